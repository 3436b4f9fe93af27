from __future__ import annotations

from ..content.schemas import CollectionRecord
from ..core.types import Collection
from .base import Repository


class CollectionRepository(Repository[Collection]):
    """Collections in the order they are declared. Collections have no drafts."""

    kind = "collection"

    async def _load(self) -> tuple[CollectionRecord, ...]:
        return await self._store.load_collections()

    def _hydrate(self, record: CollectionRecord) -> Collection:
        return Collection.from_record(record)
