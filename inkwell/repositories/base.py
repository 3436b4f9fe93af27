"""Abstract repository over one Content Store domain."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..content.store import ContentStore
from ..core.errors import NotFoundError
from ..core.types import ListOptions

ModelT = TypeVar("ModelT")


class Repository(ABC, Generic[ModelT]):
    """The only access path from page generators to the Content Store.

    Subclasses say how to load raw records and how to hydrate one of them;
    listing, filtering and lookup are defined here over the hydrated models.
    """

    kind: str = "record"

    def __init__(self, store: ContentStore):
        self._store = store

    @abstractmethod
    async def _load(self) -> tuple[Any, ...]:
        """Return the validated raw records in dataset order."""
        raise NotImplementedError

    @abstractmethod
    def _hydrate(self, record: Any) -> ModelT:
        """Build the domain model for one raw record."""
        raise NotImplementedError

    def _visible(self, model: ModelT, options: ListOptions) -> bool:
        return True

    async def _models(self) -> list[ModelT]:
        return [self._hydrate(record) for record in await self._load()]

    async def all(self, options: ListOptions | None = None) -> list[ModelT]:
        """Return every visible record in the dataset's declared order."""
        options = options or ListOptions()
        return [model for model in await self._models() if self._visible(model, options)]

    async def show(self, slug: str) -> ModelT:
        """Return the record whose slug equals `slug` exactly.

        Raises:
            NotFoundError: No record has this slug
        """
        for model in await self._models():
            if model.slug == slug:
                return model
        raise NotFoundError(self.kind, slug)
