from __future__ import annotations

from ..content.schemas import PostRecord
from ..core.types import Blogpost, ListOptions
from .base import Repository


class BlogpostRepository(Repository[Blogpost]):
    """Blog posts in the order they are declared.

    Drafts are hidden from `all()` unless `ListOptions(drafts=True)` is given.
    `show()` finds drafts too; callers decide whether to publish them.
    """

    kind = "blogpost"

    async def _load(self) -> tuple[PostRecord, ...]:
        return await self._store.load_posts()

    def _hydrate(self, record: PostRecord) -> Blogpost:
        return Blogpost.from_record(record)

    def _visible(self, model: Blogpost, options: ListOptions) -> bool:
        return options.drafts or not model.draft

    async def in_collection(self, collection_slug: str, options: ListOptions | None = None) -> list[Blogpost]:
        """Visible posts that belong to `collection_slug`, in dataset order."""
        return [post for post in await self.all(options) if post.collection_slug == collection_slug]
