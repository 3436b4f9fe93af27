from __future__ import annotations

from dataclasses import dataclass

from ..config import AppConfig, is_development
from ..content.store import ContentStore
from ..core.types import ListOptions
from ..repositories import (
    BlogpostRepository,
    CollectionRepository,
    get_blogpost_repository,
    get_collection_repository,
)


@dataclass(frozen=True)
class BuildContext:
    """Everything a page generator needs for one build.

    Attributes:
        store: Content Store shared by both repositories for the build
        collections: Collection repository
        blogposts: Blog post repository
        drafts: Whether drafts are visible in listings for this build
    """

    store: ContentStore
    collections: CollectionRepository
    blogposts: BlogpostRepository
    drafts: bool = False

    @classmethod
    def from_config(cls, cfg: AppConfig, drafts: bool | None = None) -> "BuildContext":
        store = ContentStore.from_config(cfg.content)
        return cls(
            store=store,
            collections=get_collection_repository(cfg, store),
            blogposts=get_blogpost_repository(cfg, store),
            drafts=is_development(cfg) if drafts is None else drafts,
        )

    @property
    def list_options(self) -> ListOptions:
        return ListOptions(drafts=self.drafts)
