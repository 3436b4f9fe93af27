"""Repositories and the factories page generators use to obtain them."""

from __future__ import annotations

from ..config import AppConfig
from ..content.store import ContentStore
from .base import Repository
from .blogposts import BlogpostRepository
from .collections import CollectionRepository


def get_collection_repository(cfg: AppConfig, store: ContentStore | None = None) -> CollectionRepository:
    """Build a collection repository, sharing `store` when one is given."""
    return CollectionRepository(store or ContentStore.from_config(cfg.content))


def get_blogpost_repository(cfg: AppConfig, store: ContentStore | None = None) -> BlogpostRepository:
    """Build a blog post repository, sharing `store` when one is given."""
    return BlogpostRepository(store or ContentStore.from_config(cfg.content))


__all__ = [
    "Repository",
    "CollectionRepository",
    "BlogpostRepository",
    "get_collection_repository",
    "get_blogpost_repository",
]
