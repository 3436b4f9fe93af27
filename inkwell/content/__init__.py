"""Content Store access and raw document schemas."""

from .schemas import CollectionRecord, CollectionsDocument, PostRecord, PostsDocument
from .store import ContentStore

__all__ = [
    "ContentStore",
    "CollectionRecord",
    "CollectionsDocument",
    "PostRecord",
    "PostsDocument",
]
