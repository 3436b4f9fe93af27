"""Read-only access to the bundled Content Store.

The store owns one JSON document per content domain. Each document is read
and validated at most once per content version: the parsed records are kept
keyed by the file's fingerprint, so an unchanged file is served from memory
and a changed one is re-read.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from ..config import ContentConfig
from ..core.errors import ContentStoreError
from .schemas import CollectionRecord, CollectionsDocument, PostRecord, PostsDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CachedDocument:
    fingerprint: tuple[int, int]
    records: tuple[Any, ...]


class ContentStore:
    """Loads and caches the collections and posts documents.

    Attributes:
        directory: Directory holding the content documents
        collections_path: Full path to the collections document
        posts_path: Full path to the posts document
    """

    def __init__(
        self,
        directory: Path,
        collections_file: str = "collections.json",
        posts_file: str = "posts.json",
    ):
        self.directory = Path(directory)
        self.collections_path = self.directory / collections_file
        self.posts_path = self.directory / posts_file
        self._cache: dict[Path, _CachedDocument] = {}
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def from_config(cls, cfg: ContentConfig) -> "ContentStore":
        return cls(cfg.path, cfg.collections_file, cfg.posts_file)

    async def load_collections(self) -> tuple[CollectionRecord, ...]:
        return await self._load(self.collections_path, CollectionsDocument, "collections")

    async def load_posts(self) -> tuple[PostRecord, ...]:
        return await self._load(self.posts_path, PostsDocument, "posts")

    def invalidate(self) -> None:
        """Drop every cached document."""
        self._cache.clear()

    def _get_lock(self) -> asyncio.Lock:
        # One lock per event loop; a store may outlive several asyncio.run calls.
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def _load(self, path: Path, schema: type[BaseModel], key: str) -> tuple[Any, ...]:
        async with self._get_lock():
            fingerprint = _fingerprint(path)
            cached = self._cache.get(path)
            if cached is not None and cached.fingerprint == fingerprint:
                return cached.records

            records = await asyncio.to_thread(_read_document, path, schema, key)
            self._cache[path] = _CachedDocument(fingerprint=fingerprint, records=records)
            logger.debug("Loaded %d %s from %s", len(records), key, path)
            return records


def _fingerprint(path: Path) -> tuple[int, int]:
    try:
        stat = path.stat()
    except FileNotFoundError as exc:
        raise ContentStoreError(path, "document not found") from exc
    except OSError as exc:
        raise ContentStoreError(path, f"cannot stat document: {exc}") from exc
    return (stat.st_mtime_ns, stat.st_size)


def _read_document(path: Path, schema: type[BaseModel], key: str) -> tuple[Any, ...]:
    """Read, parse and validate one document, returning its records in order."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ContentStoreError(path, "document not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentStoreError(path, f"cannot read document: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ContentStoreError(path, f"invalid JSON: {exc}") from exc

    if not isinstance(raw, dict) or key not in raw:
        raise ContentStoreError(path, f"missing top-level '{key}' sequence")

    try:
        document = schema.model_validate(raw)
    except ValidationError as exc:
        raise ContentStoreError(path, _describe(exc)) from exc

    return tuple(getattr(document, key))


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
