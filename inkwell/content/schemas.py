"""Schemas for the raw Content Store documents.

Every document is validated here before any record reaches a domain model
constructor, so malformed content fails at the boundary.
"""

from __future__ import annotations

from datetime import date as date_type, datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SLUG_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._~-]*$"


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


def _normalize_slug(value):
    # Only identifiers are normalized; display text and markup are kept verbatim.
    return value.strip() if isinstance(value, str) else value


class CollectionRecord(_Record):
    """One raw collection entry."""
    slug: str = Field(pattern=SLUG_PATTERN)
    name: str = Field(min_length=1)

    @field_validator("slug", mode="before")
    @classmethod
    def _strip_slugs(cls, value):
        return _normalize_slug(value)


class PostRecord(_Record):
    """One raw blog post entry."""
    model_config = ConfigDict(populate_by_name=True)

    slug: str = Field(pattern=SLUG_PATTERN)
    title: str = Field(min_length=1)
    date: datetime
    draft: bool = False
    collection_slug: Optional[str] = Field(default=None, alias="collectionSlug", pattern=SLUG_PATTERN)
    body: str = ""

    @field_validator("slug", "collection_slug", mode="before")
    @classmethod
    def _strip_slugs(cls, value):
        return _normalize_slug(value)

    @field_validator("date", mode="before")
    @classmethod
    def _date_only(cls, value):
        # "2023-05-01" is promoted to midnight; full timestamps pass through.
        if isinstance(value, str) and len(value.strip()) == 10:
            return datetime.combine(date_type.fromisoformat(value.strip()), time.min)
        return value


def _ensure_unique(records: list, label: str) -> list:
    seen: set[str] = set()
    for record in records:
        if record.slug in seen:
            raise ValueError(f"duplicate {label} slug '{record.slug}'")
        seen.add(record.slug)
    return records


class CollectionsDocument(_Record):
    version: Optional[int] = None
    collections: list[CollectionRecord]

    @field_validator("collections")
    @classmethod
    def _unique_slugs(cls, value: list[CollectionRecord]) -> list[CollectionRecord]:
        return _ensure_unique(value, "collection")


class PostsDocument(_Record):
    version: Optional[int] = None
    posts: list[PostRecord]

    @field_validator("posts")
    @classmethod
    def _unique_slugs(cls, value: list[PostRecord]) -> list[PostRecord]:
        return _ensure_unique(value, "post")
