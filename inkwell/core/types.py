"""
Core data types for inkwell.

This module defines the domain and transport models:
- Collection: A named grouping of content
- Blogpost: One long-form article
- ApiCollection / ApiArticle: Plain, JSON-serializable snapshots of the
  above, safe to hand to page templates and to write as props
- ListOptions: Listing policy understood by the repositories

Domain models are frozen; conversions always build new values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional, TypedDict

from .errors import ConversionError, NotFoundError

if TYPE_CHECKING:
    from ..content.schemas import CollectionRecord, PostRecord
    from ..repositories.collections import CollectionRepository


class ApiCollection(TypedDict):
    slug: str
    name: str
    url: str


class ApiArticle(TypedDict):
    slug: str
    title: str
    date: str
    draft: bool
    url: str
    body: str
    collection: Optional[ApiCollection]


@dataclass(frozen=True)
class ListOptions:
    """Listing policy for `Repository.all`.

    Attributes:
        drafts: Include records flagged as draft when True
    """
    drafts: bool = False


@dataclass(frozen=True)
class Collection:
    """A named grouping of content.

    Attributes:
        slug: Unique, URL-safe identifier
        name: Display name
    """
    slug: str
    name: str

    @classmethod
    def from_record(cls, record: "CollectionRecord") -> "Collection":
        return cls(slug=record.slug, name=record.name)

    @property
    def url(self) -> str:
        return f"/collections/{self.slug}"

    def to_api_collection(self) -> ApiCollection:
        return ApiCollection(slug=self.slug, name=self.name, url=self.url)


@dataclass(frozen=True)
class Blogpost:
    """One long-form article.

    Attributes:
        slug: Unique, URL-safe identifier
        title: Article headline
        date: Publication timestamp
        draft: True while the article is not publishable
        body: Markup source of the article
        collection_slug: Optional reference to the owning collection
    """
    slug: str
    title: str
    date: datetime
    draft: bool = False
    body: str = ""
    collection_slug: str | None = None

    @classmethod
    def from_record(cls, record: "PostRecord") -> "Blogpost":
        return cls(
            slug=record.slug,
            title=record.title,
            date=record.date,
            draft=record.draft,
            body=record.body,
            collection_slug=record.collection_slug,
        )

    @property
    def url(self) -> str:
        return f"/blog/{self.slug}"

    async def to_api_article(self, collections: "CollectionRepository | None" = None) -> ApiArticle:
        """Build the transport snapshot of this article.

        The owning collection, if any, is resolved through `collections`.
        An unresolved reference fails the conversion.
        """
        collection: ApiCollection | None = None
        if self.collection_slug is not None:
            if collections is None:
                raise ConversionError(self.slug, "a collection repository is required to resolve the collection")
            try:
                owner = await collections.show(self.collection_slug)
            except NotFoundError as exc:
                raise ConversionError(self.slug, f"unknown collection '{exc.identifier}'") from exc
            collection = owner.to_api_collection()

        return ApiArticle(
            slug=self.slug,
            title=self.title,
            date=self.date.isoformat(),
            draft=self.draft,
            url=self.url,
            body=self.body,
            collection=collection,
        )
