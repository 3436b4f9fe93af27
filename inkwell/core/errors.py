"""
Error taxonomy for content loading and page generation.

- NotFoundError: a lookup by slug matched nothing. Recoverable by the caller
  (a page generator may turn it into a 404 page).
- ContentStoreError: the Content Store is missing, malformed or fails
  validation. Fatal for the build.
- ConversionError: a transport conversion failed. Fails the whole batch.
"""

from __future__ import annotations

from pathlib import Path


class InkwellError(Exception):
    """Base class for all inkwell errors."""


class NotFoundError(InkwellError):
    """Raised by `Repository.show` when no record has the requested slug.

    Attributes:
        kind: The content domain searched ("collection", "blogpost")
        identifier: The slug that was not found
    """

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"Invalid {kind}: '{identifier}'")


class ContentStoreError(InkwellError):
    """Raised when a Content Store document cannot be read or validated."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Content store error in {self.path}: {reason}")


class ConversionError(InkwellError):
    """Raised when a domain model cannot be converted to its transport shape."""

    def __init__(self, slug: str, reason: str):
        self.slug = slug
        self.reason = reason
        super().__init__(f"Could not convert '{slug}': {reason}")
