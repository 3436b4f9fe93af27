"""
Core domain models and error types.

This package contains data types that are independent of how content
is stored or rendered.
"""

from .errors import ContentStoreError, ConversionError, InkwellError, NotFoundError
from .types import ApiArticle, ApiCollection, Blogpost, Collection, ListOptions

__all__ = [
    "ApiArticle",
    "ApiCollection",
    "Blogpost",
    "Collection",
    "ListOptions",
    "InkwellError",
    "NotFoundError",
    "ContentStoreError",
    "ConversionError",
]
