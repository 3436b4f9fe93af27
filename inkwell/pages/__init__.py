"""Per-route static page generators."""

from .context import BuildContext
from .generators import (
    convert_all,
    get_blog_props,
    get_blogpost_paths,
    get_blogpost_props,
    get_collection_paths,
    get_collection_props,
    get_collections_props,
)

__all__ = [
    "BuildContext",
    "convert_all",
    "get_blog_props",
    "get_blogpost_paths",
    "get_blogpost_props",
    "get_collection_paths",
    "get_collection_props",
    "get_collections_props",
]
