"""
inkwell - statically generated content site.

This package loads collections and blog posts from a bundled, read-only
Content Store, turns them into page props through per-route generators,
and renders long-form articles with a markup-to-component mapping.

Main entry point is the CLI via `inkwell build` command.

Example:
    $ inkwell build -c config.yaml -o out/
"""

__all__ = [
    "__version__",
    "load_config",
    "ContentStore",
    "CollectionRepository",
    "BlogpostRepository",
    "render_article",
]
__version__ = "0.1.0"

from .config import load_config
from .content.store import ContentStore
from .rendering import render_article
from .repositories import BlogpostRepository, CollectionRepository
