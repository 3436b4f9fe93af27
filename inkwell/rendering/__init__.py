"""Presentation components and the markup-to-component mapping."""

from .components import Breadcrumb
from .markup import (
    PRESENTATION_MAPPING,
    NodeKind,
    PresentationRenderer,
    create_markdown,
    render_article,
    render_markup,
)

__all__ = [
    "Breadcrumb",
    "NodeKind",
    "PRESENTATION_MAPPING",
    "PresentationRenderer",
    "create_markdown",
    "render_article",
    "render_markup",
]
