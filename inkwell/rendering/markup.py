"""
Long-form markup rendering with component substitution.

Markdown is parsed by mistune. Every node kind listed in `NodeKind` is
rendered by the component the mapping table assigns to it; node kinds the
table does not mention (tables, emphasis, images, h3-h6, ...) keep
mistune's default HTML. Document order and nesting are untouched.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache, partial
from typing import Any, Callable, Mapping, Sequence

import mistune

from . import components
from .components import BreadcrumbLike

Component = Callable[..., str]

MARKDOWN_PLUGINS = ["strikethrough", "table"]


class NodeKind(str, Enum):
    H1 = "h1"
    H2 = "h2"
    P = "p"
    BLOCKQUOTE = "blockquote"
    CODE = "code"
    INLINE_CODE = "inlineCode"
    PRE = "pre"
    UL = "ul"
    OL = "ol"
    LI = "li"
    A = "a"


PRESENTATION_MAPPING: Mapping[NodeKind, Component] = {
    NodeKind.A: components.link,
    NodeKind.BLOCKQUOTE: components.blockquote,
    NodeKind.CODE: components.code,
    NodeKind.H1: partial(components.heading, el="h1", size="jumbo"),
    NodeKind.H2: partial(components.heading, el="h2", size="l"),
    NodeKind.INLINE_CODE: components.code,
    NodeKind.LI: components.list_item,
    NodeKind.OL: partial(components.list_, ordered=True),
    NodeKind.P: components.text,
    NodeKind.PRE: components.codeblock,
    NodeKind.UL: components.list_,
}

_HEADING_KINDS = {1: NodeKind.H1, 2: NodeKind.H2}


class PresentationRenderer(mistune.HTMLRenderer):
    """mistune renderer that routes mapped node kinds to components.

    Inline code looks up `inlineCode` first and then `code`, so a table
    that only maps `code` still covers it.
    """

    def __init__(self, mapping: Mapping[NodeKind, Component] | None = None):
        super().__init__(escape=True)
        self.mapping = dict(PRESENTATION_MAPPING if mapping is None else mapping)

    def _component(self, *kinds: NodeKind) -> Component | None:
        for kind in kinds:
            component = self.mapping.get(kind)
            if component is not None:
                return component
        return None

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        kind = _HEADING_KINDS.get(level)
        component = self._component(kind) if kind else None
        if component is None:
            return super().heading(text, level, **attrs)
        return component(text)

    def paragraph(self, text: str) -> str:
        component = self._component(NodeKind.P)
        if component is None:
            return super().paragraph(text)
        return component(text)

    def block_quote(self, text: str) -> str:
        component = self._component(NodeKind.BLOCKQUOTE)
        if component is None:
            return super().block_quote(text)
        return component(text)

    def block_code(self, code: str, info: str | None = None) -> str:
        component = self._component(NodeKind.PRE)
        if component is None:
            return super().block_code(code, info)
        language = info.split(None, 1)[0] if info and info.strip() else None
        return component(code, language=language)

    def codespan(self, text: str) -> str:
        component = self._component(NodeKind.INLINE_CODE, NodeKind.CODE)
        if component is None:
            return super().codespan(text)
        return component(mistune.escape(text))

    def list(self, text: str, ordered: bool, **attrs: Any) -> str:
        if ordered:
            component = self._component(NodeKind.OL)
            if component is None:
                return super().list(text, ordered, **attrs)
            return component(text, start=attrs.get("start"))
        component = self._component(NodeKind.UL)
        if component is None:
            return super().list(text, ordered, **attrs)
        return component(text)

    def list_item(self, text: str) -> str:
        component = self._component(NodeKind.LI)
        if component is None:
            return super().list_item(text)
        return component(text)

    def link(self, text: str, url: str, title: str | None = None) -> str:
        component = self._component(NodeKind.A)
        if component is None:
            return super().link(text, url, title)
        return component(text, href=self.safe_url(url), title=title)


def create_markdown(mapping: Mapping[NodeKind, Component] | None = None) -> mistune.Markdown:
    return mistune.create_markdown(renderer=PresentationRenderer(mapping), plugins=MARKDOWN_PLUGINS)


@lru_cache(maxsize=1)
def _default_markdown() -> mistune.Markdown:
    return create_markdown()


def render_markup(source: str, mapping: Mapping[NodeKind, Component] | None = None) -> str:
    """Render markdown `source` to HTML through the presentation mapping."""
    markdown = _default_markdown() if mapping is None else create_markdown(mapping)
    return markdown(source)


def render_article(
    source: str,
    breadcrumbs: Sequence[BreadcrumbLike] | None = None,
    class_name: str | None = None,
    mapping: Mapping[NodeKind, Component] | None = None,
) -> str:
    """Render an article body inside the article wrapper.

    A breadcrumb trail is emitted before the body only when `breadcrumbs`
    is non-empty.
    """
    classes = "AppArticle" if not class_name else f"AppArticle {class_name}"
    parts = [f'<article class="{classes}">\n']
    if breadcrumbs:
        parts.append(components.breadcrumbs(breadcrumbs, class_name="AppArticle__Breadcrumbs"))
    parts.append(render_markup(source, mapping))
    parts.append("</article>\n")
    return "".join(parts)
