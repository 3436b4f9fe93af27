"""Presentation components.

Each component is a plain function from already-rendered children (HTML)
and a few props to an HTML string. Children are escaped by the markup
renderer before they get here (inline code included); raw code passed to
`codeblock` and all props are escaped here.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Sequence, Union

HEADING_SIZES = ("jumbo", "xl", "l", "m", "s")


def _classes(*names: str | None) -> str:
    return " ".join(name for name in names if name)


def heading(children: str, el: str = "h2", size: str = "m") -> str:
    if size not in HEADING_SIZES:
        raise ValueError(f"Unknown heading size: {size}")
    return f'<{el} class="Heading Heading--{size}">{children}</{el}>\n'


def text(children: str, size: str | None = None) -> str:
    modifier = f"Text--{size}" if size else None
    return f'<p class="{_classes("Text", modifier)}">{children}</p>\n'


def blockquote(children: str) -> str:
    return f'<blockquote class="Blockquote">\n{children}</blockquote>\n'


def code(children: str) -> str:
    return f'<code class="Code">{children}</code>'


def codeblock(source: str, language: str | None = None) -> str:
    """Fenced code. `source` is raw code and is escaped here."""
    lang = f' class="language-{escape(language, quote=True)}"' if language else ""
    return f'<pre class="Codeblock"><code{lang}>{escape(source, quote=False)}</code></pre>\n'


def list_(children: str, ordered: bool = False, start: int | None = None) -> str:
    if ordered:
        start_attr = f' start="{int(start)}"' if start is not None and start != 1 else ""
        return f'<ol class="List List--ordered"{start_attr}>\n{children}</ol>\n'
    return f'<ul class="List">\n{children}</ul>\n'


def list_item(children: str) -> str:
    return f'<li class="List__Item">{children}</li>\n'


def link(children: str, href: str, title: str | None = None) -> str:
    """`href` must already be escaped and checked for harmful protocols."""
    title_attr = f' title="{escape(title, quote=True)}"' if title else ""
    return f'<a class="Link" href="{href}"{title_attr}>{children}</a>'


@dataclass(frozen=True)
class Breadcrumb:
    """One entry of a breadcrumb trail.

    Attributes:
        title: Visible label
        href: Optional link target; the current page usually has none
    """
    title: str
    href: str | None = None


BreadcrumbLike = Union[Breadcrumb, str]


def breadcrumbs(path: Sequence[BreadcrumbLike], class_name: str | None = None) -> str:
    items = []
    for entry in path:
        crumb = entry if isinstance(entry, Breadcrumb) else Breadcrumb(title=str(entry))
        label = escape(crumb.title)
        if crumb.href:
            label = f'<a class="Link" href="{escape(crumb.href, quote=True)}">{label}</a>'
        items.append(f'<li class="Breadcrumbs__Item">{label}</li>')
    return (
        f'<nav class="{_classes("Breadcrumbs", class_name)}" aria-label="Breadcrumb">'
        f'<ol>{"".join(items)}</ol></nav>\n'
    )
