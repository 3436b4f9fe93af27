"""
Page rendering to disk.

This module renders page props into HTML files using Jinja2 templates.
Article bodies go through the presentation mapping before they reach a
template and are inserted as trusted markup.
"""

from __future__ import annotations

import json
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from ..rendering import render_article

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def _format_date(value: str, fmt: str = "%B %d, %Y") -> str:
    """Format an ISO-8601 timestamp from transport props for display.

    Examples:
        >>> _format_date("2023-05-01T00:00:00")
        "May 01, 2023"
    """
    return datetime.fromisoformat(value).strftime(fmt)


def _article_html(source: str, breadcrumbs: list[Any] | None = None) -> Markup:
    return Markup(render_article(source, breadcrumbs=breadcrumbs))


@lru_cache(maxsize=None)
def get_environment(templates_dir: str = str(TEMPLATES_DIR)) -> Environment:
    env = Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["date"] = _format_date
    env.filters["article"] = _article_html
    return env


def render_page(template_name: str, output_path: Path, **context: Any) -> Path:
    """Render one template to `output_path`, creating parent directories.

    Args:
        template_name: Template filename inside the templates directory
        output_path: Path where the HTML file will be written
        **context: Template variables (page props plus site settings)

    Returns:
        The written path
    """
    template = get_environment().get_template(template_name)
    html = template.render(**context)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    return output_path


def write_props(props: dict[str, Any], output_path: Path) -> Path:
    """Write page props as JSON next to the page they produced."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(props, ensure_ascii=False, indent=2), encoding="utf-8")
    return output_path
