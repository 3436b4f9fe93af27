"""Shared fixtures: small Content Store documents written to tmp_path."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from inkwell.config import AppConfig
from inkwell.content.store import ContentStore

COLLECTIONS = [
    {"slug": "tools", "name": "Tools"},
    {"slug": "design", "name": "Software Design"},
]

POSTS = [
    {
        "slug": "a",
        "title": "Post A",
        "date": "2023-01-10",
        "draft": False,
        "collectionSlug": "tools",
        "body": "# Post A\n\nFirst post.\n",
    },
    {
        "slug": "b",
        "title": "Post B",
        "date": "2023-02-10T08:00:00",
        "draft": True,
        "body": "# Post B\n\nStill a draft.\n",
    },
    {
        "slug": "c",
        "title": "Post C",
        "date": "2023-03-10",
        "draft": False,
        "collectionSlug": "design",
        "body": "## Post C\n\nThird post.\n",
    },
]


def write_content(
    directory: Path,
    collections: list[dict[str, Any]] | None = None,
    posts: list[dict[str, Any]] | None = None,
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "collections.json").write_text(
        json.dumps({"version": 1, "collections": COLLECTIONS if collections is None else collections}),
        encoding="utf-8",
    )
    (directory / "posts.json").write_text(
        json.dumps({"version": 1, "posts": POSTS if posts is None else posts}),
        encoding="utf-8",
    )
    return directory


@pytest.fixture(autouse=True)
def _clear_mode_env(monkeypatch):
    monkeypatch.delenv("INKWELL_ENV", raising=False)


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    return write_content(tmp_path / "content")


@pytest.fixture
def store(content_dir: Path) -> ContentStore:
    return ContentStore(content_dir)


@pytest.fixture
def app_config(content_dir: Path, tmp_path: Path) -> AppConfig:
    cfg = AppConfig()
    cfg.content.directory = str(content_dir)
    cfg.output.directory = str(tmp_path / "out")
    cfg.logging.console = False
    return cfg
