"""Integration tests for a full static build."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from inkwell.core.errors import ConversionError
from inkwell.runner import run_build

from conftest import POSTS, write_content


def test_build_writes_every_route(app_config, tmp_path: Path):
    out = tmp_path / "out"

    stats = run_build(app_config, out)

    assert (out / "blog" / "index.html").exists()
    assert (out / "blog" / "a" / "index.html").exists()
    assert (out / "blog" / "c" / "index.html").exists()
    assert not (out / "blog" / "b").exists()
    assert (out / "collections" / "index.html").exists()
    assert (out / "collections" / "tools" / "index.html").exists()
    assert (out / "404.html").exists()
    assert stats.articles == 2
    assert stats.drafts_included is False
    assert stats.pages == len(stats.written)


def test_build_writes_json_props(app_config, tmp_path: Path):
    out = tmp_path / "out"
    run_build(app_config, out)

    props = json.loads((out / "blog" / "props.json").read_text(encoding="utf-8"))

    assert [article["slug"] for article in props["articles"]] == ["a", "c"]


def test_build_without_props(app_config, tmp_path: Path):
    app_config.output.write_props = False
    out = tmp_path / "out"
    run_build(app_config, out)

    assert not (out / "blog" / "props.json").exists()


def test_post_page_renders_mapped_article(app_config, tmp_path: Path):
    out = tmp_path / "out"
    run_build(app_config, out)

    html = (out / "blog" / "a" / "index.html").read_text(encoding="utf-8")

    assert '<article class="AppArticle">' in html
    assert html.count('class="Breadcrumbs__Item"') == 2
    assert '<p class="Text">First post.</p>' in html
    assert "Post A" in html


def test_blog_listing_links_articles_in_order(app_config, tmp_path: Path):
    out = tmp_path / "out"
    run_build(app_config, out)

    html = (out / "blog" / "index.html").read_text(encoding="utf-8")

    assert html.index('href="/blog/a/"') < html.index('href="/blog/c/"')
    assert "Post B" not in html
    assert "January 10, 2023" in html


def test_development_build_includes_drafts(app_config, tmp_path: Path):
    out = tmp_path / "out"

    stats = run_build(app_config, out, drafts=True)

    assert stats.drafts_included is True
    assert stats.articles == 3
    assert (out / "blog" / "b" / "index.html").exists()


def test_failed_build_writes_nothing(app_config, content_dir, tmp_path: Path):
    posts = POSTS + [
        {"slug": "d", "title": "Post D", "date": "2023-04-01", "collectionSlug": "ghost", "body": ""},
    ]
    write_content(content_dir, posts=posts)
    out = tmp_path / "out"

    with pytest.raises(ConversionError):
        run_build(app_config, out)

    assert not (out / "blog").exists()


def test_file_logging_writes_jsonl(app_config, tmp_path: Path):
    app_config.logging.file = True
    out = tmp_path / "out"
    run_build(app_config, out)

    lines = (out / "build.jsonl").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line).get("event") for line in lines]

    assert events[0] == "build_start"
    assert "route_generated" in events
    assert events[-1] == "build_finished"


def test_not_found_page_is_counted_as_a_page_not_a_route(app_config, tmp_path: Path):
    out = tmp_path / "out"

    stats = run_build(app_config, out)

    assert "Not found" in (out / "404.html").read_text(encoding="utf-8")
    assert stats.written[-1] == out / "404.html"
    assert stats.pages == stats.routes + 1


def test_failed_build_logs_the_failing_slug(app_config, content_dir, tmp_path: Path):
    posts = POSTS + [
        {"slug": "d", "title": "Post D", "date": "2023-04-01", "collectionSlug": "ghost", "body": ""},
    ]
    write_content(content_dir, posts=posts)
    app_config.logging.file = True
    out = tmp_path / "out"

    with pytest.raises(ConversionError):
        run_build(app_config, out)

    entries = [json.loads(line) for line in (out / "build.jsonl").read_text(encoding="utf-8").splitlines()]
    failure = entries[-1]
    assert failure["event"] == "build_failed"
    assert failure["error_type"] == "ConversionError"
    assert failure["slug"] == "d"
    assert failure["mode"] == "production"
