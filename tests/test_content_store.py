"""Tests for loading and validating the Content Store."""

from __future__ import annotations

import asyncio
import json
from datetime import datetime

import pytest

from inkwell.content.store import ContentStore
from inkwell.core.errors import ContentStoreError

from conftest import write_content


def test_load_collections_keeps_declared_order(store):
    records = asyncio.run(store.load_collections())

    assert [record.slug for record in records] == ["tools", "design"]
    assert records[1].name == "Software Design"


def test_load_posts_parses_dates_and_aliases(store):
    records = asyncio.run(store.load_posts())

    assert records[0].date == datetime(2023, 1, 10)
    assert records[1].date == datetime(2023, 2, 10, 8, 0)
    assert records[0].collection_slug == "tools"
    assert records[1].collection_slug is None


def test_missing_document_is_fatal(tmp_path):
    store = ContentStore(tmp_path / "nowhere")

    with pytest.raises(ContentStoreError, match="document not found"):
        asyncio.run(store.load_collections())


def test_invalid_json_is_fatal(content_dir):
    (content_dir / "posts.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ContentStoreError, match="invalid JSON"):
        asyncio.run(ContentStore(content_dir).load_posts())


def test_missing_top_level_sequence_is_fatal(content_dir):
    (content_dir / "collections.json").write_text(json.dumps({"items": []}), encoding="utf-8")

    with pytest.raises(ContentStoreError, match="missing top-level 'collections'"):
        asyncio.run(ContentStore(content_dir).load_collections())


def test_record_without_slug_is_rejected(tmp_path):
    content = write_content(tmp_path / "content", collections=[{"name": "Nameless"}])

    with pytest.raises(ContentStoreError, match="slug"):
        asyncio.run(ContentStore(content).load_collections())


def test_duplicate_slugs_are_rejected(tmp_path):
    content = write_content(
        tmp_path / "content",
        collections=[{"slug": "tools", "name": "Tools"}, {"slug": "tools", "name": "Again"}],
    )

    with pytest.raises(ContentStoreError, match="duplicate collection slug 'tools'"):
        asyncio.run(ContentStore(content).load_collections())


def test_unknown_fields_are_rejected(tmp_path):
    content = write_content(
        tmp_path / "content",
        collections=[{"slug": "tools", "name": "Tools", "colour": "red"}],
    )

    with pytest.raises(ContentStoreError):
        asyncio.run(ContentStore(content).load_collections())


def test_unsafe_slug_is_rejected(tmp_path):
    content = write_content(tmp_path / "content", collections=[{"slug": "a b/c", "name": "Bad"}])

    with pytest.raises(ContentStoreError):
        asyncio.run(ContentStore(content).load_collections())


def test_invalid_date_is_rejected(tmp_path):
    posts = [{"slug": "x", "title": "X", "date": "yesterday", "body": ""}]
    content = write_content(tmp_path / "content", posts=posts)

    with pytest.raises(ContentStoreError, match="date"):
        asyncio.run(ContentStore(content).load_posts())


def test_unchanged_document_is_parsed_once(store, monkeypatch):
    from inkwell.content import store as store_module

    calls = 0
    original = store_module._read_document

    def counting_read(*args, **kwargs):
        nonlocal calls
        calls += 1
        return original(*args, **kwargs)

    monkeypatch.setattr(store_module, "_read_document", counting_read)

    async def _load_twice():
        first = await store.load_collections()
        second = await store.load_collections()
        return first, second

    first, second = asyncio.run(_load_twice())

    assert calls == 1
    assert first is second


def test_concurrent_loads_share_one_parse(store, monkeypatch):
    from inkwell.content import store as store_module

    calls = 0
    original = store_module._read_document

    def counting_read(*args, **kwargs):
        nonlocal calls
        calls += 1
        return original(*args, **kwargs)

    monkeypatch.setattr(store_module, "_read_document", counting_read)

    async def _load_many():
        return await asyncio.gather(*(store.load_posts() for _ in range(5)))

    results = asyncio.run(_load_many())

    assert calls == 1
    assert all(result == results[0] for result in results)


def test_changed_document_is_reloaded(content_dir):
    store = ContentStore(content_dir)
    before = asyncio.run(store.load_collections())

    write_content(content_dir, collections=[{"slug": "tools", "name": "Tools and Workflow"}])
    after = asyncio.run(store.load_collections())

    assert [record.name for record in before] == ["Tools", "Software Design"]
    assert [record.name for record in after] == ["Tools and Workflow"]


def test_invalidate_forces_reload(store, monkeypatch):
    from inkwell.content import store as store_module

    calls = 0
    original = store_module._read_document

    def counting_read(*args, **kwargs):
        nonlocal calls
        calls += 1
        return original(*args, **kwargs)

    monkeypatch.setattr(store_module, "_read_document", counting_read)

    asyncio.run(store.load_posts())
    store.invalidate()
    asyncio.run(store.load_posts())

    assert calls == 2
