from __future__ import annotations

import json
from pathlib import Path

import pytest

from landing_core.content.defaults import default_hero, default_intro
from landing_core.content.models import Section
from landing_core.content.store import ContentStore, StorageError


def test_ensure_defaults_writes_every_missing_document(tmp_path: Path) -> None:
    store = ContentStore(tmp_path / "data")

    created = store.ensure_defaults()
    assert set(created) == set(Section)
    assert store.get(Section.HERO) == default_hero()
    assert store.get(Section.INTRO) == default_intro()
    assert store.get(Section.HIGHLIGHT_INFO) == {"text": ""}
    assert store.list_articles() == []

    # Second run leaves existing files alone.
    store.set(Section.HIGHLIGHT_INFO, {"text": "kept"})
    assert store.ensure_defaults() == []
    assert store.get(Section.HIGHLIGHT_INFO) == {"text": "kept"}


def test_get_creates_missing_document_lazily(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)

    assert not store.path_for(Section.HERO).exists()
    hero = store.get(Section.HERO)
    assert hero["warningAlert"]
    assert store.path_for(Section.HERO).is_file()


def test_set_overwrites_whole_document(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    store.set(Section.HERO, {"warningAlert": "A", "title": "B", "subtitle": "C"})
    store.set(Section.HERO, {"title": "only"})

    assert store.get(Section.HERO) == {"title": "only"}
    on_disk = json.loads(store.path_for(Section.HERO).read_text(encoding="utf-8"))
    assert on_disk == {"title": "only"}


def test_set_keeps_non_ascii_text_readable(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    store.set(Section.HIGHLIGHT_INFO, {"text": "¿Qué batidora?"})

    assert "¿Qué batidora?" in store.path_for(Section.HIGHLIGHT_INFO).read_text(encoding="utf-8")


def test_create_article_assigns_increasing_ids_in_order(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)

    created = [store.create_article(title=f"T{i}", content=f"C{i}") for i in range(5)]
    ids = [a["id"] for a in created]

    assert len(set(ids)) == 5
    assert ids == sorted(ids)
    assert [a["title"] for a in store.list_articles()] == ["T0", "T1", "T2", "T3", "T4"]
    assert all(a["createdAt"].endswith("Z") for a in created)


def test_delete_article(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    a, b, c = (store.create_article(title=t, content="x") for t in ("a", "b", "c"))

    assert store.delete_article(999) is False
    assert [x["id"] for x in store.list_articles()] == [a["id"], b["id"], c["id"]]

    assert store.delete_article(b["id"]) is True
    assert [x["id"] for x in store.list_articles()] == [a["id"], c["id"]]


def test_set_config_keeps_omitted_members(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    store.ensure_defaults()
    store.set(Section.HIGHLIGHT_INFO, {"text": "before"})
    intro_before = store.get(Section.INTRO)

    result = store.set_config(hero={"warningAlert": "A", "title": "B", "subtitle": "C"})

    assert result["hero"] == {"warningAlert": "A", "title": "B", "subtitle": "C"}
    assert result["intro"] == intro_before
    assert result["highlightInfo"] == {"text": "before"}
    assert store.get_config() == result


def test_malformed_document_raises_storage_error(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    store.path_for(Section.INTRO).write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        store.get(Section.INTRO)


def test_articles_file_must_hold_a_list(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    store.path_for(Section.ARTICLES).write_text("{}", encoding="utf-8")

    with pytest.raises(StorageError):
        store.list_articles()


def test_writes_leave_no_temporary_files(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    store.ensure_defaults()
    store.create_article(title="t", content="c")

    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "articles.json",
        "hero.json",
        "highlight-info.json",
        "intro.json",
    ]
