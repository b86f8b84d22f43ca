from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from landing_core.app import create_app
from landing_core.content.defaults import DEFAULT_HERO_TITLE


def test_hero_defaults_and_round_trip(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.get("/api/hero")
        assert r.status_code == 200
        assert r.json()["title"] == DEFAULT_HERO_TITLE

        hero = {"warningAlert": "A", "title": "B", "subtitle": "C"}
        saved = client.post("/api/hero", json=hero)
        assert saved.status_code == 200
        assert saved.json() == hero

        assert client.get("/api/hero").json() == hero


def test_hero_missing_field_is_rejected_and_store_untouched(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        hero = {"warningAlert": "A", "title": "B", "subtitle": "C"}
        client.post("/api/hero", json=hero)

        for missing in ("warningAlert", "title", "subtitle"):
            partial = {k: v for k, v in hero.items() if k != missing}
            r = client.post("/api/hero", json=partial)
            assert r.status_code == 400
            body = r.json()
            assert body["ok"] is False
            assert body["error"]["code"] == "missing_field"
            assert body["error"]["details"] == {"fields": [missing]}

        r = client.post("/api/hero", json={**hero, "title": ""})
        assert r.status_code == 400

        assert client.get("/api/hero").json() == hero


def test_hero_drops_unknown_keys(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.post(
            "/api/hero",
            json={"warningAlert": "A", "title": "B", "subtitle": "C", "extra": "x"},
        )
        assert r.status_code == 200
        assert r.json() == {"warningAlert": "A", "title": "B", "subtitle": "C"}


def test_hero_wrong_type_is_a_validation_error(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.post("/api/hero", json={"warningAlert": "A", "title": ["B"], "subtitle": "C"})
        assert r.status_code == 422
        assert r.json()["error"]["code"] == "validation_error"


def test_intro_accepts_empty_testimonials_but_requires_the_key(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        intro = {"title": "T", "highlight": "H", "testimonials": []}
        r = client.post("/api/intro", json=intro)
        assert r.status_code == 200
        assert r.json() == intro

        r2 = client.post("/api/intro", json={"title": "T", "highlight": "H"})
        assert r2.status_code == 400
        assert r2.json()["error"]["details"] == {"fields": ["testimonials"]}

        assert client.get("/api/intro").json() == intro


def test_intro_testimonials_are_normalised(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.post(
            "/api/intro",
            json={
                "title": "T",
                "highlight": "H",
                "testimonials": [{"text": "Great", "author": "Ana", "metric": 30}],
            },
        )
        assert r.status_code == 200
        assert r.json()["testimonials"] == [
            {"text": "Great", "author": "Ana", "role": "", "metric": "30"}
        ]


def test_highlight_info(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        assert client.get("/api/highlight-info").json() == {"text": ""}

        r = client.post("/api/highlight-info", json={"text": "Hello"})
        assert r.status_code == 200
        assert r.json() == {"text": "Hello"}

        bad = client.post("/api/highlight-info", json={})
        assert bad.status_code == 400
        assert client.get("/api/highlight-info").json() == {"text": "Hello"}


def test_config_partial_write_keeps_other_documents(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        client.post("/api/highlight-info", json={"text": "Keep me"})
        intro = {
            "title": "T",
            "highlight": "H",
            "testimonials": [{"text": "x", "author": "y", "role": "z", "metric": "1"}],
        }
        client.post("/api/intro", json=intro)

        hero = {"warningAlert": "A", "title": "B", "subtitle": "C"}
        r = client.post("/api/config", json={"hero": hero})
        assert r.status_code == 200
        assert r.json() == {"hero": hero, "intro": intro, "highlightInfo": {"text": "Keep me"}}

        assert client.get("/api/config").json() == r.json()
        assert client.get("/api/hero").json() == hero


def test_config_write_is_not_presence_checked(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.post("/api/config", json={"highlightInfo": {}, "intro": None})
        assert r.status_code == 200
        body = r.json()
        assert body["highlightInfo"] == {}
        assert body["intro"]["testimonials"] == []


def test_intro_testimonial_null_fields_are_stored_as_empty(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.post(
            "/api/intro",
            json={
                "title": "T",
                "highlight": "H",
                "testimonials": [{"text": "x", "author": "y", "role": None, "metric": None}],
            },
        )
        assert r.status_code == 200
        expected = [{"text": "x", "author": "y", "role": "", "metric": ""}]
        assert r.json()["testimonials"] == expected
        assert client.get("/api/intro").json()["testimonials"] == expected
