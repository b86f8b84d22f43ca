from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from landing_core.app import create_app


def test_healthz_ok(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_startup_writes_default_documents(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()):
        data_dir = tmp_path / "data"
        for name in ("hero.json", "intro.json", "highlight-info.json", "articles.json"):
            assert (data_dir / name).is_file()


def test_unknown_route_uses_error_envelope(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LANDING_HOME", str(tmp_path))

    with TestClient(create_app()) as client:
        r = client.get("/api/nope")
        assert r.status_code == 404
        body = r.json()
        assert body["ok"] is False
        assert body["error"]["code"] == "not_found"
