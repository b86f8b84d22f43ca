from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from landing_core.config import (
    CoreConfig,
    load_core_config,
    resolve_configured_paths,
    resolve_under_home,
)
from landing_core.home import ensure_landing_layout


def test_load_core_config_defaults_when_missing(tmp_path: Path) -> None:
    paths = ensure_landing_layout(tmp_path)
    cfg = load_core_config(paths)
    assert isinstance(cfg, CoreConfig)
    assert cfg.network.bind_host == "127.0.0.1"
    assert cfg.network.port == 3000
    assert cfg.render.template_path is None
    assert cfg.security.headers_enabled is True


def test_load_core_config_validation_error(tmp_path: Path) -> None:
    paths = ensure_landing_layout(tmp_path)

    paths.core_config_path.write_text(
        json.dumps({"network": {"port": "not-an-int"}}),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        load_core_config(paths)


def test_load_core_config_reads_render_section(tmp_path: Path) -> None:
    paths = ensure_landing_layout(tmp_path)
    paths.core_config_path.write_text(
        json.dumps({"render": {"publish_path": "public/index.html"}}),
        encoding="utf-8",
    )

    loaded = load_core_config(paths)

    assert loaded.render.publish_path == "public/index.html"


def test_resolve_configured_paths_creates_overrides(tmp_path: Path) -> None:
    paths = ensure_landing_layout(tmp_path)

    cfg = CoreConfig.model_validate(
        {
            "paths": {
                "data_dir": "custom_data",
                "logs_dir": "custom_logs",
            }
        }
    )

    resolved = resolve_configured_paths(paths, cfg)
    assert resolved.data_dir.is_dir()
    assert resolved.logs_dir.is_dir()

    # Overrides are resolved relative to LANDING_HOME by default.
    assert resolved.data_dir == (tmp_path / "custom_data").resolve()
    assert resolved.logs_dir == (tmp_path / "custom_logs").resolve()

    # Non-configurable dirs remain under home.
    assert resolved.config_dir == tmp_path / "config"


def test_resolve_under_home(tmp_path: Path) -> None:
    paths = ensure_landing_layout(tmp_path)

    assert resolve_under_home(paths, None) is None
    assert resolve_under_home(paths, "  ") is None
    assert resolve_under_home(paths, "templates/page.html") == (
        tmp_path / "templates" / "page.html"
    ).resolve()
    absolute = (tmp_path / "elsewhere.html").resolve()
    assert resolve_under_home(paths, str(absolute)) == absolute
