from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

from landing_core.home import LandingPaths


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)


class PathOverrides(BaseModel):
    data_dir: str | None = None
    logs_dir: str | None = None


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class RenderConfig(BaseModel):
    """Where the renderer reads its inputs and (optionally) publishes the full page."""

    template_path: str | None = Field(
        default=None,
        description=(
            "Base HTML template; if relative, resolved under LANDING_HOME. "
            "If omitted, the packaged landing.html is used."
        ),
    )
    stylesheet_path: str | None = Field(
        default=None,
        description="Stylesheet inlined by the 'paste anywhere' modes; defaults to embed.css",
    )
    publish_path: str | None = Field(
        default=None,
        description="If set, every full-page render is also written to this file.",
    )


class SecurityConfig(BaseModel):
    headers_enabled: bool = Field(default=True)


class CoreConfig(BaseModel):
    version: str = Field(default="1")
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    paths: PathOverrides = Field(default_factory=PathOverrides)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_core_config(paths: LandingPaths) -> CoreConfig:
    """Load config from ${LANDING_HOME}/config/core.json.

    - If missing: returns defaults.
    - Validation is performed by Pydantic.
    """

    config_path = paths.core_config_path
    if not config_path.exists():
        return CoreConfig()

    raw = _read_json(config_path)
    return CoreConfig.model_validate(raw)


def resolve_under_home(paths: LandingPaths, raw: str | None) -> Path | None:
    if raw is None or not str(raw).strip():
        return None
    candidate = Path(raw).expanduser()
    if not candidate.is_absolute():
        return (paths.home / candidate).resolve()
    return candidate.resolve()


def resolve_configured_paths(paths: LandingPaths, config: CoreConfig) -> LandingPaths:
    """Apply user-configurable path overrides from config.

    Only the data and logs directories can be moved; config/ stays under home.
    """

    data_dir = resolve_under_home(paths, config.paths.data_dir) or paths.data_dir
    logs_dir = resolve_under_home(paths, config.paths.logs_dir) or paths.logs_dir

    for p in (data_dir, logs_dir):
        p.mkdir(parents=True, exist_ok=True)

    return replace(paths, data_dir=data_dir, logs_dir=logs_dir)
