from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LandingPaths:
    home: Path
    data_dir: Path
    logs_dir: Path
    config_dir: Path
    templates_dir: Path

    @property
    def core_config_path(self) -> Path:
        return self.config_dir / "core.json"


def resolve_landing_home(environ: dict[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ

    raw = (env.get("LANDING_HOME") or "").strip()
    if raw:
        candidate = Path(raw).expanduser()
        # Relative values are anchored at the user's home, never at CWD.
        if not candidate.is_absolute():
            candidate = (Path.home() / candidate).resolve()
        else:
            candidate = candidate.resolve()
        return candidate

    def default_home() -> Path:
        if sys.platform.startswith("win"):
            base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
            if base:
                return Path(base) / "LandingCore"
            return Path.home() / "AppData" / "Local" / "LandingCore"

        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support" / "LandingCore"

        xdg = os.environ.get("XDG_DATA_HOME")
        if xdg:
            return Path(xdg) / "landing-core"
        return Path.home() / ".local" / "share" / "landing-core"

    return default_home().resolve()


def ensure_landing_layout(home: Path) -> LandingPaths:
    home.mkdir(parents=True, exist_ok=True)

    data_dir = home / "data"
    logs_dir = home / "logs"
    config_dir = home / "config"
    templates_dir = home / "templates"

    for path in (data_dir, logs_dir, config_dir, templates_dir):
        path.mkdir(parents=True, exist_ok=True)

    return LandingPaths(
        home=home,
        data_dir=data_dir,
        logs_dir=logs_dir,
        config_dir=config_dir,
        templates_dir=templates_dir,
    )
