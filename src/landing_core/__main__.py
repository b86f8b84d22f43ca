from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

import uvicorn

from landing_core.app import LOG_FORMAT, create_app
from landing_core.config import load_core_config, resolve_configured_paths
from landing_core.home import ensure_landing_layout, resolve_landing_home


def main() -> None:
    home = resolve_landing_home()
    paths = ensure_landing_layout(home)
    config = load_core_config(paths)
    paths = resolve_configured_paths(paths, config)

    log_file = paths.logs_dir / "core.log"
    logging.basicConfig(
        level=config.logging.level,
        format=LOG_FORMAT,
        handlers=[
            RotatingFileHandler(
                log_file,
                maxBytes=config.logging.max_size_mb * 1024 * 1024,
                backupCount=config.logging.backup_count,
                encoding="utf-8",
            ),
            logging.StreamHandler(),
        ],
    )

    host = os.environ.get("LANDING_BIND") or config.network.bind_host

    env_port = os.environ.get("LANDING_PORT")
    port = int(env_port) if env_port else config.network.port

    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
