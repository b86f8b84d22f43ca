from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from landing_core.app import build_renderer
from landing_core.config import load_core_config, resolve_configured_paths
from landing_core.content.store import ContentStore
from landing_core.home import ensure_landing_layout, resolve_landing_home
from landing_core.render.renderer import RenderError, RenderMode, RenderOptions

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m landing_core.internal.export_html",
        description="Render the landing page from the stored documents (no server).",
    )
    parser.add_argument("--home", type=Path, default=None, help="Override LANDING_HOME")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in RenderMode],
        default=RenderMode.FULL.value,
        help="Output shape (default: full)",
    )
    parser.add_argument(
        "--force-important", action="store_true", help="Append !important to CSS declarations"
    )
    parser.add_argument(
        "--inline-stylesheet", action="store_true", help="Inline the default stylesheet"
    )
    parser.add_argument("--json", action="store_true", help="Wrap the HTML in {success, html}")
    parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Write to a file instead of stdout"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    environ = None
    if args.home is not None:
        environ = {"LANDING_HOME": str(args.home)}

    home = resolve_landing_home(environ)
    paths = ensure_landing_layout(home)
    config = load_core_config(paths)
    paths = resolve_configured_paths(paths, config)

    store = ContentStore(paths.data_dir)
    store.ensure_defaults()
    renderer = build_renderer(paths, config)

    options = RenderOptions(
        mode=RenderMode(args.mode),
        force_important=args.force_important,
        inline_stylesheet=args.inline_stylesheet,
    )
    try:
        html = renderer.render_config(store.get_config(), options)
    except RenderError as exc:
        logger.error("Render failed: %s", exc)
        return 1

    output = json.dumps({"success": True, "html": html}, ensure_ascii=False) if args.json else html

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(output)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
