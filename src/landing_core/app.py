from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.staticfiles import StaticFiles

from landing_core import __version__
from landing_core.api.deps import get_renderer, get_store
from landing_core.api.models import fail
from landing_core.api.render import render_full_page
from landing_core.api.router import router as api_router
from landing_core.config import (
    CoreConfig,
    load_core_config,
    resolve_configured_paths,
    resolve_under_home,
)
from landing_core.content.store import ContentStore, StorageError
from landing_core.content.validation import MissingFieldError
from landing_core.home import LandingPaths, ensure_landing_layout, resolve_landing_home
from landing_core.render.renderer import RenderError, TemplateRenderer
from landing_core.ui.router import STATIC_DIR as UI_STATIC_DIR
from landing_core.ui.router import router as ui_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Baseline security headers. No CSP: rendered pages carry inline styles and scripts."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        config = getattr(request.app.state, "landing_config", None)
        if config is not None and not config.security.headers_enabled:
            return response
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response


def configure_logging(paths: LandingPaths, config: CoreConfig) -> None:
    root = logging.getLogger()
    root.setLevel(config.logging.level)
    # Avoid adding duplicate handlers if reloaded
    if any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        return

    file_handler = RotatingFileHandler(
        paths.logs_dir / "core.log",
        maxBytes=config.logging.max_size_mb * 1024 * 1024,
        backupCount=config.logging.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(file_handler)


def _home_template(paths: LandingPaths, name: str) -> Path | None:
    candidate = paths.templates_dir / name
    return candidate if candidate.is_file() else None


def build_renderer(paths: LandingPaths, config: CoreConfig) -> TemplateRenderer:
    """Configured paths win, then files dropped into templates/, then the packaged ones."""

    return TemplateRenderer(
        template_path=resolve_under_home(paths, config.render.template_path)
        or _home_template(paths, "landing.html"),
        stylesheet_path=resolve_under_home(paths, config.render.stylesheet_path)
        or _home_template(paths, "embed.css"),
    )


def _status_to_code(status_code: int) -> str:
    if status_code == 404:
        return "not_found"
    if status_code == 405:
        return "method_not_allowed"
    if status_code == 422:
        return "validation_error"
    if 400 <= status_code < 500:
        return "client_error"
    return "server_error"


def create_app() -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        home = resolve_landing_home()
        paths = ensure_landing_layout(home)
        config = load_core_config(paths)
        paths = resolve_configured_paths(paths, config)

        configure_logging(paths, config)

        logger.info("Landing Core %s starting up", __version__)
        logger.info("Data directory: %s", paths.data_dir)

        store = ContentStore(paths.data_dir)
        store.ensure_defaults()

        app.state.landing_home = home
        app.state.landing_paths = paths
        app.state.landing_config = config
        app.state.content_store = store
        app.state.renderer = build_renderer(paths, config)
        app.state.publish_path = resolve_under_home(paths, config.render.publish_path)

        yield

        logger.info("Landing Core shutting down")

    app = FastAPI(title="Landing Core", version=__version__, lifespan=_lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    app.add_middleware(SecurityHeadersMiddleware)

    @app.exception_handler(MissingFieldError)
    async def _missing_field_handler(request: Request, exc: MissingFieldError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=fail(
                code="missing_field",
                message=str(exc),
                details={"fields": exc.fields},
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=fail(
                code="validation_error",
                message="Request validation failed",
                details=exc.errors(),
            ).model_dump(mode="json"),
        )

    @app.exception_handler(StorageError)
    async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.exception("Storage failure on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=fail(code="storage_error", message=str(exc)).model_dump(mode="json"),
        )

    @app.exception_handler(RenderError)
    async def _render_error_handler(request: Request, exc: RenderError) -> JSONResponse:
        logger.exception("Rendering failure on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=fail(code="render_error", message=str(exc)).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(
                code=_status_to_code(exc.status_code),
                message=str(exc.detail),
            ).model_dump(mode="json"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(
                code=_status_to_code(exc.status_code),
                message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
            ).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=fail(code="internal_error", message="Internal server error").model_dump(
                mode="json"
            ),
        )

    app.include_router(api_router)

    if UI_STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(UI_STATIC_DIR)), name="static")
    else:
        logger.warning(
            "UI static directory is missing (%s); /static will not be served",
            UI_STATIC_DIR,
        )
    app.include_router(ui_router)

    @app.get("/", response_class=HTMLResponse)
    async def root(request: Request) -> HTMLResponse:
        html = render_full_page(request, get_store(request), get_renderer(request))
        return HTMLResponse(html)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
