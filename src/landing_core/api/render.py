from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from landing_core.api.deps import get_renderer, get_store
from landing_core.api.models import HtmlEnvelope
from landing_core.content.store import ContentStore, StorageError
from landing_core.render.renderer import (
    RenderError,
    RenderMode,
    RenderOptions,
    TemplateRenderer,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["render"])

FULL_PAGE = RenderOptions(mode=RenderMode.FULL)
WORDPRESS = RenderOptions(mode=RenderMode.WORDPRESS, force_important=True)
POST_INLINE = RenderOptions(mode=RenderMode.FRAGMENT)
POST_INLINE_ALL = RenderOptions(mode=RenderMode.FRAGMENT, force_important=True)
POST_INLINE_FULL = RenderOptions(mode=RenderMode.FRAGMENT, inline_stylesheet=True)
POST_INLINE_STYLE = RenderOptions(
    mode=RenderMode.FRAGMENT, inline_stylesheet=True, force_important=True
)


def _publish(path: Path, html: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot publish rendered page to {path}: {exc}") from exc
    logger.info("Published full page to %s", path)


def render_full_page(request: Request, store: ContentStore, renderer: TemplateRenderer) -> str:
    html = renderer.render_config(store.get_config(), FULL_PAGE)
    publish_path = getattr(request.app.state, "publish_path", None)
    if publish_path is not None:
        _publish(publish_path, html)
    return html


@router.get("/full-html", response_class=HTMLResponse)
async def full_html(
    request: Request,
    store: ContentStore = Depends(get_store),  # noqa: B008
    renderer: TemplateRenderer = Depends(get_renderer),  # noqa: B008
) -> HTMLResponse:
    return HTMLResponse(render_full_page(request, store, renderer))


@router.get("/html-for-wordpress", response_class=HTMLResponse)
async def html_for_wordpress(
    store: ContentStore = Depends(get_store),  # noqa: B008
    renderer: TemplateRenderer = Depends(get_renderer),  # noqa: B008
) -> HTMLResponse:
    return HTMLResponse(renderer.render_config(store.get_config(), WORDPRESS))


@router.get("/html-for-post-inline", response_class=HTMLResponse)
async def html_for_post_inline(
    store: ContentStore = Depends(get_store),  # noqa: B008
    renderer: TemplateRenderer = Depends(get_renderer),  # noqa: B008
) -> HTMLResponse:
    return HTMLResponse(renderer.render_config(store.get_config(), POST_INLINE))


@router.get(
    "/html-for-post-inline-json",
    response_model=HtmlEnvelope,
    response_model_exclude_none=True,
)
async def html_for_post_inline_json(
    store: ContentStore = Depends(get_store),  # noqa: B008
    renderer: TemplateRenderer = Depends(get_renderer),  # noqa: B008
) -> HtmlEnvelope | JSONResponse:
    try:
        html = renderer.render_config(store.get_config(), POST_INLINE)
    except (RenderError, StorageError) as exc:
        logger.exception("Rendering the inline post fragment failed")
        return JSONResponse(
            status_code=500,
            content=HtmlEnvelope(success=False, error=str(exc)).model_dump(
                mode="json", exclude_none=True
            ),
        )
    return HtmlEnvelope(success=True, html=html)


@router.get("/html-for-post-inline-all", response_class=HTMLResponse)
async def html_for_post_inline_all(
    store: ContentStore = Depends(get_store),  # noqa: B008
    renderer: TemplateRenderer = Depends(get_renderer),  # noqa: B008
) -> HTMLResponse:
    return HTMLResponse(renderer.render_config(store.get_config(), POST_INLINE_ALL))


@router.get("/html-for-post-inline-full", response_class=HTMLResponse)
async def html_for_post_inline_full(
    store: ContentStore = Depends(get_store),  # noqa: B008
    renderer: TemplateRenderer = Depends(get_renderer),  # noqa: B008
) -> HTMLResponse:
    return HTMLResponse(renderer.render_config(store.get_config(), POST_INLINE_FULL))


@router.get("/html-for-post-inline-style", response_class=HTMLResponse)
async def html_for_post_inline_style(
    store: ContentStore = Depends(get_store),  # noqa: B008
    renderer: TemplateRenderer = Depends(get_renderer),  # noqa: B008
) -> HTMLResponse:
    return HTMLResponse(renderer.render_config(store.get_config(), POST_INLINE_STYLE))
