from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["ui"])

RENDER_LINKS: tuple[tuple[str, str], ...] = (
    ("Página completa", "/api/full-html"),
    ("WordPress", "/api/html-for-wordpress"),
    ("Fragmento", "/api/html-for-post-inline"),
    ("Fragmento (JSON)", "/api/html-for-post-inline-json"),
    ("Fragmento !important", "/api/html-for-post-inline-all"),
    ("Fragmento con estilos base", "/api/html-for-post-inline-full"),
    ("Fragmento con estilos base !important", "/api/html-for-post-inline-style"),
)


@router.get("/admin", response_class=HTMLResponse)
async def admin_page(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "admin.html",
        {"title": "Panel de administración", "render_links": RENDER_LINKS},
    )
