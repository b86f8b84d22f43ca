from __future__ import annotations

from fastapi import APIRouter

from landing_core.api.articles import router as articles_router
from landing_core.api.content import router as content_router
from landing_core.api.render import router as render_router

router = APIRouter(prefix="/api")

router.include_router(content_router)
router.include_router(articles_router)
router.include_router(render_router)
