from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from landing_core.api.deps import get_store, validate_body
from landing_core.content.models import (
    ConfigAggregate,
    ConfigUpdateRequest,
    Hero,
    HighlightInfo,
    Intro,
    Section,
)
from landing_core.content.store import ContentStore
from landing_core.content.validation import require_fields

router = APIRouter(tags=["content"])


@router.get("/hero")
async def hero_get(store: ContentStore = Depends(get_store)) -> dict[str, Any]:  # noqa: B008
    return store.get(Section.HERO)


@router.post("/hero")
async def hero_set(
    payload: dict[str, Any] = Body(...),  # noqa: B008
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> dict[str, Any]:
    require_fields(payload, ("warningAlert", "title", "subtitle"))
    hero = validate_body(Hero, payload)
    return store.set(Section.HERO, hero.to_document())


@router.get("/intro")
async def intro_get(store: ContentStore = Depends(get_store)) -> dict[str, Any]:  # noqa: B008
    return store.get(Section.INTRO)


@router.post("/intro")
async def intro_set(
    payload: dict[str, Any] = Body(...),  # noqa: B008
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> dict[str, Any]:
    # An empty testimonials list is fine; the key itself must be sent.
    require_fields(payload, ("title", "highlight", "testimonials"), allow_empty=("testimonials",))
    intro = validate_body(Intro, payload)
    return store.set(Section.INTRO, intro.to_document())


@router.get("/highlight-info")
async def highlight_info_get(
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> dict[str, Any]:
    return store.get(Section.HIGHLIGHT_INFO)


@router.post("/highlight-info")
async def highlight_info_set(
    payload: dict[str, Any] = Body(...),  # noqa: B008
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> dict[str, Any]:
    require_fields(payload, ("text",))
    info = validate_body(HighlightInfo, payload)
    return store.set(Section.HIGHLIGHT_INFO, info.to_document())


@router.get("/config", response_model=ConfigAggregate, response_model_by_alias=True)
async def config_get(store: ContentStore = Depends(get_store)) -> dict[str, Any]:  # noqa: B008
    return store.get_config()


@router.post("/config", response_model=ConfigAggregate, response_model_by_alias=True)
async def config_set(
    payload: ConfigUpdateRequest,
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> dict[str, Any]:
    # Unlike the per-section endpoints, members are optional and written as sent.
    return store.set_config(
        hero=payload.hero,
        intro=payload.intro,
        highlight_info=payload.highlight_info,
    )
