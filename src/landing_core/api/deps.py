from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from landing_core.content.store import ContentStore
from landing_core.render.renderer import TemplateRenderer


def get_store(request: Request) -> ContentStore:
    store = getattr(request.app.state, "content_store", None)
    if store is None:
        raise HTTPException(status_code=500, detail="Content store not initialized")
    return store


def get_renderer(request: Request) -> TemplateRenderer:
    renderer = getattr(request.app.state, "renderer", None)
    if renderer is None:
        raise HTTPException(status_code=500, detail="Renderer not initialized")
    return renderer


def validate_body[M: BaseModel](model: type[M], payload: dict[str, Any]) -> M:
    """Validate an already presence-checked body, reporting failures like FastAPI does."""

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        for error in errors:
            error["loc"] = ("body", *error["loc"])
        raise RequestValidationError(errors) from exc
