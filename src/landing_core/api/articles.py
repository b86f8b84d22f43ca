from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from landing_core.api.deps import get_store, validate_body
from landing_core.api.models import DeleteResponse
from landing_core.content.models import Article, ArticleCreateRequest
from landing_core.content.store import ContentStore
from landing_core.content.validation import require_fields

router = APIRouter(tags=["articles"])


@router.get("/articles", response_model=list[Article], response_model_by_alias=True)
async def articles_list(
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> list[dict[str, Any]]:
    return store.list_articles()


@router.post(
    "/articles",
    status_code=201,
    response_model=Article,
    response_model_by_alias=True,
)
async def articles_create(
    payload: dict[str, Any] = Body(...),  # noqa: B008
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> dict[str, Any]:
    require_fields(payload, ("title", "content"))
    body = validate_body(ArticleCreateRequest, payload)
    return store.create_article(title=body.title, content=body.content)


@router.delete("/articles/{article_id}", response_model=DeleteResponse)
async def articles_delete(
    article_id: int,
    store: ContentStore = Depends(get_store),  # noqa: B008
) -> DeleteResponse:
    deleted = store.delete_article(article_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Article not found")

    return DeleteResponse(message="Article deleted", id=article_id)
