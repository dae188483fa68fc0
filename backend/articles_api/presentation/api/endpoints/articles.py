"""Article resource endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, Response, status

from articles_api.application.schemas import ArticleRecord, ArticleView
from articles_api.application.services import ArticleService
from articles_api.application.transformers import ArticleTransformer
from articles_api.infrastructure.dependencies import get_article_service, get_article_transformer

router = APIRouter(prefix="/article", tags=["Articles"])

ArticleId = Annotated[int, Path(ge=0, description="Article's unique ID")]


@router.get("")
async def list_articles(
    service: ArticleService = Depends(get_article_service),
    transformer: ArticleTransformer = Depends(get_article_transformer),
) -> dict[str, list[ArticleView]]:
    """Get all articles."""
    articles = await service.list_articles()
    return {"data": transformer.transform_many(articles)}


@router.get("/{article_id}")
async def get_article(
    article_id: ArticleId,
    service: ArticleService = Depends(get_article_service),
    transformer: ArticleTransformer = Depends(get_article_transformer),
) -> dict[str, ArticleView]:
    """Get an article by ID. Responds 404 when it does not exist."""
    article = await service.get_article(article_id)
    return {"data": transformer.transform_one(article)}


@router.post("", response_model=ArticleRecord)
async def create_article(
    fields: dict[str, Any] | None = Body(None),
    service: ArticleService = Depends(get_article_service),
) -> ArticleRecord:
    """Create an article and return the stored record as-is.

    Responds 400 with per-field messages when title or body is missing or empty.
    """
    article = await service.create_article(fields or {})
    return ArticleRecord.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: ArticleId,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete an article by ID."""
    await service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
