"""Application service (use case) for Article operations."""

import logging
from collections.abc import Mapping
from typing import Any

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.schemas import ArticleForm
from articles_api.application.validation import Validator
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import EntityNotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository, validator: Validator | None = None):
        self._repository = repository
        self._validator = validator or Validator()

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, fields: Mapping[str, Any]) -> Article:
        """Validate raw input fields and persist a new article.

        Raises ValidationFailedError with per-field messages when the input
        does not satisfy ``ArticleForm``; nothing is stored in that case.
        """
        result = self._validator.validate(fields, ArticleForm)
        if result.fails():
            logger.info("Rejected article input: %s", ", ".join(result.errors))
            raise ValidationFailedError(result.errors)

        form: ArticleForm = result.data
        article = await self._repository.create(Article(title=form.title, body=form.body))
        logger.info("Created article %s", article.id)
        return article

    async def delete_article(self, article_id: int) -> bool:
        exists = await self._repository.get_by_id(article_id)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        deleted = await self._repository.delete(article_id)
        logger.info("Deleted article %s", article_id)
        return deleted
