"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.config import get_settings
from articles_api.application.services import ArticleService
from articles_api.application.transformers import ArticleTransformer
from articles_api.application.validation import Validator
from articles_api.infrastructure.database.session import get_db_session
from articles_api.infrastructure.database.repositories import SQLAlchemyArticleRepository


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository, validator=Validator())


def get_article_transformer() -> ArticleTransformer:
    """Provides the transformer used to render article views."""
    return ArticleTransformer(locale=get_settings().humanize_locale)
