"""Article record store backed by SQLAlchemy async sessions."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.application.interfaces import ArticleRepository
from articles_api.domain.entities import Article
from articles_api.domain.exceptions import RecordStoreError
from articles_api.infrastructure.database.models import ArticleModel

# Largest primary key a signed 64-bit INTEGER column can hold.
MAX_ARTICLE_ID = 2**63 - 1


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Re-raise driver and ORM failures as RecordStoreError."""
    try:
        yield
    except (SQLAlchemyError, OverflowError) as exc:
        raise RecordStoreError(operation, str(exc)) from exc


def _storable_id(article_id: int) -> bool:
    return 0 <= article_id <= MAX_ARTICLE_ID


class SQLAlchemyArticleRepository(ArticleRepository):
    """Stores articles in the 'articles' table; ids outside the column range never match."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: ArticleModel) -> Article:
        return Article(
            id=model.id,
            title=model.title,
            body=model.body,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        if not _storable_id(article_id):
            return None
        with _store_errors("get_by_id"):
            model = await self._session.get(ArticleModel, article_id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Article]:
        with _store_errors("get_all"):
            result = await self._session.execute(select(ArticleModel).order_by(ArticleModel.id))
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def create(self, article: Article) -> Article:
        model = ArticleModel(
            title=article.title,
            body=article.body,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )
        with _store_errors("create"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        if not _storable_id(article_id):
            return False
        with _store_errors("delete"):
            model = await self._session.get(ArticleModel, article_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True
