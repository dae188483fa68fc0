"""Shared fixtures: an in-memory fake repository, an in-memory SQLite store, and API clients."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.services import ArticleService
from articles_api.domain.entities import Article
from articles_api.infrastructure.database import Base
from articles_api.infrastructure.database import session as db_session
from articles_api.infrastructure.dependencies import get_article_service
from articles_api.main import app


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    async def get_all(self) -> list[Article]:
        return list(self._articles.values())

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> bool:
        if article_id in self._articles:
            del self._articles[article_id]
            return True
        return False


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)


@pytest_asyncio.fixture
async def client(service: ArticleService) -> AsyncIterator[AsyncClient]:
    """HTTP client whose article endpoints use the in-memory repository."""
    app.dependency_overrides[get_article_service] = lambda: service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Session factory over a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def store_client(session_factory, monkeypatch) -> AsyncIterator[AsyncClient]:
    """HTTP client running the production dependency chain against in-memory SQLite.

    Only the session factory is swapped, so ``get_db_session`` still commits
    or rolls back each request.
    """
    monkeypatch.setattr(db_session, "async_session_factory", session_factory)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
