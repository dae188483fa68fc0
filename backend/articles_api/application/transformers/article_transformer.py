"""Projection of Article entities onto their wire representation."""

from collections.abc import Iterable
from datetime import datetime

import pendulum

from articles_api.application.schemas import ArticleView
from articles_api.domain.entities import Article


class ArticleTransformer:
    """Maps articles to ``ArticleView`` with human-relative timestamps."""

    def __init__(self, locale: str = "en"):
        self._locale = locale

    def transform_one(self, article: Article) -> ArticleView:
        return ArticleView(
            id=article.id,
            title=article.title,
            body=article.body,
            published=self._humanize(article.created_at),
            updated=self._humanize(article.updated_at or article.created_at),
        )

    def transform_many(self, articles: Iterable[Article]) -> list[ArticleView]:
        return [self.transform_one(article) for article in articles]

    def _humanize(self, moment: datetime) -> str:
        # Naive datetimes (e.g. read back from SQLite) are stored as UTC.
        return pendulum.instance(moment, tz="UTC").diff_for_humans(locale=self._locale)
