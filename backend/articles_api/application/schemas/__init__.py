from .article import ArticleForm, ArticleView, ArticleRecord

__all__ = [
    "ArticleForm",
    "ArticleView",
    "ArticleRecord",
]
