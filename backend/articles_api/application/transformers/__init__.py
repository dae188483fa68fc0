from .article_transformer import ArticleTransformer

__all__ = [
    "ArticleTransformer",
]
