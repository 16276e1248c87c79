from .article import ArticleFormData

__all__ = [
    "ArticleFormData",
]
