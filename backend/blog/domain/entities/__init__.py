from .article import MAX_ARTICLE_ID, Article
from .write_result import WriteOutcome, WriteResult

__all__ = [
    "Article",
    "MAX_ARTICLE_ID",
    "WriteOutcome",
    "WriteResult",
]
