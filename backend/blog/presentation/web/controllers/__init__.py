from .articles_controller import ArticleController
from .pages_controller import PageController

__all__ = [
    "ArticleController",
    "PageController",
]
