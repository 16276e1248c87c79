from .base import Base
from .session import (
    create_engine_from_settings,
    create_session_factory,
    init_models,
    ping_database,
)
from .models import ArticleModel

__all__ = [
    "Base",
    "create_engine_from_settings",
    "create_session_factory",
    "init_models",
    "ping_database",
    "ArticleModel",
]
