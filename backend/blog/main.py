"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.config import Settings, get_settings
from blog.application.interfaces import ArticleRepository
from blog.application.services import ArticleService
from blog.infrastructure.database import (
    create_engine_from_settings,
    create_session_factory,
    init_models,
    ping_database,
)
from blog.infrastructure.database.repositories import SQLAlchemyArticleRepository
from blog.infrastructure.logging.log_config import setup_logging
from blog.infrastructure.templating import TemplateRenderer
from blog.presentation.web.controllers import ArticleController, PageController
from blog.presentation.web.middleware import ForceHTMLContentTypeMiddleware, TrailingSlashMiddleware
from blog.presentation.web.router import Router
from blog.presentation.web.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: check the database, create tables, dispose the pool."""
    settings: Settings = app.state.settings
    setup_logging(settings)
    engine = app.state.engine

    # 1. Reachability check; a failure is logged and startup continues
    await ping_database(engine)

    # 2. Create the articles table if it does not exist
    try:
        await init_models(engine)
    except SQLAlchemyError:
        logger.exception("Failed to create tables, continuing without them")

    # 3. Named-route examples
    router: Router = app.state.router
    logger.info("homeURL: %s", router.reverse_url("home"))
    logger.info("articleURL: %s", router.reverse_url("articles.show", "id", "23"))

    yield

    # Shutdown
    await engine.dispose()


def create_app(
    settings: Settings | None = None,
    repository: ArticleRepository | None = None,
) -> FastAPI:
    """Factory function that builds and wires the application.

    Router, store and renderer are constructed once here and handed to the
    controllers; nothing is looked up from module globals at request time.
    ``repository`` replaces the SQL store when given.
    """
    settings = settings or get_settings()

    engine = create_engine_from_settings(settings)
    if repository is None:
        repository = SQLAlchemyArticleRepository(
            create_session_factory(engine),
            timeout=settings.db_timeout_seconds,
        )
    service = ArticleService(repository)

    router = Router()
    renderer = TemplateRenderer(router.reverse_url, settings.templates_dir)
    pages = PageController(renderer, contact_email=settings.contact_email)
    articles = ArticleController(service, router, renderer)
    register_routes(router, pages, articles)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.router = router

    # Added last runs first: slashes are stripped before anything else sees the path
    app.add_middleware(ForceHTMLContentTypeMiddleware)
    app.add_middleware(TrailingSlashMiddleware)

    app.add_exception_handler(StarletteHTTPException, pages.http_error)
    app.include_router(router.api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "blog.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=(_settings.app_env == "development"),
    )
