"""Shared fixtures: a throwaway SQLite database per test and an HTTP client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog.config import Settings
from blog.infrastructure.database import init_models
from blog.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'blog.db'}",
        db_timeout_seconds=5.0,
        contact_email="editor@example.com",
    )


@pytest_asyncio.fixture
async def app(settings: Settings):
    # ASGITransport does not run the lifespan, so create the schema here.
    application = create_app(settings)
    await init_models(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
