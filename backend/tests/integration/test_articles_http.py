"""End-to-end tests for the HTML article endpoints."""

import re
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

from blog.config import Settings
from blog.infrastructure.database import (
    Base,
    create_engine_from_settings,
    create_session_factory,
    init_models,
)
from blog.infrastructure.database.repositories import SQLAlchemyArticleRepository
from blog.main import create_app

HTML = "text/html; charset=utf-8"
OUT_OF_RANGE_ID = "99999999999999999999999"


class NoInsertArticleRepository(SQLAlchemyArticleRepository):
    async def create(self, title: str, body: str) -> int:
        return 0


class RacingDeleteArticleRepository(SQLAlchemyArticleRepository):
    """Finds the row, then another request deletes it before this one does."""

    async def delete(self, article_id: int) -> int:
        return 0


@asynccontextmanager
async def _serve(settings: Settings, repository_class=None):
    """HTTP client for an app built from ``settings`` and an optional store class."""
    engine = create_engine_from_settings(settings)
    await init_models(engine)
    repository = repository_class(create_session_factory(engine)) if repository_class else None
    application = create_app(settings, repository=repository)
    try:
        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url="http://test") as http_client:
            yield http_client
    finally:
        await application.state.engine.dispose()
        await engine.dispose()


async def _create(client: AsyncClient, title: str = "Hello World", body: str = "0123456789") -> int:
    response = await client.post("/articles", data={"title": title, "body": body})
    assert response.status_code == 200
    match = re.search(r"ID: (\d+)", response.text)
    assert match, response.text
    return int(match.group(1))


@pytest.mark.asyncio
async def test_home_and_about(client: AsyncClient):
    home = await client.get("/")
    assert home.status_code == 200
    assert home.headers["content-type"] == HTML

    about = await client.get("/about")
    assert about.status_code == 200
    assert "mailto:editor@example.com" in about.text


@pytest.mark.asyncio
async def test_index_empty(client: AsyncClient):
    response = await client.get("/articles")
    assert response.status_code == 200
    assert "<li>" not in response.text


@pytest.mark.asyncio
async def test_create_form_targets_store_route(client: AsyncClient):
    response = await client.get("/articles/create")
    assert response.status_code == 200
    assert 'action="/articles"' in response.text


@pytest.mark.asyncio
async def test_store_invalid_title_rerenders_form(client: AsyncClient):
    response = await client.post("/articles", data={"title": "Hi", "body": "1234567890"})
    assert response.status_code == 200
    assert "title length must be between 3 and 40" in response.text
    assert 'value="Hi"' in response.text
    assert (await client.get("/articles")).text.count("<li>") == 0


@pytest.mark.asyncio
async def test_store_missing_fields(client: AsyncClient):
    response = await client.post("/articles", data={})
    assert response.status_code == 200
    assert "title required" in response.text
    assert "body required" in response.text


@pytest.mark.asyncio
async def test_store_valid_article(client: AsyncClient):
    article_id = await _create(client)

    show = await client.get(f"/articles/{article_id}")
    assert show.status_code == 200
    assert "Hello World" in show.text
    assert f'href="/articles/{article_id}/edit"' in show.text
    assert f'action="/articles/{article_id}/delete"' in show.text

    index = await client.get("/articles")
    assert f'href="/articles/{article_id}"' in index.text


@pytest.mark.asyncio
async def test_show_missing_article(client: AsyncClient):
    response = await client.get("/articles/999999")
    assert response.status_code == 404
    assert response.text == "article not found"
    assert response.headers["content-type"] == HTML


@pytest.mark.asyncio
async def test_edit_form_prefilled(client: AsyncClient):
    article_id = await _create(client, "Editable", "editable body text")
    response = await client.get(f"/articles/{article_id}/edit")
    assert response.status_code == 200
    assert f'action="/articles/{article_id}"' in response.text
    assert 'value="Editable"' in response.text
    assert "editable body text" in response.text


@pytest.mark.asyncio
async def test_edit_missing_article(client: AsyncClient):
    response = await client.get("/articles/999999/edit")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_redirects_to_show(client: AsyncClient):
    article_id = await _create(client)
    response = await client.post(
        f"/articles/{article_id}", data={"title": "New title", "body": "0123456789"}
    )
    assert response.status_code == 302
    assert response.headers["location"] == f"/articles/{article_id}"
    assert "New title" in (await client.get(f"/articles/{article_id}")).text


@pytest.mark.asyncio
async def test_update_with_identical_values(client: AsyncClient):
    article_id = await _create(client)
    response = await client.post(
        f"/articles/{article_id}", data={"title": "Hello World", "body": "0123456789"}
    )
    assert response.status_code == 200
    assert response.text == "no changes made"
    assert "location" not in response.headers


@pytest.mark.asyncio
async def test_update_invalid_rerenders_edit_form(client: AsyncClient):
    article_id = await _create(client)
    response = await client.post(f"/articles/{article_id}", data={"title": "Hello World", "body": "short"})
    assert response.status_code == 200
    assert "body length must be at least 10" in response.text
    assert f'action="/articles/{article_id}"' in response.text


@pytest.mark.asyncio
async def test_update_missing_article(client: AsyncClient):
    response = await client.post("/articles/999999", data={"title": "Hello World", "body": "0123456789"})
    assert response.status_code == 404
    assert response.text == "article not found"


@pytest.mark.asyncio
async def test_delete_twice(client: AsyncClient):
    article_id = await _create(client)

    first = await client.post(f"/articles/{article_id}/delete")
    assert first.status_code == 302
    assert first.headers["location"] == "/articles"
    assert first.headers["content-type"] == HTML

    second = await client.post(f"/articles/{article_id}/delete")
    assert second.status_code == 404
    assert second.text == "article not found"


@pytest.mark.asyncio
async def test_database_failure_is_500(app, client: AsyncClient):
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    for response in (
        await client.get("/articles/1"),
        await client.get("/articles"),
        await client.post("/articles", data={"title": "Hello World", "body": "0123456789"}),
    ):
        assert response.status_code == 500
        assert response.text == "internal server error"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [("GET", "/articles/abc"), ("GET", "/nowhere"), ("PUT", "/articles"), ("GET", "/articles/1/delete")],
)
async def test_unmatched_requests_get_not_found_page(client: AsyncClient, method: str, path: str):
    response = await client.request(method, path)
    assert response.status_code == 404
    assert "Page not found" in response.text
    assert response.headers["content-type"] == HTML


@pytest.mark.asyncio
async def test_trailing_slash_is_stripped(client: AsyncClient):
    assert (await client.get("/articles/")).status_code == 200
    assert (await client.get("/about/")).status_code == 200
    assert (await client.get("/articles/create/")).status_code == 200


@pytest.mark.asyncio
async def test_only_one_trailing_slash_is_stripped(client: AsyncClient):
    response = await client.get("/articles//")
    assert response.status_code == 404
    assert "Page not found" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", f"/articles/{OUT_OF_RANGE_ID}"),
        ("GET", f"/articles/{OUT_OF_RANGE_ID}/edit"),
        ("POST", f"/articles/{OUT_OF_RANGE_ID}"),
        ("POST", f"/articles/{OUT_OF_RANGE_ID}/delete"),
    ],
)
async def test_id_beyond_64_bits_is_not_found(client: AsyncClient, method: str, path: str):
    response = await client.request(method, path, data={"title": "Hello World", "body": "0123456789"})
    assert response.status_code == 404
    assert response.text == "article not found"
    assert response.headers["content-type"] == HTML


@pytest.mark.asyncio
async def test_delete_that_loses_a_race_is_not_found(settings: Settings):
    async with _serve(settings, RacingDeleteArticleRepository) as client:
        article_id = await _create(client)
        response = await client.post(f"/articles/{article_id}/delete")

    assert response.status_code == 404
    assert response.text == "article not found"


@pytest.mark.asyncio
async def test_insert_without_id_is_server_error(settings: Settings):
    async with _serve(settings, NoInsertArticleRepository) as client:
        response = await client.post("/articles", data={"title": "Hello World", "body": "0123456789"})
        index = await client.get("/articles")

    assert response.status_code == 500
    assert response.text == "internal server error"
    assert response.headers["content-type"] == HTML
    assert index.status_code == 200


@pytest.mark.asyncio
async def test_template_failures_are_server_errors(tmp_path, settings: Settings):
    broken = settings.model_copy(update={"templates_dir": str(tmp_path / "no-templates")})
    async with _serve(broken) as client:
        store = await client.post("/articles", data={"title": "Hello World", "body": "0123456789"})
        article_id = int(re.search(r"ID: (\d+)", store.text).group(1))

        responses = [
            await client.get("/"),
            await client.get("/about"),
            await client.get("/articles"),
            await client.get("/articles/create"),
            await client.get(f"/articles/{article_id}"),
            await client.get(f"/articles/{article_id}/edit"),
            await client.post("/articles", data={"title": "Hi", "body": "short"}),
        ]
        missing = await client.get("/nowhere")

    for response in responses:
        assert response.status_code == 500
        assert response.text == "internal server error"
        assert response.headers["content-type"] == HTML

    # The not-found page falls back to static HTML when its template is missing.
    assert missing.status_code == 404
    assert "Page not found" in missing.text
