"""HTML endpoints for the article resource.

This controller is the single place where domain errors become HTTP
responses: missing articles are 404, store or template failures are 500,
and validation failures re-render the originating form.
"""

import logging

from fastapi import Form
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from blog.application.schemas import ArticleFormData
from blog.application.services import ArticleService
from blog.domain.entities import WriteOutcome
from blog.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    RenderError,
    ValidationError,
)
from blog.infrastructure.templating import TemplateRenderer, format_int64
from blog.presentation.web.router import Router

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "article not found"
SERVER_ERROR_MESSAGE = "internal server error"
NO_CHANGES_MESSAGE = "no changes made"


def _not_found() -> Response:
    return HTMLResponse(NOT_FOUND_MESSAGE, status_code=404)


def _server_error() -> Response:
    return HTMLResponse(SERVER_ERROR_MESSAGE, status_code=500)


class ArticleController:
    """Request handlers for ``articles.*`` routes."""

    def __init__(self, service: ArticleService, router: Router, renderer: TemplateRenderer):
        self._service = service
        self._router = router
        self._renderer = renderer

    # ── helpers ─────────────────────────────────────────────────────

    def _error_response(self, exc: Exception) -> Response:
        if isinstance(exc, EntityNotFoundError):
            return _not_found()
        logger.error("Article request failed: %s", exc, exc_info=exc)
        return _server_error()

    async def _render(self, template: str, **context) -> Response:
        try:
            return await self._renderer.render(template, context)
        except RenderError as exc:
            logger.error("Rendering failed: %s", exc, exc_info=exc)
            return _server_error()

    def _update_url(self, article_id: int) -> str:
        return self._router.reverse_url("articles.update", "id", format_int64(article_id))

    # ── read ────────────────────────────────────────────────────────

    async def index(self) -> Response:
        try:
            articles = await self._service.list_articles()
        except PersistenceError as exc:
            return self._error_response(exc)
        return await self._render("articles/index.html", articles=articles)

    async def show(self, id: int) -> Response:
        try:
            article = await self._service.get_article(id)
        except (EntityNotFoundError, PersistenceError) as exc:
            return self._error_response(exc)
        return await self._render("articles/show.html", article=article)

    # ── create ──────────────────────────────────────────────────────

    async def create_form(self) -> Response:
        form = ArticleFormData(target_url=self._router.reverse_url("articles.store"))
        return await self._render("articles/create.html", form=form)

    async def store(self, title: str = Form(""), body: str = Form("")) -> Response:
        try:
            result = await self._service.create_article(title, body)
        except ValidationError as exc:
            form = ArticleFormData(
                title=title,
                body=body,
                target_url=self._router.reverse_url("articles.store"),
                errors=exc.errors,
            )
            return await self._render("articles/create.html", form=form)
        except PersistenceError as exc:
            return self._error_response(exc)

        if result.outcome is WriteOutcome.CREATED:
            return HTMLResponse(f"Article created successfully, ID: {format_int64(result.article_id)}")

        logger.error("Article insert returned no id (outcome=%s)", result.outcome.value)
        return _server_error()

    # ── update ──────────────────────────────────────────────────────

    async def edit_form(self, id: int) -> Response:
        try:
            article = await self._service.get_article(id)
        except (EntityNotFoundError, PersistenceError) as exc:
            return self._error_response(exc)

        form = ArticleFormData(
            title=article.title,
            body=article.body,
            target_url=self._update_url(article.id),
        )
        return await self._render("articles/edit.html", form=form, article_id=article.id)

    async def update(self, id: int, title: str = Form(""), body: str = Form("")) -> Response:
        try:
            result = await self._service.update_article(id, title, body)
        except ValidationError as exc:
            form = ArticleFormData(
                title=title,
                body=body,
                target_url=self._update_url(id),
                errors=exc.errors,
            )
            return await self._render("articles/edit.html", form=form, article_id=id)
        except (EntityNotFoundError, PersistenceError) as exc:
            return self._error_response(exc)

        if result.outcome is WriteOutcome.UPDATED:
            show_url = self._router.reverse_url("articles.show", "id", format_int64(id))
            return RedirectResponse(show_url, status_code=302)
        return HTMLResponse(NO_CHANGES_MESSAGE)

    # ── delete ──────────────────────────────────────────────────────

    async def delete(self, id: int) -> Response:
        try:
            result = await self._service.delete_article(id)
        except (EntityNotFoundError, PersistenceError) as exc:
            return self._error_response(exc)

        if result.outcome is WriteOutcome.DELETED:
            return RedirectResponse(self._router.reverse_url("articles.index"), status_code=302)
        return _not_found()
