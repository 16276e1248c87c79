"""Static pages and the site-wide not-found page."""

import logging

from fastapi import Request
from fastapi.responses import HTMLResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.domain.exceptions import RenderError
from blog.infrastructure.templating import TemplateRenderer

logger = logging.getLogger(__name__)

_FALLBACK_NOT_FOUND = "<h1>Page not found :(</h1><p>If you have questions, please contact us.</p>"


class PageController:
    def __init__(self, renderer: TemplateRenderer, contact_email: str):
        self._renderer = renderer
        self._contact_email = contact_email

    async def _render(self, template: str, status_code: int = 200, **context) -> Response:
        try:
            return await self._renderer.render(template, context, status_code=status_code)
        except RenderError as exc:
            logger.error("Rendering failed: %s", exc, exc_info=exc)
            return HTMLResponse("internal server error", status_code=500)

    async def home(self) -> Response:
        return await self._render("pages/home.html")

    async def about(self) -> Response:
        return await self._render("pages/about.html", contact_email=self._contact_email)

    async def http_error(self, request: Request, exc: StarletteHTTPException) -> Response:
        """Exception handler: unmatched paths and methods get the 404 page."""
        if exc.status_code not in (404, 405):
            return HTMLResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

        logger.debug("No route for %s %s", request.method, request.url.path)
        try:
            return await self._renderer.render("pages/not_found.html", status_code=404)
        except RenderError as render_exc:
            logger.error("Rendering failed: %s", render_exc, exc_info=render_exc)
            return HTMLResponse(_FALLBACK_NOT_FOUND, status_code=404)
