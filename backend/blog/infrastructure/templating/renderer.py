"""Jinja2 template rendering with URL-reversal and number formatting helpers."""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from blog.domain.exceptions import RenderError, URLReversalError

logger = logging.getLogger(__name__)


def format_int64(value: int) -> str:
    """Decimal representation of an integer id."""
    return str(int(value))


class TemplateRenderer:
    """Renders templates from ``directory``.

    Templates receive two globals: ``route_name_to_url`` (the reverse-URL
    capability passed in at construction) and ``format_int64``.
    """

    def __init__(self, reverse_url: Callable[..., str], directory: str | Path):
        self._env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            enable_async=True,
        )
        self._env.globals["route_name_to_url"] = reverse_url
        self._env.globals["format_int64"] = format_int64

    async def render_to_string(self, name: str, context: Mapping[str, Any] | None = None) -> str:
        try:
            template = self._env.get_template(name)
            return await template.render_async(dict(context or {}))
        except (TemplateError, URLReversalError) as exc:
            raise RenderError(name, f"{type(exc).__name__}: {exc}") from exc

    async def render(
        self,
        name: str,
        context: Mapping[str, Any] | None = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        """Render ``name`` into a complete HTML response. Raises RenderError."""
        content = await self.render_to_string(name, context)
        return HTMLResponse(content, status_code=status_code)
