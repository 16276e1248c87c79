"""Named route table with reverse URL generation.

Routes are mounted on a FastAPI ``APIRouter`` so dispatch is done by
Starlette; this class adds the name bookkeeping on top: unique names,
resolution of a (method, path) pair outside a request, and building URLs
from a route name and its parameters.
"""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from fastapi.routing import APIRoute
from starlette.routing import Match, NoMatchFound

from blog.domain.exceptions import RouteConfigurationError, RouteNotFoundError, URLReversalError

logger = logging.getLogger(__name__)


class Router:
    """Registration-ordered route table keyed by route name."""

    def __init__(self) -> None:
        self.api_router = APIRouter()
        self._routes: dict[str, APIRoute] = {}

    def register(self, name: str, method: str, path: str, handler: Callable[..., Any]) -> APIRoute:
        """Bind ``name`` to ``method path``. Names must be unique."""
        if name in self._routes:
            raise RouteConfigurationError(f"route '{name}' is already registered")

        self.api_router.add_api_route(
            path,
            handler,
            methods=[method.upper()],
            name=name,
            response_class=HTMLResponse,
        )
        route = self.api_router.routes[-1]
        self._routes[name] = route
        logger.debug("Registered route %s -> %s %s", name, method.upper(), path)
        return route

    def resolve(self, method: str, path: str) -> tuple[Callable[..., Any], dict[str, Any]]:
        """Return the handler and converted path parameters for a request.

        The first route in registration order that fully matches wins.
        """
        scope = {"type": "http", "method": method.upper(), "path": path, "root_path": ""}
        for route in self.api_router.routes:
            match, child_scope = route.matches(scope)
            if match == Match.FULL:
                return route.endpoint, child_scope.get("path_params", {})
        raise RouteNotFoundError(method.upper(), path)

    def reverse_url(self, name: str, *pairs: Any, **params: Any) -> str:
        """Build the path of route ``name``.

        Parameters may be given as alternating key/value positional pairs
        (``reverse_url("articles.show", "id", "23")``), as keywords, or both.
        """
        route = self._routes.get(name)
        if route is None:
            raise URLReversalError(name, "route is not registered")
        if len(pairs) % 2:
            raise URLReversalError(name, "parameters must be given as key/value pairs")

        values = dict(zip(pairs[::2], pairs[1::2]))
        values.update(params)
        try:
            return str(route.url_path_for(name, **values))
        except NoMatchFound as exc:
            raise URLReversalError(name, f"missing or unexpected parameters {sorted(values)}") from exc
        except (ValueError, AssertionError) as exc:
            # Starlette's int convertor rejects non-numeric and negative values.
            raise URLReversalError(name, f"invalid parameter value in {values}") from exc
