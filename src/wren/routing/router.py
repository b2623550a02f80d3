"""Ordered route table with first-match dispatch.

Routes are registered during setup and the table is frozen when the app
starts serving. Dispatch scans in registration order; the sitemap view
is sorted by address and verb precedence.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wren.routing.route import Route

if TYPE_CHECKING:
    from wren.http.request import Request
    from wren.http.response import Response

logger = logging.getLogger("wren.routing")

# Sitemap ordering within one address; unknown verbs sort last.
METHOD_PRECEDENCE: dict[str, int] = {
    "HEAD": 0,
    "GET": 1,
    "POST": 2,
    "PUT": 3,
    "PATCH": 4,
    "DELETE": 5,
}
_OTHER_METHOD = len(METHOD_PRECEDENCE)

NOT_FOUND_BODY: dict[str, object] = {
    "status": 404,
    "error": {"code": "not_found", "message": "resource not found"},
}


def _head_handler(request: Request, response: Response, params: dict[str, str]) -> None:
    response.with_status(200).end()


def _sitemap_key(route: Route) -> tuple[str, int, str]:
    return (
        route.path,
        METHOD_PRECEDENCE.get(route.method, _OTHER_METHOD),
        route.method,
    )


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.register(Route.create("GET", "/users/{id:[0-9]+}", handler))
        router.compile()
        router.handle(request, response)
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def register(self, route: Route) -> Router:
        """Add a route. Must be called before compile().

        Every non-HEAD route gets a synthesized HEAD route on the same
        address, registered just ahead of it, that answers 200 with an
        empty body.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        if route.method != "HEAD":
            self._routes.append(Route("HEAD", route.address, _head_handler))
        self._routes.append(route)
        logger.debug("registered %s %s", route.method, route.path)
        return self

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, request: Request) -> Route | None:
        """Return the first registered route matching *request*, if any."""
        for route in self._routes:
            if route.matches(request):
                return route
        return None

    def handle(self, request: Request, response: Response) -> None:
        """Dispatch *request* to the first matching route.

        With no match the response is finalized as a 404 envelope and no
        handler runs.
        """
        route = self.match(request)
        if route is None:
            logger.debug("404 %s %s", request.method, request.uri)
            response.with_status(404).with_json(NOT_FOUND_BODY).end()
            return
        route.handle(request, response)

    def sitemap(self) -> list[dict[str, str]]:
        """Every route as ``{"address", "method"}``, sorted for introspection.

        Sorted by address, then verb precedence (HEAD, GET, POST, PUT,
        PATCH, DELETE, anything else), then verb name. The result does
        not depend on registration order.
        """
        return [
            {"address": route.path, "method": route.method}
            for route in sorted(self._routes, key=_sitemap_key)
        ]
