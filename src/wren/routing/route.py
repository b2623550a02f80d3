"""Route frozen dataclass — a method, a compiled address, and a handler."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wren._internal.types import Handler
from wren.errors import HTTPError, InternalServerError
from wren.routing.address import RouteAddress, compile_address

if TYPE_CHECKING:
    from wren.http.request import Request
    from wren.http.response import Response

logger = logging.getLogger("wren.routing")


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created at registration time; the method is upper-cased and the
    address compiled here, so malformed patterns fail immediately.
    """

    method: str
    address: RouteAddress
    handler: Handler

    @classmethod
    def create(cls, method: str, pattern: str, handler: Handler) -> Route:
        """Build a route from a verb and a raw pattern string."""
        return cls(method=method.upper(), address=compile_address(pattern), handler=handler)

    @property
    def path(self) -> str:
        """The raw pattern this route was registered with."""
        return self.address.raw

    def matches(self, request: Request) -> bool:
        return self.method == request.method and self.address.matches(request.uri)

    def extract_params(self, request: Request) -> dict[str, str]:
        """Captured path variables for a request this route matches."""
        return self.address.extract(request.uri)

    def handle(self, request: Request, response: Response) -> None:
        """Invoke the handler with ``(request, response, params)``.

        ``HTTPError`` propagates unchanged. Any other exception becomes an
        ``InternalServerError`` carrying the original message.
        """
        params = self.extract_params(request)
        try:
            self.handler(request, response, params)
        except HTTPError:
            raise
        except Exception as exc:
            logger.exception("500 %s %s", request.method, request.uri)
            raise InternalServerError(str(exc)) from exc
