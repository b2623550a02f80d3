"""Wren application class.

Mutable during setup (route registration). Frozen at runtime when
``start()``, ``run()``, or ``__call__()`` is first invoked.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.types import Handler
from wren.config import AppConfig
from wren.errors import ConfigurationError, HTTPError
from wren.http.parsers import BodyParser, ParserRegistry, default_parsers
from wren.http.request import RawRequest, Request
from wren.http.response import Response
from wren.routing.route import Route
from wren.routing.router import Router
from wren.server.errors import handle_http_error
from wren.server.handler import handle_request


class App:
    """The wren application.

    Wires the body parsers and the router together and owns the single
    top-level error boundary.

    Usage::

        app = App()

        @app.get("/users/{id:[0-9]+}")
        def user(request, response, params):
            response.with_json({"id": int(params["id"])}).end()

        app.get("/ping", lambda req, res, params: res.with_text("pong").end())

    Thread safety:
        Registration happens at import time, single-threaded. The freeze
        transition uses a Lock + double-check so exactly one thread
        compiles the route table; after that it is shared read-only.
    """

    __slots__ = ("_freeze_lock", "_frozen", "_parsers", "_router", "config")

    def __init__(
        self,
        parsers: Iterable[BodyParser] | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._parsers = ParserRegistry(default_parsers() if parsers is None else parsers)
        self._router = Router()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    @property
    def parsers(self) -> ParserRegistry:
        return self._parsers

    @property
    def router(self) -> Router:
        return self._router

    # -- Route registration --

    def route(
        self,
        method: str,
        address: str,
        handler: Handler | None = None,
    ) -> Any:
        """Register *handler* for *method* on *address*.

        Called with a handler, registers it and returns it. Called
        without one, returns a decorator. Malformed address patterns
        raise ``ConfigurationError`` here, not at request time.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._router.register(Route.create(method, address, func))
            return func

        if handler is None:
            return decorator
        return decorator(handler)

    def head(self, address: str, handler: Handler | None = None) -> Any:
        """Register a HEAD route."""
        return self.route("HEAD", address, handler)

    def get(self, address: str, handler: Handler | None = None) -> Any:
        """Register a GET route (plus its implicit HEAD route)."""
        return self.route("GET", address, handler)

    def post(self, address: str, handler: Handler | None = None) -> Any:
        """Register a POST route."""
        return self.route("POST", address, handler)

    def put(self, address: str, handler: Handler | None = None) -> Any:
        """Register a PUT route."""
        return self.route("PUT", address, handler)

    def patch(self, address: str, handler: Handler | None = None) -> Any:
        """Register a PATCH route."""
        return self.route("PATCH", address, handler)

    def delete(self, address: str, handler: Handler | None = None) -> Any:
        """Register a DELETE route."""
        return self.route("DELETE", address, handler)

    def sitemap(self) -> list[dict[str, str]]:
        """Registered routes as ``{"address", "method"}``, sorted.

        See ``Router.sitemap`` for the ordering.
        """
        return self._router.sitemap()

    # -- Dispatch --

    def build_request(self, source: RawRequest | None) -> Request:
        """Normalize a host-supplied request using the registered parsers."""
        if source is None:
            msg = "App.start() needs either a request or a request source."
            raise ConfigurationError(msg)
        return Request.from_raw(source, self._parsers, root_path=self.config.root_path)

    def start(
        self,
        request: Request | None = None,
        response: Response | None = None,
        *,
        source: RawRequest | None = None,
    ) -> Response:
        """Dispatch one request and return its finalized Response.

        Builds the request from *source* when none is given. Any
        ``HTTPError`` escaping the pipeline (unsupported body, handler
        failures) is rendered as the JSON error envelope on a fresh
        Response. A handler that never calls ``end()`` gets its response
        finalized here.
        """
        self._ensure_frozen()

        try:
            if request is None:
                request = self.build_request(source)
            if response is None:
                response = Response()
            self._router.handle(request, response)
        except HTTPError as exc:
            return handle_http_error(exc, request)

        if not response.finalized:
            response.end()
        return response

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the pounce development server.

        Freezes the route table and serves requests until interrupted.
        Reload is enabled when ``config.debug`` is set.
        """
        from wren.server.dev import run_dev_server

        self._ensure_frozen()
        run_dev_server(self, host=host, port=port)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, app=self)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup, before the first HTTP request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                self._ensure_frozen()
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking.

        Multiple ASGI worker threads could call __call__() concurrently
        on first request. This pattern ensures exactly one thread
        compiles the route table.
        """
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.compile()
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes before calling app.start() or app.run()."
            )
            raise RuntimeError(msg)
