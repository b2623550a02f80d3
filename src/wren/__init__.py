"""Wren — a minimal HTTP request-routing layer.

Matches requests to handlers by method and path pattern, extracts path
variables, decodes request bodies by content type, and answers with
JSON/text responses and uniform JSON error envelopes.

Basic usage::

    from wren import App

    app = App()

    @app.get("/hello/{name}")
    def hello(request, response, params):
        response.with_text(f"Hello, {params['name']}!").end()

    app.run()
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "App",
    "AppConfig",
    "BodyParser",
    "ConfigurationError",
    "FormParser",
    "HTTPError",
    "InternalServerError",
    "JSONParser",
    "PlainTextParser",
    "RawRequest",
    "Request",
    "Response",
    "Route",
    "RouteAddress",
    "Router",
    "UnsupportedMediaType",
    "WrenError",
    "compile_address",
]

_LAZY_IMPORTS: dict[str, str] = {
    "App": "wren.app",
    "AppConfig": "wren.config",
    "BodyParser": "wren.http.parsers",
    "ConfigurationError": "wren.errors",
    "FormParser": "wren.http.parsers",
    "HTTPError": "wren.errors",
    "InternalServerError": "wren.errors",
    "JSONParser": "wren.http.parsers",
    "PlainTextParser": "wren.http.parsers",
    "RawRequest": "wren.http.request",
    "Request": "wren.http.request",
    "Response": "wren.http.response",
    "Route": "wren.routing.route",
    "RouteAddress": "wren.routing.address",
    "Router": "wren.routing.router",
    "UnsupportedMediaType": "wren.errors",
    "WrenError": "wren.errors",
    "compile_address": "wren.routing.address",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
