"""Tests for wren.routing.route — Route matching, params, and handler wrapping."""

import pytest

from wren.errors import ConfigurationError, HTTPError, InternalServerError
from wren.http.request import Request
from wren.http.response import Response
from wren.routing.route import Route


def _noop(request: Request, response: Response, params: dict[str, str]) -> None:
    return None


class TestRouteCreate:
    def test_method_uppercased(self) -> None:
        route = Route.create("get", "/users", _noop)
        assert route.method == "GET"
        assert route.path == "/users"
        assert route.handler is _noop

    def test_custom_verb(self) -> None:
        assert Route.create("purge", "/cache", _noop).method == "PURGE"

    def test_malformed_pattern_fails_at_creation(self) -> None:
        with pytest.raises(ConfigurationError):
            Route.create("GET", "/users/{id", _noop)

    def test_frozen(self) -> None:
        route = Route.create("GET", "/", _noop)
        with pytest.raises(AttributeError):
            route.method = "POST"  # type: ignore[misc]


class TestRouteMatches:
    def test_method_and_path(self) -> None:
        route = Route.create("GET", "/users/{id:[0-9]+}", _noop)
        assert route.matches(Request.create("GET", "/users/42"))
        assert not route.matches(Request.create("POST", "/users/42"))
        assert not route.matches(Request.create("GET", "/users/abc"))

    def test_request_method_normalized(self) -> None:
        route = Route.create("GET", "/", _noop)
        assert route.matches(Request.create("get", "/"))

    def test_extract_params(self) -> None:
        route = Route.create("GET", "/{name}", _noop)
        assert route.extract_params(Request.create("GET", "/alice")) == {"name": "alice"}


class TestRouteHandle:
    def test_handler_receives_request_response_params(self) -> None:
        seen: dict[str, object] = {}

        def handler(request: Request, response: Response, params: dict[str, str]) -> None:
            seen["request"] = request
            seen["response"] = response
            seen["params"] = params

        route = Route.create("GET", "/users/{id}", handler)
        request = Request.create("GET", "/users/7")
        response = Response()
        route.handle(request, response)

        assert seen == {"request": request, "response": response, "params": {"id": "7"}}

    def test_http_error_propagates_unchanged(self) -> None:
        error = HTTPError(status=403, message="forbidden", details={"role": "guest"})

        def handler(request: Request, response: Response, params: dict[str, str]) -> None:
            raise error

        route = Route.create("GET", "/", handler)
        with pytest.raises(HTTPError) as exc_info:
            route.handle(Request.create("GET", "/"), Response())
        assert exc_info.value is error

    def test_other_errors_become_500(self) -> None:
        def handler(request: Request, response: Response, params: dict[str, str]) -> None:
            msg = "database unavailable"
            raise ValueError(msg)

        route = Route.create("GET", "/", handler)
        with pytest.raises(InternalServerError) as exc_info:
            route.handle(Request.create("GET", "/"), Response())

        assert exc_info.value.status == 500
        assert exc_info.value.message == "database unavailable"
        assert dict(exc_info.value.details) == {}
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_wrapped_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: Request, response: Response, params: dict[str, str]) -> None:
            msg = "boom"
            raise KeyError(msg)

        route = Route.create("GET", "/explode", handler)
        with caplog.at_level("ERROR", logger="wren.routing"), pytest.raises(InternalServerError):
            route.handle(Request.create("GET", "/explode"), Response())

        assert "500 GET /explode" in caplog.text
