"""Tests for wren.routing.address — route pattern compilation."""

import pytest

from wren.errors import ConfigurationError
from wren.routing.address import RouteAddress, compile_address


class TestLiteralPatterns:
    @pytest.mark.parametrize(
        ("pattern", "path", "expected"),
        [
            ("/", "/", True),
            ("/", "/ping", False),
            ("/ping", "/ping", True),
            ("/ping", "/pong", False),
            ("/ping", "/ping/extra", False),
            ("/api/v2/users", "/api/v2/users", True),
            ("/api/v2/users", "/api/v2", False),
            ("api//v2/", "/api/v2", True),
        ],
    )
    def test_exact_equality(self, pattern: str, path: str, expected: bool) -> None:
        assert compile_address(pattern).matches(path) is expected

    def test_no_variables(self) -> None:
        address = compile_address("/users")
        assert address.variable_names == ()
        assert address.extract("/users") == {}

    def test_literals_are_not_regex(self) -> None:
        address = compile_address("/sitemap.json")
        assert address.matches("/sitemap.json")
        assert not address.matches("/sitemapxjson")

    def test_raw_preserved(self) -> None:
        assert compile_address("/users/{id}").raw == "/users/{id}"
        assert str(compile_address("/users/{id}")) == "/users/{id}"


class TestVariables:
    def test_free_form_capture(self) -> None:
        address = compile_address("/{name}")
        assert address.variable_names == ("name",)
        assert address.matches("/alice")
        assert address.extract("/alice") == {"name": "alice"}

    def test_free_form_capture_is_unbounded(self) -> None:
        address = compile_address("/files/{rest}")
        assert address.extract("/files/a/b/c.txt") == {"rest": "a/b/c.txt"}

    def test_constrained_capture(self) -> None:
        address = compile_address("/{id:[0-9]+}")
        assert not address.matches("/abc")
        assert address.matches("/42")
        assert address.extract("/42") == {"id": "42"}

    def test_empty_subpattern_uses_default(self) -> None:
        address = compile_address("/{id:}")
        assert address.matches("/anything")

    def test_variable_order_follows_pattern(self) -> None:
        address = compile_address("/{org}/repos/{repo}/issues/{number:[0-9]+}")
        assert address.variable_names == ("org", "repo", "number")
        assert address.extract("/acme/repos/web/issues/7") == {
            "org": "acme",
            "repo": "web",
            "number": "7",
        }

    def test_free_form_capture_spans_newlines(self) -> None:
        address = compile_address("/{name}")
        assert address.matches("/a\nb")
        assert address.extract("/a\nb") == {"name": "a\nb"}

    def test_extract_on_mismatch_is_empty(self) -> None:
        assert compile_address("/{id:[0-9]+}").extract("/abc") == {}


class TestCatchAll:
    def test_matches_any_path(self) -> None:
        address = compile_address("*")
        assert address.variable_names == ()
        for path in ("/", "/a", "/a/b/c", ""):
            assert address.matches(path)


class TestCompileCaching:
    def test_same_raw_same_address(self) -> None:
        first = compile_address("/users/{id:[0-9]+}")
        second = compile_address("/users/{id:[0-9]+}")
        assert first == second
        assert first.matcher.pattern == second.matcher.pattern
        assert first.variable_names == second.variable_names

    def test_frozen(self) -> None:
        address = compile_address("/users")
        assert isinstance(address, RouteAddress)
        with pytest.raises(AttributeError):
            address.raw = "/other"  # type: ignore[misc]


class TestMalformedPatterns:
    @pytest.mark.parametrize(
        "pattern",
        [
            "/users/{id",
            "/users/id}",
            "/users/{}",
            "/users/{a}{b}",
            "/users/{id:[0-9+}",
            "/{1abc}",
            "/{id}/{id}",
        ],
    )
    def test_rejected_at_compile_time(self, pattern: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            compile_address(pattern)
        assert pattern in str(exc_info.value)
