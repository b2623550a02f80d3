"""Immutable HTTP request.

Frozen metadata with a lazily decoded body. The request is honest about
what it is: received data that doesn't change.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from wren.http.headers import Headers
from wren.http.parsers import BodyParser, ParserRegistry


@dataclass(frozen=True, slots=True)
class RawRequest:
    """What the host transport hands over: nothing normalized yet.

    ``path`` may still carry the mount prefix, a trailing slash, and a
    query string.
    """

    method: str
    path: str
    headers: tuple[tuple[str, str], ...] = ()
    body: str = ""

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any], body: bytes = b"") -> RawRequest:
        """Create a RawRequest from an ASGI HTTP scope and the full body."""
        headers = tuple(
            (name.decode("latin-1"), value.decode("latin-1"))
            for name, value in scope.get("headers", ())
        )
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=headers,
            body=body.decode("utf-8", errors="replace"),
        )


def normalize_uri(path: str, root_path: str = "") -> str:
    """Strip the query string, routing prefix, and trailing slash.

    An empty result becomes ``/``.
    """
    path = path.split("?", 1)[0].rstrip("/")
    prefix = root_path.rstrip("/")
    if prefix and (path == prefix or path.startswith(prefix + "/")):
        path = path[len(prefix):]
    return path or "/"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata (method, uri, headers) is frozen at creation. The body
    parser is chosen up front, so an unsupported content type fails
    while the request is built; decoding happens on first access to
    ``body`` and the result is cached.
    """

    method: str
    uri: str = "/"
    headers: Headers = field(default_factory=Headers)
    raw_body: str = ""

    # Private: parser chosen for raw_body (None for an empty body)
    _parser: BodyParser | None = field(default=None, repr=False, compare=False)

    # Private: mutable cache for the decoded body
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def body(self) -> Any:
        """The decoded body, or ``None`` when the request had none.

        Decoder errors (e.g. malformed JSON) propagate from here.
        """
        if "body" in self._cache:
            return self._cache["body"]
        value = None
        if self._parser is not None:
            value = self._parser.parse(self.headers, self.raw_body)
        self._cache["body"] = value
        return value

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup; ``None`` when absent."""
        return self.headers.get(name)

    # -- Factories --

    @classmethod
    def create(
        cls,
        method: str,
        uri: str = "/",
        headers: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        body: Any = None,
    ) -> Request:
        """Build a request with an already decoded body (tests, embedding)."""
        request = cls(method=method.upper(), uri=normalize_uri(uri), headers=Headers(headers))
        request._cache["body"] = body
        return request

    @classmethod
    def from_raw(
        cls,
        raw: RawRequest,
        parsers: ParserRegistry,
        *,
        root_path: str = "",
    ) -> Request:
        """Normalize a host-supplied request.

        Raises ``UnsupportedMediaType`` if the body is non-empty and no
        registered parser accepts its content type.
        """
        headers = Headers(raw.headers)
        return cls(
            method=raw.method.upper(),
            uri=normalize_uri(raw.path, root_path),
            headers=headers,
            raw_body=raw.body,
            _parser=parsers.select(headers, raw.body),
        )
