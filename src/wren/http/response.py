"""HTTP response with a chainable ``.with_*()`` setter API.

Handlers receive a Response, shape it through chained calls, and
finalize it with ``end()``. Finalization is terminal: any later
modification raises ``ResponseFinalizedError``.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from wren.errors import ResponseFinalizedError

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def is_bodyless_status(status: int) -> bool:
    """Whether a status code is sent without a body (1xx and 204)."""
    return status < 200 or status == 204


class Response:
    """An HTTP response built through chained, in-place setters.

    Each ``with_*()`` call mutates the response and returns it, so calls
    chain::

        response.with_status(201).with_json({"id": 7}).end()
    """

    __slots__ = ("_body", "_finalized", "_headers", "_status")

    def __init__(self) -> None:
        self._status = 200
        self._headers: dict[str, str] = {}
        self._body: str | None = None
        self._finalized = False

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "open"
        return f"<Response {self._status} {state}>"

    # -- Read access --

    @property
    def status(self) -> int:
        return self._status

    @property
    def headers(self) -> Mapping[str, str]:
        """Read-only view of the headers set so far (names lower-cased)."""
        return MappingProxyType(self._headers)

    @property
    def body(self) -> str | None:
        return self._body

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def content_type(self) -> str | None:
        return self._headers.get("content-type")

    # -- Chainable setters --

    def with_status(self, status: int) -> Response:
        """Set the status code."""
        self._check_not_finalized()
        self._status = status
        return self

    def with_header(self, name: str, value: str) -> Response:
        """Set a single header, replacing any previous value."""
        self._check_not_finalized()
        self._headers[name.lower()] = value
        return self

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Merge *headers* into the response; later values win."""
        self._check_not_finalized()
        for name, value in headers.items():
            self._headers[name.lower()] = value
        return self

    def with_body(self, body: str) -> Response:
        """Set the raw body text without touching content-type."""
        self._check_not_finalized()
        self._body = body
        return self

    def with_text(self, body: str) -> Response:
        """Set a plain-text body."""
        return self.with_header("content-type", TEXT_CONTENT_TYPE).with_body(body)

    def with_json(self, payload: Any) -> Response:
        """Serialize *payload* as compact JSON. An empty payload renders ``{}``."""
        if isinstance(payload, (dict, list, tuple)) and not payload:
            payload = {}
        return self.with_header("content-type", JSON_CONTENT_TYPE).with_body(
            json_module.dumps(payload, separators=(",", ":"))
        )

    def end(self) -> Response:
        """Finalize the response. No further modification is allowed."""
        self._check_not_finalized()
        self._finalized = True
        return self

    # -- Outbound view --

    @property
    def body_bytes(self) -> bytes:
        """Body as UTF-8 bytes; empty for bodyless statuses."""
        if self._body is None or is_bodyless_status(self._status):
            return b""
        return self._body.encode("utf-8")

    @property
    def text(self) -> str:
        """Body as string ("" when unset)."""
        return self._body or ""

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json_module.loads(self.text)

    def _check_not_finalized(self) -> None:
        if self._finalized:
            msg = "Cannot modify a response after end() has been called."
            raise ResponseFinalizedError(msg)
