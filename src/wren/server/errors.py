"""Error envelope rendering.

Maps HTTPError exceptions to finalized JSON Responses. This is the
single translator every failure funnels through.
"""

import logging
from typing import Any

from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response

logger = logging.getLogger("wren.server")


def error_envelope(exc: HTTPError) -> dict[str, Any]:
    """The uniform JSON error body for *exc*."""
    return {
        "status": exc.status,
        "error": {
            "code": f"http_error_{exc.status}",
            "message": exc.message,
            "details": dict(exc.details or {}),
        },
    }


def handle_http_error(exc: HTTPError, request: Request | None = None) -> Response:
    """Render *exc* on a fresh Response: its status, headers, and envelope."""
    if request is not None:
        logger.debug("%d %s %s — %s", exc.status, request.method, request.uri, exc.message)
    else:
        logger.debug("%d (request not built) — %s", exc.status, exc.message)

    return (
        Response()
        .with_status(exc.status)
        .with_headers(exc.headers or {})
        .with_json(error_envelope(exc))
        .end()
    )
