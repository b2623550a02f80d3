"""ASGI handler — translates ASGI scope/messages to wren types.

The only component that touches raw ASGI HTTP messages. Drains the body,
hands a RawRequest to the synchronous core, and sends the finalized
Response back through ASGI send().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wren._internal.asgi import Receive, Scope, Send, read_body
from wren.http.request import RawRequest
from wren.server.sender import send_response

if TYPE_CHECKING:
    from wren.app import App


async def handle_request(scope: Scope, receive: Receive, send: Send, *, app: App) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    body = await read_body(receive)
    response = app.start(source=RawRequest.from_asgi(scope, body))
    await send_response(response, send)
