"""ASGI response sending — translates a finalized Response to ASGI messages."""

from wren._internal.asgi import Send
from wren.http.response import Response


def build_raw_headers(response: Response) -> list[tuple[bytes, bytes]]:
    """Response headers as ASGI byte pairs, with content-length last."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (name.encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers.items()
        if name != "content-length"
    ]
    raw_headers.append((b"content-length", str(len(response.body_bytes)).encode("latin-1")))
    return raw_headers


async def send_response(response: Response, send: Send) -> None:
    """Translate a wren Response into ASGI send() calls.

    Bodyless statuses (1xx, 204) always send an empty body.
    """
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": build_raw_headers(response),
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": response.body_bytes,
        }
    )
