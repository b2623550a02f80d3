"""Request body parsers and the content-type negotiation registry.

Parsers are tried in registration order; the first one whose content
types match the request's ``content-type`` header decodes the body.
URL-encoded forms and JSON use the standard library decoders.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import parse_qsl

from wren.errors import UnsupportedMediaType


class BodyParser(ABC):
    """Decodes one family of content types.

    ``matches`` is a pure function of the ``content-type`` header and
    the raw body text.
    """

    __slots__ = ()

    #: Substrings searched for in the ``content-type`` header, in order.
    acceptable_content_types: tuple[str, ...] = ()

    def matches(self, headers: Mapping[str, str], body: str) -> bool:
        content_type = headers.get("content-type") or ""
        return any(accepted in content_type for accepted in self.acceptable_content_types)

    @abstractmethod
    def parse(self, headers: Mapping[str, str], body: str) -> Any:
        """Decode *body*. Decoder errors propagate unchanged."""


class FormParser(BodyParser):
    """``application/x-www-form-urlencoded`` → ``dict`` (last value wins)."""

    __slots__ = ()

    acceptable_content_types = ("application/x-www-form-urlencoded",)

    def parse(self, headers: Mapping[str, str], body: str) -> dict[str, str]:
        return dict(parse_qsl(body, keep_blank_values=True))


class JSONParser(BodyParser):
    """``application/json`` → the decoded JSON value."""

    __slots__ = ()

    acceptable_content_types = ("application/json",)

    def parse(self, headers: Mapping[str, str], body: str) -> Any:
        return json.loads(body)


class PlainTextParser(BodyParser):
    """``text/plain`` → the raw body text.

    With ``fallback=True`` it accepts every content type, so any
    non-empty body decodes to at least a string. Register it last.
    """

    __slots__ = ("fallback",)

    acceptable_content_types = ("text/plain",)

    def __init__(self, fallback: bool = False) -> None:
        self.fallback = fallback

    def matches(self, headers: Mapping[str, str], body: str) -> bool:
        if self.fallback:
            return True
        return super().matches(headers, body)

    def parse(self, headers: Mapping[str, str], body: str) -> str:
        return body


def default_parsers() -> tuple[BodyParser, ...]:
    """Form, JSON, and strict plain text, in that order."""
    return (FormParser(), JSONParser(), PlainTextParser())


class ParserRegistry:
    """An ordered set of body parsers.

    Usage::

        registry = ParserRegistry([JSONParser(), PlainTextParser(fallback=True)])
        value = registry.resolve(headers, raw_body)
    """

    __slots__ = ("_parsers",)

    def __init__(self, parsers: Iterable[BodyParser] = ()) -> None:
        self._parsers: tuple[BodyParser, ...] = tuple(parsers)

    def __iter__(self) -> Iterator[BodyParser]:
        return iter(self._parsers)

    def __len__(self) -> int:
        return len(self._parsers)

    @property
    def content_types(self) -> tuple[str, ...]:
        """Every content type accepted by the registered parsers, in order."""
        return tuple(
            content_type
            for parser in self._parsers
            for content_type in parser.acceptable_content_types
        )

    def select(self, headers: Mapping[str, str], body: str) -> BodyParser | None:
        """Pick the parser for *body*, or ``None`` when the body is empty.

        Raises ``UnsupportedMediaType`` when no parser accepts the
        request's content type.
        """
        if not body:
            return None
        for parser in self._parsers:
            if parser.matches(headers, body):
                return parser
        raise UnsupportedMediaType(headers.get("content-type") or "", self.content_types)

    def resolve(self, headers: Mapping[str, str], body: str) -> Any:
        """Select a parser and decode *body* with it."""
        parser = self.select(headers, body)
        if parser is None:
            return None
        return parser.parse(headers, body)
