"""Immutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]``. Names are lower-cased on the way in;
when a name repeats, the last value wins.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    Accepts a mapping or an iterable of ``(name, value)`` pairs. Byte
    pairs (as found in an ASGI scope) are decoded as latin-1.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        raw: Mapping[str, str] | Iterable[tuple[str | bytes, str | bytes]] = (),
    ) -> None:
        pairs = raw.items() if isinstance(raw, Mapping) else raw
        data: dict[str, str] = {}
        for name, value in pairs:
            if isinstance(name, bytes):
                name = name.decode("latin-1")
            if isinstance(value, bytes):
                value = value.decode("latin-1")
            data[name.lower()] = value
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key.lower()]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key.lower() in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Headers({self._data!r})"

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Headers are immutable."
        raise AttributeError(msg)

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the value for *key*, or *default* if missing."""
        return self._data.get(key.lower(), default)

    def to_dict(self) -> dict[str, str]:
        """A plain ``dict`` copy, e.g. for JSON serialization."""
        return dict(self._data)
