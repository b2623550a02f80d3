"""Route address compilation.

Turns a human-written route pattern into an anchored regular expression
plus the ordered list of variable names it captures::

    "/users"              -> ^/users$
    "/users/{name}"       -> ^/users/(?P<name>.*)$
    "/users/{id:[0-9]+}"  -> ^/users/(?P<id>[0-9]+)$
    "*"                   -> any path
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from wren.errors import ConfigurationError

CATCH_ALL = "*"

# {name} or {name:subpattern}
_VARIABLE = re.compile(r"^\{(?P<name>\w+)(?::(?P<pattern>.*))?\}$")

# Capture pattern for variables declared without a sub-pattern
DEFAULT_VARIABLE_PATTERN = ".*"


@dataclass(frozen=True, slots=True)
class RouteAddress:
    """A compiled route pattern. Immutable after construction."""

    raw: str
    matcher: re.Pattern[str]
    variable_names: tuple[str, ...] = ()

    def matches(self, path: str) -> bool:
        """True if *path* satisfies the whole pattern."""
        return self.matcher.fullmatch(path) is not None

    def extract(self, path: str) -> dict[str, str]:
        """Return the captured value for each variable, in declaration order.

        Returns an empty dict when *path* does not match.
        """
        match = self.matcher.fullmatch(path)
        if match is None:
            return {}
        return {name: match.group(name) for name in self.variable_names}

    def __str__(self) -> str:
        return self.raw


def _segment_pattern(segment: str, raw: str, variables: list[str]) -> str:
    variable = _VARIABLE.match(segment)
    if variable is None:
        if "{" in segment or "}" in segment:
            msg = (
                f"Malformed variable segment {segment!r} in route {raw!r}. "
                "Use {name} or {name:pattern}."
            )
            raise ConfigurationError(msg)
        return re.escape(segment)

    name = variable.group("name")
    if name in variables:
        msg = f"Variable {name!r} appears more than once in route {raw!r}."
        raise ConfigurationError(msg)
    variables.append(name)
    pattern = variable.group("pattern") or DEFAULT_VARIABLE_PATTERN
    return f"(?P<{name}>{pattern})"


@lru_cache(maxsize=512)
def compile_address(raw: str) -> RouteAddress:
    """Compile a route pattern into a ``RouteAddress``.

    Raises ``ConfigurationError`` for malformed variable syntax or an
    invalid sub-pattern, so bad routes fail at registration time.
    """
    if raw == CATCH_ALL:
        return RouteAddress(raw=raw, matcher=re.compile(".*", re.DOTALL))

    variables: list[str] = []
    pieces = [
        _segment_pattern(segment, raw, variables)
        for segment in raw.split("/")
        if segment
    ]

    try:
        matcher = re.compile("^/" + "/".join(pieces) + "$", re.DOTALL)
    except re.error as exc:
        msg = f"Invalid pattern in route {raw!r}: {exc}"
        raise ConfigurationError(msg) from exc

    return RouteAddress(raw=raw, matcher=matcher, variable_names=tuple(variables))
