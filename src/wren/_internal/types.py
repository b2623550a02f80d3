"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — called as handler(request, response, params)
Handler: TypeAlias = Callable[[Any, Any, dict[str, str]], None]
