"""Shared type aliases used across spur modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — user-defined function receiving path params as keywords
Handler: TypeAlias = Callable[..., Any]
