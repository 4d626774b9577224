"""Validation shared by static and dynamic routes and by the store.

Every check raises a ``spur.errors`` exception on failure and returns the
cleaned value otherwise.
"""

import re
from typing import Any

from spur._internal.types import Handler
from spur.errors import (
    InvalidHandlerError,
    InvalidMethodError,
    InvalidNameError,
    InvalidNamespaceError,
    InvalidPatternError,
)
from spur.routing.route import Method

ROUTE_NAME_RE = re.compile(r"[a-zA-Z0-9_]+")

# Alphanumerics plus "_", "-" and "/", never two "/" in a row
STATIC_PATH_RE = re.compile(r"(?!.*//)[a-zA-Z0-9_\-/]+")

# Same as a static path but "." is allowed too
NAMESPACE_RE = re.compile(r"(?!.*//)[a-zA-Z0-9_.\-/]+")


def validate_method(method: Any) -> Method:
    """Coerce *method* to a ``Method``. Matching is case-sensitive."""
    if isinstance(method, Method):
        return method
    try:
        return Method(method)
    except ValueError:
        msg = f"{method!r} is not a valid HTTP method."
        raise InvalidMethodError(msg) from None


def validate_name(name: Any) -> str:
    if not isinstance(name, str) or not ROUTE_NAME_RE.fullmatch(name):
        msg = f"{name!r} is not a valid route name."
        raise InvalidNameError(msg)
    return name


def validate_handler(handler: Any, name: str) -> Handler:
    if not callable(handler):
        msg = f"Invalid handler for '{name}' route."
        raise InvalidHandlerError(msg)
    return handler


def validate_static_path(path: str) -> str:
    """Check the characters of a static path (or the static parts of a pattern).

    The empty string is the root route and is accepted.
    """
    if path and not STATIC_PATH_RE.fullmatch(path):
        msg = f"'{path}' is not a valid route path."
        raise InvalidPatternError(msg)
    return path


def parse_namespace(namespace: str) -> str:
    """Validate a router namespace and strip surrounding spaces and ``/``."""
    if namespace and not NAMESPACE_RE.fullmatch(namespace):
        msg = f"'{namespace}' is not a valid namespace."
        raise InvalidNamespaceError(msg)
    return namespace.strip(" /")


def trim_path(path: str) -> str:
    """Strip the surrounding spaces and slashes of a route or request path."""
    return path.strip(" /")
