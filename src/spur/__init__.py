"""Spur — named URL routes with regex matching and reverse routing.

Register routes by HTTP method, path pattern, name and handler; match
requests to exactly one route; build paths back from route names.

Basic usage::

    from spur import Router

    router = Router()
    router.get("/posts/{id:i}", "get_post", lambda id: f"post {id}")
    router.get("/comments/{filter}?", "get_comments", list_comments)

    router.match("GET", "/posts/25").params   # {"id": "25"}
    router.path_for("get_comments")            # "/comments/"
    router.path_for("get_comments", "deleted") # "/comments/deleted/"
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "NOT_DISPATCHED",
    "ConfigurationError",
    "Dispatcher",
    "DuplicateNameError",
    "DuplicatePathError",
    "InvalidHandlerError",
    "InvalidMethodError",
    "InvalidNameError",
    "InvalidNamespaceError",
    "InvalidOutputFormatError",
    "InvalidParameterError",
    "InvalidPatternError",
    "Method",
    "MissingParameterError",
    "MissingRouteError",
    "OutputFormat",
    "RegistrationError",
    "RespondTo",
    "ReverseRouter",
    "ReverseRoutingError",
    "Route",
    "RouteMatch",
    "RouteStore",
    "Router",
    "RouterConfig",
    "SpurError",
    "TooManyParametersError",
]

_ERRORS = frozenset(
    {
        "ConfigurationError",
        "DuplicateNameError",
        "DuplicatePathError",
        "InvalidHandlerError",
        "InvalidMethodError",
        "InvalidNameError",
        "InvalidNamespaceError",
        "InvalidOutputFormatError",
        "InvalidParameterError",
        "InvalidPatternError",
        "MissingParameterError",
        "MissingRouteError",
        "RegistrationError",
        "ReverseRoutingError",
        "SpurError",
        "TooManyParametersError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import spur`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from spur.router import Router

        return Router

    if name == "RouterConfig":
        from spur.config import RouterConfig

        return RouterConfig

    if name in ("Dispatcher", "NOT_DISPATCHED", "OutputFormat", "RespondTo"):
        from spur import dispatch as _dispatch

        return getattr(_dispatch, name)

    if name in ("Method", "Route", "RouteMatch"):
        from spur.routing import route as _route

        return getattr(_route, name)

    if name == "RouteStore":
        from spur.routing.store import RouteStore

        return RouteStore

    if name == "ReverseRouter":
        from spur.routing.reverse import ReverseRouter

        return ReverseRouter

    if name in _ERRORS:
        from spur import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
