"""Spur exception hierarchy.

Shared across the route store, the reverse router, the dispatcher and the
CLI so every module raises and catches the same types.

A failed lookup is not an error: ``RouteStore.match()`` returns ``None``
and ``Dispatcher.dispatch()`` returns ``NOT_DISPATCHED``.
"""


class SpurError(Exception):
    """Base for all spur-specific errors."""


class ConfigurationError(SpurError):
    """Raised when router configuration is invalid.

    Typically raised while building a ``Router`` or ``RouteStore``.
    """


class InvalidNamespaceError(ConfigurationError):
    """The router namespace contains forbidden characters or ``//``."""


class InvalidOutputFormatError(ConfigurationError):
    """The output format is not one of ``auto``, ``html`` or ``json``."""


# -- Registration ------------------------------------------------------------


class RegistrationError(SpurError):
    """Base for errors raised while adding a route.

    A route that fails registration leaves the store untouched.
    """


class InvalidPatternError(RegistrationError):
    """The route path is malformed.

    Covers unbalanced or nested braces, garbled placeholders, repeated
    parameter names, invalid parameter regexes and forbidden characters in
    the static parts of the path.
    """


class InvalidMethodError(RegistrationError):
    """The HTTP method is not in the allowed set."""


class InvalidNameError(RegistrationError):
    """The route name is not made of ``[A-Za-z0-9_]`` characters."""


class InvalidHandlerError(RegistrationError):
    """The route handler (or a ``RespondTo`` html branch) is not callable."""


class DuplicateNameError(RegistrationError):
    """Another route already uses this name."""


class DuplicatePathError(RegistrationError):
    """Another route already resolves the same path for the same method."""


# -- Reverse routing ---------------------------------------------------------


class ReverseRoutingError(SpurError):
    """Base for errors raised while building a path from a route name."""


class MissingRouteError(ReverseRoutingError):
    """No route is registered under the requested name."""


class _ParameterError(ReverseRoutingError):
    def __init__(self, message: str, *, param: str, route: str) -> None:
        super().__init__(message)
        self.param = param
        self.route = route


class MissingParameterError(_ParameterError):
    """A required parameter received no value."""

    def __init__(self, param: str, route: str) -> None:
        super().__init__(
            f"Missing required parameter '{param}' for '{route}' route.",
            param=param,
            route=route,
        )


class InvalidParameterError(_ParameterError):
    """A parameter value does not satisfy the parameter's regex."""

    def __init__(self, param: str, route: str) -> None:
        super().__init__(
            f"Invalid parameter '{param}' for '{route}' route.",
            param=param,
            route=route,
        )


class TooManyParametersError(ReverseRoutingError):
    """More values were passed than the route has parameters."""
