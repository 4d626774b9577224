"""Reverse routing — build a concrete path from a route name and values."""

from typing import Any

from spur.errors import (
    InvalidParameterError,
    MissingParameterError,
    MissingRouteError,
    TooManyParametersError,
)
from spur.routing.route import ParamSegment, Route
from spur.routing.store import RouteStore


class ReverseRouter:
    """Builds paths for the routes of a ``RouteStore``.

    Paths always come back wrapped in slashes::

        reverse = ReverseRouter(store)
        reverse.build_path("get_user_comments", "matt")
        # "/users/matt/comments/"
        reverse.build_path("get_user_comments", "james", "published")
        # "/users/james/comments/published/"
    """

    __slots__ = ("_store",)

    def __init__(self, store: RouteStore) -> None:
        self._store = store

    def build_path(self, name: str, *args: Any) -> str:
        """Return the path of route *name* with *args* filled in, in order.

        ``None`` stands for an omitted value, so a middle optional
        parameter can be skipped while later ones are still given. Values
        are converted with ``str()`` before being checked against the
        parameter regex.

        Raises:
            MissingRouteError: No route is named *name*.
            MissingParameterError: A required parameter got no value.
            InvalidParameterError: A value does not match its parameter regex.
            TooManyParametersError: More values than parameters.
        """
        route = self._store.route_by_name(name)
        if route is None:
            msg = f"There is no route named '{name}'."
            raise MissingRouteError(msg)

        if route.is_static:
            if args:
                raise _too_many(route, expected=0, got=len(args))
            return _wrap(route.path)
        return _wrap(_render_segments(route, args))


def _too_many(route: Route, *, expected: int, got: int) -> TooManyParametersError:
    msg = f"Too many parameters for '{route.name}' route: expected at most {expected}, got {got}."
    return TooManyParametersError(msg)


def _wrap(path: str) -> str:
    return f"/{path}/" if path else "/"


def _render_segments(route: Route, args: tuple[Any, ...]) -> str:
    out: list[str] = []
    arg_index = 0
    skip_slash = False

    for segment in route.segments:
        if not isinstance(segment, ParamSegment):
            if skip_slash and segment == "/":
                skip_slash = False
                continue
            skip_slash = False
            out.append(segment)
            continue

        value = args[arg_index] if arg_index < len(args) else None
        arg_index += 1

        if value is None:
            if not segment.optional:
                raise MissingParameterError(segment.name, route.name)
            # Omitted optional: drop one separator so none is left dangling
            if out and out[-1] == "/":
                out.pop()
            else:
                skip_slash = True
            continue

        value = str(value)
        if not segment.matches(value):
            raise InvalidParameterError(segment.name, route.name)
        out.append(value)

    if len(args) > arg_index:
        raise _too_many(route, expected=arg_index, got=len(args))

    return "".join(out)
