"""Request dispatching — run the matched handler and pick its output.

The dispatcher is the seam between the route store and whatever serves
requests. It never reads a request itself: the host passes the method,
the path and whether the client asked for JSON.

Handlers receive the bound path parameters as keyword arguments. An
omitted optional parameter is simply not passed, so the handler default
applies::

    def list_comments(filter="all"):
        ...

A handler may return ``RespondTo`` to serve both HTML and JSON clients
from one route; the dispatcher picks the branch from the configured
``OutputFormat``.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from spur._internal.invoke import invoke
from spur.errors import InvalidHandlerError, InvalidOutputFormatError
from spur.routing.route import RouteMatch
from spur.routing.store import RouteStore

logger = logging.getLogger("spur.dispatch")


class OutputFormat(StrEnum):
    """How handler output is chosen between HTML and JSON.

    ``AUTO`` serves JSON only to callers that ask for it.
    """

    AUTO = "auto"
    HTML = "html"
    JSON = "json"


def parse_output_format(value: Any) -> OutputFormat:
    try:
        return OutputFormat(value)
    except ValueError:
        msg = f"{value!r} is not a valid output format."
        raise InvalidOutputFormatError(msg) from None


@dataclass(frozen=True, slots=True)
class RespondTo:
    """Handler output with one branch per client type.

    ``json`` is returned as-is for JSON clients. ``html`` is a callable
    run for everyone else (it can render a template, print, ...).
    """

    json: Any
    html: Callable[[], Any]

    def __post_init__(self) -> None:
        if not callable(self.html):
            msg = "The html branch of RespondTo must be callable."
            raise InvalidHandlerError(msg)


@dataclass(frozen=True, slots=True)
class NotDispatched:
    """Sentinel for requests no route matched.

    The host decides the fallback (another router, a 404 page, ...).
    Falsy, so ``if not result`` reads naturally.
    """

    def __bool__(self) -> bool:
        return False


NOT_DISPATCHED: NotDispatched = NotDispatched()


class Dispatcher:
    """Runs handlers for matched routes.

    Usage::

        dispatcher = Dispatcher(OutputFormat.AUTO)
        result = dispatcher.dispatch(store, "GET", "/posts/25")
        if result is NOT_DISPATCHED:
            ...
    """

    __slots__ = ("_output_format",)

    def __init__(self, output_format: OutputFormat | str = OutputFormat.AUTO) -> None:
        self._output_format = parse_output_format(output_format)

    @property
    def output_format(self) -> OutputFormat:
        return self._output_format

    def wants_json(self, requested: bool) -> bool:
        """Whether to serve JSON, given what the client asked for.

        An explicit ``HTML`` or ``JSON`` format overrides the client.
        """
        if self._output_format is OutputFormat.AUTO:
            return requested
        return self._output_format is OutputFormat.JSON

    def _lookup(self, store: RouteStore, method: str, path: str) -> RouteMatch | None:
        match = store.match(method, path)
        if match is None:
            logger.debug("No route for %s %s", method, path)
        return match

    def dispatch(
        self,
        store: RouteStore,
        method: str,
        path: str,
        *,
        wants_json: bool = False,
    ) -> Any:
        """Match and run a handler, returning its (selected) output.

        Returns ``NOT_DISPATCHED`` when no route matches. Use
        ``dispatch_async()`` for ``async def`` handlers.
        """
        match = self._lookup(store, method, path)
        if match is None:
            return NOT_DISPATCHED

        output = match.route.handler(**match.params)
        if isinstance(output, RespondTo):
            if self.wants_json(wants_json):
                return output.json
            return output.html()
        if callable(output):
            return output()
        return output

    async def dispatch_async(
        self,
        store: RouteStore,
        method: str,
        path: str,
        *,
        wants_json: bool = False,
    ) -> Any:
        """Async variant of ``dispatch()``; awaits coroutine handlers."""
        match = self._lookup(store, method, path)
        if match is None:
            return NOT_DISPATCHED

        output = await invoke(match.route.handler, **match.params)
        if isinstance(output, RespondTo):
            if self.wants_json(wants_json):
                return output.json
            return await invoke(output.html)
        if callable(output):
            return await invoke(output)
        return output
