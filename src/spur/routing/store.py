"""Route store — registration, uniqueness rules and request matching.

Static routes live in a ``path -> {method -> Route}`` map and match by
plain lookup. Dynamic routes live in a ``regex -> {method -> Route}`` map
and match through a ``ChunkedMatcher`` built lazily from that map.

Thread safety:
    Registration is a single-threaded setup step. Matching is read-only,
    except for rebuilding the dynamic matcher after new dynamic routes
    were added. The rebuild runs under a lock with a double-checked dirty
    flag and publishes the new matcher by swapping one reference, so a
    concurrent ``match()`` sees either the old or the new matcher, never
    a half-built one.
"""

import logging
import threading
from collections.abc import Iterable, Iterator, Sequence

from spur._internal.types import Handler
from spur.errors import DuplicateNameError, DuplicatePathError
from spur.routing.chunks import CHUNK_SIZE, ChunkedMatcher
from spur.routing.pattern import compile_pattern, is_static_path
from spur.routing.route import Method, Route, RouteKind, RouteMatch
from spur.routing.validation import (
    parse_namespace,
    trim_path,
    validate_handler,
    validate_method,
    validate_name,
    validate_static_path,
)

logger = logging.getLogger("spur.routing")


class RouteStore:
    """Holds every registered route and answers match / name queries.

    Usage::

        store = RouteStore("api/v2")
        store.add("GET", "/posts/{id:i}", "get_post", show_post)
        match = store.match("GET", "/api/v2/posts/25/")
        match.params  # {"id": "25"}
    """

    __slots__ = (
        "_chunk_size",
        "_dirty",
        "_dynamic",
        "_lock",
        "_matcher",
        "_names",
        "_namespace",
        "_static",
    )

    def __init__(self, namespace: str = "", *, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size < 1:
            msg = f"chunk_size must be at least 1, got {chunk_size}."
            raise ValueError(msg)
        self._namespace = parse_namespace(namespace)
        self._chunk_size = chunk_size
        self._static: dict[str, dict[Method, Route]] = {}
        self._dynamic: dict[str, dict[Method, Route]] = {}
        self._names: dict[str, Route] = {}
        self._matcher: ChunkedMatcher | None = None
        self._dirty = False
        self._lock = threading.Lock()

    @property
    def namespace(self) -> str:
        return self._namespace

    # -- Registration --

    def add(self, method: str, path: str, name: str, handler: Handler) -> Route:
        """Register a route and return it.

        Raises a ``RegistrationError`` subclass if the method, name,
        handler or path is invalid, or if the route clashes with an
        existing one. Nothing is stored when an error is raised.
        """
        route = self._build(method, path, name, handler)
        self._insert(route)
        return route

    def add_all(self, entries: Iterable[tuple[str, str, str, Handler]]) -> list[Route]:
        """Register several ``(method, path, name, handler)`` routes at once.

        Every route is checked, against the store and against the others,
        before any is stored: either all are registered or none is.
        """
        routes: list[Route] = []
        for method, path, name, handler in entries:
            routes.append(self._build(method, path, name, handler, pending=routes))
        for route in routes:
            self._insert(route)
        return routes

    def _prefixed(self, path: str) -> str:
        if not self._namespace:
            return path
        if not path:
            return self._namespace
        return f"{self._namespace}/{path}"

    def _build(
        self,
        method: str,
        path: str,
        name: str,
        handler: Handler,
        *,
        pending: Sequence[Route] = (),
    ) -> Route:
        http_method = validate_method(method)
        validate_name(name)
        validate_handler(handler, name)

        if name in self._names or any(r.name == name for r in pending):
            msg = f"A route named '{name}' already exists."
            raise DuplicateNameError(msg)

        path = trim_path(path)
        if is_static_path(path):
            validate_static_path(path)
            route = Route(http_method, name, handler, RouteKind.STATIC, self._prefixed(path))
            taken = self._static.get(route.path, {})
        else:
            pattern = compile_pattern(path, prefix=self._namespace)
            route = Route(http_method, name, handler, RouteKind.DYNAMIC, pattern.path, pattern)
            taken = self._dynamic.get(pattern.regex, {})

        key = _path_key(route)
        if http_method in taken or any(
            r.method is http_method and _path_key(r) == key for r in pending
        ):
            msg = f"Cannot register two routes matching '{key}' for method '{http_method}'."
            raise DuplicatePathError(msg)
        return route

    def _insert(self, route: Route) -> None:
        if route.pattern is None:
            self._static.setdefault(route.path, {})[route.method] = route
        else:
            with self._lock:
                self._dynamic.setdefault(route.pattern.regex, {})[route.method] = route
                self._dirty = True
        self._names[route.name] = route
        logger.debug("Route registered: %s %s (%s)", route.method, route.path, route.name)

    # -- Matching --

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Find the route for a request.

        Static routes win over dynamic ones for the same concrete path.
        Returns ``None`` when nothing matches, including when *method* is
        not a known HTTP method or *path* is outside the namespace.
        """
        try:
            http_method = Method(method)
        except ValueError:
            return None

        path = trim_path(path)
        if not path.startswith(self._namespace):
            return None

        route = self._static.get(path, {}).get(http_method)
        if route is not None:
            return RouteMatch(route=route, params={})

        return self._dynamic_matcher().match(http_method, path)

    def _dynamic_matcher(self) -> ChunkedMatcher:
        matcher = self._matcher
        if matcher is not None and not self._dirty:
            return matcher
        with self._lock:
            if self._matcher is None or self._dirty:
                self._matcher = ChunkedMatcher(self._dynamic, self._chunk_size)
                self._dirty = False
                logger.debug(
                    "Dynamic matcher rebuilt: %d patterns in %d chunks",
                    len(self._dynamic),
                    len(self._matcher),
                )
            return self._matcher

    # -- Lookup by name --

    def static_route_by_name(self, name: str) -> Route | None:
        route = self._names.get(name)
        return route if route is not None and route.is_static else None

    def dynamic_route_by_name(self, name: str) -> Route | None:
        route = self._names.get(name)
        return route if route is not None and not route.is_static else None

    def route_by_name(self, name: str) -> Route | None:
        return self._names.get(name)

    # -- Introspection --

    @property
    def routes(self) -> list[Route]:
        """Every route, static ones first, each group in registration order."""
        result: list[Route] = []
        for by_method in self._static.values():
            result.extend(by_method.values())
        for by_method in self._dynamic.values():
            result.extend(by_method.values())
        return result

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names


def _path_key(route: Route) -> str:
    # Static routes clash on their path, dynamic ones on their regex
    return route.path if route.pattern is None else route.pattern.regex
