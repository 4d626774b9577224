"""Router facade — one object for registration, matching, dispatch and paths.

Wires a ``RouteStore``, a ``ReverseRouter`` and a ``Dispatcher`` together
from a single ``RouterConfig``.
"""

from collections.abc import Callable, Iterable
from typing import Any

from spur._internal.types import Handler
from spur.config import RouterConfig
from spur.dispatch import Dispatcher
from spur.routing.reverse import ReverseRouter
from spur.routing.route import Method, Route, RouteMatch
from spur.routing.store import RouteStore


class Router:
    """Route registry with matching, dispatching and reverse routing.

    Usage::

        router = Router.create(namespace="api")

        @router.route("/users/{username}", name="get_user")
        def get_user(username):
            return f"user {username}"

        router.dispatch("GET", "/api/users/matt")  # "user matt"
        router.path_for("get_user", "matt")         # "/api/users/matt/"
    """

    __slots__ = ("_dispatcher", "_reverse", "_store", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._store = RouteStore(self.config.namespace, chunk_size=self.config.chunk_size)
        self._reverse = ReverseRouter(self._store)
        self._dispatcher = Dispatcher(self.config.output_format)

    @classmethod
    def create(cls, **overrides: Any) -> "Router":
        """Build a router from ``RouterConfig`` field overrides."""
        return cls(RouterConfig(**overrides))

    @property
    def store(self) -> RouteStore:
        return self._store

    @property
    def routes(self) -> list[Route]:
        return self._store.routes

    # -- Registration --

    def add_route(self, method: str, path: str, name: str, handler: Handler) -> Route:
        return self._store.add(method, path, name, handler)

    def get(self, path: str, name: str, handler: Handler) -> Route:
        return self.add_route(Method.GET, path, name, handler)

    def head(self, path: str, name: str, handler: Handler) -> Route:
        return self.add_route(Method.HEAD, path, name, handler)

    def post(self, path: str, name: str, handler: Handler) -> Route:
        return self.add_route(Method.POST, path, name, handler)

    def put(self, path: str, name: str, handler: Handler) -> Route:
        return self.add_route(Method.PUT, path, name, handler)

    def patch(self, path: str, name: str, handler: Handler) -> Route:
        return self.add_route(Method.PATCH, path, name, handler)

    def delete(self, path: str, name: str, handler: Handler) -> Route:
        return self.add_route(Method.DELETE, path, name, handler)

    def options(self, path: str, name: str, handler: Handler) -> Route:
        return self.add_route(Method.OPTIONS, path, name, handler)

    def route(
        self,
        path: str,
        *,
        name: str | None = None,
        methods: Iterable[str] = ("GET",),
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Route path. Use ``{param}`` for path parameters.
            name: Route name for reverse routing. Defaults to the
                function name.
            methods: HTTP methods. Defaults to ``("GET",)``. Names must
                be unique, so with more than one method each route is
                named ``<name>_<method>`` (e.g. ``comments_post``).

        All methods are registered together: if one of them is rejected,
        none is.
        """
        methods = tuple(methods)

        def decorator(func: Handler) -> Handler:
            base_name = name or func.__name__
            if len(methods) == 1:
                names = [base_name]
            else:
                names = [f"{base_name}_{str(method).lower()}" for method in methods]
            self._store.add_all(
                (method, path, route_name, func) for method, route_name in zip(methods, names)
            )
            return func

        return decorator

    # -- Matching and dispatch --

    def match(self, method: str, path: str) -> RouteMatch | None:
        return self._store.match(method, path)

    def dispatch(self, method: str, path: str, *, wants_json: bool = False) -> Any:
        """Run the handler for a request. See ``Dispatcher.dispatch()``."""
        return self._dispatcher.dispatch(self._store, method, path, wants_json=wants_json)

    async def dispatch_async(self, method: str, path: str, *, wants_json: bool = False) -> Any:
        return await self._dispatcher.dispatch_async(
            self._store, method, path, wants_json=wants_json
        )

    # -- Reverse routing --

    def path_for(self, name: str, *args: Any) -> str:
        """Build the path of route *name*. See ``ReverseRouter.build_path()``."""
        return self._reverse.build_path(name, *args)

    url_for = path_for
