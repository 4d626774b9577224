"""Route, RoutePattern and RouteMatch frozen dataclasses."""

import re
from dataclasses import dataclass, field
from enum import Enum, StrEnum

from spur._internal.types import Handler


class Method(StrEnum):
    """The HTTP methods a route can be registered for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class RouteKind(Enum):
    """Static routes match by string equality, dynamic ones by regex."""

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True, slots=True)
class ParamSegment:
    """A parameter slot in a dynamic route path.

    ``value_regex`` is anchored (``^(...)$``) and is what a value has to
    satisfy when the path is built back from arguments.
    """

    name: str
    value_regex: str
    optional: bool = False
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.value_regex))

    def matches(self, value: str) -> bool:
        return self._compiled.fullmatch(value) is not None


# A segment is either literal text (including a lone "/") or a parameter
Segment = str | ParamSegment


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A compiled dynamic route path.

    Two views of the same path, computed together:

    - ``regex``: one expression for forward matching, where an optional
      parameter swallows its neighbouring ``/``
    - ``segments``: the path split into literal and parameter pieces for
      reverse routing, where every ``/`` stays its own piece
    """

    path: str
    regex: str
    segments: tuple[Segment, ...]
    param_names: tuple[str, ...]
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", re.compile(f"^{self.regex}$"))

    @property
    def params(self) -> tuple[ParamSegment, ...]:
        return tuple(seg for seg in self.segments if isinstance(seg, ParamSegment))


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route. Created once by the store, never modified."""

    method: Method
    name: str
    handler: Handler
    kind: RouteKind
    path: str
    pattern: RoutePattern | None = None

    @property
    def is_static(self) -> bool:
        return self.kind is RouteKind.STATIC

    @property
    def param_names(self) -> tuple[str, ...]:
        return self.pattern.param_names if self.pattern else ()

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self.pattern.segments if self.pattern else ()


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    ``params`` only holds parameters present in the request path; an
    omitted optional parameter has no key at all.
    """

    route: Route
    params: dict[str, str]
