"""Chunked regex matcher for dynamic routes.

Dynamic route regexes are merged into a few large alternations instead of
being tried one by one::

    ^(?:users/([^/]+)()|posts/([0-9]+)()|tags/([^/]+)/([^/]+)())$

Python's ``re`` numbers groups left to right across alternatives, so each
alternative starts at a known base offset. Every alternative ends with an
empty marker group ``()``; when an alternative matches, its marker is the
last group to close, which makes ``match.lastindex`` name the alternative.
Each marker index is strictly greater than the ones before it, and the
chunk keeps a ``marker -> slot`` map to get back to the routes.

Chunks hold at most ``chunk_size`` alternatives to bound the size of each
regex. The matcher is immutable: the store builds a fresh one whenever the
set of dynamic routes changes and swaps the reference.
"""

import bisect
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar

from spur.routing.route import Method, Route, RouteMatch

CHUNK_SIZE = 10

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class _Slot:
    """One alternative of a chunk: every method registered for one regex."""

    base: int
    # Parameter groups in the shared regex; names come from each route
    size: int
    routes: Mapping[Method, Route]


@dataclass(frozen=True, slots=True)
class _Chunk:
    regex: re.Pattern[str]
    markers: tuple[int, ...]
    slots: Mapping[int, _Slot]

    def find_slot(self, lastindex: int) -> _Slot:
        # Smallest marker >= the observed group count
        pos = bisect.bisect_left(self.markers, lastindex)
        return self.slots[self.markers[pos]]


def split_chunks(items: Sequence[T], chunk_size: int = CHUNK_SIZE) -> list[list[T]]:
    """Split *items* into evenly sized, order-preserving chunks.

    Uses the fewest chunks that keep each one at or under *chunk_size*,
    then spreads the items evenly, so 12 items become 6 + 6, not 10 + 2.
    """
    if not items:
        return []
    parts = math.ceil(len(items) / chunk_size)
    size = math.ceil(len(items) / parts)
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def _build_chunk(entries: Sequence[tuple[str, Mapping[Method, Route]]]) -> _Chunk:
    alternatives: list[str] = []
    slots: dict[int, _Slot] = {}
    groups = 0

    for regex, routes in entries:
        size = len(next(iter(routes.values())).param_names)
        alternatives.append(f"{regex}()")
        marker = groups + size + 1
        slots[marker] = _Slot(base=groups, size=size, routes=routes)
        groups = marker

    combined = re.compile("^(?:" + "|".join(alternatives) + ")$")
    return _Chunk(regex=combined, markers=tuple(slots), slots=slots)


class ChunkedMatcher:
    """Matches request paths against every dynamic route at once.

    Build from the store's ``regex -> {method -> Route}`` mapping, in
    registration order::

        matcher = ChunkedMatcher(dynamic_routes)
        match = matcher.match(Method.GET, "users/42")
    """

    __slots__ = ("_chunks",)

    def __init__(
        self,
        dynamic_routes: Mapping[str, Mapping[Method, Route]],
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        entries = [(regex, dict(routes)) for regex, routes in dynamic_routes.items()]
        self._chunks: tuple[_Chunk, ...] = tuple(
            _build_chunk(chunk) for chunk in split_chunks(entries, chunk_size)
        )

    def __len__(self) -> int:
        return len(self._chunks)

    @property
    def patterns(self) -> tuple[str, ...]:
        """The combined regex of every chunk, in match order."""
        return tuple(chunk.regex.pattern for chunk in self._chunks)

    def match(self, method: Method, path: str) -> RouteMatch | None:
        """Return the dynamic route matching *path*, or ``None``.

        The first chunk whose regex matches decides: if the matched route
        is not registered for *method*, the result is ``None`` rather than
        some other route further down.
        """
        for chunk in self._chunks:
            m = chunk.regex.fullmatch(path)
            if m is None:
                continue

            slot = chunk.find_slot(m.lastindex or 0)
            route = slot.routes.get(method)
            if route is None:
                return None

            params: dict[str, str] = {}
            for i, name in enumerate(route.param_names, start=slot.base + 1):
                value = m.group(i)
                if value:
                    params[name] = value
            return RouteMatch(route=route, params=params)

        return None
