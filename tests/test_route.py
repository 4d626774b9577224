"""Tests for spur.routing.route — Method, ParamSegment, RoutePattern, Route, RouteMatch."""

import pytest

from spur.routing.route import (
    Method,
    ParamSegment,
    Route,
    RouteKind,
    RouteMatch,
    RoutePattern,
)


def _handler() -> str:
    return "ok"


class TestMethod:
    def test_members(self) -> None:
        assert [m.value for m in Method] == [
            "GET",
            "POST",
            "PUT",
            "PATCH",
            "DELETE",
            "HEAD",
            "OPTIONS",
        ]

    def test_compares_as_string(self) -> None:
        assert Method.GET == "GET"
        assert f"{Method.DELETE}" == "DELETE"


class TestParamSegment:
    def test_matches_whole_value(self) -> None:
        seg = ParamSegment("id", "^([0-9]+)$")
        assert seg.matches("25")
        assert not seg.matches("25a")

    def test_trailing_newline_rejected(self) -> None:
        seg = ParamSegment("id", "^([0-9]+)$")
        assert not seg.matches("25\n")

    def test_required_by_default(self) -> None:
        assert ParamSegment("id", "^([^/]+)$").optional is False

    def test_equality_ignores_compiled_regex(self) -> None:
        assert ParamSegment("id", "^(x)$", True) == ParamSegment("id", "^(x)$", True)

    def test_frozen(self) -> None:
        seg = ParamSegment("id", "^([0-9]+)$")
        with pytest.raises(AttributeError):
            seg.name = "other"  # type: ignore[misc]


class TestRoutePattern:
    def test_compiled_is_anchored(self) -> None:
        pattern = RoutePattern(
            path="posts/{id}",
            regex="posts/([^/]+)",
            segments=("posts", "/", ParamSegment("id", "^([^/]+)$")),
            param_names=("id",),
        )
        assert pattern.compiled.fullmatch("posts/1")
        assert pattern.compiled.match("xposts/1") is None

    def test_params(self) -> None:
        id_seg = ParamSegment("id", "^([^/]+)$")
        pattern = RoutePattern("a/{id}", "a/([^/]+)", ("a", "/", id_seg), ("id",))
        assert pattern.params == (id_seg,)


class TestRoute:
    def test_static_route(self) -> None:
        route = Route(Method.GET, "users", _handler, RouteKind.STATIC, "users")
        assert route.is_static is True
        assert route.param_names == ()
        assert route.segments == ()
        assert route.pattern is None

    def test_dynamic_route_exposes_pattern_data(self) -> None:
        id_seg = ParamSegment("id", "^([^/]+)$")
        pattern = RoutePattern("a/{id}", "a/([^/]+)", ("a", "/", id_seg), ("id",))
        route = Route(Method.GET, "get_a", _handler, RouteKind.DYNAMIC, "a/{id}", pattern)
        assert route.is_static is False
        assert route.param_names == ("id",)
        assert route.segments == ("a", "/", id_seg)

    def test_frozen(self) -> None:
        route = Route(Method.GET, "users", _handler, RouteKind.STATIC, "users")
        with pytest.raises(AttributeError):
            route.path = "other"  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        route = Route(Method.GET, "users", _handler, RouteKind.STATIC, "users")
        match = RouteMatch(route=route, params={})
        assert match.route is route
        assert match.params == {}

    def test_frozen(self) -> None:
        route = Route(Method.GET, "users", _handler, RouteKind.STATIC, "users")
        match = RouteMatch(route=route, params={})
        with pytest.raises(AttributeError):
            match.route = route  # type: ignore[misc]
