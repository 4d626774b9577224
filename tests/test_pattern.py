"""Tests for spur.routing.pattern — dynamic route pattern compiler."""

import pytest

from spur.errors import InvalidPatternError
from spur.routing.pattern import compile_pattern, is_static_path
from spur.routing.route import ParamSegment


def _param(name: str, regex: str = "[^/]+", optional: bool = False) -> ParamSegment:
    return ParamSegment(name, f"^({regex})$", optional)


class TestIsStaticPath:
    def test_static(self) -> None:
        assert is_static_path("netflix/movies/featured") is True
        assert is_static_path("") is True

    def test_dynamic(self) -> None:
        assert is_static_path("posts/{id}") is False

    def test_stray_brace_is_not_static(self) -> None:
        assert is_static_path("posts/id}") is False


class TestCompileRequired:
    def test_single_param(self) -> None:
        pattern = compile_pattern("users/{username}")
        assert pattern.regex == "users/([^/]+)"
        assert pattern.segments == ("users", "/", _param("username"))
        assert pattern.param_names == ("username",)

    def test_shortcut_expanded(self) -> None:
        pattern = compile_pattern("posts/{id:i}")
        assert pattern.path == "posts/{id:[0-9]+}"
        assert pattern.regex == "posts/([0-9]+)"
        assert pattern.segments[-1] == _param("id", "[0-9]+")

    def test_custom_regex(self) -> None:
        pattern = compile_pattern("languages/{language:english|italian}")
        assert pattern.regex == "languages/(english|italian)"
        assert pattern.compiled.fullmatch("languages/italian")
        assert not pattern.compiled.fullmatch("languages/german")

    def test_static_text_after_param(self) -> None:
        pattern = compile_pattern("friends/{username}/details")
        assert pattern.segments == (
            "friends",
            "/",
            _param("username"),
            "/",
            "details",
        )
        assert pattern.compiled.fullmatch("friends/m@tt!/details")

    def test_param_first(self) -> None:
        pattern = compile_pattern("{model:a}/{filter_type:s}/{filter_value:a}")
        assert pattern.param_names == ("model", "filter_type", "filter_value")
        assert pattern.segments[0] == _param("model", "[a-zA-Z0-9]+")
        assert pattern.compiled.fullmatch("taxonomy/type/tag")

    def test_literal_text_is_escaped(self) -> None:
        pattern = compile_pattern("raspberrypi-projects/{slug}")
        assert pattern.compiled.fullmatch("raspberrypi-projects/led")

    def test_segments_and_param_names_keep_order(self) -> None:
        pattern = compile_pattern("users/{user_id:i}/posts/{post_id:i}")
        assert pattern.param_names == ("user_id", "post_id")
        assert [p.name for p in pattern.params] == ["user_id", "post_id"]


class TestCompileOptional:
    def test_optional_last_swallows_previous_slash(self) -> None:
        pattern = compile_pattern("comments/{filter}?")
        assert pattern.regex == "comments(?:/([^/]+))?"
        assert pattern.compiled.fullmatch("comments")
        assert pattern.compiled.fullmatch("comments/deleted")

    def test_segments_keep_the_slash(self) -> None:
        pattern = compile_pattern("comments/{filter}?")
        assert pattern.segments == ("comments", "/", _param("filter", optional=True))

    def test_optional_between_static_parts(self) -> None:
        pattern = compile_pattern("attachments/{type}?/alphabetical")
        assert pattern.regex == "attachments(?:/([^/]+))?/alphabetical"
        assert pattern.segments == (
            "attachments",
            "/",
            _param("type", optional=True),
            "/",
            "alphabetical",
        )

    def test_optional_first_swallows_next_slash(self) -> None:
        pattern = compile_pattern("{lang}?/posts")
        assert pattern.regex == "(?:([^/]+)/)?posts"
        assert pattern.segments == (_param("lang", optional=True), "/", "posts")
        assert pattern.compiled.fullmatch("posts")
        assert pattern.compiled.fullmatch("en/posts")

    def test_optional_not_next_to_slash(self) -> None:
        pattern = compile_pattern("files/v{version:i}?")
        assert pattern.regex == "files/v([0-9]+)?"

    def test_mixed_optional_and_required(self) -> None:
        pattern = compile_pattern(
            "college/{college_name}/{teacher_name}?/students/{class_year}?"
        )
        assert pattern.regex == (
            "college/([^/]+)(?:/([^/]+))?/students(?:/([^/]+))?"
        )
        # One "/" per optional parameter lives only in the segments
        assert len(pattern.segments) == 9

    def test_optional_integer_rejects_words(self) -> None:
        pattern = compile_pattern("circles/{circle:i}?/activities")
        assert pattern.compiled.fullmatch("circles/activities")
        assert pattern.compiled.fullmatch("circles/12/activities")
        assert not pattern.compiled.fullmatch("circles/close-friends/activities")


class TestCompilePrefix:
    def test_prefix_becomes_literal_segments(self) -> None:
        pattern = compile_pattern("users/{id}", prefix="api/v2")
        assert pattern.path == "api/v2/users/{id}"
        assert pattern.regex == "api/v2/users/([^/]+)"
        assert pattern.segments[:6] == ("api", "/", "v2", "/", "users", "/")

    def test_prefix_may_contain_dots(self) -> None:
        pattern = compile_pattern("{id}", prefix="api.v2")
        assert pattern.compiled.fullmatch("api.v2/1")
        assert not pattern.compiled.fullmatch("apixv2/1")

    def test_optional_right_after_prefix(self) -> None:
        pattern = compile_pattern("{lang}?", prefix="docs")
        assert pattern.regex == "docs(?:/([^/]+))?"


class TestCompileErrors:
    @pytest.mark.parametrize(
        "path",
        [
            "this/{will/not/{work}",
            "{neither}/will/this}",
            "not/{cool{at-all}}",
            "a/{b/{c}",
            "open/{brace",
        ],
    )
    def test_unbalanced_braces(self, path: str) -> None:
        with pytest.raises(InvalidPatternError, match="Mismatching curly braces"):
            compile_pattern(path)

    @pytest.mark.parametrize(
        "path",
        [
            "users/{username}/{username}",
            "books/{id:i}/{id:i}",
            "movies/{title:a}/{title:c}",
            "x/{id}/{id}?",
        ],
    )
    def test_duplicate_param_names(self, path: str) -> None:
        with pytest.raises(InvalidPatternError, match="found more than once"):
            compile_pattern(path)

    def test_empty_placeholder(self) -> None:
        with pytest.raises(InvalidPatternError, match="1 invalid parameter found"):
            compile_pattern("users/{}")

    def test_several_garbled_placeholders(self) -> None:
        with pytest.raises(InvalidPatternError, match="2 invalid parameters found"):
            compile_pattern("users/{na-me}/{:i}")

    def test_empty_custom_regex(self) -> None:
        with pytest.raises(InvalidPatternError, match="invalid parameter"):
            compile_pattern("users/{id:}")

    def test_invalid_custom_regex(self) -> None:
        with pytest.raises(InvalidPatternError, match="not a valid regex"):
            compile_pattern("users/{id:[0-9}")

    def test_capturing_group_in_custom_regex(self) -> None:
        with pytest.raises(InvalidPatternError, match="capturing group"):
            compile_pattern("languages/{lang:(en|it)}")

    def test_non_capturing_group_allowed(self) -> None:
        pattern = compile_pattern("languages/{lang:(?:en|it)}")
        assert pattern.compiled.fullmatch("languages/it")

    @pytest.mark.parametrize(
        "path",
        [
            "a route/{with}/spaces",
            "users//{id}",
            "users/{id}!",
            "users/{id}??",
            "users/ {id}",
        ],
    )
    def test_invalid_static_parts(self, path: str) -> None:
        with pytest.raises(InvalidPatternError, match="not a valid route path"):
            compile_pattern(path)
