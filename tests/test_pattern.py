"""Tests for wren.routing.pattern — matcher and generator compilation."""

import pytest

from wren.errors import RouteGenerationError
from wren.routing.pattern import PathGenerator, compile_segments, encode_literal
from wren.routing.segments import Part, parse_segment

FILE = "src/pages/test.astro"


def _segments(*names: str) -> tuple[tuple[Part, ...], ...]:
    return tuple(parse_segment(name, FILE) for name in names)


class TestEncodeLiteral:
    def test_reserved_characters(self) -> None:
        assert encode_literal("what?") == "what%3F"
        assert encode_literal("c#") == "c%23"

    def test_restores_encoded_brackets(self) -> None:
        assert encode_literal("%5Bx%5D") == "[x]"

    def test_nfc_normalization(self) -> None:
        assert encode_literal("cafe\u0301") == "caf\u00e9"

    def test_percent_is_escaped(self) -> None:
        assert encode_literal("100%") == "100%25"


class TestMatcher:
    def test_root(self) -> None:
        pattern, _ = compile_segments(())
        assert pattern.match("/")
        assert not pattern.match("/about")
        assert not pattern.match("")

    def test_literal(self) -> None:
        pattern, _ = compile_segments(_segments("about"))
        assert pattern.match("/about")
        assert pattern.match("/about/")
        assert not pattern.match("/about/team")
        assert not pattern.match("/aboutx")

    def test_literal_strict_trailing_slash(self) -> None:
        pattern, _ = compile_segments(_segments("about"), trailing_slash=False)
        assert pattern.match("/about")
        assert not pattern.match("/about/")

    def test_param_captures_one_segment(self) -> None:
        pattern, _ = compile_segments(_segments("blog", "[slug]"))
        match = pattern.match("/blog/hello")
        assert match is not None
        assert match.groups() == ("hello",)
        assert not pattern.match("/blog/a/b")
        assert not pattern.match("/blog")

    def test_rest_captures_remainder(self) -> None:
        pattern, _ = compile_segments(_segments("docs", "[...path]"))
        deep = pattern.match("/docs/a/b/c")
        assert deep is not None
        assert deep.groups() == ("a/b/c",)
        bare = pattern.match("/docs")
        assert bare is not None
        assert bare.groups() == (None,)

    def test_rest_ignores_trailing_slash(self) -> None:
        pattern, _ = compile_segments(_segments("docs", "[...path]"))
        match = pattern.match("/docs/a/b/")
        assert match is not None
        assert match.groups() == ("a/b",)

    def test_rest_in_middle(self) -> None:
        pattern, _ = compile_segments(_segments("[...path]", "edit"))
        match = pattern.match("/a/b/edit")
        assert match is not None
        assert match.groups() == ("a/b",)

    def test_literal_metacharacters_are_escaped(self) -> None:
        pattern, _ = compile_segments(_segments("a.b+c"))
        assert pattern.match("/a.b+c")
        assert not pattern.match("/aXbbc")

    def test_reserved_characters_match_encoded(self) -> None:
        pattern, _ = compile_segments(_segments("what?"))
        assert pattern.match("/what%3F")
        assert not pattern.match("/what")

    def test_mixed_segment(self) -> None:
        pattern, _ = compile_segments(_segments("post-[id].json"))
        match = pattern.match("/post-42.json")
        assert match is not None
        assert match.groups() == ("42",)


class TestGenerator:
    def test_root(self) -> None:
        _, generate = compile_segments(())
        assert generate() == "/"

    def test_literal(self) -> None:
        _, generate = compile_segments(_segments("blog", "feed.xml"))
        assert generate({}) == "/blog/feed.xml"

    def test_param(self) -> None:
        _, generate = compile_segments(_segments("blog", "[slug]"))
        assert generate({"slug": "hello"}) == "/blog/hello"

    def test_param_values_are_percent_encoded(self) -> None:
        _, generate = compile_segments(_segments("blog", "[slug]"))
        assert generate({"slug": "hello world"}) == "/blog/hello%20world"
        assert generate({"slug": "a/b"}) == "/blog/a%2Fb"

    def test_rest_keeps_slashes(self) -> None:
        _, generate = compile_segments(_segments("docs", "[...path]"))
        assert generate({"path": "a/b"}) == "/docs/a/b"

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_rest_omits_segment(self, value: str | None) -> None:
        _, generate = compile_segments(_segments("docs", "[...path]"))
        assert generate({"path": value}) == "/docs"
        assert generate({}) == "/docs"

    def test_only_rest_unset_is_root(self) -> None:
        _, generate = compile_segments(_segments("[...path]"))
        assert generate({}) == "/"

    def test_missing_named_param_raises(self) -> None:
        _, generate = compile_segments(_segments("blog", "[slug]"))
        with pytest.raises(RouteGenerationError, match="slug"):
            generate({})

    def test_missing_param_is_value_error(self) -> None:
        _, generate = compile_segments(_segments("[slug]"))
        with pytest.raises(ValueError):
            generate({"other": "x"})

    def test_non_string_values_stringified(self) -> None:
        _, generate = compile_segments(_segments("posts", "[id]"))
        assert generate({"id": 42}) == "/posts/42"

    def test_literals_are_percent_encoded(self) -> None:
        _, generate = compile_segments(_segments("about us", "caf\u00e9"))
        assert generate() == "/about%20us/caf%C3%A9"

    def test_literal_encoding_matches_matcher(self) -> None:
        pattern, generate = compile_segments(_segments("what?", "c#"))
        path = generate()
        assert path == "/what%3F/c%23"
        assert pattern.match(path)

    def test_params_in_capture_order(self) -> None:
        generate = PathGenerator(_segments("[lang]", "docs", "[...path]"))
        assert generate.params == ("lang", "path")


class TestInverse:
    @pytest.mark.parametrize(
        ("names", "params"),
        [
            (("blog", "[slug]"), {"slug": "hello"}),
            (("blog", "[slug]"), {"slug": "hello world & more"}),
            (("[lang]", "docs", "[page]"), {"lang": "en", "page": "intro"}),
            (("post-[id].json",), {"id": "7"}),
            (("[lang]-[version]",), {"lang": "en", "version": "v2"}),
        ],
    )
    def test_generate_then_match(self, names: tuple[str, ...], params: dict[str, str]) -> None:
        from urllib.parse import unquote

        pattern, generate = compile_segments(_segments(*names))
        path = generate(params)
        match = pattern.match(path)
        assert match is not None
        extracted = dict(zip(generate.params, (unquote(g) for g in match.groups()), strict=True))
        assert extracted == params
        assert generate(extracted) == path
