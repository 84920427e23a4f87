"""Tests for wren.routing.pattern — reversible URL patterns."""

import pytest

from wren.errors import ArgumentCountError, MalformedPatternError, NoMatchError
from wren.routing.pattern import UrlPattern, compile_pattern


class TestMatching:
    def test_literal(self) -> None:
        p = UrlPattern("/users")
        assert p.matches("/users")
        assert not p.matches("/users/")
        assert not p.matches("/user")

    def test_whole_string_only(self) -> None:
        p = UrlPattern(r"/articles/(\d+)")
        assert p.matches("/articles/123")
        assert not p.matches("/articles/123/edit")
        assert not p.matches("x/articles/123")

    def test_trailing_newline_does_not_match(self) -> None:
        p = UrlPattern(r"/articles/(\d+)")
        assert not p.matches("/articles/123\n")

    def test_metacharacters_outside_groups_are_literal(self) -> None:
        p = UrlPattern("/a.b+c*d?e|f^g$h[i]{j}")
        assert p.matches("/a.b+c*d?e|f^g$h[i]{j}")
        assert not p.matches("/axbbc")

    def test_dot_is_not_a_wildcard(self) -> None:
        p = UrlPattern("/file.txt")
        assert not p.matches("/fileXtxt")

    def test_empty_pattern_matches_empty_path(self) -> None:
        p = UrlPattern("")
        assert p.matches("")
        assert not p.matches("/")

    def test_escaped_parens_are_literal(self) -> None:
        p = UrlPattern(r"/a\(b\)/(\d+)")
        assert p.matches("/a(b)/1")
        assert p.capture_count == 1
        assert p.reverse(["1"]) == "/a(b)/1"

    def test_escaped_backslash_is_literal(self) -> None:
        p = UrlPattern(r"/a\\b")
        assert p.matches("/a\\b")
        assert p.reverse([]) == "/a\\b"


class TestFragment:
    """Scenario: '#' matches either '/' or '#'."""

    def test_matches_both_separators(self) -> None:
        p = UrlPattern(r"/app#profile/(\d+)")
        assert p.matches("/app/profile/55")
        assert p.matches("/app#profile/55")
        assert not p.matches("/app?profile/55")

    def test_reverse_with_and_without_fragment(self) -> None:
        p = UrlPattern(r"/app#profile/(\d+)")
        assert p.reverse(["55"], use_fragment=True) == "/app#profile/55"
        assert p.reverse(["55"], use_fragment=False) == "/app/profile/55"

    def test_has_fragment(self) -> None:
        assert UrlPattern("/app#home").has_fragment is True
        assert UrlPattern("/app/home").has_fragment is False

    def test_matches_non_fragment_uses_base(self) -> None:
        p = UrlPattern(r"/app#profile/(\d+)")
        assert p.matches_non_fragment("/app")
        assert not p.matches_non_fragment("/app/profile/55")
        assert p.base_regex is not None

    def test_matches_non_fragment_without_fragment(self) -> None:
        p = UrlPattern(r"/articles/(\d+)")
        assert p.matches_non_fragment("/articles/1")
        assert not p.matches_non_fragment("/articles")
        assert p.base_regex is None

    def test_escaped_hash_is_literal(self) -> None:
        p = UrlPattern(r"/a\#b#c")
        assert p.matches("/a#b/c")
        assert p.matches("/a#b#c")
        assert not p.matches("/a/b/c")
        assert p.reverse([]) == "/a#b/c"
        assert p.reverse([], use_fragment=True) == "/a#b#c"


class TestParse:
    def test_scenario_articles(self) -> None:
        p = UrlPattern(r"/articles/(\d+)")
        assert p.parse("/articles/123") == ["123"]
        assert p.reverse(["123"], use_fragment=False) == "/articles/123"

    def test_groups_in_order(self) -> None:
        p = UrlPattern(r"/page1/([a-zA-Z]+)/([0-9]+)")
        assert p.parse("/page1/view/78654") == ["view", "78654"]

    def test_no_groups(self) -> None:
        assert UrlPattern("/home").parse("/home") == []

    def test_no_match_raises(self) -> None:
        p = UrlPattern(r"/articles/(\d+)")
        assert not p.matches("/articles/abc")
        with pytest.raises(NoMatchError) as exc_info:
            p.parse("/articles/abc")
        assert exc_info.value.path == "/articles/abc"
        assert exc_info.value.pattern == r"/articles/(\d+)"

    @pytest.mark.parametrize(
        ("raw", "path"),
        [
            (r"/articles/(\d+)", "/articles/123"),
            (r"/articles/(\d+)", "/articles/abc"),
            (r"/articles/(\d+)", "/articles/"),
            (r"/app#profile/(\d+)", "/app#profile/1"),
            (r"/app#profile/(\d+)", "/app/profile/1"),
            (r"/app#profile/(\d+)", "/app"),
            (r"/page1/([a-z]+)/([0-9]+)", "/page1/view/78654"),
            (r"/page1/([a-z]+)/([0-9]+)", "/page1/VIEW/78654"),
            ("/a.b", "/a.b"),
            ("/a.b", "/axb"),
            ("", ""),
        ],
    )
    def test_parse_succeeds_exactly_when_matches(self, raw: str, path: str) -> None:
        p = UrlPattern(raw)
        if p.matches(path):
            assert len(p.parse(path)) == p.capture_count
        else:
            with pytest.raises(NoMatchError):
                p.parse(path)

    def test_no_match_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            UrlPattern("/a").parse("/b")

    def test_nested_groups_report_top_level_only(self) -> None:
        p = UrlPattern(r"/range/((\d+)-(\d+))")
        assert p.capture_count == 1
        assert p.parse("/range/1-20") == ["1-20"]

    def test_non_capturing_inner_group(self) -> None:
        p = UrlPattern(r"/x/((?:ab)+)/(\d+)")
        assert p.parse("/x/abab/7") == ["abab", "7"]

    def test_named_inner_group(self) -> None:
        p = UrlPattern(r"/u/((?P<id>\d+))/(\w+)")
        assert p.parse("/u/5/bob") == ["5", "bob"]

    def test_paren_in_character_class(self) -> None:
        p = UrlPattern(r"/x/([()]+)")
        assert p.capture_count == 1
        assert p.parse("/x/()(") == ["()("]

    def test_alternation_inside_group(self) -> None:
        p = UrlPattern(r"/(en|fr)/home")
        assert p.parse("/fr/home") == ["fr"]
        assert not p.matches("/de/home")


class TestReverse:
    def test_stringifies_args(self) -> None:
        p = UrlPattern(r"/articles/(\d+)")
        assert p.reverse([1234]) == "/articles/1234"

    def test_too_few_args(self) -> None:
        p = UrlPattern(r"/a/(\d+)/b/(\d+)")
        with pytest.raises(ArgumentCountError):
            p.reverse(["1"])

    def test_too_few_args_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            UrlPattern(r"/a/(\d+)").reverse([])

    def test_extra_args_ignored(self) -> None:
        p = UrlPattern(r"/a/(\d+)")
        assert p.reverse(["1", "2", "3"]) == "/a/1"

    def test_accepts_any_iterable(self) -> None:
        p = UrlPattern(r"/a/(\d+)/b/(\d+)")
        assert p.reverse(iter(("1", "2"))) == "/a/1/b/2"


ROUND_TRIP_CASES = [
    (r"/articles/(\d+)", ["123"]),
    (r"/app#profile/(\d+)", ["55"]),
    (r"/page1/([a-zA-Z]+)/([0-9]+)", ["view", "78654"]),
    (r"/(\w+)/x/(\w+)", ["a", "b"]),
    (r"/range/((\d+)-(\d+))#detail/(.+)", ["1-2", "deep/path"]),
    ("/static", []),
]


class TestRoundTrip:
    @pytest.mark.parametrize(("raw", "args"), ROUND_TRIP_CASES)
    @pytest.mark.parametrize("use_fragment", [True, False])
    def test_parse_reverse(self, raw: str, args: list[str], use_fragment: bool) -> None:
        p = UrlPattern(raw)
        path = p.reverse(args, use_fragment=use_fragment)
        assert p.matches(path)
        assert p.parse(path) == args


class TestMalformed:
    @pytest.mark.parametrize(
        "raw",
        [
            r"/(\d+)(\w+)",
            "/(a)(b)/c",
            "/x/(a)(b)",
        ],
    )
    def test_adjacent_top_level_groups(self, raw: str) -> None:
        with pytest.raises(MalformedPatternError, match="adjacent"):
            UrlPattern(raw)

    def test_adjacent_groups_allowed_when_nested(self) -> None:
        p = UrlPattern("/((a)(b))")
        assert p.parse("/ab") == ["ab"]

    def test_literal_between_groups_is_enough(self) -> None:
        p = UrlPattern(r"/(\d+)-(\d+)")
        assert p.parse("/1-2") == ["1", "2"]

    def test_multiple_hashes(self) -> None:
        with pytest.raises(MalformedPatternError, match="multiple"):
            UrlPattern("/a#b#c")

    def test_hash_inside_group(self) -> None:
        with pytest.raises(MalformedPatternError, match="inside a group"):
            UrlPattern("/(a#b)")

    def test_unmatched_close(self) -> None:
        with pytest.raises(MalformedPatternError, match="unmatched"):
            UrlPattern("/a)")

    def test_unclosed_group(self) -> None:
        with pytest.raises(MalformedPatternError, match="unclosed"):
            UrlPattern(r"/a/(\d+")

    def test_non_capturing_top_level_group(self) -> None:
        with pytest.raises(MalformedPatternError, match="plain capture group"):
            UrlPattern("/(?:a|b)/c")

    def test_invalid_group_body(self) -> None:
        with pytest.raises(MalformedPatternError):
            UrlPattern("/(a{2,1})")

    def test_trailing_backslash(self) -> None:
        with pytest.raises(MalformedPatternError):
            UrlPattern("/a\\")

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            UrlPattern("/a)")

    def test_message_names_pattern(self) -> None:
        with pytest.raises(MalformedPatternError) as exc_info:
            UrlPattern("/a#b#c")
        assert "/a#b#c" in str(exc_info.value)
        assert exc_info.value.pattern == "/a#b#c"


class TestValueSemantics:
    def test_equal_by_raw_string(self) -> None:
        assert UrlPattern("/a/(\\d+)") == UrlPattern("/a/(\\d+)")
        assert UrlPattern("/a") != UrlPattern("/b")

    def test_not_equal_to_string(self) -> None:
        assert UrlPattern("/a") != "/a"

    def test_hashable(self) -> None:
        patterns = {UrlPattern("/a"), UrlPattern("/a"), UrlPattern("/b")}
        assert len(patterns) == 2

    def test_str_and_repr(self) -> None:
        p = UrlPattern("/a")
        assert str(p) == "/a"
        assert repr(p) == "UrlPattern('/a')"

    def test_immutable(self) -> None:
        p = UrlPattern("/a")
        with pytest.raises(AttributeError):
            p.pattern = "/b"  # type: ignore[misc]

    def test_compile_pattern(self) -> None:
        assert compile_pattern("/a") == UrlPattern("/a")
