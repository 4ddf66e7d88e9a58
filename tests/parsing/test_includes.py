"""
Tests for include specification parsing.
"""

import pytest

from moderare.exceptions import InvalidInputError
from moderare.parsing import (
    ResolvedIncludes,
    expand_parents,
    parse_includes,
    trim_to_recursion_limit,
)


class TestInputShapes:
    """Test which raw include requests are accepted."""

    def test_comma_separated_string(self):
        assert parse_includes("author,comments").requested == ("author", "comments")

    def test_list_of_strings(self):
        assert parse_includes(["author", "comments"]).requested == ("author", "comments")

    def test_whitespace_and_empty_entries_dropped(self):
        assert parse_includes(" author , ,comments,").requested == ("author", "comments")

    @pytest.mark.parametrize("raw", [None, 42, {"author": True}, 3.5])
    def test_other_types_rejected(self, raw):
        with pytest.raises(InvalidInputError):
            parse_includes(raw)

    def test_non_string_entries_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_includes(["author", 7])

    def test_empty_string_resolves_nothing(self):
        resolved = parse_includes("")
        assert resolved.requested == ()
        assert dict(resolved.params) == {}


class TestRecursionLimit:
    """Test trimming of overly deep include paths."""

    def test_deep_include_trimmed_to_limit(self):
        resolved = parse_includes("a.b.c.d.e", recursion_limit=3)
        assert resolved.requested == ("a", "a.b", "a.b.c")

    def test_default_limit_is_ten(self):
        deep = ".".join(f"s{i}" for i in range(15))
        resolved = parse_includes(deep)
        assert max(len(include.split(".")) for include in resolved.requested) == 10

    def test_trim_helper(self):
        assert trim_to_recursion_limit("a.b.c", 2) == "a.b"
        assert trim_to_recursion_limit("a", 2) == "a"

    def test_trimmed_duplicates_collapse(self):
        resolved = parse_includes("a.b.c,a.b.d", recursion_limit=2)
        assert resolved.requested == ("a", "a.b")


class TestParentAutoInclusion:
    """Test that every parent of a nested include is requested too."""

    def test_parents_added_in_order(self):
        assert parse_includes("a.b.c").requested == ("a", "a.b", "a.b.c")

    def test_mixed_includes(self):
        assert parse_includes("foo,bar.baz").requested == ("foo", "bar", "bar.baz")

    def test_explicit_parent_not_duplicated(self):
        assert parse_includes("a.b.c,a").requested == ("a", "a.b", "a.b.c")

    def test_expand_parents_helper(self):
        assert expand_parents(["x.y", "x.z"]) == ["x", "x.y", "x.z"]


class TestModifierParams:
    """Test modifier parameters attached to includes."""

    def test_params_for_nested_include(self):
        resolved = parse_includes("comments.author:limit(5|10)")

        params = resolved.get_params("comments.author")
        assert params is not None
        assert params["limit"] == ("5", "10")
        assert resolved.is_requested("comments")
        assert resolved.get_params("comments") is None

    def test_first_occurrence_wins(self):
        resolved = parse_includes("comments:limit(5),comments:limit(20)")
        assert resolved.requested == ("comments",)
        assert resolved.get_params("comments")["limit"] == ("5",)

    def test_malformed_modifier_yields_empty_params(self):
        resolved = parse_includes("comments:limit")
        params = resolved.get_params("comments")
        assert params is not None
        assert len(params) == 0

    def test_custom_delimiter(self):
        resolved = parse_includes("comments:limit(5;10)", param_delimiter=";")
        assert resolved.get_params("comments")["limit"] == ("5", "10")

    def test_params_are_read_only(self):
        resolved = parse_includes("comments:limit(5)")
        with pytest.raises(TypeError):
            resolved.params["comments"] = {}


class TestResolvedIncludes:
    """Test the ResolvedIncludes value."""

    def test_default_is_empty(self):
        resolved = ResolvedIncludes()
        assert resolved.requested == ()
        assert not resolved.is_requested("author")
        assert resolved.get_params("author") is None

    def test_is_frozen(self):
        resolved = parse_includes("author")
        with pytest.raises(AttributeError):
            resolved.requested = ("comments",)
