"""
Tests for the Engine: settings, include state and scope creation.
"""

import pytest

from moderare import Engine, EngineSettings, Item
from moderare.exceptions import InvalidInputError
from moderare.scope import Scope, ScopeState


class TestSettings:
    """Test engine configuration."""

    def test_defaults(self, engine):
        assert engine.recursion_limit == 10
        assert engine.param_delimiter == "|"

    def test_overrides_at_construction(self):
        engine = Engine(recursion_limit=3, param_delimiter=";")
        assert engine.recursion_limit == 3
        assert engine.param_delimiter == ";"

    def test_settings_object(self):
        engine = Engine(EngineSettings(recursion_limit=4))
        assert engine.settings.recursion_limit == 4

    def test_set_recursion_limit_is_chainable(self, engine):
        assert engine.set_recursion_limit(2) is engine
        engine.parse_includes("a.b.c.d")
        assert engine.get_requested_includes() == ["a", "a.b"]

    def test_set_param_delimiter(self, engine):
        engine.set_param_delimiter(",").parse_includes(["comments:limit(5,10)"])
        assert engine.get_include_params("comments")["limit"] == ("5", "10")

    @pytest.mark.parametrize("limit", [0, -1, "many"])
    def test_invalid_recursion_limit(self, engine, limit):
        with pytest.raises(InvalidInputError):
            engine.set_recursion_limit(limit)
        assert engine.recursion_limit == 10

    def test_invalid_delimiter(self, engine):
        with pytest.raises(InvalidInputError):
            engine.set_param_delimiter("")

    def test_unknown_setting(self):
        with pytest.raises(InvalidInputError):
            Engine(depth=3)


class TestParseIncludes:
    """Test the engine's include state."""

    def test_returns_self(self, engine):
        assert engine.parse_includes("author") is engine

    def test_requested_includes_with_parents(self, engine):
        engine.parse_includes("author,comments.author:limit(5|10)")
        assert engine.get_requested_includes() == [
            "author",
            "comments",
            "comments.author",
        ]
        assert engine.requested_includes == ("author", "comments", "comments.author")

    def test_include_params(self, engine):
        engine.parse_includes("comments.author:limit(5|10)")
        params = engine.get_include_params("comments.author")
        assert params["limit"] == ("5", "10")
        assert engine.is_requested("comments")
        assert engine.get_include_params("comments") is None

    def test_unknown_include_params(self, engine):
        assert engine.get_include_params("nothing") is None

    def test_reparse_replaces_state(self, engine):
        engine.parse_includes("author:limit(1)")
        engine.parse_includes("comments")
        assert engine.get_requested_includes() == ["comments"]
        assert not engine.is_requested("author")
        assert engine.get_include_params("author") is None

    def test_invalid_input(self, engine):
        with pytest.raises(InvalidInputError):
            engine.parse_includes(123)

    def test_engines_do_not_share_state(self):
        first = Engine().parse_includes("author")
        second = Engine()
        assert first.is_requested("author")
        assert not second.is_requested("author")


class TestValidateData:
    """Test scope creation."""

    def test_root_scope(self, engine):
        scope = engine.validate_data(Item(1, lambda value: True))
        assert isinstance(scope, Scope)
        assert scope.is_root
        assert scope.engine is engine
        assert scope.state is ScopeState.PENDING
        assert not scope.success

    def test_child_scope_extends_parent_chain(self, engine):
        root = engine.validate_data(Item(1, lambda value: True), "post")
        child = engine.validate_data(Item(2, lambda value: True), "comments", root)
        grandchild = child.embed_child_scope("author", Item(3, lambda value: True))

        assert child.parent_scopes == ["post"]
        assert grandchild.parent_scopes == ["post", "comments"]
        assert grandchild.get_identifier() == "post.comments.author"
        assert grandchild.parent_scope is child
