"""
Tests for MessageBag aggregation.
"""

from moderare.core import MessageBag


class TestMessageBagConstruction:
    """Test the accepted construction shapes."""

    def test_empty_bag(self):
        bag = MessageBag()
        assert bag.is_empty()
        assert not bag
        assert bag.count() == 0
        assert bag.keys() == []

    def test_from_list_uses_positions_as_keys(self):
        bag = MessageBag(["first", "second"])
        assert bag.keys() == [0, 1]
        assert bag.get(0) == ["first"]
        assert bag.all() == ["first", "second"]

    def test_from_single_string(self):
        assert MessageBag("bad").all() == ["bad"]

    def test_from_mapping(self):
        bag = MessageBag({"title": ["Too short.", "Too plain."], "body": "Missing."})
        assert bag.get("title") == ["Too short.", "Too plain."]
        assert bag.get("body") == ["Missing."]


class TestMessageBagOperations:
    """Test adding, merging and reading messages."""

    def test_add_is_chainable_and_ordered(self):
        bag = MessageBag().add("title", "Too short.").add("body", "Missing.")
        assert bag.all() == ["Too short.", "Missing."]
        assert bag.first() == "Too short."
        assert bag.first("body") == "Missing."

    def test_duplicate_message_under_same_key_ignored(self):
        bag = MessageBag().add("title", "Too short.").add("title", "Too short.")
        assert bag.get("title") == ["Too short."]

    def test_nested_bags_are_flattened_by_all(self):
        child = MessageBag({"name": "Author name is required."})
        bag = MessageBag(["bad"]).add("includes", child)

        assert bag.count() == 2
        assert "Author name is required." in bag
        assert bag.to_dict() == {
            0: ["bad"],
            "includes": [{"name": ["Author name is required."]}],
        }

    def test_merge_appends_entries(self):
        bag = MessageBag({"title": "Too short."})
        bag.merge(MessageBag({"title": "Too plain.", "body": "Missing."}))
        assert bag.get("title") == ["Too short.", "Too plain."]
        assert bag.has("body")
        assert not bag.has("author")

    def test_get_returns_copy(self):
        bag = MessageBag(["bad"])
        bag.get(0).append("worse")
        assert bag.get(0) == ["bad"]

    def test_equality(self):
        assert MessageBag(["bad"]) == MessageBag({0: "bad"})
        assert MessageBag(["bad"]) != MessageBag(["good"])
