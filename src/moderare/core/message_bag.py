"""
Message aggregation for validation failures.

A MessageBag is an ordered multi-map from a field key to the messages recorded
against it. Values are message strings or nested bags, which is how child
scope failures are folded into their parent's output under ``"includes"``.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from moderare.core.types import MessageKey

Message = Union[str, "MessageBag"]


class MessageBag:
    """Append-only ordered multi-map of validation messages."""

    def __init__(
        self,
        messages: Mapping[MessageKey, Any] | Iterable[Message] | None = None,
    ):
        """
        Initialize the bag.

        Params:
            messages: Either a mapping of key to message(s), or a plain sequence
                of messages stored under their integer positions
        """
        self._messages: dict[MessageKey, list[Message]] = {}
        if messages is None:
            return
        if isinstance(messages, (str, MessageBag)):
            messages = [messages]
        if isinstance(messages, Mapping):
            for key, value in messages.items():
                if isinstance(value, (list, tuple)):
                    for item in value:
                        self.add(key, item)
                else:
                    self.add(key, value)
        else:
            for position, value in enumerate(messages):
                self.add(position, value)

    def add(self, key: MessageKey, message: Message) -> "MessageBag":
        """
        Record a message against a key.

        Params:
            key: Field key the message belongs to
            message: Message text or a nested MessageBag

        Returns:
            This bag, for chaining
        """
        bucket = self._messages.setdefault(key, [])
        if isinstance(message, MessageBag) or message not in bucket:
            bucket.append(message)
        return self

    def merge(self, other: "MessageBag | Mapping[MessageKey, Any]") -> "MessageBag":
        """Append every entry of another bag (or mapping) to this one."""
        entries = other._messages if isinstance(other, MessageBag) else MessageBag(other)._messages
        for key, values in entries.items():
            for value in values:
                self.add(key, value)
        return self

    def has(self, key: MessageKey) -> bool:
        return bool(self._messages.get(key))

    def get(self, key: MessageKey) -> list[Message]:
        return list(self._messages.get(key, []))

    def first(self, key: MessageKey | None = None) -> str | None:
        """Get the first string message, for one key or across the whole bag."""
        if key is None:
            flattened = self.all()
        else:
            flattened = list(_flatten(self._messages.get(key, [])))
        return flattened[0] if flattened else None

    def keys(self) -> list[MessageKey]:
        return list(self._messages)

    def all(self) -> list[str]:
        """Every string message in insertion order, nested bags included."""
        return [
            message for values in self._messages.values() for message in _flatten(values)
        ]

    def count(self) -> int:
        return len(self.all())

    def is_empty(self) -> bool:
        return self.count() == 0

    def to_dict(self) -> dict[MessageKey, list[Any]]:
        """Render the bag as plain nested dicts and lists."""
        return {
            key: [value.to_dict() if isinstance(value, MessageBag) else value for value in values]
            for key, values in self._messages.items()
        }

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[str]:
        return iter(self.all())

    def __contains__(self, message: object) -> bool:
        return message in self.all()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageBag):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"MessageBag({self.to_dict()!r})"


def _flatten(values: Iterable[Message]) -> Iterator[str]:
    for value in values:
        if isinstance(value, MessageBag):
            yield from value.all()
        else:
            yield value
