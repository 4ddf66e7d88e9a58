"""Sequence resource."""

from collections.abc import Iterator
from typing import Any

from attrs import field, frozen

from moderare.resource.base import ResourceBase, handle_field
from moderare.validation.handle import ValidatorHandle


@frozen
class Collection(ResourceBase):
    """
    A resource wrapping an ordered sequence, validated once per element.

    Any iterable is accepted and stored as a tuple, so generators can be passed
    and the collection can still be walked more than once.
    """

    data: tuple[Any, ...] = field(converter=tuple)
    validator: Any = field()
    handle: ValidatorHandle = handle_field()

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)
