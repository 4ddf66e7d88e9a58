"""Single-value resource."""

from typing import Any

from attrs import frozen

from moderare.resource.base import ResourceBase, handle_field
from moderare.validation.handle import ValidatorHandle


@frozen
class Item(ResourceBase):
    """A resource wrapping exactly one data value, validated once."""

    data: Any
    validator: Any
    handle: ValidatorHandle = handle_field()
