"""
Base class for resources handed to the scope tree.

A resource pairs data with the validator that checks it. Only the two concrete
variants, Item and Collection, are understood by a Scope.
"""

from typing import Any

from attrs import Factory, field, frozen

from moderare.validation.handle import ValidatorHandle


def handle_field() -> Any:
    """Field tagging the resource's validator once, at construction."""
    return field(
        init=False,
        repr=False,
        eq=False,
        default=Factory(lambda self: ValidatorHandle.wrap(self.validator), takes_self=True),
    )


@frozen
class ResourceBase:
    """
    Immutable pairing of data and a validator.

    Subclasses declare ``data``, ``validator`` (a Validator instance or a
    callable taking one data value) and ``handle``.
    """

    def get_data(self) -> Any:
        return self.data

    def get_validator(self) -> Any:
        return self.validator
