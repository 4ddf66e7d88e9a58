"""
Dispatch between the two validator forms.

ValidatorHandle tags a validator as a plain callable or a Validator capability
once, when the resource is built; the scope then invokes it by tag.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any

from attrs import frozen

from moderare.core.types import RawValidatorResult, ValidationResult
from moderare.exceptions import InvalidValidatorError
from moderare.validation.validator import Validator

if TYPE_CHECKING:
    from moderare.scope import Scope


class ValidatorKind(Enum):
    """How a validator is invoked."""

    CALLABLE = "callable"
    CAPABILITY = "capability"


@frozen
class ValidatorHandle:
    """A validator paired with the tag that decides how to invoke it."""

    kind: ValidatorKind
    target: Any

    @classmethod
    def wrap(cls, validator: Any) -> "ValidatorHandle":
        """
        Tag a validator.

        Params:
            validator: A Validator instance or a callable

        Returns:
            The tagged handle

        Raises:
            InvalidValidatorError: If the object is neither form
        """
        if isinstance(validator, ValidatorHandle):
            return validator
        if isinstance(validator, Validator):
            return cls(ValidatorKind.CAPABILITY, validator)
        if callable(validator):
            return cls(ValidatorKind.CALLABLE, validator)
        raise InvalidValidatorError(validator)

    @property
    def has_includes(self) -> bool:
        return self.kind is ValidatorKind.CAPABILITY and self.target.has_includes()

    def invoke(self, data: Any) -> RawValidatorResult:
        if self.kind is ValidatorKind.CAPABILITY:
            return self.target.validate(data)
        return self.target(data)

    def process_included_resources(
        self, scope: "Scope", data: Any
    ) -> dict[str, ValidationResult]:
        if not self.has_includes:
            return {}
        return self.target.process_included_resources(scope, data) or {}
