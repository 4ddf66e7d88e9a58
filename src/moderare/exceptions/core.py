"""
Exception classes for Moderare include resolution and scope validation.

This module defines specific exception types for the error conditions that can
occur while parsing include specifications, building resources and walking the
scope tree. A failed validation is not an error: it is returned as a
MessageBag.
"""

from typing import Any


class ModerareError(Exception):
    """Base exception for all Moderare errors."""

    pass


class InvalidInputError(ModerareError, ValueError):
    """Raised when an include specification or engine setting is malformed."""

    def __init__(self, value: Any, reason: str):
        """
        Initialize the exception.

        Params:
            value: The rejected input
            reason: Why the input was rejected
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid input {value!r}: {reason}")


class InvalidResourceTypeError(ModerareError, TypeError):
    """Raised when a resource is neither an Item nor a Collection."""

    def __init__(self, resource: Any):
        """
        Initialize the exception.

        Params:
            resource: The offending resource object
        """
        self.resource = resource
        super().__init__(
            f"Resource should be an instance of moderare.resource.Item or "
            f"moderare.resource.Collection, {type(resource).__name__} given"
        )


class InvalidValidatorError(ModerareError, TypeError):
    """Raised when a resource is built with something that cannot validate."""

    def __init__(self, validator: Any):
        """
        Initialize the exception.

        Params:
            validator: The object passed as validator
        """
        self.validator = validator
        super().__init__(
            f"Validator must be callable or a moderare Validator, "
            f"{type(validator).__name__} given"
        )


class InvalidValidatorResultError(ModerareError):
    """Raised when a validator returns a value of an unsupported shape."""

    def __init__(self, result: Any):
        """
        Initialize the exception.

        Params:
            result: The value returned by the validator
        """
        self.result = result
        super().__init__(
            f"Validator returned unsupported result of type {type(result).__name__}"
        )


class ValidatorRuntimeError(ModerareError):
    """Wraps an exception raised inside validator logic.

    Never escapes a Scope; it carries the message that ends up in the
    failing scope's MessageBag.
    """

    def __init__(self, original: BaseException):
        """
        Initialize the exception.

        Params:
            original: The exception raised by the validator
        """
        self.original = original
        message = str(original) or type(original).__name__
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0]


class MissingIncludeMethodError(ModerareError, AttributeError):
    """Raised when a validator declares an include it has no method for."""

    def __init__(self, validator_name: str, include: str, method_name: str):
        """
        Initialize the exception.

        Params:
            validator_name: Class name of the validator
            include: The include identifier being processed
            method_name: The method that was expected to exist
        """
        self.validator_name = validator_name
        self.include = include
        self.method_name = method_name
        super().__init__(
            f"Include '{include}' requires method {validator_name}.{method_name}()"
        )


class ScopeStateError(ModerareError, RuntimeError):
    """Raised when a scope is used outside its single-use lifecycle."""

    def __init__(self, identifier: str, reason: str):
        """
        Initialize the exception.

        Params:
            identifier: Full identifier of the scope ('' for an anonymous root)
            reason: What went wrong
        """
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Scope '{identifier or '<root>'}' {reason}")


class ParamBagImmutableError(ModerareError, TypeError):
    """Raised on any attempt to modify a ParamBag."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The modifier name that was being set or deleted
        """
        self.name = name
        super().__init__(f"ParamBag is read-only, cannot modify '{name}'")
