"""
Moderare exception classes.

This package provides all exception types used while resolving includes and
validating scope trees.
"""

from moderare.exceptions.core import (
    InvalidInputError,
    InvalidResourceTypeError,
    InvalidValidatorError,
    InvalidValidatorResultError,
    MissingIncludeMethodError,
    ModerareError,
    ParamBagImmutableError,
    ScopeStateError,
    ValidatorRuntimeError,
)

__all__ = [
    "ModerareError",
    "InvalidInputError",
    "InvalidResourceTypeError",
    "InvalidValidatorError",
    "InvalidValidatorResultError",
    "ValidatorRuntimeError",
    "MissingIncludeMethodError",
    "ScopeStateError",
    "ParamBagImmutableError",
]
