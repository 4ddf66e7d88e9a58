"""
Moderare validation components.

This package provides the Validator capability base class, the callable vs.
capability dispatch handle and the normalization of validator results.
"""

from moderare.validation.handle import ValidatorHandle, ValidatorKind
from moderare.validation.outcome import DEFAULT_FAILURE_MESSAGE, ValidationOutcome
from moderare.validation.validator import Validator

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "ValidationOutcome",
    "Validator",
    "ValidatorHandle",
    "ValidatorKind",
]
