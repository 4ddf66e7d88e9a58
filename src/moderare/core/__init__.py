"""
Core Moderare components.

This package provides the value containers shared across the framework: the
read-only ParamBag, the MessageBag aggregation sink and common type aliases.
"""

from moderare.core.message_bag import MessageBag
from moderare.core.param_bag import ParamBag
from moderare.core.types import (
    IncludedResults,
    MessageKey,
    ModifierParams,
    RawValidatorResult,
    ValidationResult,
    ValidatorCallable,
)

__all__ = [
    "MessageBag",
    "ParamBag",
    "MessageKey",
    "ModifierParams",
    "RawValidatorResult",
    "ValidationResult",
    "IncludedResults",
    "ValidatorCallable",
]
