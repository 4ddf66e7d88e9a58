"""
Core type definitions for Moderare.

This module contains the type aliases shared by the engine, the scope tree and
validator implementations.
"""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from moderare.core.message_bag import MessageBag

MessageKey = str | int

# What a validator may hand back before coercion
RawValidatorResult = Union[bool, str, list[str], tuple[str, ...], "MessageBag", None]

# What a scope hands back after validation
ValidationResult = Union[bool, "MessageBag"]

# Result of processing a validator's includes for one data value
IncludedResults = Mapping[str, ValidationResult]

ValidatorCallable = Callable[[Any], RawValidatorResult]

ModifierParams = Mapping[str, tuple[str, ...]]
