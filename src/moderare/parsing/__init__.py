"""
Moderare parsing components.

This package provides include specification parsing and the modifier
tokenizer it relies on.
"""

from moderare.parsing.includes import (
    DEFAULT_PARAM_DELIMITER,
    DEFAULT_RECURSION_LIMIT,
    ResolvedIncludes,
    expand_parents,
    parse_includes,
    split_include_list,
    trim_to_recursion_limit,
)
from moderare.parsing.modifiers import parse_modifiers, scan_modifiers

__all__ = [
    "DEFAULT_PARAM_DELIMITER",
    "DEFAULT_RECURSION_LIMIT",
    "ResolvedIncludes",
    "expand_parents",
    "parse_includes",
    "parse_modifiers",
    "scan_modifiers",
    "split_include_list",
    "trim_to_recursion_limit",
]
