"""
Include specification parsing.

Turns a raw include request such as ``"author,comments.author:limit(5|10)"``
into the normalized set of include identifiers the scope tree consults while
deciding which child resources to validate.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from attrs import field, frozen

from moderare.core.param_bag import ParamBag
from moderare.core.types import ModifierParams
from moderare.exceptions import InvalidInputError
from moderare.parsing.modifiers import parse_modifiers

logger = logging.getLogger(__name__)

INCLUDE_SEPARATOR = ","
MODIFIER_SEPARATOR = ":"
PATH_SEPARATOR = "."

DEFAULT_RECURSION_LIMIT = 10
DEFAULT_PARAM_DELIMITER = "|"


def _freeze_params(
    params: Mapping[str, ModifierParams],
) -> Mapping[str, ModifierParams]:
    return MappingProxyType(
        {include: MappingProxyType(dict(modifiers)) for include, modifiers in params.items()}
    )


@frozen
class ResolvedIncludes:
    """The outcome of one include parse.

    Params:
        requested: Include identifiers in expansion order, parents first
        params: Include identifier to its modifier mapping; only includes that
            carried a modifier specification appear here
    """

    requested: tuple[str, ...] = field(default=(), converter=tuple)
    params: Mapping[str, ModifierParams] = field(
        factory=dict, converter=_freeze_params
    )

    def is_requested(self, include: str) -> bool:
        return include in self.requested

    def get_params(self, include: str) -> ParamBag | None:
        """Get the modifier parameters of an include, or None if it had none."""
        if include not in self.params:
            return None
        return ParamBag(self.params[include])


def split_include_list(raw: str | Sequence[str]) -> list[str]:
    """
    Normalize a raw include request to a list of include entries.

    Params:
        raw: Comma separated string or a list/tuple of entries

    Returns:
        Stripped, non-empty include entries

    Raises:
        InvalidInputError: If raw is not a string or a list/tuple of strings
    """
    if isinstance(raw, str):
        entries = raw.split(INCLUDE_SEPARATOR)
    elif isinstance(raw, (list, tuple)):
        entries = list(raw)
    else:
        raise InvalidInputError(
            raw, f"parse_includes() expects a string or a list, {type(raw).__name__} given"
        )

    cleaned = []
    for entry in entries:
        if not isinstance(entry, str):
            raise InvalidInputError(
                entry, f"include entries must be strings, {type(entry).__name__} given"
            )
        entry = entry.strip()
        if entry:
            cleaned.append(entry)
    return cleaned


def trim_to_recursion_limit(include: str, recursion_limit: int) -> str:
    """Drop any path segments beyond the recursion limit."""
    return PATH_SEPARATOR.join(include.split(PATH_SEPARATOR)[:recursion_limit])


def expand_parents(includes: Iterable[str]) -> list[str]:
    """
    Add every ancestor path of each include, parents before children.

    Examples:
        ["foo", "bar.baz"] -> ["foo", "bar", "bar.baz"]
        ["a.b.c", "a"]     -> ["a", "a.b", "a.b.c"]
    """
    expanded: dict[str, None] = {}
    for include in includes:
        segments = include.split(PATH_SEPARATOR)
        for depth in range(1, len(segments) + 1):
            expanded.setdefault(PATH_SEPARATOR.join(segments[:depth]), None)
    return list(expanded)


def parse_includes(
    raw: str | Sequence[str],
    recursion_limit: int = DEFAULT_RECURSION_LIMIT,
    param_delimiter: str = DEFAULT_PARAM_DELIMITER,
) -> ResolvedIncludes:
    """
    Parse a raw include request.

    Each entry is split on its first ``:`` into the include name and an optional
    modifier specification. Names are trimmed to ``recursion_limit`` segments and
    deduplicated (the first occurrence and its modifiers win). Finally every
    parent path is added so nested includes stay reachable.

    Params:
        raw: Comma separated string or list of include entries
        recursion_limit: Maximum number of dot segments kept per include
        param_delimiter: Separator for parameters inside a modifier group

    Returns:
        A fresh ResolvedIncludes value

    Raises:
        InvalidInputError: If raw is neither a string nor a list of strings
    """
    requested: list[str] = []
    params: dict[str, dict[str, tuple[str, ...]]] = {}

    for entry in split_include_list(raw):
        name, separator, modifier_spec = entry.partition(MODIFIER_SEPARATOR)
        name = trim_to_recursion_limit(name, recursion_limit)

        if name in requested:
            continue
        requested.append(name)

        if separator:
            params[name] = parse_modifiers(modifier_spec, param_delimiter)

    resolved = ResolvedIncludes(requested=expand_parents(requested), params=params)
    logger.debug(
        "Resolved includes %s from %r (params for %s)",
        list(resolved.requested),
        raw,
        list(resolved.params),
    )
    return resolved
