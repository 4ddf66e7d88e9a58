"""
Read-only container for include modifier parameters.

An include such as ``comments:limit(5|10):order(created_at|desc)`` yields one
ParamBag with ``limit -> ("5", "10")`` and ``order -> ("created_at", "desc")``.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from moderare.exceptions import ParamBagImmutableError


class ParamBag(Mapping):
    """Immutable ordered mapping from modifier name to its parameter list.

    Parameter lists are stored and returned as tuples, e.g. ``bag["limit"] ==
    ("5", "10")``; use ``to_dict()`` for plain lists.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Mapping[str, Iterable[str]] | None = None):
        """
        Initialize the bag.

        Params:
            params: Modifier name to parameter sequence, in declaration order
        """
        frozen = {name: tuple(values) for name, values in (params or {}).items()}
        object.__setattr__(self, "_params", frozen)

    def get(self, name: str, default: Any = None) -> Any:
        """Get the parameter list for a modifier, or ``default`` when absent."""
        return self._params.get(name, default)

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(values) for name, values in self._params.items()}

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._params[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __getattr__(self, name: str) -> Any:
        # _params is only missing on an instance that was never initialized
        if name.startswith("__") or name == "_params":
            raise AttributeError(name)
        return self._params.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise ParamBagImmutableError(name)

    def __delattr__(self, name: str) -> None:
        raise ParamBagImmutableError(name)

    def __setitem__(self, name: str, value: Any) -> None:
        raise ParamBagImmutableError(name)

    def __delitem__(self, name: str) -> None:
        raise ParamBagImmutableError(name)

    def __reduce__(self):
        return (ParamBag, (self.to_dict(),))

    def __repr__(self) -> str:
        return f"ParamBag({self.to_dict()!r})"
