"""
Engine for include-aware validation runs.

The Engine holds the state of one validation request: the includes the caller
asked for, their modifier parameters and the settings used to parse them. It
builds the root scope and every child scope of the tree.

Example:
    engine = Engine().parse_includes("author,comments.author:limit(5|10)")
    result = engine.validate_data(Item(post, PostValidator())).validate()
    if result is not True:
        print(result.to_dict())
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from moderare.core.param_bag import ParamBag
from moderare.exceptions import InvalidInputError
from moderare.parsing.includes import (
    DEFAULT_PARAM_DELIMITER,
    DEFAULT_RECURSION_LIMIT,
    ResolvedIncludes,
    parse_includes,
)
from moderare.resource import ResourceBase
from moderare.scope import Scope

logger = logging.getLogger(__name__)


class EngineSettings(BaseModel):
    """Settings applied when parsing include specifications."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    recursion_limit: int = Field(
        default=DEFAULT_RECURSION_LIMIT,
        ge=1,
        description="Maximum number of dot segments kept per include",
    )
    param_delimiter: str = Field(
        default=DEFAULT_PARAM_DELIMITER,
        min_length=1,
        description="Separator between parameters of a modifier, e.g. limit(5|10)",
    )


class Engine:
    """
    Request-scoped orchestrator of a validation run.

    Use one Engine per request: ``parse_includes`` replaces the previous
    include state entirely, and every scope of a tree reads it.
    """

    def __init__(self, settings: EngineSettings | None = None, **overrides: Any):
        """
        Initialize the engine.

        Params:
            settings: Base settings, defaults when omitted
            **overrides: Individual EngineSettings fields to override

        Raises:
            InvalidInputError: If a setting fails validation
        """
        self._settings = self._apply_settings(settings or EngineSettings(), overrides)
        self._includes = ResolvedIncludes()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def recursion_limit(self) -> int:
        return self._settings.recursion_limit

    @property
    def param_delimiter(self) -> str:
        return self._settings.param_delimiter

    @property
    def includes(self) -> ResolvedIncludes:
        return self._includes

    @property
    def requested_includes(self) -> tuple[str, ...]:
        return self._includes.requested

    def set_recursion_limit(self, recursion_limit: int) -> "Engine":
        """Set the maximum include depth used by subsequent parses."""
        self._settings = self._apply_settings(
            self._settings, {"recursion_limit": recursion_limit}
        )
        return self

    def set_param_delimiter(self, param_delimiter: str) -> "Engine":
        """Set the modifier parameter separator used by subsequent parses."""
        self._settings = self._apply_settings(
            self._settings, {"param_delimiter": param_delimiter}
        )
        return self

    def parse_includes(self, includes: str | Sequence[str]) -> "Engine":
        """
        Parse the caller's include request, replacing any previous one.

        Params:
            includes: Comma separated string or list of includes, e.g.
                "author,comments.author:limit(5|10)"

        Returns:
            This engine, for chaining

        Raises:
            InvalidInputError: If includes is neither a string nor a list of strings
        """
        self._includes = parse_includes(
            includes,
            recursion_limit=self.recursion_limit,
            param_delimiter=self.param_delimiter,
        )
        return self

    def get_requested_includes(self) -> list[str]:
        return list(self._includes.requested)

    def is_requested(self, include: str) -> bool:
        return self._includes.is_requested(include)

    def get_include_params(self, include: str) -> ParamBag | None:
        """
        Get the modifier parameters of an include.

        Params:
            include: Full include path, e.g. "comments.author"

        Returns:
            The include's ParamBag, or None when it carried no modifiers
        """
        return self._includes.get_params(include)

    def validate_data(
        self,
        resource: ResourceBase,
        scope_identifier: str | None = None,
        parent_scope: Scope | None = None,
    ) -> Scope:
        """
        Build a scope for a resource.

        Params:
            resource: The Item or Collection to validate
            scope_identifier: Include segment of a child scope (optional for a root)
            parent_scope: The embedding scope, None for a root

        Returns:
            The new scope; call ``validate()`` on it to run the validation
        """
        scope = Scope(self, resource, scope_identifier, parent_scope)
        logger.debug(
            "Created %s scope '%s'",
            "root" if parent_scope is None else "child",
            scope.get_identifier(),
        )
        return scope

    @staticmethod
    def _apply_settings(base: EngineSettings, overrides: dict[str, Any]) -> EngineSettings:
        if not overrides:
            return base
        try:
            return EngineSettings.model_validate({**base.model_dump(), **overrides})
        except ValidationError as e:
            raise InvalidInputError(overrides, str(e)) from e
