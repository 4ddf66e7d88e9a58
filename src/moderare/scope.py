"""
Scope tree for include-aware validation.

A Scope relates one resource to one position in the include hierarchy. The
root scope is built by the Engine; child scopes are created on demand while a
validator processes its includes, so the tree only ever contains the
resources that were actually requested.

All scopes of one tree live in a ScopeArena and refer to their parent by
index. A failure anywhere is pushed up that index chain straight away, so the
root reports failure even though messages are only collected on the way back
up the call stack.
"""

import logging
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING, Any

from moderare.core.message_bag import MessageBag
from moderare.core.param_bag import ParamBag
from moderare.core.types import IncludedResults, ValidationResult
from moderare.exceptions import (
    InvalidResourceTypeError,
    InvalidValidatorResultError,
    ScopeStateError,
    ValidatorRuntimeError,
)
from moderare.parsing.includes import PATH_SEPARATOR
from moderare.resource import Collection, Item, ResourceBase
from moderare.validation.outcome import ValidationOutcome

if TYPE_CHECKING:
    from moderare.engine import Engine

logger = logging.getLogger(__name__)

INCLUDES_KEY = "includes"


class ScopeState(Enum):
    """Lifecycle of a single-use scope."""

    PENDING = "pending"
    RESOLVED = "resolved"


class ScopeArena:
    """Index-addressed store of every scope in one validation tree."""

    def __init__(self):
        self._scopes: list["Scope"] = []
        self._parents: list[int | None] = []

    def register(self, scope: "Scope", parent_index: int | None) -> int:
        """
        Add a scope to the arena.

        Params:
            scope: The scope to store
            parent_index: Arena index of its parent, None for the root

        Returns:
            The index assigned to the scope
        """
        if parent_index is not None and not 0 <= parent_index < len(self._scopes):
            raise IndexError(f"Unknown parent scope index {parent_index}")
        self._scopes.append(scope)
        self._parents.append(parent_index)
        return len(self._scopes) - 1

    def get(self, index: int) -> "Scope":
        return self._scopes[index]

    def parent_index(self, index: int) -> int | None:
        return self._parents[index]

    def ancestors(self, index: int) -> Iterator[int]:
        """Indices of every ancestor of a scope, nearest first."""
        parent = self._parents[index]
        while parent is not None:
            yield parent
            parent = self._parents[parent]

    def lineage(self, index: int) -> list["Scope"]:
        """Ancestors of a scope ordered from the root down, excluding itself."""
        return [self._scopes[i] for i in reversed(list(self.ancestors(index)))]

    def __len__(self) -> int:
        return len(self._scopes)


class Scope:
    """
    One node of the validation tree.

    A scope runs its resource's validator, once for an Item or once per element
    of a Collection, lets the validator embed child scopes for requested
    includes, and reports ``True`` or the aggregated MessageBag.
    """

    def __init__(
        self,
        engine: "Engine",
        resource: ResourceBase,
        scope_identifier: str | None = None,
        parent_scope: "Scope | None" = None,
    ):
        """
        Initialize the scope.

        Params:
            engine: The engine holding the requested includes
            resource: The resource to validate
            scope_identifier: Include segment this scope was embedded under
            parent_scope: The scope that embedded this one, None for a root
        """
        self._engine = engine
        self._resource = resource
        self._scope_identifier = scope_identifier
        self._state = ScopeState.PENDING
        self._success = False
        self._failed = False

        if parent_scope is None:
            self._arena = ScopeArena()
            self._index = self._arena.register(self, None)
        else:
            self._arena = parent_scope._arena
            self._index = self._arena.register(self, parent_scope.index)

    @property
    def engine(self) -> "Engine":
        return self._engine

    @property
    def resource(self) -> ResourceBase:
        return self._resource

    @property
    def scope_identifier(self) -> str | None:
        return self._scope_identifier

    @property
    def index(self) -> int:
        return self._index

    @property
    def parent_index(self) -> int | None:
        return self._arena.parent_index(self._index)

    @property
    def parent_scope(self) -> "Scope | None":
        parent = self.parent_index
        return None if parent is None else self._arena.get(parent)

    @property
    def is_root(self) -> bool:
        return self.parent_index is None

    @property
    def parent_scopes(self) -> list[str]:
        """Identifiers of the ancestors from the root down, unnamed ones skipped."""
        return [
            scope.scope_identifier
            for scope in self._arena.lineage(self._index)
            if scope.scope_identifier
        ]

    @property
    def success(self) -> bool:
        return self._success

    @property
    def state(self) -> ScopeState:
        return self._state

    def get_manager(self) -> "Engine":
        return self._engine

    def get_scope_identifier(self) -> str | None:
        return self._scope_identifier

    def get_parent_scopes(self) -> list[str]:
        return self.parent_scopes

    def get_identifier(self, append_identifier: str | None = None) -> str:
        """
        Get the full dotted identifier of this scope.

        Params:
            append_identifier: Optional trailing segment, e.g. a child include

        Returns:
            Ancestors, own identifier and the appended segment joined with dots
        """
        parts = [*self.parent_scopes, self._scope_identifier, append_identifier]
        return PATH_SEPARATOR.join(part for part in parts if part)

    def get_include_path(self, segment: str | None = None) -> str:
        """
        Get the include path of this scope (or of one of its child segments).

        Unlike ``get_identifier`` the root scope's own name is not part of the
        path: includes are requested relative to the root resource.
        """
        lineage = self._arena.lineage(self._index)
        parts = [scope.scope_identifier for scope in lineage[1:]]
        if not self.is_root:
            parts.append(self._scope_identifier)
        parts.append(segment)
        return PATH_SEPARATOR.join(part for part in parts if part)

    def is_requested(self, segment: str) -> bool:
        """Check whether the child include ``segment`` of this scope was requested."""
        return self._engine.is_requested(self.get_include_path(segment))

    def get_include_params(self, segment: str) -> ParamBag:
        """Modifier parameters of a child include; empty when none were given."""
        params = self._engine.get_include_params(self.get_include_path(segment))
        return params if params is not None else ParamBag()

    def embed_child_scope(self, scope_identifier: str, resource: ResourceBase) -> "Scope":
        """
        Create a child scope for an included resource.

        Params:
            scope_identifier: The include segment, e.g. "comments"
            resource: The child resource

        Returns:
            The child scope, not yet validated

        Raises:
            InvalidResourceTypeError: If resource is not an Item or Collection
        """
        if not isinstance(resource, ResourceBase):
            raise InvalidResourceTypeError(resource)
        return self._engine.validate_data(resource, scope_identifier, self)

    def validate(self) -> ValidationResult:
        """
        Validate this scope and every requested include below it.

        Returns:
            True when this scope and all of its descendants passed, otherwise a
            MessageBag with the validator's messages and the child failures
            under "includes"

        Raises:
            ScopeStateError: If the scope was already validated
            InvalidResourceTypeError: If the resource is not an Item or Collection
        """
        if self._state is ScopeState.RESOLVED:
            raise ScopeStateError(self.get_identifier(), "has already been validated")
        self._state = ScopeState.RESOLVED

        outcomes, included = self.execute()

        if self._success:
            return True
        return self._assemble_messages(outcomes, included)

    def execute(self) -> tuple[list[ValidationOutcome], list[IncludedResults]]:
        """
        Run the resource's validator and collect per-element results.

        Returns:
            One outcome and one included-results mapping per validated value
        """
        outcomes: list[ValidationOutcome] = []
        included: list[IncludedResults] = []

        if isinstance(self._resource, Item):
            outcome, children = self.fire_validator(self._resource.data)
            outcomes.append(outcome)
            included.append(children)
        elif isinstance(self._resource, Collection):
            for value in self._resource.data:
                outcome, children = self.fire_validator(value)
                outcomes.append(outcome)
                included.append(children)
            # nothing to validate
            if not self._resource.data:
                self._mark_success()
        else:
            raise InvalidResourceTypeError(self._resource)

        return outcomes, included

    def fire_validator(self, data: Any) -> tuple[ValidationOutcome, IncludedResults]:
        """
        Validate one data value and process the validator's includes for it.

        Errors raised by the validator become a failed outcome; they never leave
        the scope.

        Params:
            data: The value to validate

        Returns:
            The outcome and the child include results for this value
        """
        handle = self._resource.handle

        try:
            outcome = ValidationOutcome.coerce(handle.invoke(data))
        except InvalidValidatorResultError as e:
            logger.warning("Scope '%s': %s", self.get_identifier(), e)
            outcome = ValidationOutcome.from_exception(e)
        except Exception as e:
            error = ValidatorRuntimeError(e)
            logger.warning(
                "Validator raised in scope '%s': %s",
                self.get_identifier(),
                error.message,
                exc_info=e,
            )
            outcome = ValidationOutcome.from_exception(error)

        if outcome.passed:
            self._mark_success()
        else:
            self.fail_validation()

        children: IncludedResults = {}
        if handle.has_includes:
            children = handle.process_included_resources(self, data)

        return outcome, children

    def fail_validation(self) -> None:
        """Mark this scope and every ancestor as failed."""
        self._mark_failed()
        for index in self._arena.ancestors(self._index):
            self._arena.get(index)._mark_failed()
        logger.debug("Scope '%s' failed validation", self.get_identifier())

    def _mark_success(self) -> None:
        if not self._failed:
            self._success = True

    def _mark_failed(self) -> None:
        self._failed = True
        self._success = False

    def _assemble_messages(
        self, outcomes: list[ValidationOutcome], included: list[IncludedResults]
    ) -> MessageBag:
        if isinstance(self._resource, Collection):
            bag = MessageBag()
            for position, (outcome, children) in enumerate(zip(outcomes, included)):
                element_bag = _element_messages(outcome, children)
                if element_bag:
                    bag.add(position, element_bag)
            return bag
        return _element_messages(outcomes[0], included[0])

    def __repr__(self) -> str:
        return (
            f"Scope(identifier={self.get_identifier()!r}, index={self._index}, "
            f"state={self._state.value}, success={self._success})"
        )


def _element_messages(outcome: ValidationOutcome, children: IncludedResults) -> MessageBag:
    """Messages of one validated value, with failed includes nested under "includes"."""
    bag = MessageBag().merge(outcome.messages)

    includes = MessageBag()
    for identifier, result in children.items():
        if isinstance(result, MessageBag) and result:
            includes.add(identifier, result)
    if includes:
        bag.add(INCLUDES_KEY, includes)
    return bag
