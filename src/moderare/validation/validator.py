"""
Validator capability.

A resource's validator is either a plain callable taking one data value, or an
instance of Validator, which can additionally expose child resources as
includes through ``include_<name>`` methods.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from moderare.core.message_bag import MessageBag
from moderare.core.param_bag import ParamBag
from moderare.core.types import RawValidatorResult, ValidationResult
from moderare.exceptions import MissingIncludeMethodError, ValidatorRuntimeError

if TYPE_CHECKING:
    from moderare.scope import Scope

logger = logging.getLogger(__name__)

INCLUDE_METHOD_PREFIX = "include_"


class Validator(ABC):
    """
    Base class for validators that expose child resources.

    Subclasses implement ``validate`` and, for every include they declare, an
    ``include_<name>(data, params)`` method returning the child resource (or
    None to skip it).

    Example:
        class PostValidator(Validator):
            available_includes = ["comments"]

            def validate(self, post):
                return bool(post["title"]) or "Title is required."

            def include_comments(self, post, params):
                limit = int(params.get("limit", ("10",))[0])
                return Collection(post["comments"][:limit], CommentValidator())
    """

    # class-level declarations; the setters override them per instance
    available_includes: list[str] = []
    default_includes: list[str] = []

    @abstractmethod
    def validate(self, data: Any) -> RawValidatorResult:
        """Validate one data value."""
        pass

    def get_available_includes(self) -> list[str]:
        return list(self.available_includes)

    def get_default_includes(self) -> list[str]:
        return list(self.default_includes)

    def set_available_includes(self, includes: list[str]) -> "Validator":
        self.available_includes = list(includes)
        return self

    def set_default_includes(self, includes: list[str]) -> "Validator":
        self.default_includes = list(includes)
        return self

    def has_includes(self) -> bool:
        return bool(self.get_default_includes() or self.get_available_includes())

    def figure_out_which_includes(self, scope: "Scope") -> list[str]:
        """Default includes first, then available includes the caller requested."""
        includes = self.get_default_includes()
        for include in self.get_available_includes():
            if include not in includes and scope.is_requested(include):
                includes.append(include)
        return includes

    def process_included_resources(
        self, scope: "Scope", data: Any
    ) -> dict[str, ValidationResult]:
        """
        Validate the child resources this validator exposes for one data value.

        An include method that raises fails the scope; its error text is
        recorded as the include's only message and the remaining includes
        still run.

        Params:
            scope: The scope currently validating ``data``
            data: The data value whose children are being included

        Returns:
            Include identifier to the child scope's validation result

        Raises:
            MissingIncludeMethodError: If an include has no ``include_<name>`` method
            InvalidResourceTypeError: If an include method returns a non-resource
        """
        results: dict[str, ValidationResult] = {}
        for include in self.figure_out_which_includes(scope):
            method = self.get_include_method(include)
            params: ParamBag = scope.get_include_params(include)
            logger.debug(
                "Including '%s' via %s.%s()",
                scope.get_identifier(include),
                type(self).__name__,
                method.__name__,
            )

            try:
                resource = method(data, params)
            except Exception as e:
                error = ValidatorRuntimeError(e)
                logger.warning(
                    "Include '%s' raised in scope '%s': %s",
                    include,
                    scope.get_identifier(),
                    error.message,
                    exc_info=e,
                )
                scope.fail_validation()
                results[include] = MessageBag([error.message])
                continue

            if resource is None:
                continue
            results[include] = scope.embed_child_scope(include, resource).validate()
        return results

    def get_include_method(self, include: str):
        method_name = INCLUDE_METHOD_PREFIX + include.replace("-", "_").replace(" ", "_")
        method = getattr(self, method_name, None)
        if method is None:
            raise MissingIncludeMethodError(type(self).__name__, include, method_name)
        return method
