"""
Normalization of validator return values.

Validators may answer with ``True``, ``False``, a message, a list of messages
or a ready MessageBag, and may raise. This module is the single place where
that variety is turned into a ValidationOutcome; everything above it works
with ``True`` or a MessageBag only.
"""

from attrs import field, frozen

from moderare.core.message_bag import MessageBag
from moderare.core.types import RawValidatorResult
from moderare.exceptions import InvalidValidatorResultError, ModerareError

DEFAULT_FAILURE_MESSAGE = "Validation failed."


@frozen
class ValidationOutcome:
    """A validator's verdict on one data value.

    Params:
        passed: Whether the data value is valid
        messages: Failure messages; always empty when passed
    """

    passed: bool
    messages: MessageBag = field(factory=MessageBag)

    @classmethod
    def success(cls) -> "ValidationOutcome":
        return cls(passed=True)

    @classmethod
    def failure(cls, messages: MessageBag) -> "ValidationOutcome":
        return cls(passed=False, messages=messages)

    @classmethod
    def coerce(cls, result: RawValidatorResult) -> "ValidationOutcome":
        """
        Convert a raw validator return value into an outcome.

        Params:
            result: Value returned by the validator

        Returns:
            Success for ``True``; failure carrying the derived messages otherwise

        Raises:
            InvalidValidatorResultError: If the value has an unsupported shape
        """
        if isinstance(result, bool):
            if result:
                return cls.success()
            return cls.failure(MessageBag([DEFAULT_FAILURE_MESSAGE]))
        if isinstance(result, MessageBag):
            return cls.failure(result)
        if isinstance(result, str):
            return cls.failure(MessageBag([result]))
        if isinstance(result, (list, tuple)) and all(isinstance(item, str) for item in result):
            return cls.failure(MessageBag(list(result)))
        raise InvalidValidatorResultError(result)

    @classmethod
    def from_exception(cls, error: ModerareError) -> "ValidationOutcome":
        """Failure carrying the error's text as its only message."""
        return cls.failure(MessageBag([str(error)]))
