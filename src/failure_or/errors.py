"""Exception types: construction faults, escalated failures and argument guards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from failure_or.failure import Failure

__all__ = [
    'FailureError',
    'InvalidArgument',
    'ValidationException',
    'require_exception',
    'require_not_none',
    'require_text',
]


class InvalidArgument(ValueError):  # noqa: N818 - mirrors the argument-fault name callers expect
    """A required argument was None, blank or of the wrong kind.

    This is a programming error raised at construction time. Containers never
    turn it into a failure state.
    """

    def __init__(self, name: str, reason: str = 'must not be None') -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"'{name}' {reason}")


class FailureError(Exception):
    """A failure without an underlying cause, escalated into a raised exception."""

    def __init__(self, failure: Failure) -> None:
        self.failure = failure
        super().__init__(failure.message)

    def to_failure(self) -> Failure:
        """Convert back to the failure descriptor that was escalated."""
        return self.failure


class ValidationException(Exception):
    """A validation error converted for raise-based code."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'A validation error occurred.')


def require_not_none[T](value: T | None, name: str) -> T:
    """Return value, raising InvalidArgument if it is None."""
    if value is None:
        raise InvalidArgument(name)
    return value


def require_text(value: Any, name: str) -> str:
    """Return value if it is a non-blank string.

    Raises:
        InvalidArgument: If value is None, not a string, or only whitespace.
    """
    if value is None:
        raise InvalidArgument(name)
    if not isinstance(value, str):
        raise InvalidArgument(name, f'must be a string, not {type(value).__name__}')
    if not value.strip():
        raise InvalidArgument(name, 'must not be empty or whitespace')
    return value


def require_exception(value: Any, name: str) -> BaseException:
    """Return value if it is an exception instance."""
    if value is None:
        raise InvalidArgument(name)
    if not isinstance(value, BaseException):
        raise InvalidArgument(name, f'must be an exception, not {type(value).__name__}')
    return value
