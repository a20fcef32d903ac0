"""FailureFactory: the validated entry point for building failure descriptors."""

from __future__ import annotations

from typing import Any

from failure_or.errors import InvalidArgument, require_exception, require_text
from failure_or.failure import CodedFailure, Failure, FailureInfo, is_failure

__all__ = ['FailureFactory']


class FailureFactory:
    """Build failure descriptors from messages, codes and exceptions.

    Every method validates its arguments eagerly and raises InvalidArgument
    on a None or blank string, or a missing exception.

    Example:
        ```python
        FailureFactory.from_code_and_description('ERR1', 'bad input').message
        # 'ERR1: bad input'

        try:
            int('x')
        except ValueError as e:
            failure = FailureFactory.from_exception(e)
        failure.cause.has_value()
        # True
        ```
    """

    @staticmethod
    def from_message(message: str) -> FailureInfo:
        """Create a plain failure from a message."""
        return FailureInfo(require_text(message, 'message'))

    @staticmethod
    def from_code_and_description(code: str, description: str) -> CodedFailure:
        """Create a coded failure from a short code and a description."""
        return CodedFailure(require_text(code, 'code'), require_text(description, 'description'))

    @staticmethod
    def from_message_and_exception(message: str, cause: BaseException) -> FailureInfo:
        """Create a plain failure with a message and the exception that caused it."""
        return FailureInfo(require_text(message, 'message'), require_exception(cause, 'cause'))

    @staticmethod
    def from_code_message_and_exception(code: str, description: str, cause: BaseException) -> CodedFailure:
        """Create a coded failure with the exception that caused it."""
        return CodedFailure(
            require_text(code, 'code'),
            require_text(description, 'description'),
            require_exception(cause, 'cause'),
        )

    @staticmethod
    def from_exception(exception: BaseException) -> FailureInfo:
        """Create a plain failure from an exception.

        The message is the exception's text, or its type name when the text
        is blank (e.g. ``KeyError()``), so capturing never raises.
        """
        require_exception(exception, 'exception')
        text = str(exception)
        message = text if text.strip() else type(exception).__name__
        return FailureInfo(message, exception)

    @staticmethod
    def from_reason(reason: Any, message: str | None = None) -> Failure:
        """Coerce a message, failure descriptor or exception into a descriptor.

        Args:
            reason: A message string, a failure descriptor, or an exception.
            message: Overrides the exception's text when reason is an exception.

        Raises:
            InvalidArgument: If reason is None or unsupported, or if a message
                is given alongside something other than an exception.
        """
        if reason is None:
            raise InvalidArgument('reason')
        if isinstance(reason, BaseException):
            if message is None:
                return FailureFactory.from_exception(reason)
            return FailureFactory.from_message_and_exception(message, reason)
        if message is not None:
            raise InvalidArgument('message', 'is only accepted together with an exception')
        if isinstance(reason, str):
            return FailureFactory.from_message(reason)
        if is_failure(reason):
            return reason
        raise InvalidArgument(
            'reason', f'must be a message, a failure or an exception, not {type(reason).__name__}'
        )

    # with_* aliases
    with_message = from_message
    with_code_and_message = from_code_and_description
    with_message_and_exception = from_message_and_exception
    with_code_message_and_exception = from_code_message_and_exception
