"""FailureOr type: Success[T] | Failed[T] for operations that return a value or fail.

``Success`` holds a non-None value; ``Failed`` holds a failure descriptor.
Failures propagate through ``then``/``map`` chains without calling the
continuations, and are collapsed at the end with ``match``, ``get_or`` or
``catch_``.

Example:
    ```python
    from failure_or import FailureOr

    FailureOr.from_(lambda: 10 // 2).map(lambda x: x * 2).get_or(-1)
    # 10

    FailureOr.from_(lambda: 10 // 0).get_or(-1)
    # -1
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from failure_or._internal import escalate, log_capture, resolve
from failure_or.errors import InvalidArgument, require_not_none
from failure_or.factory import FailureFactory
from failure_or.failure import Failure, is_failure
from failure_or.optional import Empty, EmptyType, Some

__all__ = ['NONE_RESULT_MESSAGE', 'NONE_VALUE_MESSAGE', 'Failed', 'FailureOr', 'Success']

NONE_RESULT_MESSAGE = 'Action returned None.'
NONE_VALUE_MESSAGE = 'Value cannot be None.'


class FailureOr[T](msgspec.Struct, frozen=True):
    """Base of the two FailureOr variants, ``Success`` and ``Failed``.

    Build instances with the static constructors below.
    """

    @staticmethod
    def succeed[U](value: U) -> Success[U]:
        """Wrap a successful value.

        Raises:
            InvalidArgument: If value is None.
        """
        return Success(value)

    @staticmethod
    def fail(reason: str | Failure | BaseException, message: str | None = None) -> Failed[Any]:
        """Create a failure from a message, a descriptor or an exception.

        Args:
            reason: Message, failure descriptor, or exception.
            message: Describes the failure when reason is an exception.
        """
        return Failed(FailureFactory.from_reason(reason, message))

    @staticmethod
    def from_[U](
        fn: Callable[[], U | None],
        *,
        exceptions: tuple[type[BaseException], ...] = (Exception,),
    ) -> Success[U] | Failed[U]:
        """Call fn and capture its outcome.

        A non-None result becomes Success. An exception listed in
        ``exceptions`` becomes Failed with the exception as its cause. A None
        result becomes Failed with ``NONE_RESULT_MESSAGE``, since Success never
        holds None.

        Args:
            fn: Zero-argument callable to invoke.
            exceptions: Exception types to capture. Others propagate.
        """
        try:
            result = fn()
        except exceptions as e:
            log_capture('FailureOr.from_', e)
            return Failed(FailureFactory.from_exception(e))
        if result is None:
            return Failed(FailureFactory.from_message(NONE_RESULT_MESSAGE))
        return Success(result)

    @staticmethod
    async def from_async[U](
        fn: Callable[[], Awaitable[U | None]],
        *,
        exceptions: tuple[type[BaseException], ...] = (Exception,),
    ) -> Success[U] | Failed[U]:
        """Await fn() and capture its outcome, with the same rules as from_()."""
        try:
            result = await fn()
        except exceptions as e:
            log_capture('FailureOr.from_async', e)
            return Failed(FailureFactory.from_exception(e))
        if result is None:
            return Failed(FailureFactory.from_message(NONE_RESULT_MESSAGE))
        return Success(result)

    @staticmethod
    def from_value[U](value: U | Failure | BaseException | None) -> Success[U] | Failed[U]:
        """Coerce an arbitrary value into a FailureOr.

        Precedence, first match wins:

        1. None becomes Failed with ``NONE_VALUE_MESSAGE``.
        2. A failure descriptor becomes Failed wrapping it.
        3. An exception becomes Failed with the exception as its cause.
        4. Anything else becomes Success.

        This lets generic code that yields either a domain value or an error
        marker convert without branching.
        """
        if value is None:
            return Failed(FailureFactory.from_message(NONE_VALUE_MESSAGE))
        if is_failure(value):
            return Failed(value)
        if isinstance(value, BaseException):
            return Failed(FailureFactory.from_exception(value))
        return Success(value)

    @staticmethod
    def from_error(exception: BaseException, message: str | None = None) -> Failed[Any]:
        """Wrap an exception as a failure, optionally with a custom message."""
        if message is None:
            return Failed(FailureFactory.from_exception(exception))
        return Failed(FailureFactory.from_message_and_exception(message, exception))

    @staticmethod
    def from_failure(failure: Failure) -> Failed[Any]:
        """Wrap a failure descriptor."""
        return Failed(failure)


class Success[T](FailureOr[T], frozen=True):
    """Success variant of FailureOr containing a non-None value.

    Examples:
        >>> Success(5).map(lambda x: x * 2)
        Success(value=10)
        >>> Success(5).get_or(0)
        5
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgument('value', 'cannot be None in a successful result')

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failed[Any]]:
        """Return False since this is Success."""
        return False

    def get_or(self, fallback: T) -> T:
        """Return the contained value. fallback must still not be None."""
        require_not_none(fallback, 'fallback')
        return self.value

    def get_or_else(self, supplier: Callable[[Failure], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling supplier."""
        return self.value

    def match[R](self, on_success: Callable[[T], R], on_failure: Callable[[Failure], R]) -> R:  # noqa: ARG002
        """Call on_success with the value and return its result."""
        return on_success(self.value)

    async def match_async[R](
        self,
        on_success: Callable[[T], Awaitable[R] | R],
        on_failure: Callable[[Failure], Awaitable[R] | R],  # noqa: ARG002
    ) -> R:
        """Call on_success with the value, awaiting its result if needed."""
        return await resolve(on_success(self.value))

    def then[U](self, f: Callable[[T], Success[U] | Failed[U]]) -> Success[U] | Failed[U]:
        """Chain a step that may fail. Also known as bind.

        Args:
            f: Function that takes the value and returns a FailureOr.

        Returns:
            The FailureOr returned by f.
        """
        return f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply f to the value and wrap the result in Success.

        Raises:
            InvalidArgument: If f returns None.
        """
        return Success(f(self.value))

    async def then_async[U](
        self, f: Callable[[T], Awaitable[Success[U] | Failed[U]]]
    ) -> Success[U] | Failed[U]:
        """Await a step that may fail."""
        return await f(self.value)

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Success[U]:
        """Await f applied to the value and wrap the result in Success."""
        return Success(await f(self.value))

    def catch_(self, handler: Callable[[Failure], Any]) -> None:
        """Do nothing since this is Success."""

    def inspect(self, f: Callable[[T], Any]) -> Success[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def inspect_failure(self, f: Callable[[Failure], Any]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def to_optional(self) -> Some[T]:
        """Convert to Optional, returning Some(value)."""
        return Some(self.value)

    def throw_as_exception(self) -> T:
        """Return the value; there is nothing to raise."""
        return self.value


class Failed[T](FailureOr[T], frozen=True):
    """Failure variant of FailureOr containing a failure descriptor.

    Examples:
        >>> failed = FailureOr.fail('not found')
        >>> failed.get_or(0)
        0
        >>> failed.map(lambda x: x * 2) is failed
        True
    """

    failure: Failure

    def __post_init__(self) -> None:
        if not is_failure(self.failure):
            raise InvalidArgument('failure', f'must be a failure descriptor, not {type(self.failure).__name__}')

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Failed."""
        return False

    def is_failure(self) -> TypeIs[Failed[T]]:
        """Return True since this is Failed."""
        return True

    def get_or(self, fallback: T) -> T:
        """Return the fallback, which must not be None."""
        return require_not_none(fallback, 'fallback')

    def get_or_else(self, supplier: Callable[[Failure], T]) -> T:
        """Compute a fallback from the failure."""
        return supplier(self.failure)

    def match[R](self, on_success: Callable[[T], R], on_failure: Callable[[Failure], R]) -> R:  # noqa: ARG002
        """Call on_failure with the descriptor and return its result."""
        return on_failure(self.failure)

    async def match_async[R](
        self,
        on_success: Callable[[T], Awaitable[R] | R],  # noqa: ARG002
        on_failure: Callable[[Failure], Awaitable[R] | R],
    ) -> R:
        """Call on_failure with the descriptor, awaiting its result if needed."""
        return await resolve(on_failure(self.failure))

    def then[U](self, f: Callable[[T], Success[U] | Failed[U]]) -> Failed[U]:  # noqa: ARG002
        """Propagate this failure without calling f."""
        return self  # type: ignore[return-value]

    def map[U](self, f: Callable[[T], U]) -> Failed[U]:  # noqa: ARG002
        """Propagate this failure without calling f."""
        return self  # type: ignore[return-value]

    async def then_async[U](self, f: Callable[[T], Awaitable[Success[U] | Failed[U]]]) -> Failed[U]:  # noqa: ARG002
        """Propagate this failure without calling f."""
        return self  # type: ignore[return-value]

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Failed[U]:  # noqa: ARG002
        """Propagate this failure without calling f."""
        return self  # type: ignore[return-value]

    def catch_(self, handler: Callable[[Failure], Any]) -> None:
        """Call handler with the descriptor."""
        handler(self.failure)

    def inspect(self, f: Callable[[T], Any]) -> Failed[T]:  # noqa: ARG002
        """Return self unchanged since this is Failed."""
        return self

    def inspect_failure(self, f: Callable[[Failure], Any]) -> Failed[T]:
        """Call f with the descriptor for side effects and return self."""
        f(self.failure)
        return self

    def to_optional(self) -> EmptyType:
        """Convert to Optional, returning Empty."""
        return Empty

    def throw_as_exception(self) -> NoReturn:
        """Raise the failure's cause, or a FailureError with its message."""
        escalate(self.failure)
