"""FailureOrNothing type: Done | Faulted for effectful operations without a result."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeIs

import msgspec

from failure_or._internal import escalate, log_capture, resolve
from failure_or.errors import InvalidArgument
from failure_or.factory import FailureFactory
from failure_or.failure import Failure, is_failure

__all__ = ['ACTION_FAILED_MESSAGE', 'DONE', 'Done', 'FailureOrNothing', 'Faulted']

ACTION_FAILED_MESSAGE = 'Action threw an exception.'


class FailureOrNothing(msgspec.Struct, frozen=True):
    """Base of the two FailureOrNothing variants, ``Done`` and ``Faulted``.

    Example:
        ```python
        outcome = (
            FailureOrNothing.succeed()
            .then(lambda: open_connection())
            .then(lambda: send_greeting())
        )
        outcome.catch_(lambda failure: print(failure.message))
        outcome.throw_as_exception()  # back to raise-based code
        ```
    """

    @staticmethod
    def succeed() -> Done:
        """Return the successful outcome."""
        return DONE

    @staticmethod
    def fail(reason: str | Failure | BaseException, message: str | None = None) -> Faulted:
        """Create a failure from a message, a descriptor or an exception."""
        return Faulted(FailureFactory.from_reason(reason, message))

    @staticmethod
    def from_error(exception: BaseException, message: str | None = None) -> Faulted:
        """Wrap an exception as a failure, optionally with a custom message."""
        if message is None:
            return Faulted(FailureFactory.from_exception(exception))
        return Faulted(FailureFactory.from_message_and_exception(message, exception))

    @staticmethod
    def from_failure(failure: Failure) -> Faulted:
        """Wrap a failure descriptor."""
        return Faulted(failure)

    @staticmethod
    def from_(
        action: Callable[[], Any],
        *,
        exceptions: tuple[type[BaseException], ...] = (Exception,),
    ) -> Done | Faulted:
        """Run action and capture any listed exception as a failure.

        The captured exception becomes the failure's cause and the message is
        ``ACTION_FAILED_MESSAGE``. The action's return value is ignored.
        """
        try:
            action()
        except exceptions as e:
            log_capture('FailureOrNothing.from_', e)
            return Faulted(FailureFactory.from_message_and_exception(ACTION_FAILED_MESSAGE, e))
        return DONE

    @staticmethod
    async def from_async(
        action: Callable[[], Awaitable[Any]],
        *,
        exceptions: tuple[type[BaseException], ...] = (Exception,),
    ) -> Done | Faulted:
        """Await action() and capture any listed exception as a failure."""
        try:
            await action()
        except exceptions as e:
            log_capture('FailureOrNothing.from_async', e)
            return Faulted(FailureFactory.from_message_and_exception(ACTION_FAILED_MESSAGE, e))
        return DONE


class Done(FailureOrNothing, frozen=True, gc=False):
    """Successful outcome with no value. Use the ``DONE`` constant."""

    def __repr__(self) -> str:
        return 'Done'

    def is_success(self) -> TypeIs[Done]:
        """Return True since this is Done."""
        return True

    def is_failure(self) -> TypeIs[Faulted]:
        """Return False since this is Done."""
        return False

    def then(self, action: Callable[[], Any]) -> Done | Faulted:
        """Run the next action, capturing an exception it raises.

        Args:
            action: Zero-argument callable with side effects.

        Returns:
            Done if action returned normally, otherwise Faulted whose cause is
            the raised exception.
        """
        return FailureOrNothing.from_(action)

    async def then_async(self, action: Callable[[], Awaitable[Any]]) -> Done | Faulted:
        """Await the next action, capturing an exception it raises."""
        return await FailureOrNothing.from_async(action)

    def match[R](self, on_success: Callable[[], R], on_failure: Callable[[Failure], R]) -> R:  # noqa: ARG002
        """Call on_success and return its result."""
        return on_success()

    async def match_async[R](
        self,
        on_success: Callable[[], Awaitable[R] | R],
        on_failure: Callable[[Failure], Awaitable[R] | R],  # noqa: ARG002
    ) -> R:
        """Call on_success, awaiting its result if needed."""
        return await resolve(on_success())

    def catch_(self, handler: Callable[[Failure], Any]) -> None:
        """Do nothing since this is Done."""

    def throw_as_exception(self) -> None:
        """Do nothing since this is Done."""


class Faulted(FailureOrNothing, frozen=True):
    """Failed outcome carrying a failure descriptor."""

    failure: Failure

    def __post_init__(self) -> None:
        if not is_failure(self.failure):
            raise InvalidArgument('failure', f'must be a failure descriptor, not {type(self.failure).__name__}')

    def is_success(self) -> TypeIs[Done]:
        """Return False since this is Faulted."""
        return False

    def is_failure(self) -> TypeIs[Faulted]:
        """Return True since this is Faulted."""
        return True

    def then(self, action: Callable[[], Any]) -> Faulted:  # noqa: ARG002
        """Short-circuit without running action."""
        return self

    async def then_async(self, action: Callable[[], Awaitable[Any]]) -> Faulted:  # noqa: ARG002
        """Short-circuit without running action."""
        return self

    def match[R](self, on_success: Callable[[], R], on_failure: Callable[[Failure], R]) -> R:  # noqa: ARG002
        """Call on_failure with the descriptor and return its result."""
        return on_failure(self.failure)

    async def match_async[R](
        self,
        on_success: Callable[[], Awaitable[R] | R],  # noqa: ARG002
        on_failure: Callable[[Failure], Awaitable[R] | R],
    ) -> R:
        """Call on_failure with the descriptor, awaiting its result if needed."""
        return await resolve(on_failure(self.failure))

    def catch_(self, handler: Callable[[Failure], Any]) -> None:
        """Call handler with the descriptor."""
        handler(self.failure)

    def throw_as_exception(self) -> None:
        """Raise the failure's cause, or a FailureError with its message.

        Raises:
            BaseException: The captured cause, if there is one.
            FailureError: If the failure has no cause.
        """
        escalate(self.failure)


DONE: Done = Done()
"""Singleton instance representing a successful outcome."""
