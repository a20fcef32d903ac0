"""Optional type: Some[T] | EmptyType for values that may be absent.

Unlike a nullable reference, an Optional is a tagged variant: the payload lives
only in ``Some``, and ``Some`` never wraps ``None``. Mapping a value to ``None``
erases it to ``Empty``, which lets null-returning functions be used safely.

Example:
    ```python
    from failure_or.optional import of

    of({'name': 'ada'}.get('name')).map(str.upper).or_else('anonymous')
    # 'ADA'

    of(None).map(str.upper).or_else('anonymous')
    # 'anonymous'
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from failure_or._internal import resolve
from failure_or.errors import InvalidArgument, require_exception

if TYPE_CHECKING:
    from failure_or.failure import Failure
    from failure_or.failure_or import Failed, Success

__all__ = ['Empty', 'EmptyType', 'Optional', 'Some', 'empty', 'of', 'some']


class Optional[T](msgspec.Struct, frozen=True):
    """Base of the two Optional variants, ``Some`` and ``EmptyType``.

    Use the constructors rather than instantiating the base directly.
    """

    @staticmethod
    def some[U](value: U) -> Some[U]:
        """Wrap a value that must not be None."""
        return Some(value)

    @staticmethod
    def of[U](value: U | None) -> Some[U] | EmptyType:
        """Wrap value, or return Empty if it is None."""
        return of(value)

    @staticmethod
    def empty() -> EmptyType:
        """Return the absent Optional."""
        return Empty

    @staticmethod
    def none() -> EmptyType:
        """Alias for empty()."""
        return Empty


class Some[T](Optional[T], frozen=True):
    """Present variant of Optional containing a non-None value.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).or_else(0)
        42
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgument('value', 'must not be None; use of() or empty() for absent values')

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return False since this is Some."""
        return False

    def has_value(self) -> bool:
        """Return True since this is Some."""
        return True

    def or_else(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the supplier."""
        return self.value

    def or_throw(self, error: BaseException) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the error."""
        return self.value

    def if_has_value(self, action: Callable[[T], Any]) -> None:
        """Call action with the contained value."""
        action(self.value)

    def map[U](self, f: Callable[[T], U | None]) -> Some[U] | EmptyType:
        """Apply f to the value.

        Args:
            f: Function to apply to the value.

        Returns:
            Some with the result, or Empty if f returned None.
        """
        return of(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | EmptyType]) -> Some[U] | EmptyType:
        """Apply a function that returns an Optional, without re-wrapping its result."""
        return f(self.value)

    def then[U](self, f: Callable[[T], Some[U] | EmptyType]) -> Some[U] | EmptyType:
        """Chain an Optional-returning step. Same as flat_map."""
        return self.flat_map(f)

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Call on_some with the value and return its result."""
        return on_some(self.value)

    async def map_async[U](self, f: Callable[[T], Awaitable[U | None]]) -> Some[U] | EmptyType:
        """Await f applied to the value; a None result becomes Empty."""
        return of(await f(self.value))

    async def match_async[R](
        self,
        on_some: Callable[[T], Awaitable[R] | R],
        on_none: Callable[[], Awaitable[R] | R],  # noqa: ARG002
    ) -> R:
        """Call on_some with the value, awaiting its result if needed."""
        return await resolve(on_some(self.value))

    def to_failure_or(self, failure: Failure | str) -> Success[T]:  # noqa: ARG002
        """Convert to a FailureOr, returning Success(value)."""
        from failure_or.failure_or import Success

        return Success(self.value)


class EmptyType(Optional[Any], frozen=True, gc=False):
    """Absent variant of Optional.

    Use the ``Empty`` constant instead of instantiating directly. All
    instances compare equal.

    Examples:
        >>> Empty.or_else(0)
        0
        >>> Empty.map(lambda x: x * 2)
        Empty
    """

    def __repr__(self) -> str:
        return 'Empty'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Empty."""
        return False

    def is_empty(self) -> TypeIs[EmptyType]:
        """Return True since this is Empty."""
        return True

    def has_value(self) -> bool:
        """Return False since this is Empty."""
        return False

    def or_else[T](self, fallback: T) -> T:
        """Return the fallback."""
        return fallback

    def or_else_get[T](self, supplier: Callable[[], T]) -> T:
        """Compute the fallback lazily."""
        return supplier()

    def or_throw(self, error: BaseException) -> NoReturn:
        """Raise the caller-supplied error.

        Raises:
            BaseException: Always, the error passed in.
        """
        raise require_exception(error, 'error')

    def if_has_value(self, action: Callable[[Any], Any]) -> None:
        """Do nothing since there is no value."""

    def map(self, f: Callable[[Any], Any]) -> EmptyType:  # noqa: ARG002
        """Return Empty without calling f."""
        return self

    def flat_map(self, f: Callable[[Any], Any]) -> EmptyType:  # noqa: ARG002
        """Return Empty without calling f."""
        return self

    def then(self, f: Callable[[Any], Any]) -> EmptyType:  # noqa: ARG002
        """Return Empty without calling f."""
        return self

    def match[R](self, on_some: Callable[[Any], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Call on_none and return its result."""
        return on_none()

    async def map_async(self, f: Callable[[Any], Awaitable[Any]]) -> EmptyType:  # noqa: ARG002
        """Return Empty without calling f."""
        return self

    async def match_async[R](
        self,
        on_some: Callable[[Any], Awaitable[R] | R],  # noqa: ARG002
        on_none: Callable[[], Awaitable[R] | R],
    ) -> R:
        """Call on_none, awaiting its result if needed."""
        return await resolve(on_none())

    def to_failure_or(self, failure: Failure | str) -> Failed[Any]:
        """Convert to a FailureOr, returning Failed with the given failure.

        Args:
            failure: A failure descriptor, or a message to build one from.
        """
        from failure_or.failure_or import FailureOr

        return FailureOr.fail(failure)


Empty: EmptyType = EmptyType()
"""Singleton instance representing the absence of a value."""


def some[T](value: T) -> Some[T]:
    """Wrap a value that must not be None.

    Raises:
        InvalidArgument: If value is None.
    """
    return Some(value)


def of[T](value: T | None) -> Some[T] | EmptyType:
    """Wrap value, or return Empty if it is None. Never raises."""
    if value is None:
        return Empty
    return Some(value)


def empty() -> EmptyType:
    """Return the absent Optional."""
    return Empty
