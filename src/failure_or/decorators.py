"""@capture and @attempt decorators (plus async variants) for catching exceptions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from failure_or.failure_or import Failed, FailureOr, Success
from failure_or.nothing import Done, FailureOrNothing, Faulted

__all__ = ['attempt', 'attempt_async', 'capture', 'capture_async']

P = ParamSpec('P')
T = TypeVar('T')


@overload
def capture[**P, T](
    func: Callable[P, T | None],
) -> Callable[P, Success[T] | Failed[T]]: ...


@overload
def capture(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T | None]], Callable[P, Success[T] | Failed[T]]]: ...


def capture[**P, T](
    func: Callable[P, T | None] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that makes a function return FailureOr instead of raising.

    The wrapped function returns Success(value) on a non-None return,
    Failed on an exception, and Failed on a None return.

    Can be used with or without arguments:
        @capture
        def risky(): ...

        @capture(exceptions=(ValueError, KeyError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to (Exception,).

    Returns:
        A wrapped function that returns FailureOr[T] instead of T.

    Example:
        ```python
        @capture
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0).failure.message
        # 'division by zero'
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failed[T]:
        return FailureOr.from_(partial(wrapped, *args, **kwargs), exceptions=catch)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def capture_async[**P, T](
    func: Callable[P, Awaitable[T | None]],
) -> Callable[P, Awaitable[Success[T] | Failed[T]]]: ...


@overload
def capture_async(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T | None]]], Callable[P, Awaitable[Success[T] | Failed[T]]]]: ...


def capture_async[**P, T](
    func: Callable[P, Awaitable[T | None]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that makes a coroutine function return FailureOr.

    Same rules as @capture; only the wrapped coroutine is awaited.

    Example:
        ```python
        @capture_async
        async def fetch(url: str) -> bytes:
            return await http_get(url)

        (await fetch('https://example.invalid')).is_failure()
        # True
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T | None]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failed[T]:
        return await FailureOr.from_async(partial(wrapped, *args, **kwargs), exceptions=catch)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def attempt[**P](
    func: Callable[P, Any],
) -> Callable[P, Done | Faulted]: ...


@overload
def attempt(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Any]], Callable[P, Done | Faulted]]: ...


def attempt[**P](
    func: Callable[P, Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that makes a side-effecting function return FailureOrNothing.

    The wrapped function returns DONE when it returns normally (its return
    value is discarded) and Faulted when it raises.

    Example:
        ```python
        @attempt
        def save(path: str, data: bytes) -> None:
            Path(path).write_bytes(data)

        save('/read-only/file', b'x').throw_as_exception()  # re-raises the OSError
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Done | Faulted:
        return FailureOrNothing.from_(partial(wrapped, *args, **kwargs), exceptions=catch)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def attempt_async[**P](
    func: Callable[P, Awaitable[Any]],
) -> Callable[P, Awaitable[Done | Faulted]]: ...


@overload
def attempt_async(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[Any]]], Callable[P, Awaitable[Done | Faulted]]]: ...


def attempt_async[**P](
    func: Callable[P, Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that makes a coroutine function return FailureOrNothing."""
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Done | Faulted:
        return await FailureOrNothing.from_async(partial(wrapped, *args, **kwargs), exceptions=catch)

    if func is not None:
        return wrapper(func)
    return wrapper
