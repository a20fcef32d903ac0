"""Thin helpers bridging plain collections and values into Optional and FailureOr."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from failure_or.errors import require_not_none
from failure_or.failure_or import Failed, FailureOr, Success
from failure_or.optional import Empty, EmptyType, Some, of

__all__ = [
    'first_or_none',
    'get_value_for_key',
    'is_empty',
    'single_or_failure',
    'to_optional',
]

_MISSING = object()


def to_optional[T](value: T | None) -> Some[T] | EmptyType:
    """Wrap value in an Optional; None becomes Empty."""
    return of(value)


def first_or_none[T](source: Iterable[T]) -> Some[T] | EmptyType:
    """Return the first element as an Optional.

    Empty if the iterable is empty or its first element is None. Only the
    first element is consumed.

    Raises:
        InvalidArgument: If source is None.
    """
    require_not_none(source, 'source')
    for item in source:
        return of(item)
    return Empty


def single_or_failure[T](source: Iterable[T]) -> Success[T] | Failed[T]:
    """Return the only element of source as a FailureOr.

    Fails when source has no elements or more than one, with a ValueError as
    the cause. At most two elements are consumed. The element itself is
    converted with FailureOr.from_value, so a None element is a failure too.

    Raises:
        InvalidArgument: If source is None.
    """
    require_not_none(source, 'source')
    iterator = iter(source)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        error = ValueError('Source contains no elements.')
        return FailureOr.from_error(error, 'Source contains no elements - single element expected.')
    if next(iterator, _MISSING) is not _MISSING:
        error = ValueError('Source contains more than one element.')
        return FailureOr.from_error(error, 'Source contains multiple elements - single element expected.')
    return FailureOr.from_value(first)


def is_empty(source: Iterable[Any]) -> bool:
    """Return True if source yields no elements.

    Raises:
        InvalidArgument: If source is None.
    """
    require_not_none(source, 'source')
    for _ in source:
        return False
    return True


def get_value_for_key[K, V](mapping: Mapping[K, V], key: K) -> Some[V] | EmptyType:
    """Look up key, returning Some(value), or Empty if missing or None.

    Raises:
        InvalidArgument: If mapping is None.
    """
    require_not_none(mapping, 'mapping')
    return of(mapping.get(key))
