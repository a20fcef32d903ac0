"""Helpers shared by the containers: awaiting branches, capture logging, escalation."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, NoReturn

from failure_or._config import get_config
from failure_or._logging import get_logger
from failure_or.errors import FailureError

if TYPE_CHECKING:
    from failure_or.failure import Failure

__all__ = ['escalate', 'log_capture', 'resolve']

_logger = get_logger('failure_or')


async def resolve(value: Any) -> Any:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


def log_capture(operation: str, error: BaseException) -> None:
    """Record that a capture boundary turned error into a failure."""
    config = get_config()
    if config.log_level is None or not config.log_captures:
        return
    _logger.debug(
        'failure.captured',
        operation=operation,
        error_type=type(error).__name__,
        error=str(error),
    )


def escalate(failure: Failure) -> NoReturn:
    """Raise the failure's cause, or a FailureError carrying its message."""
    if get_config().log_level is not None:
        _logger.debug('failure.escalated', message=failure.message)
    cause = failure.cause.or_else(None)
    if cause is not None:
        raise cause
    raise FailureError(failure)
