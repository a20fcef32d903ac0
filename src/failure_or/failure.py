"""Failure descriptors: the Failure capability and its plain and coded shapes.

A failure descriptor carries a non-empty ``message`` and an optional
underlying ``cause``. Two immutable shapes implement it:

- ``FailureInfo``: a message and an optional exception.
- ``CodedFailure``: a short code plus a description; the message is
  derived as ``"{code}: {description}"``.

Example:
    ```python
    info = FailureInfo('disk full', OSError(28, 'No space left'))
    info.to_coded().message  # 'OSError: disk full'

    coded = CodedFailure('E42', 'bad input')
    coded.message  # 'E42: bad input'
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol, TypeIs, runtime_checkable

from failure_or.errors import require_exception, require_text
from failure_or.optional import Optional, of

__all__ = ['CodedFailure', 'Failure', 'FailureInfo', 'is_failure']

DEFAULT_CODE = 'Exception'


@runtime_checkable
class Failure(Protocol):
    """Capability shared by every failure descriptor."""

    @property
    def message(self) -> str:
        """Human readable, non-empty description of the failure."""
        ...

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying exception, if any."""
        ...


def is_failure(value: object) -> TypeIs[Failure]:
    """Return True if value is shaped like a failure descriptor."""
    return isinstance(value, Failure)


def _same_cause(a: BaseException | None, b: BaseException | None) -> bool:
    return a is b or (a is not None and b is not None and a == b)


@dataclass(slots=True, frozen=True, eq=False)
class FailureInfo:
    """A failure described by a message and an optional exception.

    Equality ignores the case of the message.

    Attributes:
        message: Description of the failure. Must not be blank.
        exception: The exception that caused the failure, if any.
    """

    message: str
    exception: BaseException | None = None

    def __post_init__(self) -> None:
        require_text(self.message, 'message')
        if self.exception is not None:
            require_exception(self.exception, 'exception')

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying exception as an Optional."""
        return of(self.exception)

    def with_exception(self, exception: BaseException) -> FailureInfo:
        """Return a copy of this failure caused by exception."""
        return replace(self, exception=require_exception(exception, 'exception'))

    def with_code(self, code: str) -> CodedFailure:
        """Return a coded failure using this message as the description."""
        return CodedFailure(code, self.message, self.exception)

    def to_coded(self) -> CodedFailure:
        """Convert to a CodedFailure.

        The code is synthesized from the cause's type name, or ``'Exception'``
        when there is no cause. A code dropped by an earlier to_info() is not
        recovered, so this is not a round trip.
        """
        code = type(self.exception).__name__ if self.exception is not None else DEFAULT_CODE
        return CodedFailure(code, self.message, self.exception)

    def to_info(self) -> FailureInfo:
        """Return self."""
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FailureInfo):
            return NotImplemented
        return self.message.casefold() == other.message.casefold() and _same_cause(
            self.exception, other.exception
        )

    def __hash__(self) -> int:
        return hash(('FailureInfo', self.message.casefold()))


@dataclass(slots=True, frozen=True, eq=False)
class CodedFailure:
    """A failure identified by a short code and a description.

    Code and description are trimmed on construction. Equality ignores case.

    Attributes:
        code: Short machine-friendly identifier, e.g. ``'E_TIMEOUT'``.
        description: Extended human-readable description.
        exception: The exception that caused the failure, if any.
    """

    code: str
    description: str
    exception: BaseException | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'code', require_text(self.code, 'code').strip())
        object.__setattr__(self, 'description', require_text(self.description, 'description').strip())
        if self.exception is not None:
            require_exception(self.exception, 'exception')

    @property
    def message(self) -> str:
        """The derived message, ``"{code}: {description}"``."""
        return f'{self.code}: {self.description}'

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying exception as an Optional."""
        return of(self.exception)

    def with_exception(self, exception: BaseException) -> CodedFailure:
        """Return a copy of this failure caused by exception."""
        return replace(self, exception=require_exception(exception, 'exception'))

    def to_info(self) -> FailureInfo:
        """Convert to a FailureInfo carrying the derived message."""
        return FailureInfo(self.message, self.exception)

    def to_coded(self) -> CodedFailure:
        """Return self."""
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodedFailure):
            return NotImplemented
        return (
            self.code.casefold() == other.code.casefold()
            and self.description.casefold() == other.description.casefold()
            and _same_cause(self.exception, other.exception)
        )

    def __hash__(self) -> int:
        return hash(('CodedFailure', self.code.casefold(), self.description.casefold()))
