"""ValidationError: builders for consistent property validation messages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from failure_or.errors import ValidationException, require_text
from failure_or.failure import CodedFailure

__all__ = ['ValidationError', 'flatten']


@dataclass(slots=True, frozen=True)
class ValidationError:
    """A validation problem on a named property.

    Builders return new instances; an existing error is never modified.

    Example:
        ```python
        ValidationError.property('age').should_be_at_least(18).reason
        # 'age should be at least 18.'
        ```

    Attributes:
        property_name: Name of the property that failed validation.
        reason: Human-readable reason.
    """

    property_name: str
    reason: str

    def __post_init__(self) -> None:
        require_text(self.property_name, 'property_name')
        require_text(self.reason, 'reason')

    def __str__(self) -> str:
        return self.reason

    @classmethod
    def property(cls, name: str) -> ValidationError:
        """Start a validation error for name with a generic reason."""
        return cls(name, f'A validation error on {name} occurred.')

    def _because(self, reason: str) -> ValidationError:
        return ValidationError(self.property_name, reason)

    def should_be_greater_than(self, threshold: Any) -> ValidationError:
        return self._because(f'{self.property_name} should be greater than {threshold}')

    def should_be_at_least(self, threshold: Any) -> ValidationError:
        return self._because(f'{self.property_name} should be at least {threshold}.')

    def should_be_at_most(self, threshold: Any) -> ValidationError:
        return self._because(f'{self.property_name} should be at most {threshold}.')

    def should_be_less_than(self, threshold: Any) -> ValidationError:
        return self._because(f'{self.property_name} should be less than {threshold}')

    def should_not_be_empty(self) -> ValidationError:
        return self._because(f'{self.property_name} should not be empty or null')

    def should_not_be_null(self) -> ValidationError:
        return self._because(f'{self.property_name} is null and should have a valid value.')

    def should_have_future_date(self) -> ValidationError:
        return self._because(f'{self.property_name} cannot be a date in the past.')

    def as_exception(self) -> ValidationException:
        """Convert to an exception for raise-based code."""
        return ValidationException(self.reason)

    def to_failure(self) -> CodedFailure:
        """Convert to a coded failure keyed by the property name."""
        return CodedFailure(self.property_name, self.reason)


def flatten(errors: Iterable[ValidationError]) -> str:
    """Join the reasons of errors, one per line."""
    return '\n'.join(error.reason for error in errors)
