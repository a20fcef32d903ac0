"""failure-or: value-or-failure, nothing-or-failure and optional containers.

Flat imports (preferred):
    from failure_or import FailureOr, FailureOrNothing, Optional, FailureFactory
    from failure_or import capture, attempt

Submodule imports (for organization):
    from failure_or.failure_or import Success, Failed
    from failure_or.optional import Some, Empty, of
    from failure_or.failure import FailureInfo, CodedFailure
"""

# Configuration
from failure_or._config import Config, get_config, init

# Decorators
from failure_or.decorators import attempt, attempt_async, capture, capture_async

# Errors
from failure_or.errors import FailureError, InvalidArgument, ValidationException

# Extensions
from failure_or.extensions import (
    first_or_none,
    get_value_for_key,
    is_empty,
    single_or_failure,
    to_optional,
)

# Descriptors
from failure_or.factory import FailureFactory
from failure_or.failure import CodedFailure, Failure, FailureInfo, is_failure

# Containers
from failure_or.failure_or import Failed, FailureOr, Success
from failure_or.nothing import DONE, Done, FailureOrNothing, Faulted
from failure_or.optional import Empty, EmptyType, Optional, Some, empty, of, some

# Validation
from failure_or.validation import ValidationError, flatten

__all__ = [
    'DONE',
    'CodedFailure',
    'Config',
    'Done',
    'Empty',
    'EmptyType',
    'Failed',
    'Failure',
    'FailureError',
    'FailureFactory',
    'FailureInfo',
    'FailureOr',
    'FailureOrNothing',
    'Faulted',
    'InvalidArgument',
    'Optional',
    'Some',
    'Success',
    'ValidationError',
    'ValidationException',
    'attempt',
    'attempt_async',
    'capture',
    'capture_async',
    'empty',
    'first_or_none',
    'flatten',
    'get_config',
    'get_value_for_key',
    'init',
    'is_empty',
    'is_failure',
    'of',
    'single_or_failure',
    'some',
    'to_optional',
]
