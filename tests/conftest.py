"""Pytest configuration and shared fixtures for failure-or tests."""

import pytest
from failure_or import _config
from failure_or._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def reset_config():
    """Run every test against the default, unconfigured library state."""
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()


@pytest.fixture
def sample_failure():
    """Plain failure descriptor without a cause."""
    from failure_or import FailureInfo

    return FailureInfo('something went wrong')


@pytest.fixture
def sample_error():
    """Exception used as a failure cause."""
    return ValueError('test error')


@pytest.fixture
def sample_success():
    """Successful FailureOr."""
    from failure_or import FailureOr

    return FailureOr.succeed(42)


@pytest.fixture
def sample_failed(sample_failure):
    """Failed FailureOr."""
    from failure_or import FailureOr

    return FailureOr.fail(sample_failure)
