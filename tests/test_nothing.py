"""Tests for FailureOrNothing type (Done and Faulted)."""

import pytest
from failure_or import DONE, Done, FailureError, FailureInfo, FailureOrNothing, Faulted, InvalidArgument, Some
from failure_or.nothing import ACTION_FAILED_MESSAGE


def raise_value_error():
    raise ValueError('boom')


class TestCreation:
    """Tests for the static constructors."""

    def test_succeed_is_done(self):
        """succeed() returns the DONE singleton."""
        assert FailureOrNothing.succeed() is DONE
        assert DONE.is_success()
        assert not DONE.is_failure()

    def test_done_equality_and_repr(self):
        """Done instances are equal and print as Done."""
        assert Done() == DONE
        assert repr(DONE) == 'Done'

    def test_fail(self, sample_failure):
        """fail() accepts a message or a descriptor."""
        assert FailureOrNothing.fail('something went wrong') == Faulted(sample_failure)
        assert FailureOrNothing.fail(sample_failure).failure is sample_failure
        assert FailureOrNothing.fail('x').is_failure()

    def test_fail_with_exception(self, sample_error):
        """fail() with an exception records the cause."""
        faulted = FailureOrNothing.fail(sample_error, 'save failed')
        assert faulted.failure == FailureInfo('save failed', sample_error)

    def test_from_error_and_failure(self, sample_error, sample_failure):
        """from_error() and from_failure() build Faulted."""
        assert FailureOrNothing.from_error(sample_error).failure.cause == Some(sample_error)
        assert FailureOrNothing.from_failure(sample_failure) == Faulted(sample_failure)

    def test_faulted_requires_descriptor(self):
        """Faulted only wraps failure-shaped values."""
        with pytest.raises(InvalidArgument):
            Faulted(None)  # type: ignore[arg-type]


class TestFromAction:
    """Tests for from_() and then()."""

    def test_from_success(self):
        """An action returning normally gives DONE."""
        assert FailureOrNothing.from_(lambda: 'ignored') is DONE

    def test_from_captures_exception(self):
        """A raised exception is the cause; the message is fixed."""
        faulted = FailureOrNothing.from_(raise_value_error)
        assert faulted.failure.message == ACTION_FAILED_MESSAGE
        cause = faulted.failure.cause.or_else(None)
        assert isinstance(cause, ValueError)
        assert str(cause) == 'boom'

    def test_from_exceptions_filter(self):
        """Unlisted exceptions propagate."""
        with pytest.raises(ValueError):
            FailureOrNothing.from_(raise_value_error, exceptions=(KeyError,))

    def test_then_runs_action_once(self):
        """then() on Done executes the action exactly once."""
        calls = []
        result = FailureOrNothing.succeed().then(lambda: calls.append(1))
        assert result is DONE
        assert calls == [1]

    def test_then_short_circuits(self):
        """Once faulted, later actions never run."""
        calls = []
        result = (
            FailureOrNothing.succeed()
            .then(lambda: calls.append('a'))
            .then(raise_value_error)
            .then(lambda: calls.append('c'))
        )
        assert result.is_failure()
        assert calls == ['a']

    def test_faulted_then_returns_self(self, sample_failure):
        """Faulted is a fixed point of then."""
        faulted = FailureOrNothing.fail(sample_failure)
        assert faulted.then(lambda: None) is faulted

    async def test_async_actions(self):
        """then_async() and from_async() await and capture."""
        calls = []

        async def ok():
            calls.append('ok')

        async def bad():
            raise RuntimeError('async boom')

        assert await DONE.then_async(ok) is DONE
        faulted = await FailureOrNothing.from_async(bad)
        assert faulted.failure.message == ACTION_FAILED_MESSAGE
        assert await faulted.then_async(ok) is faulted
        assert calls == ['ok']


class TestFolding:
    """Tests for match, catch_ and throw_as_exception."""

    def test_match(self, sample_failure):
        """match() dispatches on the variant."""
        assert DONE.match(lambda: 'ok', lambda f: f.message) == 'ok'
        faulted = FailureOrNothing.fail(sample_failure)
        assert faulted.match(lambda: 'ok', lambda f: f.message) == 'something went wrong'

    async def test_match_async(self, sample_failure):
        """match_async() awaits the branch taken."""

        async def on_success():
            return 'ok'

        async def on_failure(f):
            return f.message

        assert await DONE.match_async(on_success, on_failure) == 'ok'
        faulted = FailureOrNothing.fail(sample_failure)
        assert await faulted.match_async(on_success, on_failure) == 'something went wrong'

    def test_catch(self, sample_failure):
        """catch_() runs the handler only when faulted."""
        handled = []
        DONE.catch_(handled.append)
        FailureOrNothing.fail(sample_failure).catch_(handled.append)
        assert handled == [sample_failure]

    def test_throw_as_exception_done(self):
        """Done does not raise."""
        assert DONE.throw_as_exception() is None

    def test_throw_as_exception_reraises_cause(self):
        """The captured exception is raised unchanged."""
        error = ValueError('boom')
        with pytest.raises(ValueError) as info:
            FailureOrNothing.from_error(error).throw_as_exception()
        assert info.value is error

    def test_throw_as_exception_without_cause(self):
        """A failure without cause raises FailureError with its message."""
        with pytest.raises(FailureError, match='not saved'):
            FailureOrNothing.fail('not saved').throw_as_exception()
