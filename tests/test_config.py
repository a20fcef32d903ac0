"""Tests for library configuration and initialization."""

from __future__ import annotations

import dataclasses

import pytest
from failure_or import Config, get_config, init
from failure_or._config import _detect_log_captures, _detect_log_level, _resolve_level, reset


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove failure-or environment variables for the test."""
    monkeypatch.delenv('FAILURE_OR_LOG_LEVEL', raising=False)
    monkeypatch.delenv('FAILURE_OR_LOG_CAPTURES', raising=False)
    return monkeypatch


class TestConfig:
    """Tests for the Config dataclass."""

    def test_default_values(self) -> None:
        config = Config()
        assert config.log_level is None
        assert config.log_captures is True
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestResolveLevel:
    """Tests for log level normalization."""

    @pytest.mark.parametrize(('level', 'expected'), [('debug', 'DEBUG'), (' Info ', 'INFO'), ('ERROR', 'ERROR')])
    def test_known_levels(self, level: str, expected: str) -> None:
        assert _resolve_level(level) == expected

    @pytest.mark.parametrize('level', [None, '', '   '])
    def test_unset(self, level: str | None) -> None:
        assert _resolve_level(level) is None

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert _resolve_level('verbose') == 'INFO'


class TestEnvironmentDetection:
    """Tests for reading settings from the environment."""

    def test_log_level_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('FAILURE_OR_LOG_LEVEL', 'warning')
        assert _detect_log_level() == 'WARNING'

    def test_log_level_unset(self, clean_env: pytest.MonkeyPatch) -> None:
        assert _detect_log_level() is None

    @pytest.mark.parametrize(('value', 'expected'), [('0', False), ('false', False), ('OFF', False), ('1', True)])
    def test_log_captures_from_env(self, clean_env: pytest.MonkeyPatch, value: str, expected: bool) -> None:
        clean_env.setenv('FAILURE_OR_LOG_CAPTURES', value)
        assert _detect_log_captures() is expected

    def test_log_captures_default_on(self, clean_env: pytest.MonkeyPatch) -> None:
        assert _detect_log_captures() is True


class TestInit:
    """Tests for init(), get_config() and reset()."""

    def test_get_config_defaults_without_init(self) -> None:
        assert get_config() == Config()

    def test_init_sets_config(self, clean_env: pytest.MonkeyPatch) -> None:
        config = init(log_level='debug', log_captures=False, json_logs=False)
        assert config == Config(log_level='DEBUG', log_captures=False, json_logs=False)
        assert get_config() is config

    def test_init_reads_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('FAILURE_OR_LOG_LEVEL', 'INFO')
        clean_env.setenv('FAILURE_OR_LOG_CAPTURES', 'no')
        config = init()
        assert config.log_level == 'INFO'
        assert config.log_captures is False

    def test_explicit_args_override_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('FAILURE_OR_LOG_LEVEL', 'INFO')
        clean_env.setenv('FAILURE_OR_LOG_CAPTURES', '0')
        config = init(log_level='ERROR', log_captures=True)
        assert config.log_level == 'ERROR'
        assert config.log_captures is True

    def test_reset(self, clean_env: pytest.MonkeyPatch) -> None:
        init(log_level='DEBUG')
        reset()
        assert get_config() == Config()
