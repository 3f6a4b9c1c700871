"""Pytest configuration and shared fixtures for klaw-match tests."""

import logging

import pytest
import structlog
from hypothesis import HealthCheck, settings

settings.register_profile('klaw-match', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('klaw-match')


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_match import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_match import Nothing

    return Nothing


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from klaw_match import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from klaw_match import Err

    return Err(ValueError('test error'))


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch):
    """Start each test uninitialized, with no env overrides and default logging."""
    from klaw_match import _config

    monkeypatch.delenv('KLAW_MATCH_LOG_LEVEL', raising=False)
    monkeypatch.delenv('KLAW_MATCH_TRACE', raising=False)
    _config._reset()
    yield
    _config._reset()
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


@pytest.fixture
def traced():
    """Enable match tracing without touching logging output."""
    from klaw_match import init

    return init(trace=True)
