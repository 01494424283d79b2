"""Pytest configuration and shared fixtures for resultant tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test from an unconfigured process state."""
    import resultant.config
    from resultant._logging import clear_log_hooks

    monkeypatch.delenv("RESULTANT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RESULTANT_JSON_LOGS", raising=False)
    monkeypatch.setattr(resultant.config, "_config", None)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    clear_log_hooks()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from resultant import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from resultant import Err

    return Err("test error")


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from resultant import Some

    return Some("hello")


@pytest.fixture
def sample_nothing():
    """Sample empty Option for testing."""
    from resultant import Option

    return Option()


@pytest.fixture
def log_events():
    """Collect structlog event dicts emitted while the test runs."""
    from resultant._logging import add_log_hook, configure_logging

    events: list[dict] = []
    configure_logging("DEBUG")
    add_log_hook(events.append)
    return events
