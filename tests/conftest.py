"""
Shared test fixtures for the hello server tests.

Provides a Flask app wired with a fake clock and a predictable request id
generator, so log lines and durations can be asserted exactly.
"""

import itertools
import logging
import time

import pytest

from hello_server import create_app
from hello_server.services import ProcessUptime


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class SequentialIds:
    def __init__(self, prefix="req"):
        self._counter = itertools.count(1)
        self.prefix = prefix

    def __call__(self):
        return f"{self.prefix}-{next(self._counter)}"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell settings out of the tests."""
    for name in ("PORT", "HOST", "APP_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def uptime_clock():
    return FakeClock(start=1000.0)


@pytest.fixture
def app(clock, uptime_clock):
    app = create_app(
        config={"TESTING": True, "APP_ENV": "test"},
        uptime=ProcessUptime(clock=uptime_clock),
        id_generator=SequentialIds(),
        clock=clock,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def utc_tz(monkeypatch):
    """Run the test with the process timezone set to UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
