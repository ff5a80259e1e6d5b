"""Shared fixtures for datedisplay tests."""

import time

import pytest


@pytest.fixture
def new_york_time(monkeypatch):
    """Run a test with the process time zone set to America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("time zone can't be changed on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
