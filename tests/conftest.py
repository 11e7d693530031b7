"""
Helpers for building fake cookie hosts in tests.
"""

import pytest

# 2021-01-01T00:00:00Z
FIXED_NOW: float = 1_609_459_200.0


class HostCapture:
    """Fake host: serves a fixed cookie string and captures written directives."""

    def __init__(self, cookie_string: str = "") -> None:
        self.cookie_string = cookie_string
        self.reads: int = 0
        self.written: list[str] = []

    def read(self) -> str:
        self.reads += 1
        return self.cookie_string

    def write(self, directive: str) -> None:
        self.written.append(directive)


@pytest.fixture
def host() -> HostCapture:
    return HostCapture()


@pytest.fixture
def frozen_time(monkeypatch: pytest.MonkeyPatch) -> float:
    """Pin ``time.time`` to FIXED_NOW."""
    monkeypatch.setattr("time.time", lambda: FIXED_NOW)
    return FIXED_NOW
