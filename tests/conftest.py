"""Shared fixtures for shortlease tests."""

import pytest


class FakeClock:
    """Manually advanced time source for deterministic eviction tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
