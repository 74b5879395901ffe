"""Tests for the library's debug logging."""

from collections.abc import Iterator

import pytest
from conftest import FakeClock
from loguru import logger

from shortlease import LeaseTable


@pytest.fixture
def messages() -> Iterator[list[str]]:
    captured: list[str] = []
    logger.enable("shortlease")
    sink_id = logger.add(captured.append, level="DEBUG", format="{message}")
    yield captured
    logger.remove(sink_id)
    logger.disable("shortlease")


def test_silent_by_default() -> None:
    """Test that nothing is emitted unless the application enables the library."""
    captured: list[str] = []
    sink_id = logger.add(captured.append, level="DEBUG", format="{message}")
    try:
        table = LeaseTable[int]()
        table.insert(1)
    finally:
        logger.remove(sink_id)

    assert captured == []


def test_growth_is_logged(messages: list[str]) -> None:
    """Test that appending a slot is logged."""
    table = LeaseTable[int]()
    table.insert(1)

    assert any("grew to 1 slots" in m for m in messages)


def test_reuse_is_not_logged(messages: list[str]) -> None:
    """Test that filling a pre-sized slot emits nothing."""
    table = LeaseTable[int](2)
    table.insert(1)

    assert messages == []


def test_eviction_is_logged(messages: list[str], clock: FakeClock) -> None:
    """Test that an eviction pass that vacates slots is logged."""
    table = LeaseTable[int](4, clock=clock)
    table.insert(1)
    table.insert(2)
    clock.advance(10.0)
    table.insert(3)

    table.evict_older_than(5.0)

    assert any("Evicted 2 leases" in m and "1 still held" in m for m in messages)


def test_empty_eviction_is_not_logged(messages: list[str], clock: FakeClock) -> None:
    """Test that an eviction pass vacating nothing emits nothing."""
    table = LeaseTable[int](4, clock=clock)
    table.insert(1)

    table.evict_older_than(5.0)

    assert messages == []
