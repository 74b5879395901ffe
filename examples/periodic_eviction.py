"""Example of a pending-request table swept on a caller-driven timer."""

import asyncio
import sys

from loguru import logger

from shortlease import LeaseTable

MAX_AGE = 0.5
SWEEP_INTERVAL = 0.2


async def sweeper(table: LeaseTable[str], lock: asyncio.Lock, stop: asyncio.Event) -> None:
    """Reclaim requests nobody answered."""
    while not stop.is_set():
        async with lock:
            evicted = table.evict_older_than(MAX_AGE)
        if evicted:
            print(f"[sweeper] Dropped {evicted} unanswered requests")
        await asyncio.sleep(SWEEP_INTERVAL)


async def client(table: LeaseTable[str], lock: asyncio.Lock, name: str, answer: bool) -> None:
    """Send a few requests, answering them only if ``answer`` is set."""
    for i in range(3):
        async with lock:
            handle = table.insert(f"{name}-request-{i}")
        print(f"[{name}] Sent request {i} as #{handle}")
        await asyncio.sleep(0.1)

        if answer:
            async with lock:
                payload = table.remove(handle)
            print(f"[{name}] ✓ Answered #{handle}: {payload}")


async def main() -> None:
    """Run clients alongside a sweeper sharing one lock."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
    logger.enable("shortlease")

    print("=== Periodic Eviction Example ===\n")

    table = LeaseTable[str]()
    lock = asyncio.Lock()
    stop = asyncio.Event()

    sweep_task = asyncio.create_task(sweeper(table, lock, stop))
    await asyncio.gather(
        client(table, lock, "Fast", answer=True),
        client(table, lock, "Forgetful", answer=False),
    )

    await asyncio.sleep(MAX_AGE + SWEEP_INTERVAL * 2)
    stop.set()
    await sweep_task

    print(f"\nStill pending: {len(table)}, slots: {table.capacity}")


if __name__ == "__main__":
    asyncio.run(main())
