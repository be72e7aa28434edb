"""Cooperative delay used by polling and retry loops."""

import asyncio


async def timeout(ms: float) -> None:
    """
    Suspend the current task for ``ms`` milliseconds.

    Negative durations resume on the next loop iteration.
    """
    await asyncio.sleep(max(ms, 0) / 1000)
