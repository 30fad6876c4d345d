"""Deadline enforcement for plan generation."""

import asyncio
import logging
from typing import Awaitable, TypeVar

from ..errors import GenerationTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Strong references to work left running after a lost race
_orphaned_tasks: set[asyncio.Task] = set()


def _forget_orphan(task: asyncio.Task) -> None:
    _orphaned_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("Generation finished after its deadline with an error: %s", exc)
    else:
        logger.info("Generation finished after its deadline; result was not returned")


async def race_with_timeout(
    awaitable: Awaitable[T],
    timeout: float,
    cancel_on_timeout: bool = True,
) -> T:
    """Settle with ``awaitable``'s result or a timeout, whichever comes first.

    Args:
        awaitable: The generation work
        timeout: Deadline in seconds
        cancel_on_timeout: Cancel the work when the deadline wins. When False
            the work keeps running in the background and any write it makes
            still lands after the caller has been answered.

    Raises:
        GenerationTimeoutError: The deadline passed first
    """
    task = asyncio.ensure_future(awaitable)

    if cancel_on_timeout:
        try:
            return await asyncio.wait_for(task, timeout)
        except asyncio.TimeoutError:
            logger.warning("Generation exceeded %.1fs deadline; cancelled", timeout)
            raise GenerationTimeoutError() from None

    try:
        return await asyncio.wait_for(asyncio.shield(task), timeout)
    except asyncio.TimeoutError:
        logger.warning("Generation exceeded %.1fs deadline; left running", timeout)
        _orphaned_tasks.add(task)
        task.add_done_callback(_forget_orphan)
        raise GenerationTimeoutError() from None
