"""Retry-with-backoff for rate-limited AI calls."""

import asyncio
import logging
import re
from typing import Awaitable, Callable, TypeVar

from ..errors import is_rate_limit_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Providers embed a suggested wait like "Please retry in 13.5s."
_RETRY_IN_PATTERN = re.compile(r"retry in (\d+(?:\.\d+)?)", re.IGNORECASE)


def suggested_retry_delay(exc: BaseException) -> float | None:
    """Return the server-suggested retry delay in seconds, if the error carries one."""
    match = _RETRY_IN_PATTERN.search(str(exc))
    if match is None:
        return None
    return float(match.group(1))


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay: float = 1.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run ``operation``, retrying rate-limit failures with exponential backoff.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt
        max_retries: Total number of attempts
        base_delay: Delay in seconds before the second attempt; doubles afterwards
        sleep: Awaitable used for the backoff wait

    Returns:
        The operation's result

    Any error that is not a rate-limit error is raised immediately, unchanged.
    A rate-limit error on the final attempt is raised as-is.
    """
    for attempt in range(max_retries):
        try:
            return await operation()
        except Exception as e:
            if attempt == max_retries - 1 or not is_rate_limit_error(e):
                raise

            delay = suggested_retry_delay(e) or base_delay * 2**attempt
            logger.warning(
                "Rate limit hit, retrying in %.2fs (attempt %d/%d)",
                delay,
                attempt + 1,
                max_retries,
            )
            await sleep(delay)

    raise RuntimeError("Max retries exceeded")
