"""Tests for retry-with-backoff."""

import asyncio

import pytest

from fitplan.agents.retry import retry_with_backoff, suggested_retry_delay
from fitplan.errors import UpstreamTransientError


class Flaky:
    """Operation that fails a fixed number of times before succeeding."""

    def __init__(self, failures: list[Exception], result="ok"):
        self.failures = list(failures)
        self.result = result
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.failures:
            raise self.failures.pop(0)
        return self.result


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float):
        self.delays.append(delay)


def test_succeeds_after_rate_limits():
    op = Flaky([Exception("429 Too Many Requests"), Exception("quota exceeded")])
    sleep = RecordingSleep()

    result = asyncio.run(retry_with_backoff(op, max_retries=3, base_delay=1.0, sleep=sleep))

    assert result == "ok"
    assert op.calls == 3
    assert sleep.delays == [1.0, 2.0]


def test_non_rate_limit_error_not_retried():
    error = ValueError("bad request")
    op = Flaky([error])
    sleep = RecordingSleep()

    with pytest.raises(ValueError) as exc_info:
        asyncio.run(retry_with_backoff(op, sleep=sleep))

    assert exc_info.value is error
    assert op.calls == 1
    assert sleep.delays == []


def test_last_error_surfaces_after_exhaustion():
    errors = [UpstreamTransientError(f"429 attempt {i}") for i in range(3)]
    op = Flaky(errors)
    sleep = RecordingSleep()

    with pytest.raises(UpstreamTransientError, match="attempt 2"):
        asyncio.run(retry_with_backoff(op, max_retries=3, sleep=sleep))

    assert op.calls == 3
    assert len(sleep.delays) == 2


def test_suggested_delay_used():
    op = Flaky([Exception("429 RESOURCE_EXHAUSTED. Please retry in 7.5s.")])
    sleep = RecordingSleep()

    asyncio.run(retry_with_backoff(op, base_delay=1.0, sleep=sleep))

    assert sleep.delays == [7.5]


def test_zero_attempts_fails():
    op = Flaky([])

    with pytest.raises(RuntimeError, match="Max retries exceeded"):
        asyncio.run(retry_with_backoff(op, max_retries=0))

    assert op.calls == 0


def test_suggested_retry_delay_parsing():
    assert suggested_retry_delay(Exception("retry in 13s")) == 13.0
    assert suggested_retry_delay(Exception("Please retry in 0.25s")) == 0.25
    assert suggested_retry_delay(Exception("429 Too Many Requests")) is None
