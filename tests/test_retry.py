"""Tests for the async retry helper."""

from __future__ import annotations

import pytest

from amanda.services.exceptions import ProviderError, TransportError
from amanda.utils.retry import retry_async


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch):
    delays: list[float] = []

    async def _fake_sleep(delay):
        delays.append(delay)

    monkeypatch.setattr("amanda.utils.retry.asyncio.sleep", _fake_sleep)
    return delays


@pytest.mark.asyncio
async def test_retries_listed_errors_with_linear_backoff(_no_sleep):
    calls = 0

    async def operation():
        nonlocal calls
        calls += 1
        if calls < 3:
            raise TransportError("flaky")
        return "ok"

    result = await retry_async(operation, max_attempts=3, base_delay=0.5, retry_on=(TransportError,))

    assert result == "ok"
    assert _no_sleep == [0.5, 1.0]


@pytest.mark.asyncio
async def test_other_errors_propagate_immediately():
    calls = 0

    async def operation():
        nonlocal calls
        calls += 1
        raise ProviderError("bad payload")

    with pytest.raises(ProviderError):
        await retry_async(operation, max_attempts=3, retry_on=(TransportError,))
    assert calls == 1


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts():
    async def operation():
        raise TransportError("down")

    with pytest.raises(TransportError):
        await retry_async(operation, max_attempts=2, retry_on=(TransportError,))
