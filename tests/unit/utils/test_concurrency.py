"""Tests for the settle-all join."""

import asyncio

import pytest

from markasset.utils.concurrency import Fulfilled, Rejected, settle_all


class TestOutcomes:
    """Tests for outcome dataclasses."""

    def test_fulfilled(self):
        """Fulfilled carries item and value."""
        outcome = Fulfilled(item="a", value=1)
        assert outcome.item == "a"
        assert outcome.value == 1

    def test_rejected(self):
        """Rejected carries item and exception."""
        error = ValueError("boom")
        outcome = Rejected(item="a", reason=error)
        assert outcome.reason is error


class TestSettleAll:
    """Tests for settle_all function."""

    @pytest.mark.asyncio
    async def test_empty(self):
        """No items, no outcomes."""

        async def func(item):
            return item

        assert await settle_all([], func) == []

    @pytest.mark.asyncio
    async def test_preserves_order(self):
        """Outcomes follow input order, not completion order."""

        async def func(item):
            await asyncio.sleep(0.01 * (3 - item))
            return item * 10

        outcomes = await settle_all([1, 2, 3], func)

        assert outcomes == [Fulfilled(1, 10), Fulfilled(2, 20), Fulfilled(3, 30)]

    @pytest.mark.asyncio
    async def test_failures_are_isolated(self):
        """A failing item is reported while siblings complete."""
        completed = []

        async def func(item):
            if item == "bad":
                raise RuntimeError("nope")
            await asyncio.sleep(0.01)
            completed.append(item)
            return item

        outcomes = await settle_all(["a", "bad", "c"], func)

        assert isinstance(outcomes[1], Rejected)
        assert str(outcomes[1].reason) == "nope"
        assert outcomes[0] == Fulfilled("a", "a")
        assert outcomes[2] == Fulfilled("c", "c")
        assert sorted(completed) == ["a", "c"]

    @pytest.mark.asyncio
    async def test_runs_concurrently(self):
        """All items are in flight at the same time by default."""
        running = 0
        peak = 0

        async def func(item):
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return item

        await settle_all(range(6), func)

        assert peak == 6

    @pytest.mark.asyncio
    async def test_max_workers(self):
        """max_workers bounds concurrency."""
        running = 0
        peak = 0

        async def func(item):
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return item

        outcomes = await settle_all(range(6), func, max_workers=2)

        assert peak == 2
        assert all(isinstance(outcome, Fulfilled) for outcome in outcomes)
