"""Settle-all concurrent dispatch.

Every item gets its own coroutine; the join waits until each one has either
returned or raised and reports the outcome per item. A failing item never
cancels or affects its siblings.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from markasset.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Fulfilled(Generic[T, R]):
    """An item whose coroutine returned a value."""

    item: T
    value: R


@dataclass(frozen=True)
class Rejected(Generic[T]):
    """An item whose coroutine raised."""

    item: T
    reason: Exception


Outcome = Fulfilled[T, R] | Rejected[T]


async def settle_all(
    items: Iterable[T],
    func: Callable[[T], Awaitable[R]],
    max_workers: int | None = None,
) -> list[Outcome[T, R]]:
    """Run ``func`` over all items concurrently and collect every outcome.

    Args:
        items: Items to process
        func: Async function to apply to each item
        max_workers: Optional limit on concurrently running items

    Returns:
        One Fulfilled or Rejected per item, in input order
    """
    semaphore = asyncio.Semaphore(max_workers) if max_workers else None

    async def settle(item: T) -> Outcome[T, R]:
        try:
            if semaphore is None:
                value = await func(item)
            else:
                async with semaphore:
                    value = await func(item)
        except Exception as e:
            log.debug("Task rejected", item=str(item), error=str(e))
            return Rejected(item=item, reason=e)
        return Fulfilled(item=item, value=value)

    return list(await asyncio.gather(*(settle(item) for item in items)))
