"""
Module: producer/retry.py
Description: Whole-list retry policy for send calls.

A send attempt that ends with per-entry rejections raises
EntriesRejected; the tenacity policy built here retries only that
exception, with a fixed wait between attempts. Transport and
validation errors fall through untouched.
"""

import asyncio
from typing import Awaitable, Callable, Optional, Sequence

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

Sleep = Callable[[float], Awaitable[None]]


class EntriesRejected(Exception):
    """One full pass over the message list ended with rejected entries."""

    def __init__(self, failed_ids: Sequence[str]):
        self.failed_ids = list(failed_ids)
        super().__init__(f"{len(self.failed_ids)} entries rejected")


def whole_list_retrying(
    retries: int,
    retry_interval: float,
    sleep: Sleep = asyncio.sleep,
    before_sleep: Optional[Callable[[RetryCallState], None]] = None
) -> AsyncRetrying:
    """
    Build the retry controller for one send call.

    Args:
        retries: Extra attempts after the first one
        retry_interval: Seconds to wait before each extra attempt
        sleep: Awaitable sleep, injectable for tests
        before_sleep: Hook called before each wait

    Returns:
        AsyncRetrying that re-raises the last EntriesRejected when exhausted
    """
    if retries < 0:
        raise ValueError("retries must be non-negative")

    return AsyncRetrying(
        stop=stop_after_attempt(retries + 1),
        wait=wait_fixed(retry_interval),
        retry=retry_if_exception_type(EntriesRejected),
        sleep=sleep,
        before_sleep=before_sleep,
        reraise=True
    )
