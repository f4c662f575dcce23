# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Bounded-concurrency work queue for coroutine tasks.

Tasks are admitted in submission order and at most ``concurrency`` of
them run at any moment. The limit is fixed when the queue is created.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoundedWorkQueue:
    """
    Semaphore-gated task scheduler.

    Each call to ``add`` schedules a task immediately; the task waits on
    the queue's semaphore before invoking its coroutine factory, so no
    more than ``concurrency`` factories are ever running together.

    A failing task does not cancel its siblings. Its exception surfaces
    to whoever awaits that task (or ``map``), while tasks already
    scheduled keep running to completion.

    Usage::

        queue = BoundedWorkQueue(concurrency=5)
        results = await queue.map(lambda: fetch(r) for r in regions)
    """

    def __init__(self, concurrency: int, name: str = "work-queue"):
        """
        Args:
            concurrency: Maximum number of tasks running at once (>= 1)
            name: Label used in log messages
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")

        self.concurrency = concurrency
        self.name = name
        self._semaphore = asyncio.Semaphore(concurrency)
        self._active = 0
        self._peak = 0

    @property
    def active(self) -> int:
        """Number of tasks currently running."""
        return self._active

    @property
    def peak(self) -> int:
        """Highest number of tasks observed running at once."""
        return self._peak

    async def _run(self, factory: Callable[[], Awaitable[T]]) -> T:
        async with self._semaphore:
            self._active += 1
            self._peak = max(self._peak, self._active)
            try:
                return await factory()
            finally:
                self._active -= 1

    def add(self, factory: Callable[[], Awaitable[T]]) -> "asyncio.Task[T]":
        """
        Schedule a coroutine factory on the queue.

        Must be called from within a running event loop.

        Args:
            factory: Zero-argument callable returning the awaitable to run

        Returns:
            Task resolving to the factory's result
        """
        return asyncio.get_running_loop().create_task(self._run(factory))

    async def map(self, factories: Iterable[Callable[[], Awaitable[T]]]) -> list[T]:
        """
        Schedule every factory and wait for all results, in submission order.

        Raises the first exception any task raises.
        """
        tasks = [self.add(factory) for factory in factories]
        logger.debug(f"{self.name}: scheduled {len(tasks)} tasks (concurrency={self.concurrency})")
        return await asyncio.gather(*tasks)
