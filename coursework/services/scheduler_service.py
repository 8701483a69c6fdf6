"""
Task schedulers for the simulated delays between lifecycle transitions.

``AsyncioTaskScheduler`` runs callbacks on the running event loop in real
time. ``VirtualClockScheduler`` keeps its own clock that only moves when
``advance`` is called, which makes delayed transitions deterministic.
"""

import asyncio
import heapq
import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set

from ..core.interfaces import TaskScheduler
from ..core.exceptions import SchedulingError


logger = logging.getLogger(__name__)


def _check_delay(delay: float) -> None:
    if delay < 0:
        raise SchedulingError(f"Delay must be non-negative, got {delay}",
                              error_code="negative_delay", details={'delay': delay})


@dataclass(order=True)
class ScheduledTask:
    """A callback waiting for its due time on the virtual clock."""
    due_at: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)


class AsyncioTaskScheduler(TaskScheduler):
    """Schedules callbacks on the running asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._pending: Set[asyncio.Future] = set()
        self._completed = 0
        self._failed = 0
        self._lock = threading.RLock()

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulingError("No running event loop to schedule on",
                                  error_code="no_event_loop") from e

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        _check_delay(delay)
        loop = self._get_loop()
        done = loop.create_future()

        def run() -> None:
            with self._lock:
                self._pending.discard(done)
            try:
                callback()
            except Exception as e:
                logger.exception("Scheduled callback failed")
                with self._lock:
                    self._failed += 1
                done.set_exception(e)
                # already logged; drain() still re-raises it
                done.exception()
                return
            with self._lock:
                self._completed += 1
            done.set_result(None)

        with self._lock:
            self._pending.add(done)
        loop.call_later(delay, run)

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    async def drain(self) -> None:
        """Wait until every scheduled callback, including ones they schedule, has run."""
        while True:
            with self._lock:
                waiting = list(self._pending)
            if not waiting:
                return
            await asyncio.gather(*waiting)

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'pending': len(self._pending),
                'completed': self._completed,
                'failed': self._failed,
            }


class VirtualClockScheduler(TaskScheduler):
    """Scheduler driven by a manually advanced clock.

    Callbacks due at the same time run in the order they were scheduled.
    Callbacks scheduled while advancing run in the same ``advance`` call
    when they fall due before its target time.
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: List[ScheduledTask] = []
        self._sequence = itertools.count()
        self._completed = 0
        self._lock = threading.RLock()

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        _check_delay(delay)
        with self._lock:
            heapq.heappush(self._queue, ScheduledTask(self._now + delay, next(self._sequence), callback))

    def pending_count(self) -> int:
        with self._lock:
            return len(self._queue)

    def advance(self, seconds: float) -> int:
        """Move the clock forward, running callbacks as they fall due.

        Returns the number of callbacks run.
        """
        _check_delay(seconds)
        target = self._now + seconds
        ran = 0
        while True:
            with self._lock:
                if not self._queue or self._queue[0].due_at > target:
                    break
                task = heapq.heappop(self._queue)
                self._now = task.due_at
            self._run(task)
            ran += 1
        with self._lock:
            self._now = target
        return ran

    def run_all(self) -> int:
        """Run every pending callback, advancing the clock as needed."""
        ran = 0
        while True:
            with self._lock:
                if not self._queue:
                    break
                task = heapq.heappop(self._queue)
                self._now = max(self._now, task.due_at)
            self._run(task)
            ran += 1
        return ran

    def _run(self, task: ScheduledTask) -> None:
        try:
            task.callback()
        except Exception:
            logger.exception("Scheduled callback failed at t=%.3f", task.due_at)
            raise
        with self._lock:
            self._completed += 1

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'now': self._now,
                'pending': len(self._queue),
                'completed': self._completed,
            }
