#!/usr/bin/env python3
"""
Cancellable one-shot timers for gesture handling.

Callbacks may return an awaitable; schedulers run it to completion so a timer
can fire an async store operation. AsyncioScheduler is used at runtime,
ManualScheduler drives time by hand in tests and replays.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, List, Optional, Protocol, Union

TimerCallback = Callable[[], Union[None, Awaitable[Any]]]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: TimerCallback) -> TimerHandle: ...


class AsyncioScheduler:
    """Timers on the running asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._tasks = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def _fire(self, callback: TimerCallback):
        result = callback()
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result, loop=self.loop)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logging.error(f"Timer callback failed: {task.exception()!r}")

    def call_later(self, delay: float, callback: TimerCallback) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, self._fire, callback)


class ManualTimer:
    def __init__(self, due: float, seq: int, callback: TimerCallback):
        self.due = due
        self.seq = seq
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Fake clock: timers fire only when advance() moves time past them."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self._timers: List[ManualTimer] = []
        self._seq = 0

    def call_later(self, delay: float, callback: TimerCallback) -> ManualTimer:
        self._seq += 1
        timer = ManualTimer(self.now + delay, self._seq, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for timer in self._timers if not timer.cancelled)

    async def advance(self, seconds: float):
        """Move the clock forward, firing due timers in order and awaiting them."""
        deadline = self.now + seconds
        while True:
            due = [t for t in self._timers if not t.cancelled and t.due <= deadline]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due, t.seq))
            self._timers.remove(timer)
            self.now = timer.due
            result = timer.callback()
            if inspect.isawaitable(result):
                await result
        self._timers = [t for t in self._timers if not t.cancelled]
        self.now = deadline
