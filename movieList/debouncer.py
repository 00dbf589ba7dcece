from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Optional, Set

from movieList.settings import SEARCH_DEBOUNCE_SECONDS
from movieList.utils import log_debug


class Debouncer:
    """
    Collapse a burst of `schedule` calls into one action.

    Idle → `schedule` arms a single-shot timer (Pending). Another `schedule`
    while Pending re-arms the timer and replaces the action, so only the last
    one survives. When the timer fires the action runs once and we're Idle
    again. `cancel` drops whatever is pending without running it.

    Must be driven from the thread that runs the event loop.
    """

    def __init__(self, delay: float | None = None,
                 loop: Optional[asyncio.AbstractEventLoop] = None):
        self.delay = SEARCH_DEBOUNCE_SECONDS if delay is None else delay
        if self.delay < 0:
            raise ValueError("Debounce delay must be >= 0")
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._action: Optional[Callable[[], Any]] = None
        self._tasks: Set[asyncio.Future] = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, action: Callable[[], Any]) -> None:
        """(Re)start the window with *action* as the one to run."""
        loop = self._loop or asyncio.get_running_loop()
        self.cancel()
        self._action = action
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._action = None

    def _fire(self) -> None:
        action, self._action, self._handle = self._action, None, None
        if action is None:
            return
        result = action()
        if inspect.isawaitable(result):
            # coroutine actions run as a task on the same loop; keep a ref until done
            task = asyncio.ensure_future(result, loop=self._loop)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Future) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log_debug(f"debounced action failed: {exc!r}")
