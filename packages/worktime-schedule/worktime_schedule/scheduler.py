"""Scheduler - advances timeouts and intervals and fires their callbacks."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Union

from worktime_schedule.components import Interval, Timeout

logger = logging.getLogger(__name__)

# Float slack so that e.g. ten advances of 0.1s complete a 1s interval.
_EPSILON = 1e-9

Callback = Callable[[], None]
Task = Union[Timeout, Interval]


@dataclass(frozen=True, slots=True)
class TaskHandle:
    task_id: int
    name: str


class Scheduler:
    def __init__(self) -> None:
        self._tasks: dict[int, tuple[Task, Callback]] = {}
        self._next_id: int = 0

    def _add(self, task: Task, callback: Callback) -> TaskHandle:
        tid = self._next_id
        self._next_id += 1
        self._tasks[tid] = (task, callback)
        logger.debug("scheduled %s #%d", task.name, tid)
        return TaskHandle(tid, task.name)

    def call_later(self, name: str, delay: float, callback: Callback) -> TaskHandle:
        """Run `callback` once after `delay` seconds of advanced time."""
        return self._add(Timeout(name=name, delay=delay), callback)

    def call_every(self, name: str, period: float, callback: Callback) -> TaskHandle:
        """Run `callback` every `period` seconds until cancelled."""
        return self._add(Interval(name=name, period=period), callback)

    def cancel(self, handle: TaskHandle | None) -> None:
        if handle is None:
            return
        if self._tasks.pop(handle.task_id, None) is not None:
            logger.debug("cancelled %s #%d", handle.name, handle.task_id)

    def cancel_all(self) -> None:
        self._tasks.clear()

    def is_active(self, handle: TaskHandle | None) -> bool:
        return handle is not None and handle.task_id in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    @contextmanager
    def scoped(self, handle: TaskHandle) -> Iterator[TaskHandle]:
        """Cancel the task when the block exits."""
        try:
            yield handle
        finally:
            self.cancel(handle)

    def advance(self, dt: float) -> int:
        """Advance all tasks by `dt` seconds. Returns the number of callbacks fired.

        Tasks fire in scheduling order. Callbacks may cancel or schedule
        tasks; a task scheduled during this call starts counting on the next.
        """
        if dt < 0:
            raise ValueError("dt must not be negative")
        fired = 0
        for tid in list(self._tasks):
            entry = self._tasks.get(tid)
            if entry is None:
                continue
            task, callback = entry
            if isinstance(task, Timeout):
                task.remaining -= dt
                if task.remaining <= _EPSILON:
                    del self._tasks[tid]
                    callback()
                    fired += 1
            else:
                task.elapsed += dt
                while task.elapsed + _EPSILON >= task.period and tid in self._tasks:
                    task.elapsed = max(task.elapsed - task.period, 0.0)
                    callback()
                    fired += 1
        return fired
