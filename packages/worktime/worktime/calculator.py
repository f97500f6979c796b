"""Calculator - owns the start time, projection, countdowns and timers."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from typing import Any

from worktime_schedule import Scheduler, TaskHandle

from worktime.clock import Clock, SystemClock
from worktime.config import WorktimeConfig
from worktime.projector import Projection, project, resolve_deadline
from worktime.registry import CountdownRegistry
from worktime.types import ClockTime, Countdown, CountdownId, ThresholdKind

logger = logging.getLogger(__name__)

TRANSITION = "transition"
REFRESH = "refresh"


class Calculator:
    """State container for one calculator session.

    All time-driven behaviour goes through `advance(dt)`: the fade-in
    timeout after a start-time change and the periodic countdown refresh,
    which only runs while at least one countdown exists.
    """

    def __init__(
        self,
        config: WorktimeConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config or WorktimeConfig()
        self._clock: Clock = clock or SystemClock()
        self._scheduler = Scheduler()
        self._registry = CountdownRegistry()
        self._start: ClockTime | None = None
        self._projection: Projection | None = None
        self._transition: TaskHandle | None = None
        self._refresh: TaskHandle | None = None
        self._refresh_scope: ExitStack | None = None
        self.animating: bool = False

        self._registry.on_start(self._on_countdown_start)
        self._registry.on_remove(self._on_countdown_remove)

    @property
    def config(self) -> WorktimeConfig:
        return self._config

    @property
    def registry(self) -> CountdownRegistry:
        return self._registry

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    @property
    def start(self) -> ClockTime | None:
        return self._start

    @property
    def projection(self) -> Projection | None:
        return self._projection

    @property
    def min_end(self) -> ClockTime | None:
        return self._projection.min_end if self._projection else None

    @property
    def max_end(self) -> ClockTime | None:
        return self._projection.max_end if self._projection else None

    @property
    def countdowns(self) -> list[Countdown]:
        return list(self._registry)

    @property
    def refreshing(self) -> bool:
        return self._scheduler.is_active(self._refresh)

    def set_start(self, start: ClockTime | None) -> None:
        self._scheduler.cancel(self._transition)
        self._transition = None
        self._start = start

        if start is None:
            self.animating = False
            self._projection = None
            self._registry.clear()
            logger.debug("start time cleared")
            return

        self.animating = True
        self._transition = self._scheduler.call_later(
            TRANSITION, self._config.transition_seconds, self._end_transition
        )
        self._projection = project(start, self._config)

    def _end_transition(self) -> None:
        self.animating = False
        self._transition = None

    def is_running(self, kind: ThresholdKind) -> bool:
        return self._registry.has_kind(kind)

    def start_countdown(self, kind: ThresholdKind) -> Countdown | None:
        """Start the countdown for `kind`. Returns None without a start time."""
        if self._start is None or self._projection is None:
            return None
        now = self._clock.now()
        deadline = resolve_deadline(self._start, kind, now, self._config)
        return self._registry.start(kind, self._projection.for_kind(kind), deadline, now)

    def delete_countdown(self, countdown_id: CountdownId) -> None:
        self._registry.delete(countdown_id)

    def advance(self, dt: float) -> None:
        self._scheduler.advance(dt)

    def tick(self) -> None:
        self._registry.tick(self._clock.now())

    def _on_countdown_start(self, registry: CountdownRegistry, countdown: Countdown) -> None:
        if self._refresh_scope is not None:
            return
        scope = ExitStack()
        handle = self._scheduler.call_every(REFRESH, self._config.refresh_seconds, self.tick)
        self._refresh = scope.enter_context(self._scheduler.scoped(handle))
        self._refresh_scope = scope

    def _on_countdown_remove(self, registry: CountdownRegistry, countdown: Countdown) -> None:
        if len(registry) == 0:
            self._release_refresh()

    def _release_refresh(self) -> None:
        if self._refresh_scope is not None:
            self._refresh_scope.close()
        self._refresh_scope = None
        self._refresh = None

    def close(self) -> None:
        self._release_refresh()
        self._scheduler.cancel_all()
        self._transition = None
        self.animating = False

    def __enter__(self) -> Calculator:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
