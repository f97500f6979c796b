"""CountdownRegistry - at most one live countdown per threshold kind."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterator

from worktime.types import ClockTime, Countdown, CountdownId, ThresholdKind

logger = logging.getLogger(__name__)

# Hook callback signature.
HookCallback = Callable[["CountdownRegistry", Countdown], None]


class CountdownRegistry:
    def __init__(self) -> None:
        self._countdowns: dict[CountdownId, Countdown] = {}
        self._next_id: int = 1
        self._on_start: list[HookCallback] = []
        self._on_remove: list[HookCallback] = []
        self._on_finish: list[HookCallback] = []

    def start(
        self,
        kind: ThresholdKind,
        target_time: ClockTime,
        deadline: datetime,
        now: datetime,
    ) -> Countdown:
        """Create the countdown for `kind`, or return the one already running."""
        existing = self.find(kind)
        if existing is not None:
            return existing

        cid = self._next_id
        self._next_id += 1
        countdown = Countdown(id=cid, kind=kind, target_time=target_time, deadline=deadline)
        self._countdowns[cid] = countdown
        logger.debug("countdown %d (%s) started, target %s", cid, kind.value, target_time)
        for cb in list(self._on_start):
            cb(self, countdown)
        self._refresh(countdown, now)
        return countdown

    def tick(self, now: datetime) -> None:
        for countdown in list(self._countdowns.values()):
            self._refresh(countdown, now)

    def _refresh(self, countdown: Countdown, now: datetime) -> None:
        if countdown.finished:
            return
        diff = (countdown.deadline - now).total_seconds()
        if diff <= 0:
            countdown.remaining = 0
            countdown.finished = True
            logger.debug("countdown %d (%s) finished", countdown.id, countdown.kind.value)
            for cb in list(self._on_finish):
                cb(self, countdown)
        else:
            countdown.remaining = int(diff)

    def delete(self, countdown_id: CountdownId) -> None:
        countdown = self._countdowns.pop(countdown_id, None)
        if countdown is None:
            return
        logger.debug("countdown %d (%s) deleted", countdown_id, countdown.kind.value)
        for cb in list(self._on_remove):
            cb(self, countdown)

    def clear(self) -> None:
        for cid in list(self._countdowns):
            self.delete(cid)

    def get(self, countdown_id: CountdownId) -> Countdown:
        try:
            return self._countdowns[countdown_id]
        except KeyError:
            raise KeyError(f"No countdown with id {countdown_id}") from None

    def find(self, kind: ThresholdKind) -> Countdown | None:
        for countdown in self._countdowns.values():
            if countdown.kind is kind:
                return countdown
        return None

    def has_kind(self, kind: ThresholdKind) -> bool:
        return self.find(kind) is not None

    def ids(self) -> tuple[CountdownId, ...]:
        return tuple(self._countdowns)

    def __len__(self) -> int:
        return len(self._countdowns)

    def __iter__(self) -> Iterator[Countdown]:
        return iter(list(self._countdowns.values()))

    # -- Change hooks --

    def on_start(self, callback: HookCallback) -> None:
        self._on_start.append(callback)

    def on_remove(self, callback: HookCallback) -> None:
        self._on_remove.append(callback)

    def on_finish(self, callback: HookCallback) -> None:
        self._on_finish.append(callback)

    def off_start(self, callback: HookCallback) -> None:
        _discard(self._on_start, callback)

    def off_remove(self, callback: HookCallback) -> None:
        _discard(self._on_remove, callback)

    def off_finish(self, callback: HookCallback) -> None:
        _discard(self._on_finish, callback)


def _discard(callbacks: list[HookCallback], callback: HookCallback) -> None:
    try:
        callbacks.remove(callback)
    except ValueError:
        pass
