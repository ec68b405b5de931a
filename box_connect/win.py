from __future__ import annotations

import logging
from collections.abc import Callable, Sized
from enum import StrEnum

from .clock import Clock, OneShotTimer

logger = logging.getLogger(__name__)


class Completion(StrEnum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


class WinEvaluator:
    """Signals completion once every category has a committed path.

    The notification is deferred by delay_s so the final stroke can be painted
    first. completed_once latches on the first complete board and stays set
    until reset() even if a later redraw evicts a path, so a session notifies
    at most once.
    """

    def __init__(
        self,
        *,
        clock: Clock,
        category_count: int,
        delay_s: float = 0.3,
        on_win: Callable[[], None] | None = None,
    ) -> None:
        if category_count < 1:
            raise ValueError("category_count must be >= 1")
        if delay_s < 0:
            raise ValueError("delay_s must be >= 0")
        self._category_count = int(category_count)
        self._delay_s = float(delay_s)
        self._on_win = on_win
        self._timer = OneShotTimer(clock)
        self._completed_once = False
        self._notified = False

    @property
    def category_count(self) -> int:
        return self._category_count

    @property
    def completed_once(self) -> bool:
        return self._completed_once

    @property
    def win_pending(self) -> bool:
        return self._timer.pending

    @property
    def notified(self) -> bool:
        return self._notified

    def set_on_win(self, on_win: Callable[[], None] | None) -> None:
        self._on_win = on_win

    def check_completion(self, committed: Sized) -> Completion:
        if len(committed) != self._category_count:
            return Completion.INCOMPLETE
        if not self._completed_once:
            self._completed_once = True
            token = self._timer.schedule(self._delay_s, self._fire)
            logger.info("all %d categories connected; win due in %.2fs (token %d)",
                        self._category_count, self._delay_s, token)
        return Completion.COMPLETE

    def update(self) -> bool:
        return self._timer.poll()

    def reset(self) -> None:
        if self._timer.pending:
            logger.debug("dropping pending win notification")
        self._timer.cancel()
        self._completed_once = False
        self._notified = False

    def _fire(self) -> None:
        self._notified = True
        logger.info("win notification delivered")
        if self._on_win is not None:
            self._on_win()
