"""Path-drawing interaction engine.

ConnectEngine is the single owner of session state (the in-progress path and
the committed paths). Input adapters feed it canonical pointer events; the
presentation layer pulls render_state() each frame and calls update() so the
deferred win notification can fire.

Everything here is pure Python and deterministic given the injected Clock.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

from .clock import Clock
from .config import PuzzleConfig
from .geometry import Point, Rect, distance
from .paths import Path
from .targets import Target, TargetRegistry
from .validator import PathValidator, Verdict
from .win import WinEvaluator

logger = logging.getLogger(__name__)


class EnginePhase(StrEnum):
    IDLE = "idle"
    DRAWING = "drawing"


@dataclass(frozen=True, slots=True)
class RenderState:
    """View model for painting (pure data)."""

    committed_paths: tuple[Path, ...]
    in_progress_path: Path | None
    targets: tuple[Target, ...]
    complete: bool


class ConnectEngine:
    def __init__(
        self,
        *,
        clock: Clock,
        canvas: Rect,
        targets: Iterable[Target] = (),
        config: PuzzleConfig | None = None,
        on_win: Callable[[], None] | None = None,
    ) -> None:
        self._config = config or PuzzleConfig()
        self._registry = TargetRegistry(targets)
        self._validator = PathValidator(
            canvas=canvas,
            self_exemption_window=self._config.self_exemption_window,
        )
        self._win = WinEvaluator(
            clock=clock,
            category_count=self._config.category_count,
            delay_s=self._config.win_delay_s,
            on_win=on_win,
        )

        self._current: Path | None = None
        self._committed: list[Path] = []

    @property
    def phase(self) -> EnginePhase:
        return EnginePhase.IDLE if self._current is None else EnginePhase.DRAWING

    @property
    def config(self) -> PuzzleConfig:
        return self._config

    @property
    def canvas(self) -> Rect:
        return self._validator.canvas

    @property
    def targets(self) -> TargetRegistry:
        return self._registry

    @property
    def is_complete(self) -> bool:
        return len(self._committed) == self._win.category_count

    @property
    def win_pending(self) -> bool:
        return self._win.win_pending

    def set_on_win(self, on_win: Callable[[], None] | None) -> None:
        self._win.set_on_win(on_win)

    def committed_paths(self) -> tuple[Path, ...]:
        return tuple(self._committed)

    def in_progress_path(self) -> Path | None:
        return self._current

    # Input transitions

    def on_pointer_down(self, p: Point) -> bool:
        """Start a path if p hits a target. Returns True if drawing started."""

        if self._current is not None:
            # A down without a matching up (lost release); start over.
            logger.debug("pointer down while drawing; discarding stale path")
            self._discard()

        if not self.canvas.contains(p):
            return False
        target = self._registry.target_at(p)
        if target is None:
            return False

        self._evict(target.target_id)
        self._current = Path(
            category=target.category,
            points=(p,),
            start_target_id=target.target_id,
        )
        logger.debug("start %s path at %s", target.category, target.target_id)
        return True

    def on_pointer_move(self, p: Point) -> Verdict | None:
        """Extend the path. Returns None when the move was ignored."""

        path = self._current
        if path is None:
            return None
        if distance(path.last_point, p) < self._config.min_point_spacing:
            return None

        verdict = self._validator.can_extend(
            path,
            p,
            targets=self._registry.all_targets(),
            committed=self._committed,
        )
        if verdict.accepted:
            self._current = path.extended(p)
        else:
            logger.info(
                "%s path from %s cancelled: %s", path.category, path.start_target_id, verdict.value
            )
            self._discard()
        return verdict

    def on_pointer_up(self, p: Point) -> Verdict | None:
        """Resolve the path. Returns None when no path was in progress."""

        path = self._current
        if path is None:
            return None

        hit = self._registry.target_at(p)
        verdict = self._validator.can_terminate(path, hit)
        if not verdict.accepted:
            logger.debug("%s path from %s discarded: %s", path.category, path.start_target_id, verdict.value)
            self._discard()
            return verdict

        assert hit is not None
        self._evict(hit.target_id)
        self._committed.append(path.committed_to(hit.target_id))
        self._current = None
        logger.info(
            "committed %s path %s -> %s (%d points)",
            path.category,
            path.start_target_id,
            hit.target_id,
            len(path.points),
        )
        self._check_invariants()
        self._win.check_completion(self._committed)
        return verdict

    def on_pointer_cancel(self) -> bool:
        if self._current is None:
            return False
        logger.debug("pointer cancelled; discarding path from %s", self._current.start_target_id)
        self._discard()
        return True

    # Session / layout

    def on_layout_changed(self, targets: Iterable[Target], canvas: Rect | None = None) -> None:
        self._registry.replace(targets)
        if canvas is not None:
            self._validator = self._validator.with_canvas(canvas)
        logger.debug("layout changed: %d targets, canvas %s", len(self._registry), self.canvas)

    def reset(self) -> None:
        self._current = None
        self._committed.clear()
        self._win.reset()
        logger.debug("session reset")

    def update(self) -> None:
        self._win.update()

    def render_state(self) -> RenderState:
        return RenderState(
            committed_paths=tuple(self._committed),
            in_progress_path=self._current,
            targets=self._registry.all_targets(),
            complete=self.is_complete,
        )

    def _discard(self) -> None:
        self._current = None

    def _evict(self, target_id: str) -> int:
        kept = [path for path in self._committed if not path.touches(target_id)]
        evicted = len(self._committed) - len(kept)
        if evicted:
            self._committed = kept
            logger.debug("evicted %d path(s) touching %s", evicted, target_id)
        return evicted

    def _check_invariants(self) -> None:
        seen: set[str] = set()
        for path in self._committed:
            assert path.end_target_id is not None
            assert path.start_target_id != path.end_target_id
            start = self._registry.get(path.start_target_id)
            end = self._registry.get(path.end_target_id)
            if start is not None and end is not None:
                assert start.category == end.category == path.category
            assert path.start_target_id not in seen and path.end_target_id not in seen
            seen.add(path.start_target_id)
            seen.add(path.end_target_id)
