from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum

from .geometry import Point, Rect, segment_intersects_rect, segments_intersect
from .paths import Path
from .targets import Target


class Verdict(StrEnum):
    ACCEPTED = "accepted"
    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED_BY_TARGET = "blocked_by_target"
    CROSSES_PATH = "crosses_path"
    SELF_CROSSING = "self_crossing"
    NO_TARGET = "no_target"
    WRONG_CATEGORY = "wrong_category"
    SAME_TARGET = "same_target"

    @property
    def accepted(self) -> bool:
        return self is Verdict.ACCEPTED


@dataclass(frozen=True, slots=True)
class PathValidator:
    """Policy checks for extending and terminating the in-progress path.

    Extension checks run cheapest first; the self-crossing scan is last since
    it grows with the path.
    """

    canvas: Rect
    self_exemption_window: int = 10

    def __post_init__(self) -> None:
        if self.self_exemption_window < 1:
            raise ValueError("self_exemption_window must be >= 1")

    def with_canvas(self, canvas: Rect) -> "PathValidator":
        return replace(self, canvas=canvas)

    def can_extend(
        self,
        path: Path,
        candidate: Point,
        *,
        targets: Iterable[Target],
        committed: Iterable[Path],
    ) -> Verdict:
        if not self.canvas.contains(candidate):
            return Verdict.OUT_OF_BOUNDS

        last = path.last_point

        for target in targets:
            # Boxes of the path's own family (start box included) may be grazed.
            if target.target_id == path.start_target_id:
                continue
            if target.category == path.category:
                continue
            if segment_intersects_rect(last, candidate, target.bounds):
                return Verdict.BLOCKED_BY_TARGET

        for other in committed:
            for p0, p1 in other.segments():
                if segments_intersect(last, candidate, p0, p1):
                    return Verdict.CROSSES_PATH

        window = self.self_exemption_window
        if len(path.points) > window:
            for p0, p1 in path.segments(stop=len(path.points) - window):
                if segments_intersect(last, candidate, p0, p1):
                    return Verdict.SELF_CROSSING

        return Verdict.ACCEPTED

    def can_terminate(self, path: Path, hit: Target | None) -> Verdict:
        if hit is None:
            return Verdict.NO_TARGET
        if hit.category != path.category:
            return Verdict.WRONG_CATEGORY
        if hit.target_id == path.start_target_id:
            return Verdict.SAME_TARGET
        return Verdict.ACCEPTED
