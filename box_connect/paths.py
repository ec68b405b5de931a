from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from .geometry import Point
from .targets import Category


@dataclass(frozen=True, slots=True)
class Path:
    """A freehand stroke between two targets.

    end_target_id is None while the path is still being drawn.
    """

    category: Category
    points: tuple[Point, ...]
    start_target_id: str
    end_target_id: str | None = None

    @property
    def is_committed(self) -> bool:
        return self.end_target_id is not None

    @property
    def last_point(self) -> Point:
        return self.points[-1]

    def extended(self, p: Point) -> "Path":
        assert not self.is_committed, "committed paths are immutable"
        return replace(self, points=self.points + (p,))

    def committed_to(self, target_id: str) -> "Path":
        assert target_id != self.start_target_id
        return replace(self, end_target_id=target_id)

    def touches(self, target_id: str) -> bool:
        return target_id in (self.start_target_id, self.end_target_id)

    def segments(self, *, stop: int | None = None) -> Iterator[tuple[Point, Point]]:
        """Yield consecutive point pairs; stop limits the starting index (exclusive)."""

        last = len(self.points) - 1
        end = last if stop is None else min(stop, last)
        for i in range(end):
            yield self.points[i], self.points[i + 1]
