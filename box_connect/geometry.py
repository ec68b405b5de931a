from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in canvas space (y grows downward)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, p: Point) -> bool:
        # Inclusive on all four edges.
        return self.left <= p.x <= self.right and self.top <= p.y <= self.bottom

    def contains_strictly(self, p: Point) -> bool:
        return self.left < p.x < self.right and self.top < p.y < self.bottom

    def edges(self) -> tuple[tuple[Point, Point], ...]:
        """Return the four edges as (start, end) pairs: top, right, bottom, left."""

        tl = Point(self.left, self.top)
        tr = Point(self.right, self.top)
        br = Point(self.right, self.bottom)
        bl = Point(self.left, self.bottom)
        return ((tl, tr), (tr, br), (br, bl), (bl, tl))


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def segments_intersect(a0: Point, a1: Point, b0: Point, b1: Point) -> bool:
    """Return True if segment a0->a1 meets segment b0->b1.

    Solves for lambda (along a) and gamma (along b) with the cross-product
    determinant. Parallel and collinear segments (determinant 0) are treated
    as non-intersecting, including exactly overlapping ones.
    """

    det = (a1.x - a0.x) * (b1.y - b0.y) - (b1.x - b0.x) * (a1.y - a0.y)
    if det == 0:
        return False
    lam = ((b1.y - b0.y) * (b1.x - a0.x) + (b0.x - b1.x) * (b1.y - a0.y)) / det
    gamma = ((a0.y - a1.y) * (b1.x - a0.x) + (a1.x - a0.x) * (b1.y - a0.y)) / det
    return 0.0 <= lam <= 1.0 and 0.0 <= gamma <= 1.0


def segment_intersects_rect(p1: Point, p2: Point, rect: Rect) -> bool:
    """Return True if p1->p2 crosses an edge of rect, or p1 is strictly inside it.

    Only p1 is tested for containment: callers feed short incremental segments
    whose p1 is the previously accepted point.
    """

    for e0, e1 in rect.edges():
        if segments_intersect(p1, p2, e0, e1):
            return True
    return rect.contains_strictly(p1)
