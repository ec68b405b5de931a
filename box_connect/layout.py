from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect
from .targets import Category, Target


@dataclass(frozen=True, slots=True)
class BoxSpec:
    """Box placement in normalized board coordinates (0..1 on both axes)."""

    target_id: str
    category: Category
    nx: float
    ny: float
    nw: float
    nh: float


# Pairs are placed so that straight connections would cross; players must
# route around each other.
REFERENCE_BOXES: tuple[BoxSpec, ...] = (
    BoxSpec("box-a1", Category.A, 0.08, 0.12, 0.10, 0.16),
    BoxSpec("box-a2", Category.A, 0.82, 0.72, 0.10, 0.16),
    BoxSpec("box-b1", Category.B, 0.82, 0.12, 0.10, 0.16),
    BoxSpec("box-b2", Category.B, 0.08, 0.72, 0.10, 0.16),
    BoxSpec("box-c1", Category.C, 0.45, 0.08, 0.10, 0.16),
    BoxSpec("box-c2", Category.C, 0.45, 0.76, 0.10, 0.16),
)


def canvas_rect(size: tuple[int, int]) -> Rect:
    w, h = size
    return Rect(0.0, 0.0, float(w), float(h))


def build_targets(size: tuple[int, int], boxes: tuple[BoxSpec, ...] = REFERENCE_BOXES) -> tuple[Target, ...]:
    """Lay out boxes for a board of the given pixel size."""

    w, h = size
    return tuple(
        Target(
            target_id=b.target_id,
            category=b.category,
            bounds=Rect(b.nx * w, b.ny * h, b.nw * w, b.nh * h),
        )
        for b in boxes
    )
