from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .geometry import Point, Rect


class Category(StrEnum):
    A = "A"
    B = "B"
    C = "C"


@dataclass(frozen=True, slots=True)
class Target:
    target_id: str
    category: Category
    bounds: Rect


class TargetRegistry:
    """Read-mostly snapshot of the interactive targets.

    The layout owner swaps the whole snapshot through replace(); the engine
    only ever queries it.
    """

    def __init__(self, targets: Iterable[Target] = ()) -> None:
        self._targets: tuple[Target, ...] = ()
        self.replace(targets)

    def replace(self, targets: Iterable[Target]) -> None:
        snapshot = tuple(targets)
        ids = [t.target_id for t in snapshot]
        if len(set(ids)) != len(ids):
            raise ValueError(f"duplicate target ids in layout: {sorted(ids)}")
        self._targets = snapshot

    def all_targets(self) -> tuple[Target, ...]:
        return self._targets

    def target_at(self, p: Point) -> Target | None:
        for target in self._targets:
            if target.bounds.contains(p):
                return target
        return None

    def get(self, target_id: str) -> Target | None:
        for target in self._targets:
            if target.target_id == target_id:
                return target
        return None

    def categories(self) -> frozenset[Category]:
        return frozenset(t.category for t in self._targets)

    def __len__(self) -> int:
        return len(self._targets)
