"""Pygame input adapters.

Each adapter translates one input modality into the engine's canonical pointer
calls. Coordinates are converted from window space to board space by
subtracting the board origin.
"""

from __future__ import annotations

from typing import Protocol

import pygame

from .geometry import Point


class PointerSink(Protocol):
    def on_pointer_down(self, p: Point) -> object: ...
    def on_pointer_move(self, p: Point) -> object: ...
    def on_pointer_up(self, p: Point) -> object: ...
    def on_pointer_cancel(self) -> object: ...


class MouseAdapter:
    """Left-button drags. Mouse events SDL synthesizes from touch are skipped."""

    def __init__(self, sink: PointerSink, *, origin: tuple[int, int] = (0, 0)) -> None:
        self._sink = sink
        self.origin = origin
        self._pressed = False

    def _to_board(self, pos: tuple[int, int]) -> Point:
        ox, oy = self.origin
        return Point(float(pos[0] - ox), float(pos[1] - oy))

    def reset(self) -> None:
        """Forget a button press whose release will never arrive."""

        self._pressed = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was consumed."""

        if getattr(event, "touch", False):
            return False

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:
                return False
            self._pressed = True
            self._sink.on_pointer_down(self._to_board(event.pos))
            return True
        if event.type == pygame.MOUSEMOTION:
            if not self._pressed:
                return False
            self._sink.on_pointer_move(self._to_board(event.pos))
            return True
        if event.type == pygame.MOUSEBUTTONUP:
            if event.button != 1 or not self._pressed:
                return False
            self._pressed = False
            self._sink.on_pointer_up(self._to_board(event.pos))
            return True
        if event.type == pygame.WINDOWLEAVE:
            if not self._pressed:
                return False
            self._pressed = False
            self._sink.on_pointer_cancel()
            return True
        return False


class TouchAdapter:
    """Single-finger drags; extra fingers are ignored while one is tracked."""

    def __init__(
        self,
        sink: PointerSink,
        *,
        window_size: tuple[int, int],
        origin: tuple[int, int] = (0, 0),
    ) -> None:
        self._sink = sink
        self.window_size = window_size
        self.origin = origin
        self._finger_id: int | None = None

    def _to_board(self, nx: float, ny: float) -> Point:
        w, h = self.window_size
        ox, oy = self.origin
        return Point(float(nx) * w - ox, float(ny) * h - oy)

    def reset(self) -> None:
        self._finger_id = None

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.FINGERDOWN:
            if self._finger_id is not None:
                return False
            self._finger_id = int(event.finger_id)
            self._sink.on_pointer_down(self._to_board(event.x, event.y))
            return True
        if event.type == pygame.FINGERMOTION:
            if self._finger_id != int(event.finger_id):
                return False
            self._sink.on_pointer_move(self._to_board(event.x, event.y))
            return True
        if event.type == pygame.FINGERUP:
            if self._finger_id != int(event.finger_id):
                return False
            self._finger_id = None
            self._sink.on_pointer_up(self._to_board(event.x, event.y))
            return True
        return False
