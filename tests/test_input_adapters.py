from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from box_connect.geometry import Point
from box_connect.input import MouseAdapter, TouchAdapter


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Point | None]] = []

    def on_pointer_down(self, p: Point) -> None:
        self.calls.append(("down", p))

    def on_pointer_move(self, p: Point) -> None:
        self.calls.append(("move", p))

    def on_pointer_up(self, p: Point) -> None:
        self.calls.append(("up", p))

    def on_pointer_cancel(self) -> None:
        self.calls.append(("cancel", None))


def _mouse(kind: int, pos: tuple[int, int], **extra: object) -> pygame.event.Event:
    attrs: dict[str, object] = {"pos": pos}
    if kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        attrs["button"] = extra.pop("button", 1)
    else:
        attrs["rel"] = (0, 0)
        attrs["buttons"] = (1, 0, 0)
    attrs.update(extra)
    return pygame.event.Event(kind, attrs)


def _finger(kind: int, finger_id: int, x: float, y: float) -> pygame.event.Event:
    return pygame.event.Event(kind, {"finger_id": finger_id, "touch_id": 0, "x": x, "y": y, "dx": 0.0, "dy": 0.0})


def test_mouse_drag_maps_to_board_coordinates() -> None:
    sink = RecordingSink()
    adapter = MouseAdapter(sink, origin=(0, 48))

    assert adapter.handle_event(_mouse(pygame.MOUSEMOTION, (5, 60))) is False  # not pressed
    assert adapter.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, (100, 148))) is True
    assert adapter.handle_event(_mouse(pygame.MOUSEMOTION, (110, 150))) is True
    assert adapter.handle_event(_mouse(pygame.MOUSEBUTTONUP, (120, 160))) is True

    assert sink.calls == [
        ("down", Point(100.0, 100.0)),
        ("move", Point(110.0, 102.0)),
        ("up", Point(120.0, 112.0)),
    ]


def test_mouse_ignores_other_buttons_and_touch_synthesized_events() -> None:
    sink = RecordingSink()
    adapter = MouseAdapter(sink)

    assert adapter.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, (10, 10), button=3)) is False
    assert adapter.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, (10, 10), touch=True)) is False
    assert adapter.handle_event(_mouse(pygame.MOUSEBUTTONUP, (10, 10))) is False
    assert sink.calls == []


def test_mouse_leaving_window_mid_drag_cancels() -> None:
    sink = RecordingSink()
    adapter = MouseAdapter(sink)

    assert adapter.handle_event(pygame.event.Event(pygame.WINDOWLEAVE, {})) is False
    adapter.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, (10, 10)))
    assert adapter.handle_event(pygame.event.Event(pygame.WINDOWLEAVE, {})) is True
    # Release after leaving is no longer part of the drag.
    assert adapter.handle_event(_mouse(pygame.MOUSEBUTTONUP, (10, 10))) is False

    assert [name for name, _ in sink.calls] == ["down", "cancel"]


def test_touch_scales_normalized_coordinates_and_tracks_one_finger() -> None:
    sink = RecordingSink()
    adapter = TouchAdapter(sink, window_size=(1000, 500), origin=(0, 50))

    assert adapter.handle_event(_finger(pygame.FINGERDOWN, 7, 0.125, 0.25)) is True
    assert adapter.handle_event(_finger(pygame.FINGERDOWN, 8, 0.5, 0.5)) is False
    assert adapter.handle_event(_finger(pygame.FINGERMOTION, 8, 0.6, 0.6)) is False
    assert adapter.handle_event(_finger(pygame.FINGERMOTION, 7, 0.25, 0.25)) is True
    assert adapter.handle_event(_finger(pygame.FINGERUP, 7, 0.5, 0.75)) is True

    assert sink.calls == [
        ("down", Point(125.0, 75.0)),
        ("move", Point(250.0, 75.0)),
        ("up", Point(500.0, 325.0)),
    ]


def test_touch_ignores_unrelated_events() -> None:
    sink = RecordingSink()
    adapter = TouchAdapter(sink, window_size=(100, 100))
    assert adapter.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, (1, 1))) is False
    assert adapter.handle_event(_finger(pygame.FINGERUP, 1, 0.5, 0.5)) is False
    assert sink.calls == []


def test_reset_forgets_an_unfinished_gesture() -> None:
    sink = RecordingSink()
    mouse = MouseAdapter(sink)
    touch = TouchAdapter(sink, window_size=(100, 100))

    mouse.handle_event(_mouse(pygame.MOUSEBUTTONDOWN, (10, 10)))
    touch.handle_event(_finger(pygame.FINGERDOWN, 3, 0.5, 0.5))
    mouse.reset()
    touch.reset()

    # The lost release no longer reaches the sink and a new finger is tracked.
    assert mouse.handle_event(_mouse(pygame.MOUSEBUTTONUP, (10, 10))) is False
    assert touch.handle_event(_finger(pygame.FINGERUP, 3, 0.5, 0.5)) is False
    assert touch.handle_event(_finger(pygame.FINGERDOWN, 4, 0.25, 0.25)) is True
    assert [name for name, _ in sink.calls] == ["down", "down", "down"]
