"""Pygame UI shell for Box Connect.

The shell is a collaborator of the interaction engine: it lays out the boxes,
translates mouse/touch input, paints render_state() each frame, and owns the
reset button and win overlay. Game rules and state live in box_connect/engine.py.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

import pygame

from .clock import Clock, RealClock
from .config import PuzzleConfig
from .engine import ConnectEngine, RenderState
from .geometry import Point
from .input import MouseAdapter, TouchAdapter
from .layout import build_targets, canvas_rect
from .paths import Path
from .targets import Category

logger = logging.getLogger(__name__)

TARGET_FPS = 60
HEADER_HEIGHT = 48

BACKGROUND = (15, 23, 42)
BOARD_FILL = (30, 41, 59)
TEXT = (235, 235, 245)
HINT = (148, 163, 184)

COLORS: dict[Category, tuple[int, int, int]] = {
    Category.A: (0xF4, 0x3F, 0x5E),
    Category.B: (0x3B, 0x82, 0xF6),
    Category.C: (0x22, 0xC5, 0x5E),
}


class Screen(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self) -> None: ...
    def render(self, surface: pygame.Surface) -> None: ...


class App:
    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self._surface = surface
        self._font = font
        self._screens: list[Screen] = []
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def font(self) -> pygame.font.Font:
        return self._font

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def set_surface(self, surface: pygame.Surface) -> None:
        self._surface = surface

    def push(self, screen: Screen) -> None:
        self._screens.append(screen)

    def quit(self) -> None:
        self._running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if not self._screens:
            return
        self._screens[-1].handle_event(event)

    def update(self) -> None:
        if self._screens:
            self._screens[-1].update()

    def render(self) -> None:
        if not self._screens:
            return
        self._screens[-1].render(self._surface)


class PuzzleScreen:
    def __init__(self, app: App, *, clock: Clock, config: PuzzleConfig) -> None:
        self._app = app
        self._config = config
        self._won = False

        size = app.surface.get_size()
        board_size = self._board_size(size)
        self._engine = ConnectEngine(
            clock=clock,
            canvas=canvas_rect(board_size),
            targets=build_targets(board_size),
            config=config,
            on_win=self._on_win,
        )
        origin = (0, HEADER_HEIGHT)
        self._mouse = MouseAdapter(self._engine, origin=origin)
        self._touch = TouchAdapter(self._engine, window_size=size, origin=origin)

        self._title_font = pygame.font.Font(None, 34)
        self._label_font = pygame.font.Font(None, 28)
        self._hint_font = pygame.font.Font(None, 22)

        self._reset_rect = pygame.Rect(0, 0, 0, 0)
        self._play_again_rect = pygame.Rect(0, 0, 0, 0)
        self._layout_buttons(size)

    @property
    def engine(self) -> ConnectEngine:
        return self._engine

    @property
    def won(self) -> bool:
        return self._won

    def reset(self) -> None:
        self._engine.reset()
        self._release_pointers()
        self._won = False

    def _release_pointers(self) -> None:
        # Releases swallowed by the frozen board would otherwise leave a gesture open.
        self._mouse.reset()
        self._touch.reset()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._app.quit()
            elif event.key == pygame.K_r:
                self.reset()
            return

        if event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
            surface = pygame.display.get_surface()
            if surface is not None:
                self._app.set_surface(surface)
                self._relayout(surface.get_size())
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._reset_rect.collidepoint(event.pos):
                self.reset()
                return
            if self._won and self._play_again_rect.collidepoint(event.pos):
                self.reset()
                return

        if self._won:
            # Board is frozen under the win overlay.
            return

        if self._mouse.handle_event(event):
            return
        self._touch.handle_event(event)

    def update(self) -> None:
        self._engine.update()

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND)
        state = self._engine.render_state()

        w, h = surface.get_size()
        board = pygame.Rect(0, HEADER_HEIGHT, w, max(0, h - HEADER_HEIGHT))
        pygame.draw.rect(surface, BOARD_FILL, board)

        title = self._title_font.render("Connect the matching boxes", True, TEXT)
        surface.blit(title, (16, (HEADER_HEIGHT - title.get_height()) // 2))
        self._render_button(surface, self._reset_rect, "Reset")

        self._render_targets(surface, state)
        for path in state.committed_paths:
            self._render_path(surface, path)
        if state.in_progress_path is not None:
            self._render_path(surface, state.in_progress_path)

        if self._won:
            self._render_win_overlay(surface)

    def _on_win(self) -> None:
        logger.info("puzzle solved")
        self._engine.on_pointer_cancel()
        self._release_pointers()
        self._won = True

    @staticmethod
    def _board_size(size: tuple[int, int]) -> tuple[int, int]:
        w, h = size
        return (max(1, w), max(1, h - HEADER_HEIGHT))

    def _relayout(self, size: tuple[int, int]) -> None:
        board_size = self._board_size(size)
        self._engine.on_layout_changed(build_targets(board_size), canvas_rect(board_size))
        self._touch.window_size = size
        self._layout_buttons(size)

    def _layout_buttons(self, size: tuple[int, int]) -> None:
        w, h = size
        self._reset_rect = pygame.Rect(w - 112, 8, 96, HEADER_HEIGHT - 16)
        self._play_again_rect = pygame.Rect(0, 0, 180, 48)
        self._play_again_rect.center = (w // 2, h // 2 + 40)

    def _to_window(self, p: Point) -> tuple[int, int]:
        return (int(round(p.x)), int(round(p.y)) + HEADER_HEIGHT)

    def _render_targets(self, surface: pygame.Surface, state: RenderState) -> None:
        for target in state.targets:
            b = target.bounds
            rect = pygame.Rect(int(b.x), int(b.y) + HEADER_HEIGHT, int(b.width), int(b.height))
            color = COLORS.get(target.category, TEXT)
            pygame.draw.rect(surface, color, rect, border_radius=10)
            label = self._label_font.render(str(target.category), True, BACKGROUND)
            surface.blit(label, label.get_rect(center=rect.center))

    def _render_path(self, surface: pygame.Surface, path: Path) -> None:
        if len(path.points) < 2:
            return
        color = COLORS.get(path.category, TEXT)
        width = self._config.line_width
        pts = [self._to_window(p) for p in path.points]
        pygame.draw.lines(surface, color, False, pts, width)
        # Round joins and caps.
        for pt in pts:
            pygame.draw.circle(surface, color, pt, width // 2)

    def _render_button(self, surface: pygame.Surface, rect: pygame.Rect, label: str) -> None:
        pygame.draw.rect(surface, (51, 65, 85), rect, border_radius=8)
        text = self._hint_font.render(label, True, TEXT)
        surface.blit(text, text.get_rect(center=rect.center))

    def _render_win_overlay(self, surface: pygame.Surface) -> None:
        w, h = surface.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        surface.blit(shade, (0, 0))
        msg = self._title_font.render("All boxes connected!", True, TEXT)
        surface.blit(msg, msg.get_rect(center=(w // 2, h // 2 - 20)))
        self._render_button(surface, self._play_again_rect, "Play again")


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    config: PuzzleConfig | None = None,
    clock: Clock | None = None,
) -> int:
    cfg = config or PuzzleConfig()
    pygame.init()

    pygame.display.set_caption("Box Connect")
    surface = pygame.display.set_mode(cfg.window_size, pygame.RESIZABLE)

    font = pygame.font.Font(None, 36)
    frame_clock = pygame.time.Clock()

    app = App(surface=surface, font=font)
    app.push(PuzzleScreen(app, clock=clock or RealClock(), config=cfg))

    frame = 0
    try:
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            app.update()
            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            frame_clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0
