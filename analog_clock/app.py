"""Pygame shell for the analog clock.

Supplies the timer, drawing surface and layout pass around the pure core:
- TimeSampler (analog_clock/sampler.py) decides when the displayed second changes.
- face.render (analog_clock/face.py) turns a time and a size into fill calls.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from typing import Protocol

import pygame

from . import face
from .canvas import PygameCanvas
from .clock import LocalClock, WallClock
from .config import BACKGROUND_COLOR, WINDOW_SIZE, WINDOW_TITLE, ClockConfig
from .geometry import BoxConstraints, Size
from .log import get_logger
from .sampler import TimeSampler

logger = get_logger(__name__)

CLOCK_WAKE = pygame.event.custom_type()
# Scripted runs (max_frames / event_injector) must come round the loop even
# when no event is due; an interactive run blocks until the next event.
SCRIPTED_WAIT_MS = 250


class LaunchFailure(RuntimeError):
    """The window or pygame runtime could not be initialised."""


class Screen(Protocol):
    @property
    def needs_paint(self) -> bool: ...
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def render(self, surface: pygame.Surface) -> None: ...


def _delay_millis(delay: timedelta) -> int:
    """Whole milliseconds for a pygame timer: rounded up, clamped to [1, 1000]."""

    millis = -(-delay // timedelta(milliseconds=1))
    return max(1, min(1000, millis))


class PygameTimerService:
    """One-shot timers posted as CLOCK_WAKE events tagged with a token.

    pygame keeps a single timer per event type, so arming a new wake replaces
    any pending one; a wake already sitting in the queue keeps its old token.
    """

    def __init__(self) -> None:
        self._last_token = 0

    def request_timer(self, delay: timedelta) -> int:
        self._last_token += 1
        token = self._last_token
        pygame.time.set_timer(pygame.event.Event(CLOCK_WAKE, token=token), _delay_millis(delay), loops=1)
        return token


class App:
    def __init__(self, surface: pygame.Surface, screen: Screen) -> None:
        self._surface = surface
        self._screen = screen
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def quit(self) -> None:
        self._running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.quit()
            return
        if event.type == pygame.VIDEORESIZE:
            self._surface = pygame.display.get_surface()
        self._screen.handle_event(event)

    def render(self) -> bool:
        """Paint the screen if it asked for it. Returns True when something was drawn."""

        if not self._screen.needs_paint:
            return False
        self._screen.render(self._surface)
        return True


class ClockScreen:
    def __init__(self, *, sampler: TimeSampler, config: ClockConfig) -> None:
        self._sampler = sampler
        self._config = config
        self._needs_paint = True

    @property
    def needs_paint(self) -> bool:
        return self._needs_paint

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == CLOCK_WAKE:
            if self._sampler.on_wake(getattr(event, "token", -1)):
                self._needs_paint = True
            return
        if event.type in (pygame.VIDEOEXPOSE, pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
            self._needs_paint = True

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)

        w, h = surface.get_size()
        size = face.layout(BoxConstraints.loose(Size(float(w), float(h))))

        canvas = PygameCanvas(surface)
        canvas.translate((w - size.width) / 2.0, (h - size.height) / 2.0)
        face.render(self._sampler.current, size, canvas, second_hand=self._config.second_hand)
        self._needs_paint = False


def _open_window() -> pygame.Surface:
    try:
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        return pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    except pygame.error as exc:
        pygame.quit()
        raise LaunchFailure(f"could not open the clock window: {exc}") from exc


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    clock: WallClock | None = None,
) -> int:
    config = ClockConfig.from_env()
    surface = _open_window()
    logger.info("Clock window opened at %dx%d (second hand %s)", *surface.get_size(), config.second_hand)

    sampler = TimeSampler(clock=clock if clock is not None else LocalClock(), timer=PygameTimerService())
    app = App(surface, ClockScreen(sampler=sampler, config=config))
    sampler.start()

    wait_ms = None if max_frames is None and event_injector is None else SCRIPTED_WAIT_MS

    frame = 0
    try:
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            first = pygame.event.wait() if wait_ms is None else pygame.event.wait(wait_ms)
            for event in [first, *pygame.event.get()]:
                app.handle_event(event)

            if app.render():
                pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break
    finally:
        pygame.quit()

    return 0
