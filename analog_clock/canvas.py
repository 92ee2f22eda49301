from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import pygame

from .geometry import Affine, Color, Rect


class PygameCanvas:
    """DrawingSurface over a pygame.Surface.

    pygame has no transform state of its own, so rectangles are mapped through
    the current Affine and filled as polygons.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._transform = Affine()
        self._stack: list[Affine] = []

    def translate(self, dx: float, dy: float) -> None:
        self._transform = self._transform * Affine.translate(dx, dy)

    def rotate(self, angle: float) -> None:
        self._transform = self._transform * Affine.rotate(angle)

    @contextmanager
    def saved(self) -> Iterator[None]:
        self._stack.append(self._transform)
        try:
            yield
        finally:
            self._transform = self._stack.pop()

    def fill_rect(self, rect: Rect, color: Color) -> None:
        pts = [self._transform.apply(p) for p in rect.corners()]
        pygame.draw.polygon(self._surface, color, pts)
