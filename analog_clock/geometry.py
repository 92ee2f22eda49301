from __future__ import annotations

import math
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Protocol

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle; corners are normalised so x0 <= x1, y0 <= y1."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_points(cls, p0: tuple[float, float], p1: tuple[float, float]) -> "Rect":
        return cls(
            x0=min(p0[0], p1[0]),
            y0=min(p0[1], p1[1]),
            x1=max(p0[0], p1[0]),
            y1=max(p0[1], p1[1]),
        )

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def corners(self) -> tuple[tuple[float, float], ...]:
        return ((self.x0, self.y0), (self.x1, self.y0), (self.x1, self.y1), (self.x0, self.y1))


@dataclass(frozen=True, slots=True)
class Affine:
    """2D affine transform ``[a c e; b d f; 0 0 1]`` acting on (x, y) points."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def translate(cls, dx: float, dy: float) -> "Affine":
        return cls(e=float(dx), f=float(dy))

    @classmethod
    def rotate(cls, angle: float) -> "Affine":
        # Positive angles turn clockwise on a y-down surface.
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(a=cos_a, b=sin_a, c=-sin_a, d=cos_a)

    def __mul__(self, other: "Affine") -> "Affine":
        # (self * other) applies ``other`` first.
        return Affine(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def apply(self, point: tuple[float, float]) -> tuple[float, float]:
        x, y = point
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)


@dataclass(frozen=True, slots=True)
class BoxConstraints:
    """Min/max size offered to a widget by its parent during layout."""

    min_width: float = 0.0
    min_height: float = 0.0
    max_width: float = math.inf
    max_height: float = math.inf

    def __post_init__(self) -> None:
        if self.min_width < 0 or self.min_height < 0:
            raise ValueError("minimum size must be >= 0")
        if self.max_width < self.min_width or self.max_height < self.min_height:
            raise ValueError("maximum size must be >= minimum size")

    @classmethod
    def tight(cls, size: Size) -> "BoxConstraints":
        return cls(size.width, size.height, size.width, size.height)

    @classmethod
    def loose(cls, size: Size) -> "BoxConstraints":
        return cls(0.0, 0.0, size.width, size.height)

    def contains(self, size: Size) -> bool:
        return (
            self.min_width <= size.width <= self.max_width
            and self.min_height <= size.height <= self.max_height
        )

    def constrain(self, size: Size) -> Size:
        return Size(
            width=min(max(size.width, self.min_width), self.max_width),
            height=min(max(size.height, self.min_height), self.max_height),
        )

    def constrain_aspect_ratio(self, aspect_ratio: float, width: float) -> Size:
        """Size closest to ``width`` x ``width * aspect_ratio`` that keeps the ratio.

        ``aspect_ratio`` is height / width. If no size with that ratio fits,
        the ideal size is simply clamped into the box.
        """

        if aspect_ratio <= 0:
            raise ValueError("aspect_ratio must be > 0")

        ideal = Size(width, width * aspect_ratio)
        if self.contains(ideal):
            return ideal

        lo = max(self.min_width, self.min_height / aspect_ratio)
        hi = min(self.max_width, self.max_height / aspect_ratio)
        if lo > hi:
            return self.constrain(ideal)

        w = min(max(width, lo), hi)
        return Size(w, w * aspect_ratio)


class DrawingSurface(Protocol):
    """Immediate-mode fill surface with a scoped affine-transform stack."""

    def translate(self, dx: float, dy: float) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def saved(self) -> AbstractContextManager[None]: ...
    def fill_rect(self, rect: Rect, color: Color) -> None: ...
