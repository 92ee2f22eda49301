"""Analog clock face: pure mapping from a time of day and a size to filled shapes.

Angles are radians measured clockwise from 12 o'clock on a y-down surface.
Nothing here keeps state between calls; the same inputs always produce the
same shapes and draw calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from .clock_time import SECONDS_PER_DAY, Timelike
from .geometry import BoxConstraints, Color, DrawingSurface, Rect, Size

TAU = 2.0 * math.pi

TICK_COUNT = 60
MAX_EXTENT = 400.0
# Inner edge of every tick sits this far in from the rim.
TICK_INSET = 20.0

MARK_COLOR: Color = (0xC0, 0x00, 0x40)
HAND_COLOR: Color = (0x00, 0xFF, 0x00)
SECOND_HAND_COLOR: Color = (0x80, 0x80, 0x80)


class ShapeKind(StrEnum):
    LONG_TICK = "long_tick"
    SHORT_TICK = "short_tick"
    HOUR_HAND = "hour_hand"
    MINUTE_HAND = "minute_hand"
    SECOND_HAND = "second_hand"


@dataclass(frozen=True, slots=True)
class FaceShape:
    """One filled rectangle, rotated by ``angle`` about the face centre."""

    kind: ShapeKind
    rect: Rect
    angle: float
    color: Color


def max_radius(size: Size) -> float:
    return min(size.width, size.height) / 2.0


def layout(constraints: BoxConstraints) -> Size:
    """Square size for the face, capped at MAX_EXTENT."""

    return constraints.constrain_aspect_ratio(1.0, MAX_EXTENT)


def hour_hand_angle(time: Timelike) -> float:
    # Two revolutions per day.
    return TAU * float(time.seconds_since_midnight) * 2.0 / SECONDS_PER_DAY


def minute_hand_angle(time: Timelike) -> float:
    # Driven by total seconds, so the hand sweeps within each minute.
    return TAU * float(time.seconds_since_midnight) / 3600.0


def second_hand_angle(time: Timelike) -> float:
    return TAU * float(time.second) / 60.0


def tick_marks(radius: float) -> tuple[FaceShape, ...]:
    marks: list[FaceShape] = []
    for i in range(TICK_COUNT):
        if i % 5 == 0:
            kind = ShapeKind.LONG_TICK
            rect = Rect.from_points((-3.0, -radius), (2.0, TICK_INSET - radius))
        else:
            kind = ShapeKind.SHORT_TICK
            rect = Rect.from_points((-1.0, TICK_INSET - 3.0 - radius), (1.0, TICK_INSET - radius))
        marks.append(FaceShape(kind=kind, rect=rect, angle=(TAU / TICK_COUNT) * i, color=MARK_COLOR))
    return tuple(marks)


def face_shapes(time: Timelike, size: Size, *, second_hand: bool = False) -> tuple[FaceShape, ...]:
    """All shapes of the face in draw order: ticks, hour, minute, then seconds."""

    r = max_radius(size)
    hand_tip = TICK_INSET - r

    shapes = list(tick_marks(r))
    shapes.append(
        FaceShape(
            kind=ShapeKind.HOUR_HAND,
            rect=Rect.from_points((-6.0, 0.0), (6.0, hand_tip / 2.0)),
            angle=hour_hand_angle(time),
            color=HAND_COLOR,
        )
    )
    shapes.append(
        FaceShape(
            kind=ShapeKind.MINUTE_HAND,
            rect=Rect.from_points((-3.0, 0.0), (2.0, hand_tip)),
            angle=minute_hand_angle(time),
            color=HAND_COLOR,
        )
    )
    if second_hand:
        shapes.append(
            FaceShape(
                kind=ShapeKind.SECOND_HAND,
                rect=Rect.from_points((-1.0, 0.0), (1.0, hand_tip)),
                angle=second_hand_angle(time),
                color=SECOND_HAND_COLOR,
            )
        )
    return tuple(shapes)


def render(time: Timelike, size: Size, surface: DrawingSurface, *, second_hand: bool = False) -> None:
    """Issue the fill calls for one frame of the face onto ``surface``."""

    with surface.saved():
        surface.translate(size.width / 2.0, size.height / 2.0)
        for shape in face_shapes(time, size, second_hand=second_hand):
            with surface.saved():
                surface.rotate(shape.angle)
                surface.fill_rect(shape.rect, shape.color)
