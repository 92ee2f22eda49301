from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

SECOND_HAND_ENV = "ANALOG_CLOCK_SECOND_HAND"

WINDOW_TITLE = "Clock"
WINDOW_SIZE = (200, 200)
BACKGROUND_COLOR = (10, 10, 14)


@dataclass(frozen=True, slots=True)
class ClockConfig:
    second_hand: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClockConfig":
        env = os.environ if environ is None else environ
        raw = env.get(SECOND_HAND_ENV, "0").strip().lower()
        return cls(second_hand=raw in ("1", "true", "yes", "on"))
