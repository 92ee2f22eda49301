from __future__ import annotations

from datetime import datetime
from typing import Protocol


class WallClock(Protocol):
    """Local wall-clock abstraction.

    The sampler depends on this interface rather than calling real time directly.
    """

    def now(self) -> datetime:
        """Return the current local time (naive datetime)."""


class LocalClock:
    """Production clock backed by datetime.now()."""

    def now(self) -> datetime:
        return datetime.now()
