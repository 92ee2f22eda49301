from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Protocol

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86_400


class ClockArithmeticError(ArithmeticError):
    """Duration or rounding arithmetic left the valid range.

    This points at a broken system clock or a logic defect, so callers are not
    expected to recover from it.
    """


class Timelike(Protocol):
    """Narrow time-of-day capability the clock face is drawn from."""

    @property
    def hour(self) -> int: ...

    @property
    def minute(self) -> int: ...

    @property
    def second(self) -> int: ...

    @property
    def seconds_since_midnight(self) -> int: ...


@dataclass(frozen=True, slots=True)
class ClockTime:
    """Immutable time-of-day snapshot with one-second equality.

    ``nanosecond`` is carried along for the unrounded first paint but is
    ignored by ``==`` and ``hash``.
    """

    hour: int
    minute: int
    second: int
    nanosecond: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if not (0 <= self.hour < 24):
            raise ValueError("hour must be in [0, 24)")
        if not (0 <= self.minute < 60):
            raise ValueError("minute must be in [0, 60)")
        if not (0 <= self.second < 60):
            raise ValueError("second must be in [0, 60)")
        if not (0 <= self.nanosecond < NANOS_PER_SECOND):
            raise ValueError("nanosecond must be in [0, 1e9)")

    @property
    def seconds_since_midnight(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    @classmethod
    def from_datetime(cls, moment: datetime) -> "ClockTime":
        return cls(
            hour=moment.hour,
            minute=moment.minute,
            second=moment.second,
            nanosecond=moment.microsecond * 1000,
        )

    @classmethod
    def from_seconds(cls, seconds_since_midnight: int) -> "ClockTime":
        s = int(seconds_since_midnight)
        if not (0 <= s < SECONDS_PER_DAY):
            raise ValueError("seconds_since_midnight must be in [0, 86400)")
        return cls(hour=s // 3600, minute=(s // 60) % 60, second=s % 60)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


def _check_nanosecond(nanosecond: int) -> int:
    ns = int(nanosecond)
    if not (0 <= ns < NANOS_PER_SECOND):
        raise ClockArithmeticError(f"nanosecond fraction out of range: {ns}")
    return ns


def next_wake_delay(nanosecond: int) -> timedelta:
    """Time left until the next whole-second boundary.

    Always in (0, 1s]. A reading exactly on the boundary waits the full second.
    """

    nanos_left = NANOS_PER_SECOND - _check_nanosecond(nanosecond)
    # Round up to whole microseconds so a tiny remainder never becomes zero.
    return timedelta(microseconds=-(-nanos_left // 1000))


def round_to_second(moment: datetime) -> ClockTime:
    """Round ``moment`` to the nearest second, halves rounding up."""

    ns = _check_nanosecond(moment.microsecond * 1000)
    carry = 1 if ns * 2 >= NANOS_PER_SECOND else 0
    try:
        rounded = moment.replace(microsecond=0) + timedelta(seconds=carry)
    except OverflowError as exc:
        raise ClockArithmeticError(f"rounding {moment!r} overflowed") from exc
    return ClockTime.from_datetime(rounded)
