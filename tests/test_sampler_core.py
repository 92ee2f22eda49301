from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from analog_clock.clock_time import ClockTime
from analog_clock.sampler import TimeSampler


@dataclass
class FakeClock:
    t: datetime = datetime(2024, 5, 4, 10, 20, 30, 250_000)

    def now(self) -> datetime:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += timedelta(seconds=dt)


@dataclass
class FakeTimer:
    requests: list[timedelta] = field(default_factory=list)

    def request_timer(self, delay: timedelta) -> int:
        self.requests.append(delay)
        return len(self.requests)


def test_initial_sample_is_taken_immediately_and_unrounded() -> None:
    clock = FakeClock()
    timer = FakeTimer()

    sampler = TimeSampler(clock=clock, timer=timer)

    assert sampler.current == ClockTime(10, 20, 30)
    assert sampler.current.nanosecond == 250_000_000
    assert sampler.token is None
    assert timer.requests == []


def test_start_arms_a_wake_at_the_next_whole_second() -> None:
    clock = FakeClock()
    timer = FakeTimer()
    sampler = TimeSampler(clock=clock, timer=timer)

    sampler.start()

    assert sampler.token == 1
    assert timer.requests == [timedelta(milliseconds=750)]


def test_wake_resamples_rounds_and_rearms_every_time() -> None:
    clock = FakeClock()
    timer = FakeTimer()
    sampler = TimeSampler(clock=clock, timer=timer)
    sampler.start()

    clock.t = datetime(2024, 5, 4, 10, 20, 31, 2_000)
    assert sampler.on_wake(1) is True
    assert sampler.current == ClockTime(10, 20, 31)
    assert sampler.token == 2
    assert timer.requests[-1] == timedelta(microseconds=998_000)

    # Woke a hair early: rounding still lands on the next second.
    clock.t = datetime(2024, 5, 4, 10, 20, 31, 999_000)
    assert sampler.on_wake(2) is True
    assert sampler.current == ClockTime(10, 20, 32)
    assert sampler.token == 3
    assert timer.requests[-1] == timedelta(milliseconds=1)


def test_wake_with_same_rounded_second_reports_no_change() -> None:
    clock = FakeClock(t=datetime(2024, 5, 4, 8, 0, 0, 100_000))
    timer = FakeTimer()
    sampler = TimeSampler(clock=clock, timer=timer)
    sampler.start()

    clock.t = datetime(2024, 5, 4, 8, 0, 0, 400_000)
    assert sampler.on_wake(1) is False
    assert sampler.current == ClockTime(8, 0, 0)
    # Still re-armed even though nothing changed.
    assert sampler.token == 2
    assert len(timer.requests) == 2


def test_stale_tokens_are_ignored() -> None:
    clock = FakeClock()
    timer = FakeTimer()
    sampler = TimeSampler(clock=clock, timer=timer)

    # Nothing armed yet.
    assert sampler.on_wake(1) is False
    assert timer.requests == []

    sampler.start()
    clock.advance(1.0)
    assert sampler.on_wake(1) is True
    before = sampler.current

    clock.advance(5.0)
    assert sampler.on_wake(1) is False
    assert sampler.current == before
    assert sampler.token == 2
    assert len(timer.requests) == 2


def test_scripted_minute_of_wakes_advances_one_second_per_wake() -> None:
    clock = FakeClock(t=datetime(2024, 5, 4, 23, 59, 30, 0))
    timer = FakeTimer()
    sampler = TimeSampler(clock=clock, timer=timer)
    sampler.start()

    seen: list[int] = []
    for _ in range(60):
        clock.t += timer.requests[-1]
        assert sampler.on_wake(sampler.token or 0) is True
        seen.append(sampler.current.seconds_since_midnight)

    assert seen[:30] == list(range(86_371, 86_400)) + [0]
    assert seen[-1] == 30
    assert all(timedelta(0) < d <= timedelta(seconds=1) for d in timer.requests)
