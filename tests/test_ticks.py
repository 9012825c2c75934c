# tests/test_ticks.py
# Interval & silent tick sources

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from countdown.ticks import IntervalTicks, SilentTicks


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _sleeping(clock):
    return AsyncMock(side_effect=lambda delay: clock.advance(delay))


def test_interval_first_tick_waits_a_full_period():
    clock = FakeClock()
    ticks = IntervalTicks(clock=clock)
    with patch("countdown.ticks.asyncio.sleep", new=_sleeping(clock)) as sleep:
        asyncio.run(ticks.next())
    sleep.assert_awaited_once_with(1.0)
    assert clock.now == 101.0


def test_interval_keeps_one_second_cadence():
    clock = FakeClock()
    ticks = IntervalTicks(clock=clock)

    async def three_ticks():
        for _ in range(3):
            await ticks.next()
            clock.advance(0.25)

    with patch("countdown.ticks.asyncio.sleep", new=_sleeping(clock)) as sleep:
        asyncio.run(three_ticks())
    delays = [call.args[0] for call in sleep.await_args_list]
    assert delays == [1.0, 0.75, 0.75]


def test_interval_does_not_replay_missed_ticks():
    clock = FakeClock()
    ticks = IntervalTicks(clock=clock)

    async def scenario():
        await ticks.next()
        clock.advance(3.5)
        await ticks.next()
        await ticks.next()

    with patch("countdown.ticks.asyncio.sleep", new=_sleeping(clock)) as sleep:
        asyncio.run(scenario())
    delays = [call.args[0] for call in sleep.await_args_list]
    # one late tick fires at once, then a fresh full period
    assert delays == [1.0, 1.0]


def test_fresh_interval_starts_from_construction():
    clock = FakeClock()
    IntervalTicks(clock=clock)
    clock.advance(0.6)
    resumed = IntervalTicks(clock=clock)
    with patch("countdown.ticks.asyncio.sleep", new=_sleeping(clock)) as sleep:
        asyncio.run(resumed.next())
    sleep.assert_awaited_once_with(1.0)


def test_silent_ticks_never_fire():
    async def scenario():
        await asyncio.wait_for(SilentTicks().next(), timeout=0.05)

    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(scenario())


def test_armed_flags():
    assert IntervalTicks().armed is True
    assert SilentTicks().armed is False
