import asyncio
import time
from typing import Callable


class TickSource:
    armed = False

    async def next(self) -> None:
        raise NotImplementedError


class IntervalTicks(TickSource):
    armed = True

    def __init__(self, period: float = 1.0, clock: Callable[[], float] = time.monotonic) -> None:
        self.period = period
        self._clock = clock
        # a fresh cycle always starts one full period from construction
        self._deadline = clock() + period

    async def next(self) -> None:
        delay = self._deadline - self._clock()
        if delay > 0:
            await asyncio.sleep(delay)
        now = self._clock()
        self._deadline += self.period
        # missed ticks are dropped, not replayed
        if self._deadline <= now:
            self._deadline = now + self.period


class SilentTicks(TickSource):
    async def next(self) -> None:
        await asyncio.get_running_loop().create_future()
