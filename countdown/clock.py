import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Optional

from . import render
from .terminal import Key, Resize, TerminalInput, terminal_session
from .ticks import IntervalTicks, SilentTicks, TickSource

log = logging.getLogger(__name__)


class Phase(Enum):
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class CountdownConfig:
    target_seconds: int
    count_up: bool = False

    def __post_init__(self) -> None:
        if self.target_seconds < 0:
            raise ValueError("target_seconds must be non-negative")


@dataclass
class TimerState:
    remaining_seconds: int
    phase: Phase = Phase.RUNNING


@dataclass(frozen=True)
class Tick:
    pass


class Countdown:
    def __init__(
        self,
        config: CountdownConfig,
        draw: Callable[[int], None],
        tick_factory: Callable[[], TickSource] = IntervalTicks,
        silent_factory: Callable[[], TickSource] = SilentTicks,
    ) -> None:
        self.config = config
        self.state = TimerState(remaining_seconds=config.target_seconds)
        self._draw = draw
        self._tick_factory = tick_factory
        self._silent_factory = silent_factory
        self.ticks: TickSource = silent_factory()
        self._tick_task: Optional[asyncio.Future] = None

    def display_value(self) -> int:
        if self.config.count_up:
            return self.config.target_seconds - self.state.remaining_seconds
        return self.state.remaining_seconds

    def render(self) -> None:
        self._draw(self.display_value())

    def _swap_ticks(self, ticks: TickSource) -> None:
        if self._tick_task is not None:
            self._tick_task.cancel()
            self._tick_task = None
        self.ticks = ticks
        log.debug("tick source swapped, armed=%s", ticks.armed)

    def handle(self, event) -> bool:
        # False means stop
        state = self.state
        if isinstance(event, Tick):
            if state.phase is not Phase.RUNNING:
                return True
            if state.remaining_seconds == 0:
                log.debug("countdown finished")
                return False
            state.remaining_seconds -= 1
            self.render()
            return True

        if isinstance(event, Resize):
            self.render()
            return True

        if isinstance(event, Key):
            if event.alt:
                return True
            if (event.char == "q" and not event.ctrl) or (event.char == "c" and event.ctrl):
                log.debug("quit requested in phase %s", state.phase.value)
                return False
            if event.ctrl:
                return True
            if event.char == "p" and state.phase is Phase.RUNNING:
                self._swap_ticks(self._silent_factory())
                state.phase = Phase.PAUSED
                log.debug("paused at %d", state.remaining_seconds)
            elif event.char == "c" and state.phase is Phase.PAUSED:
                self._swap_ticks(self._tick_factory())
                state.phase = Phase.RUNNING
                log.debug("resumed at %d", state.remaining_seconds)
        return True

    async def run(self, inputs) -> None:
        self._swap_ticks(self._tick_factory())
        self.state.phase = Phase.RUNNING
        self.render()

        input_task: Optional[asyncio.Future] = None
        try:
            while True:
                if self._tick_task is None:
                    self._tick_task = asyncio.ensure_future(self.ticks.next())
                if input_task is None:
                    input_task = asyncio.ensure_future(inputs.next())

                done, _ = await asyncio.wait(
                    {self._tick_task, input_task}, return_when=asyncio.FIRST_COMPLETED
                )
                # the loser stays pending (or done) for the next iteration
                if input_task in done:
                    event = input_task.result()
                    input_task = None
                    if event is None:
                        log.debug("input stream closed")
                        break
                else:
                    self._tick_task.result()
                    self._tick_task = None
                    event = Tick()

                if not self.handle(event):
                    break
        finally:
            for task in (self._tick_task, input_task):
                if task is not None:
                    task.cancel()
            self._tick_task = None


async def _run(config: CountdownConfig) -> None:
    with terminal_session() as screen:
        inputs = TerminalInput()
        try:
            inputs.start()
            await Countdown(config, draw=partial(render.draw, screen)).run(inputs)
        finally:
            inputs.close()


def run(config: CountdownConfig) -> None:
    asyncio.run(_run(config))
