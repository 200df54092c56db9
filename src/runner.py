import logging
import sys
from typing import TextIO

from src.domain.tick_rules import LOOP_MESSAGE, RUNNING_MESSAGE
from src.interval_source import IntervalSource
from src.models.dc_models import TickModel


class Runner:
    """Print a startup line, then a loop line on every tick of the source."""

    def __init__(self, source: IntervalSource, stream: TextIO | None = None):
        """Initialize Runner with the tick source and an optional output stream.

        stdout is looked up at write time when no stream is given.
        """
        self.source: IntervalSource = source
        self.stream: TextIO | None = stream
        self._started = False

    def run(self) -> None:
        """Write the startup line and start the periodic loop line.

        Returns as soon as the timer is scheduled; ticks keep arriving on
        the event loop afterwards.

        Raises:
            RuntimeError: the runner was already started
        """
        if self._started:
            raise RuntimeError("Runner is already running")
        self.write(RUNNING_MESSAGE)
        self.source.subscribe(self.on_tick)
        self.source.start()
        self._started = True

    async def on_tick(self, tick: TickModel):
        self.write(LOOP_MESSAGE)

    def write(self, message: str):
        stream = self.stream if self.stream is not None else sys.stdout
        print(message, file=stream, flush=True)
        logging.debug(f"Wrote {message!r}")
