import asyncio
import itertools
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, List

from apscheduler.job import Job
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from src.domain.tick_rules import interval_seconds
from src.models.dc_models import TickModel

TickHandler = Callable[[TickModel], Awaitable[None]]


class IntervalSource:
    """Fixed-rate tick source backed by an APScheduler interval job.

    Ticks are numbered from 0 and never complete on their own: the job has
    no end date and only goes away when the scheduler is shut down.
    """

    def __init__(
        self, scheduler: AsyncIOScheduler, interval_ms: int, job_id: str = "interval_tick"
    ):
        self.scheduler: AsyncIOScheduler = scheduler
        self.interval_ms: int = interval_ms
        self.job_id: str = job_id
        self.subscribers: List[TickHandler] = []
        self.job: Job | None = None
        self._tick_index = itertools.count()

    def subscribe(self, handler: TickHandler):
        """Attach a handler, scheduling the interval job on first use.

        Args:
            handler (TickHandler): coroutine function called with every tick
        """
        if self.job is None:
            self.job = self.scheduler.add_job(
                self.emit,
                "interval",
                seconds=interval_seconds(self.interval_ms),
                id=self.job_id,
                max_instances=1,
                coalesce=True,
            )
            logging.info(f"Scheduled {self.job_id} every {self.interval_ms} ms")
        self.subscribers.append(handler)

    def unsubscribe(self, handler: TickHandler):
        """Detach a handler. Handlers that were never attached are ignored.

        Args:
            handler (TickHandler): handler previously passed to subscribe
        """
        if handler in self.subscribers:
            self.subscribers.remove(handler)

    async def emit(self):
        """Produce the next tick and hand it to every subscriber in order."""
        tick = TickModel(
            index=next(self._tick_index), fired_at=datetime.now(timezone.utc)
        )
        logging.debug(f"Tick {tick.index} on {self.job_id}")
        for handler in list(self.subscribers):
            try:
                await handler(tick)
            except Exception:
                logging.exception(f"Tick {tick.index} handler {handler!r} failed")

    def start(self):
        if not self.scheduler.running:
            self.scheduler.start()
            logging.info("Scheduler started")

    async def shutdown(self):
        """Stop the scheduler. AsyncIOScheduler applies the shutdown on the
        event loop, so yield once for it to take effect."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            await asyncio.sleep(0)
            logging.info("Scheduler stopped")
