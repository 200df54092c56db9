import io

import pytest
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from src.interval_source import IntervalSource
from src.main import lifespan
from src.runner import Runner


@pytest.mark.asyncio
async def test_lifespan_starts_and_stops_scheduler():
    stream = io.StringIO()
    scheduler = AsyncIOScheduler()
    runner = Runner(IntervalSource(scheduler, 1000), stream=stream)

    async with lifespan(runner) as running:
        assert running is runner
        assert scheduler.running
        assert stream.getvalue() == "running...\n"

    assert not scheduler.running


@pytest.mark.asyncio
async def test_lifespan_stops_scheduler_on_error():
    scheduler = AsyncIOScheduler()
    runner = Runner(IntervalSource(scheduler, 1000), stream=io.StringIO())

    with pytest.raises(ValueError):
        async with lifespan(runner):
            raise ValueError("boom")

    assert not scheduler.running
