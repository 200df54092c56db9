from apscheduler.schedulers.asyncio import AsyncIOScheduler
import asyncio
import logging
from contextlib import asynccontextmanager

from src.interval_source import IntervalSource
from src.load_settings import load_settings
from src.runner import Runner

settings = load_settings()
scheduler = AsyncIOScheduler()
logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(runner: Runner):
    """Start the runner and stop its scheduler when the process exits.
    The loop line keeps firing for as long as the context is open.
    """
    runner.run()
    try:
        yield runner
    finally:
        await runner.source.shutdown()
        logging.info("Stop Runner")


async def serve():
    source = IntervalSource(scheduler, settings.interval_ms)
    async with lifespan(Runner(source)):
        # Nothing ever sets this; only process termination ends the loop.
        await asyncio.Event().wait()


def cli():
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logging.info("Interrupted")


if __name__ == "__main__":
    cli()
