"""
Scheduler module for CryptoMate.

Runs background housekeeping on the bot's event loop. Currently a single
interval job that purges expired entries from the market data cache so
symbols nobody asks about again do not linger in memory.
"""
import logging

import pytz
from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from cryptomate.config import CACHE_CLEANUP_INTERVAL_SECONDS, DEFAULT_TIMEZONE
from cryptomate.services.cache import TTLCache

logger = logging.getLogger(__name__)

CLEANUP_JOB_ID = "cache_cleanup"


class CacheCleanupScheduler:
    """Periodically purges expired entries from a TTLCache."""

    def __init__(self, cache: TTLCache, interval_seconds: int = CACHE_CLEANUP_INTERVAL_SECONDS):
        if interval_seconds <= 0:
            raise ValueError(f"Cleanup interval must be positive, got {interval_seconds}")

        self.cache = cache
        self.interval_seconds = interval_seconds
        self.timezone = pytz.timezone(DEFAULT_TIMEZONE)

        jobstores = {'default': MemoryJobStore()}
        executors = {'default': AsyncIOExecutor()}
        job_defaults = {
            'coalesce': True,  # Combine missed runs
            'max_instances': 1,  # Prevent overlapping
            'misfire_grace_time': interval_seconds,
        }

        self.scheduler = AsyncIOScheduler(
            jobstores=jobstores,
            executors=executors,
            job_defaults=job_defaults,
            timezone=self.timezone
        )

    @property
    def running(self) -> bool:
        return self.scheduler.running

    async def start(self):
        """Register the cleanup job and start the scheduler."""
        self.scheduler.add_job(
            self._run_cleanup,
            trigger=IntervalTrigger(seconds=self.interval_seconds, timezone=self.timezone),
            id=CLEANUP_JOB_ID,
            name="Cache Cleanup",
            replace_existing=True,
        )
        self.scheduler.start()

        job = self.scheduler.get_job(CLEANUP_JOB_ID)
        next_run = job.next_run_time if job else None
        logger.info(f"Cache cleanup scheduled every {self.interval_seconds}s (next run at {next_run})")

    def shutdown(self):
        """Stop the scheduler without waiting for running jobs."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Cache cleanup scheduler stopped")

    async def _run_cleanup(self) -> int:
        removed = self.cache.purge_expired()
        if removed:
            logger.info(f"Cache cleanup removed {removed} expired entries ({len(self.cache)} remaining)")
        return removed
