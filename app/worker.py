# app/worker.py
import asyncio
import functools
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Union
from zoneinfo import ZoneInfo

from app.core.config import Settings, settings as default_settings
from app.services.health import perform_health_check, resolve_health_check_url
from app.services.reconciliation import complete_expired_bookings

logger = logging.getLogger(__name__)

JobFunc = Callable[[], Awaitable[object]]


# -----------------------------
# Schedule arithmetic
# -----------------------------
def next_run_time(now: datetime, every_minutes: int) -> datetime:
    """Next fire time of the cron expression ``*/every_minutes * * * *`` strictly after ``now``."""
    if not 1 <= every_minutes <= 59:
        raise ValueError(f"every_minutes must be between 1 and 59, got {every_minutes}")

    base = now.replace(second=0, microsecond=0)
    next_minute = (base.minute // every_minutes + 1) * every_minutes
    if next_minute >= 60:
        return base.replace(minute=0) + timedelta(hours=1)
    return base.replace(minute=next_minute)


def seconds_until(target: datetime, now: datetime) -> float:
    # Compare in UTC so a DST shift between the two instants is accounted for.
    delta = target.astimezone(dt_timezone.utc) - now.astimezone(dt_timezone.utc)
    return max(delta.total_seconds(), 0.0)


# -----------------------------
# Scheduler
# -----------------------------
@dataclass
class PeriodicJob:
    name: str
    func: JobFunc
    every_minutes: int = 5
    run_immediately: bool = False


class JobScheduler:
    """
    Runs each registered job in its own asyncio task on a cron-like cadence
    evaluated in ``timezone``. Jobs are independent of each other; a failing
    run is logged and the job keeps its schedule.
    """

    def __init__(self, timezone: Union[str, ZoneInfo], jobs: Iterable[PeriodicJob] = ()):
        self.timezone = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
        self._jobs: List[PeriodicJob] = list(jobs)
        self._tasks: Dict[str, asyncio.Task] = {}
        self._started = False

    @property
    def jobs(self) -> List[PeriodicJob]:
        return list(self._jobs)

    @property
    def running(self) -> bool:
        return self._started

    def add_job(self, job: PeriodicJob) -> None:
        if any(existing.name == job.name for existing in self._jobs):
            raise ValueError(f"Job {job.name!r} is already registered")
        self._jobs.append(job)
        if self.running:
            self._tasks[job.name] = asyncio.create_task(self._run_forever(job), name=job.name)

    def now(self) -> datetime:
        return datetime.now(self.timezone)

    def start(self) -> None:
        """Start every job. Must be called from a running event loop."""
        if self._started:
            return
        self._started = True
        for job in self._jobs:
            self._tasks[job.name] = asyncio.create_task(self._run_forever(job), name=job.name)
        logger.info(
            "Scheduler started (%s) with jobs: %s",
            self.timezone.key,
            ", ".join(f"{job.name} every {job.every_minutes}m" for job in self._jobs),
        )

    async def stop(self) -> None:
        self._started = False
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if tasks:
            logger.info("Scheduler stopped")

    async def run_job(self, job: PeriodicJob) -> None:
        try:
            await job.func()
        except Exception:
            logger.exception("[Worker] Job %s failed", job.name)

    async def _run_forever(self, job: PeriodicJob) -> None:
        if job.run_immediately:
            await self.run_job(job)
        last_fire = None
        while True:
            now = self.now()
            # The sleep clock can outrun the wall clock; never fire the same minute twice.
            after = now if last_fire is None else max(now, last_fire)
            fire_at = next_run_time(after, job.every_minutes)
            last_fire = fire_at
            await asyncio.sleep(seconds_until(fire_at, now))
            await self.run_job(job)


# -----------------------------
# Job wiring
# -----------------------------
def build_scheduler(
    settings: Optional[Settings] = None,
    booking_collection=None,
) -> JobScheduler:
    settings = settings or default_settings
    if booking_collection is None:
        from app.database import booking_collection

    scheduler = JobScheduler(settings.SCHEDULER_TIMEZONE)
    scheduler.add_job(
        PeriodicJob(
            name="complete-expired-bookings",
            func=functools.partial(
                complete_expired_bookings,
                booking_collection,
                timezone=scheduler.timezone,
                slot_duration=timedelta(minutes=settings.SLOT_DURATION_MINUTES),
            ),
            every_minutes=settings.RECONCILE_EVERY_MINUTES,
        )
    )
    scheduler.add_job(
        PeriodicJob(
            name="health-check",
            func=functools.partial(
                perform_health_check,
                resolve_health_check_url(settings),
                timeout=settings.HEALTH_CHECK_TIMEOUT_SECONDS,
            ),
            every_minutes=settings.HEALTH_CHECK_EVERY_MINUTES,
            run_immediately=True,
        )
    )
    return scheduler


# -----------------------------
# Main
# -----------------------------
async def run_worker() -> None:
    scheduler = build_scheduler()
    scheduler.start()
    try:
        await asyncio.Event().wait()
    finally:
        await scheduler.stop()


if __name__ == "__main__":
    logging.basicConfig(level=default_settings.LOG_LEVEL)
    asyncio.run(run_worker())
