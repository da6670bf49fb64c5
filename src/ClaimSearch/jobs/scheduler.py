"""Interval scheduler for sync jobs.

The scheduler owns its worker threads: nothing runs before `start` and
everything is joined by `stop`. The sync routines themselves are supplied by
the caller.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Callable

from ClaimSearch.utils.log import log

if TYPE_CHECKING:
    from ClaimSearch.config import SyncConfig


@dataclass(frozen=True, slots=True)
class SyncJob:
    """A named callable run every ``interval``."""

    name: str
    interval: timedelta
    func: Callable[[], None]


class SyncScheduler:
    """Runs each registered job on its own daemon thread until stopped."""

    def __init__(self) -> None:
        self._jobs: list[SyncJob] = []
        self._threads: list[threading.Thread] = []
        self._stop_event = threading.Event()
        self._lock = threading.Lock()

    @property
    def jobs(self) -> tuple[SyncJob, ...]:
        return tuple(self._jobs)

    @property
    def running(self) -> bool:
        return bool(self._threads)

    def every(self, interval: timedelta, func: Callable[[], None], *, name: str | None = None) -> SyncJob:
        """Register ``func`` to run every ``interval``.

        Raises:
            ValueError: If the interval is not positive.
            RuntimeError: If the scheduler is already running.
        """
        if interval.total_seconds() <= 0:
            raise ValueError("Job interval must be positive")
        job = SyncJob(name=name or getattr(func, "__name__", "job"), interval=interval, func=func)
        with self._lock:
            if self._threads:
                raise RuntimeError("Cannot register jobs on a running scheduler")
            self._jobs.append(job)
        return job

    def start(self) -> None:
        """Start one worker per job. The first run happens after one interval."""
        with self._lock:
            if self._threads:
                raise RuntimeError("Scheduler already started")
            self._stop_event.clear()
            for job in self._jobs:
                thread = threading.Thread(target=self._run, args=(job,), name=f"sync-{job.name}", daemon=True)
                self._threads.append(thread)
                thread.start()
        log.info("Sync scheduler started with %d job(s)", len(self._jobs))

    def stop(self, timeout: float | None = None) -> None:
        """Signal all workers to exit and wait for them."""
        log.debug("Shutting down sync jobs...")
        self._stop_event.set()
        with self._lock:
            threads, self._threads = self._threads, []
        for thread in threads:
            thread.join(timeout)

    def __enter__(self) -> SyncScheduler:
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def _run(self, job: SyncJob) -> None:
        seconds = job.interval.total_seconds()
        while not self._stop_event.wait(seconds):
            try:
                job.func()
            except Exception as e:  # noqa: BLE001 - a failing run must not stop the schedule
                log.error("Sync job failed: job=%s error=%s", job.name, e)
                continue
            log.debug("Sync job completed: job=%s", job.name)


def create_default_scheduler(
    config: SyncConfig,
    *,
    claims_sync: Callable[[], None],
    internal_apis_sync: Callable[[], None],
) -> SyncScheduler:
    """Register the claims and internal-API sync jobs at configured intervals."""
    scheduler = SyncScheduler()
    scheduler.every(timedelta(minutes=config.claims_every_minutes), claims_sync, name="claims")
    scheduler.every(timedelta(hours=config.internal_apis_every_hours), internal_apis_sync, name="internal-apis")
    return scheduler
