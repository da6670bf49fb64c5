"""Periodic background jobs that keep the claims index in sync."""

from __future__ import annotations

from ClaimSearch.jobs.scheduler import SyncJob, SyncScheduler, create_default_scheduler

__all__ = ["SyncJob", "SyncScheduler", "create_default_scheduler"]
