"""Background sync schedule configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ClaimSearch.config.common import expect_int, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """Intervals of the periodic index synchronization jobs."""

    claims_every_minutes: int
    internal_apis_every_hours: int


def load_sync(raw: Mapping[str, Any]) -> SyncConfig:
    section = get_section(raw, "sync", required=False)
    return SyncConfig(
        claims_every_minutes=expect_int(
            get_optional_value(section, "claims_every_minutes", 15),
            "sync.claims_every_minutes",
        ),
        internal_apis_every_hours=expect_int(
            get_optional_value(section, "internal_apis_every_hours", 6),
            "sync.internal_apis_every_hours",
        ),
    )


def check_sync(config: SyncConfig) -> None:
    if config.claims_every_minutes <= 0:
        raise ValueError("sync.claims_every_minutes must be positive")
    if config.internal_apis_every_hours <= 0:
        raise ValueError("sync.internal_apis_every_hours must be positive")
