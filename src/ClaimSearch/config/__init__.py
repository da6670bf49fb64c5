from __future__ import annotations

"""Public configuration API for ClaimSearch."""

from ClaimSearch.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from ClaimSearch.config.runtime import RuntimeConfig
from ClaimSearch.config.scoring import ScoringConfig
from ClaimSearch.config.search import SearchConfig
from ClaimSearch.config.sync import SyncConfig

__all__ = [
    "RuntimeConfig",
    "SearchConfig",
    "ScoringConfig",
    "SyncConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
