from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from ClaimSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from ClaimSearch.config.scoring import ScoringConfig, check_scoring, load_scoring
from ClaimSearch.config.search import SearchConfig, check_search, load_search
from ClaimSearch.config.sync import SyncConfig, check_sync, load_sync

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    search: SearchConfig
    scoring: ScoringConfig
    sync: SyncConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    search = load_search(raw)
    scoring = load_scoring(raw)
    sync = load_sync(raw)

    check_runtime(runtime)
    check_search(search)
    check_scoring(scoring)
    check_sync(sync)

    return AppConfig(runtime=runtime, search=search, scoring=scoring, sync=sync)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: Override config file.
        default_path: Defaults file, ignored when ``defaults_text`` is given.
        defaults_text: Inline defaults YAML.

    Returns:
        Parsed and validated configuration.
    """
    if defaults_text is None:
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
        if config_path == default_path:
            return parse_config_dict(base)
    else:
        base = parse_yaml(defaults_text)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
