"""Scoring domain configuration.

Parameters of the four score adjustments referenced by compiled queries. The
release-time origin is either ``now`` (resolved by the engine at query time)
or a fixed timestamp, which makes serialized queries reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from dateutil import parser as dt_parser

from ClaimSearch.config.common import (
    check_non_empty,
    expect_float,
    expect_str,
    get_optional_value,
    get_section,
)

_ALLOWED_MODIFIERS = {"none", "log", "log1p", "log2p", "ln", "ln1p", "ln2p", "square", "sqrt", "reciprocal"}
_ALLOWED_DECAY_FUNCTIONS = {"gauss", "exp", "linear"}


@dataclass(frozen=True, slots=True)
class FieldValueFactorConfig:
    """Boost by a numeric document field."""

    field: str
    factor: float = 1.0
    modifier: str = "log1p"
    missing: float = 1.0


@dataclass(frozen=True, slots=True)
class DecayConfig:
    """Decay function on a date field.

    Attributes:
        function: One of gauss/exp/linear.
        origin: ``now`` or an ISO-8601 timestamp.
        scale: Distance from origin+offset at which the score equals ``decay``.
        offset: Distance from origin within which no decay applies.
        decay: Score at ``scale`` distance.
    """

    field: str = "release_time"
    function: str = "gauss"
    origin: str = "now"
    scale: str = "60d"
    offset: str = "7d"
    decay: float = 0.6


@dataclass(frozen=True, slots=True)
class ControllingBoostConfig:
    field: str = "bid_state"
    value: str = "Controlling"
    boost: float = 20.0


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Store validated scoring function parameters."""

    claim_weight: FieldValueFactorConfig = field(
        default_factory=lambda: FieldValueFactorConfig(field="effective_amount")
    )
    channel_weight: FieldValueFactorConfig = field(
        default_factory=lambda: FieldValueFactorConfig(field="certificate_amount")
    )
    release_time: DecayConfig = field(default_factory=DecayConfig)
    controlling: ControllingBoostConfig = field(default_factory=ControllingBoostConfig)


def load_scoring(raw: Mapping[str, Any]) -> ScoringConfig:
    """Load scoring domain config; every key is optional.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed scoring configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the release time origin is not a timestamp.
    """
    section = get_section(raw, "scoring", required=False)
    defaults = ScoringConfig()
    return ScoringConfig(
        claim_weight=_load_field_value_factor(section, "claim_weight", defaults.claim_weight),
        channel_weight=_load_field_value_factor(section, "channel_weight", defaults.channel_weight),
        release_time=_load_decay(section, defaults.release_time),
        controlling=_load_controlling(section, defaults.controlling),
    )


def check_scoring(config: ScoringConfig) -> None:
    """Validate scoring domain constraints.

    Raises:
        ValueError: If values violate scoring constraints.
    """
    for key, fvf in (("claim_weight", config.claim_weight), ("channel_weight", config.channel_weight)):
        check_non_empty(fvf.field, f"scoring.{key}.field")
        if fvf.factor <= 0:
            raise ValueError(f"scoring.{key}.factor must be positive")
        if fvf.modifier not in _ALLOWED_MODIFIERS:
            raise ValueError(f"scoring.{key}.modifier must be one of {sorted(_ALLOWED_MODIFIERS)}")

    decay = config.release_time
    check_non_empty(decay.field, "scoring.release_time.field")
    if decay.function not in _ALLOWED_DECAY_FUNCTIONS:
        raise ValueError(f"scoring.release_time.function must be one of {sorted(_ALLOWED_DECAY_FUNCTIONS)}")
    check_non_empty(decay.scale, "scoring.release_time.scale")
    if not 0.0 < decay.decay < 1.0:
        raise ValueError("scoring.release_time.decay must be between 0 and 1 (exclusive)")

    check_non_empty(config.controlling.field, "scoring.controlling.field")
    check_non_empty(config.controlling.value, "scoring.controlling.value")
    if config.controlling.boost <= 0:
        raise ValueError("scoring.controlling.boost must be positive")


def normalize_origin(value: str, config_key: str) -> str:
    """Return ``now`` unchanged, otherwise the timestamp in ISO-8601 form."""
    if value.strip().lower() == "now":
        return "now"
    try:
        return dt_parser.isoparse(value.strip()).isoformat()
    except ValueError as e:
        raise ValueError(f"{config_key} must be 'now' or an ISO-8601 timestamp") from e


def _load_field_value_factor(
    section: Mapping[str, Any], key: str, default: FieldValueFactorConfig
) -> FieldValueFactorConfig:
    sub = get_section(section, key, required=False)
    prefix = f"scoring.{key}"
    return FieldValueFactorConfig(
        field=expect_str(get_optional_value(sub, "field", default.field), f"{prefix}.field"),
        factor=expect_float(get_optional_value(sub, "factor", default.factor), f"{prefix}.factor"),
        modifier=expect_str(get_optional_value(sub, "modifier", default.modifier), f"{prefix}.modifier").lower(),
        missing=expect_float(get_optional_value(sub, "missing", default.missing), f"{prefix}.missing"),
    )


def _load_decay(section: Mapping[str, Any], default: DecayConfig) -> DecayConfig:
    sub = get_section(section, "release_time", required=False)
    origin = expect_str(get_optional_value(sub, "origin", default.origin), "scoring.release_time.origin")
    return DecayConfig(
        field=expect_str(get_optional_value(sub, "field", default.field), "scoring.release_time.field"),
        function=expect_str(
            get_optional_value(sub, "function", default.function), "scoring.release_time.function"
        ).lower(),
        origin=normalize_origin(origin, "scoring.release_time.origin"),
        scale=expect_str(get_optional_value(sub, "scale", default.scale), "scoring.release_time.scale"),
        offset=expect_str(get_optional_value(sub, "offset", default.offset), "scoring.release_time.offset"),
        decay=expect_float(get_optional_value(sub, "decay", default.decay), "scoring.release_time.decay"),
    )


def _load_controlling(section: Mapping[str, Any], default: ControllingBoostConfig) -> ControllingBoostConfig:
    sub = get_section(section, "controlling", required=False)
    return ControllingBoostConfig(
        field=expect_str(get_optional_value(sub, "field", default.field), "scoring.controlling.field"),
        value=expect_str(get_optional_value(sub, "value", default.value), "scoring.controlling.value"),
        boost=expect_float(get_optional_value(sub, "boost", default.boost), "scoring.controlling.boost"),
    )
