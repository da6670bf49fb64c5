"""Engine-neutral query tree.

Nodes are immutable; builders always return freshly constructed trees so a
node is never shared between two compiled queries. The serializers in
``ClaimSearch.serialize`` translate a tree into a concrete engine's wire
format.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union


class MatchMode(str, Enum):
    """How a `MatchNode` compares its value against the field."""

    EXACT = "exact"
    PHRASE = "phrase"
    PHRASE_PREFIX = "phrase_prefix"
    SUBSTRING = "substring"
    PATTERN = "pattern"


class ScoreFunction(str, Enum):
    """Score adjustments contributed to the root ``should`` branch."""

    CLAIM_WEIGHT = "claim_weight"
    CHANNEL_WEIGHT = "channel_weight"
    RELEASE_TIME = "release_time"
    CONTROLLING_BOOST = "controlling_boost"


@dataclass(frozen=True, slots=True)
class MatchNode:
    """Single-field text match.

    For `MatchMode.SUBSTRING` and `MatchMode.PATTERN` the value is a
    pattern-syntax string (already wrapped/escaped by the caller).
    """

    field: str
    value: Any
    mode: MatchMode = MatchMode.EXACT
    boost: Optional[float] = None
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TermsNode:
    """Field equals any of ``values``."""

    field: str
    values: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PrefixNode:
    """Field starts with ``prefix``."""

    field: str
    prefix: str


@dataclass(frozen=True, slots=True)
class ScoreFunctionNode:
    """Opaque reference to a scoring function resolved at serialization."""

    function_id: ScoreFunction
    weight: float = 1.0


@dataclass(frozen=True, slots=True)
class MatchNoneNode:
    """Matches no document."""


@dataclass(frozen=True, slots=True)
class BoolNode:
    """Boolean composition.

    Attributes:
        must: Required clauses that also contribute to the score.
        should: Optional clauses; at least one must hold when ``must`` and
            ``filter`` are empty, otherwise they only add score.
        filter: Required clauses that do not contribute to the score.
        must_not: Clauses that must not hold.
    """

    must: tuple["QueryNode", ...] = ()
    should: tuple["QueryNode", ...] = ()
    filter: tuple["QueryNode", ...] = ()
    must_not: tuple["QueryNode", ...] = ()

    @classmethod
    def of(
        cls,
        *,
        must: Sequence["QueryNode"] = (),
        should: Sequence["QueryNode"] = (),
        filter: Sequence["QueryNode"] = (),  # noqa: A002 - mirrors the bool slot name
        must_not: Sequence["QueryNode"] = (),
    ) -> "BoolNode":
        """Build a node from arbitrary sequences."""
        return cls(must=tuple(must), should=tuple(should), filter=tuple(filter), must_not=tuple(must_not))


QueryNode = Union[BoolNode, MatchNode, TermsNode, PrefixNode, ScoreFunctionNode, MatchNoneNode]
