"""Score adjustments applied once a document already matches.

The clauses only reference the functions; their parameters live in
`ClaimSearch.config.scoring.ScoringConfig` and are resolved by the serializer.
"""

from __future__ import annotations

from ClaimSearch.core.nodes import ScoreFunction, ScoreFunctionNode


SCORING_ORDER = (
    ScoreFunction.CLAIM_WEIGHT,
    ScoreFunction.CHANNEL_WEIGHT,
    ScoreFunction.RELEASE_TIME,
    ScoreFunction.CONTROLLING_BOOST,
)


def scoring_clauses() -> list[ScoreFunctionNode]:
    """Return one non-mandatory clause per scoring function."""
    return [ScoreFunctionNode(function_id) for function_id in SCORING_ORDER]
