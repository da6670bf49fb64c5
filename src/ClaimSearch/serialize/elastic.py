"""Elasticsearch query DSL serializer.

Translates the engine-neutral tree into plain dicts ready for ``json.dumps``.

Mapping
- BoolNode                   -> bool (empty slots omitted)
- MatchNode EXACT            -> match
- MatchNode PHRASE           -> match_phrase
- MatchNode PHRASE_PREFIX    -> match_phrase_prefix
- MatchNode SUBSTRING/PATTERN -> query_string restricted to the field
- TermsNode / PrefixNode     -> terms / prefix
- MatchNoneNode              -> match_none
- ScoreFunctionNode          -> function_score, parameters from ScoringConfig
"""

from __future__ import annotations

from typing import Any, Optional

from ClaimSearch.config.scoring import ScoringConfig
from ClaimSearch.core.nodes import (
    BoolNode,
    MatchMode,
    MatchNode,
    MatchNoneNode,
    PrefixNode,
    QueryNode,
    ScoreFunction,
    ScoreFunctionNode,
    TermsNode,
)


_MATCH_KEYS = {
    MatchMode.EXACT: "match",
    MatchMode.PHRASE: "match_phrase",
    MatchMode.PHRASE_PREFIX: "match_phrase_prefix",
}
_BOOL_SLOTS = ("must", "should", "filter", "must_not")


def to_elastic(node: QueryNode, scoring: Optional[ScoringConfig] = None) -> dict[str, Any]:
    """Serialize ``node`` into the Elasticsearch query DSL.

    Args:
        node: Root of a compiled query tree.
        scoring: Scoring function parameters; defaults apply when omitted.

    Returns:
        Query DSL mapping.

    Raises:
        TypeError: If the tree contains an unknown node type.
    """
    return _Serializer(scoring or ScoringConfig()).visit(node)


class _Serializer:
    def __init__(self, scoring: ScoringConfig) -> None:
        self._scoring = scoring

    def visit(self, node: QueryNode) -> dict[str, Any]:
        if isinstance(node, BoolNode):
            return self._bool(node)
        if isinstance(node, MatchNode):
            return _match(node)
        if isinstance(node, TermsNode):
            return {"terms": {node.field: list(node.values)}}
        if isinstance(node, PrefixNode):
            return {"prefix": {node.field: node.prefix}}
        if isinstance(node, MatchNoneNode):
            return {"match_none": {}}
        if isinstance(node, ScoreFunctionNode):
            return self._function_score(node)
        raise TypeError(f"Unsupported query node: {type(node).__name__}")

    def _bool(self, node: BoolNode) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for slot in _BOOL_SLOTS:
            children = getattr(node, slot)
            if children:
                body[slot] = [self.visit(child) for child in children]
        return {"bool": body}

    def _function_score(self, node: ScoreFunctionNode) -> dict[str, Any]:
        scoring = self._scoring
        if node.function_id in (ScoreFunction.CLAIM_WEIGHT, ScoreFunction.CHANNEL_WEIGHT):
            fvf = scoring.claim_weight if node.function_id is ScoreFunction.CLAIM_WEIGHT else scoring.channel_weight
            body: dict[str, Any] = {
                "field_value_factor": {
                    "field": fvf.field,
                    "factor": fvf.factor,
                    "modifier": fvf.modifier,
                    "missing": fvf.missing,
                }
            }
        elif node.function_id is ScoreFunction.RELEASE_TIME:
            decay = scoring.release_time
            body = {
                decay.function: {
                    decay.field: {
                        "origin": decay.origin,
                        "scale": decay.scale,
                        "offset": decay.offset,
                        "decay": decay.decay,
                    }
                }
            }
        elif node.function_id is ScoreFunction.CONTROLLING_BOOST:
            controlling = scoring.controlling
            return {
                "function_score": {
                    "query": {"match": {controlling.field: {"query": controlling.value}}},
                    "boost": controlling.boost * node.weight,
                }
            }
        else:
            raise TypeError(f"Unsupported score function: {node.function_id}")
        body["boost"] = node.weight
        return {"function_score": body}


def _match(node: MatchNode) -> dict[str, Any]:
    options: dict[str, Any]
    if node.mode in (MatchMode.SUBSTRING, MatchMode.PATTERN):
        options = {"query": node.value, "fields": [node.field]}
        _add_common(options, node)
        return {"query_string": options}

    options = {"query": node.value}
    _add_common(options, node)
    return {_MATCH_KEYS[node.mode]: {node.field: options}}


def _add_common(options: dict[str, Any], node: MatchNode) -> None:
    if node.boost is not None:
        options["boost"] = node.boost
    if node.name is not None:
        options["_name"] = node.name
