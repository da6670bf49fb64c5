"""Tests for the Elasticsearch query DSL serializer."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ClaimSearch.config.scoring import ControllingBoostConfig, DecayConfig, ScoringConfig
from ClaimSearch.core.nodes import (
    BoolNode,
    MatchMode,
    MatchNode,
    MatchNoneNode,
    PrefixNode,
    ScoreFunction,
    ScoreFunctionNode,
    TermsNode,
)
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.query import build_query
from ClaimSearch.serialize import to_elastic


class TestLeafNodes(unittest.TestCase):
    def test_match_modes(self) -> None:
        self.assertEqual(
            to_elastic(MatchNode("title", "cats", MatchMode.EXACT, boost=3.0, name="title-match")),
            {"match": {"title": {"query": "cats", "boost": 3.0, "_name": "title-match"}}},
        )
        self.assertEqual(
            to_elastic(MatchNode("title", "cats", MatchMode.PHRASE)),
            {"match_phrase": {"title": {"query": "cats"}}},
        )
        self.assertEqual(
            to_elastic(MatchNode("title", "cats", MatchMode.PHRASE_PREFIX, boost=2.0)),
            {"match_phrase_prefix": {"title": {"query": "cats", "boost": 2.0}}},
        )

    def test_substring_and_pattern_use_query_string(self) -> None:
        self.assertEqual(
            to_elastic(MatchNode("name", "*cats*", MatchMode.SUBSTRING, boost=5.0, name="name-contains")),
            {"query_string": {"query": "*cats*", "fields": ["name"], "boost": 5.0, "_name": "name-contains"}},
        )
        self.assertEqual(
            to_elastic(MatchNode("channel", "@chan", MatchMode.PATTERN)),
            {"query_string": {"query": "@chan", "fields": ["channel"]}},
        )

    def test_terms_prefix_and_match_none(self) -> None:
        self.assertEqual(to_elastic(TermsNode("content_type", ("a", "b"))), {"terms": {"content_type": ["a", "b"]}})
        self.assertEqual(
            to_elastic(PrefixNode("content_type.keyword", "video/")),
            {"prefix": {"content_type.keyword": "video/"}},
        )
        self.assertEqual(to_elastic(MatchNoneNode()), {"match_none": {}})

    def test_bool_omits_empty_slots(self) -> None:
        node = BoolNode(must_not=(MatchNode("bid_state", "Accepted"),))
        self.assertEqual(
            to_elastic(node),
            {"bool": {"must_not": [{"match": {"bid_state": {"query": "Accepted"}}}]}},
        )
        self.assertEqual(to_elastic(BoolNode()), {"bool": {}})

    def test_unknown_node_type(self) -> None:
        with self.assertRaises(TypeError):
            to_elastic("not a node")  # type: ignore[arg-type]


class TestScoreFunctions(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(
            to_elastic(ScoreFunctionNode(ScoreFunction.CLAIM_WEIGHT)),
            {
                "function_score": {
                    "field_value_factor": {
                        "field": "effective_amount",
                        "factor": 1.0,
                        "modifier": "log1p",
                        "missing": 1.0,
                    },
                    "boost": 1.0,
                }
            },
        )
        channel = to_elastic(ScoreFunctionNode(ScoreFunction.CHANNEL_WEIGHT))
        self.assertEqual(channel["function_score"]["field_value_factor"]["field"], "certificate_amount")

    def test_release_time_uses_configured_origin(self) -> None:
        scoring = ScoringConfig(
            release_time=DecayConfig(function="exp", origin="2024-01-01T00:00:00+00:00", scale="30d"),
        )
        self.assertEqual(
            to_elastic(ScoreFunctionNode(ScoreFunction.RELEASE_TIME, weight=2.0), scoring),
            {
                "function_score": {
                    "exp": {
                        "release_time": {
                            "origin": "2024-01-01T00:00:00+00:00",
                            "scale": "30d",
                            "offset": "7d",
                            "decay": 0.6,
                        }
                    },
                    "boost": 2.0,
                }
            },
        )

    def test_controlling_boost(self) -> None:
        scoring = ScoringConfig(controlling=ControllingBoostConfig(boost=5.0))
        self.assertEqual(
            to_elastic(ScoreFunctionNode(ScoreFunction.CONTROLLING_BOOST), scoring),
            {
                "function_score": {
                    "query": {"match": {"bid_state": {"query": "Controlling"}}},
                    "boost": 5.0,
                }
            },
        )


class TestCompiledQuery(unittest.TestCase):
    def test_full_query_is_json_serializable(self) -> None:
        request = SearchRequest(s='@alice "bar baz"', media_type="video", nsfw=False, channel="@alice")
        body = to_elastic(build_query(request))
        decoded = json.loads(json.dumps(body))
        bool_body = decoded["bool"]
        self.assertEqual(len(bool_body["should"]), 4)
        self.assertEqual(len(bool_body["must"][0]["bool"]["should"]), 12)
        self.assertEqual(bool_body["filter"][-1], {"bool": {"must_not": [{"match": {"bid_state": {"query": "Accepted"}}}]}})
        self.assertIn({"match": {"nsfw": {"query": False}}}, bool_body["filter"])
        self.assertNotIn("must_not", bool_body)

    def test_serialization_is_deterministic(self) -> None:
        request = SearchRequest(s="cats", media_type="audio,cad")
        scoring = ScoringConfig(release_time=DecayConfig(origin="2024-06-01T00:00:00+00:00"))
        first = json.dumps(to_elastic(build_query(request), scoring), sort_keys=True)
        second = json.dumps(to_elastic(build_query(request), scoring), sort_keys=True)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
