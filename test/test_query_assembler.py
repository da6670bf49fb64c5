"""Tests for the root query layout."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ClaimSearch.core.nodes import BoolNode, MatchNoneNode, ScoreFunction, ScoreFunctionNode
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.query import build_query
from ClaimSearch.query.filters import bid_state_filter


class TestBuildQuery(unittest.TestCase):
    def test_root_layout(self) -> None:
        root = build_query(SearchRequest(s="cats"))

        self.assertIsInstance(root, BoolNode)
        self.assertEqual(root.must_not, ())
        self.assertEqual(
            [node.function_id for node in root.should],
            [
                ScoreFunction.CLAIM_WEIGHT,
                ScoreFunction.CHANNEL_WEIGHT,
                ScoreFunction.RELEASE_TIME,
                ScoreFunction.CONTROLLING_BOOST,
            ],
        )
        self.assertTrue(all(isinstance(node, ScoreFunctionNode) for node in root.should))

        self.assertEqual(len(root.must), 1)
        minimum = root.must[0]
        self.assertIsInstance(minimum, BoolNode)
        self.assertEqual(len(minimum.should), 12)
        self.assertEqual((minimum.must, minimum.filter, minimum.must_not), ((), (), ()))

        self.assertEqual(root.filter, (bid_state_filter(),))

    def test_channel_query_boost(self) -> None:
        minimum = build_query(SearchRequest(s="@alice")).must[0]
        exact = [m for m in minimum.should if m.name == "name-match-@boost"]
        self.assertEqual(len(exact), 1)
        self.assertEqual(exact[0].boost, 1000.0)

    def test_empty_text_compiles(self) -> None:
        root = build_query(SearchRequest(s=""))
        self.assertEqual(len(root.must[0].should), 12)
        self.assertEqual(root.filter, (bid_state_filter(),))

    def test_unusable_media_type_forces_no_match(self) -> None:
        root = build_query(SearchRequest(s="cats", media_type="bogus"))
        self.assertEqual(root.filter, (MatchNoneNode(), bid_state_filter()))

    def test_repeated_builds_are_identical_but_fresh(self) -> None:
        request = SearchRequest(s='@x "y"', media_type="video,cad", claim_type="channel", nsfw=True)
        first = build_query(request)
        second = build_query(request)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        self.assertIsNot(first.must[0], second.must[0])


if __name__ == "__main__":
    unittest.main()
