"""Tests for claim document serialization and bulk actions."""

import json
import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ClaimSearch.core.models import ClaimDocument


def _make_claim(**overrides) -> ClaimDocument:
    values = {
        "claim_id": "abc123",
        "name": "cats-video",
        "bid_state": "Controlling",
        "effective_amount": 250,
        "title": "Cats",
        "content_type": "video/mp4",
        "release_time": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return ClaimDocument(**values)


class TestClaimDocument(unittest.TestCase):
    def test_document_uses_index_field_names_and_drops_empty(self) -> None:
        doc = _make_claim().to_document()
        self.assertEqual(
            doc,
            {
                "claimId": "abc123",
                "name": "cats-video",
                "bid_state": "Controlling",
                "effective_amount": 250,
                "title": "Cats",
                "content_type": "video/mp4",
                "release_time": "2024-01-02T03:04:05+00:00",
            },
        )

    def test_as_json_round_trips(self) -> None:
        claim = _make_claim(nsfw=True, value={"stream": {"source": {}}})
        decoded = json.loads(claim.as_json())
        self.assertTrue(decoded["nsfw"])
        self.assertEqual(decoded["value"], {"stream": {"source": {}}})

    def test_value_is_read_only(self) -> None:
        claim = _make_claim(value={"a": 1})
        with self.assertRaises(TypeError):
            claim.value["a"] = 2  # type: ignore[index]

    def test_bulk_actions(self) -> None:
        claim = _make_claim()
        index_action = claim.index_action("claims")
        self.assertEqual(index_action[0], {"index": {"_index": "claims", "_id": "abc123"}})
        self.assertEqual(index_action[1], claim.to_document())
        self.assertEqual(claim.update_action("claims")[1], {"doc": claim.to_document()})
        self.assertEqual(claim.delete_action("claims"), [{"delete": {"_index": "claims", "_id": "abc123"}}])

    def test_from_row_parses_timestamps(self) -> None:
        claim = ClaimDocument.from_row(
            {
                "claimId": "abc123",
                "name": "@chan",
                "claim_type": "channel",
                "transaction_time": 1700000000,
                "release_time": "2024-01-02T03:04:05Z",
                "certificate_amount": "10",
            }
        )
        self.assertEqual(claim.transaction_time, datetime.fromtimestamp(1700000000, tz=timezone.utc))
        self.assertEqual(claim.release_time, datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        self.assertEqual(claim.certificate_amount, 10)
        self.assertIsNone(claim.title)

    def test_from_row_requires_identity(self) -> None:
        with self.assertRaises(ValueError):
            ClaimDocument.from_row({"name": "x"})


if __name__ == "__main__":
    unittest.main()
