"""Tests for search body construction."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ClaimSearch.config import load_config
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.services import ClaimSearchService, create_search_service


class TestClaimSearchService(unittest.TestCase):
    def test_body_uses_default_size(self) -> None:
        service = ClaimSearchService(default_size=25)
        body = service.build_body(SearchRequest(s="cats"))
        self.assertEqual(body["size"], 25)
        self.assertEqual(body["from"], 0)
        self.assertIn("bool", body["query"])

    def test_explicit_paging(self) -> None:
        body = ClaimSearchService().build_body(SearchRequest(s="cats"), size=5, offset=20)
        self.assertEqual((body["size"], body["from"]), (5, 20))

    def test_invalid_paging(self) -> None:
        service = ClaimSearchService()
        with self.assertRaises(ValueError):
            service.build_body(SearchRequest(s="cats"), size=0)
        with self.assertRaises(ValueError):
            service.build_body(SearchRequest(s="cats"), offset=-1)

    def test_service_from_config(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        service = create_search_service(cfg)
        self.assertEqual(service.index, "claims")
        self.assertEqual(service.scoring, cfg.scoring)


if __name__ == "__main__":
    unittest.main()
