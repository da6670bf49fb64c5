"""Tests for the compile CLI command."""

import json
import sys
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ClaimSearch.cli.ui import cli

_CONFIG = str(REPO_ROOT / "config" / "default.yml")


def _invoke(*args: str):
    return CliRunner().invoke(cli, ["--config", _CONFIG, "compile", *args])


def _stdout(result) -> str:
    # Log lines go to stderr; older click versions mix them into ``output``.
    return getattr(result, "stdout", result.output)


class TestCompileCommand(unittest.TestCase):
    def test_compile_prints_search_body(self) -> None:
        result = _invoke("@alice", "--media-type", "video,bogus", "--claim-type", "file", "--size", "3")

        self.assertEqual(result.exit_code, 0, result.output)
        body = json.loads(_stdout(result)[_stdout(result).index("{"):])
        self.assertEqual(body["size"], 3)
        filters = body["query"]["bool"]["filter"]
        self.assertIn({"bool": {"should": [{"prefix": {"content_type.keyword": "video/"}}]}}, filters)
        self.assertIn({"match": {"claim_type": {"query": "stream"}}}, filters)
        self.assertEqual(filters[-1]["bool"]["must_not"][0]["match"]["bid_state"]["query"], "Accepted")

    def test_nsfw_flag(self) -> None:
        result = _invoke("cats", "--nsfw", "false")

        self.assertEqual(result.exit_code, 0, result.output)
        body = json.loads(_stdout(result)[_stdout(result).index("{"):])
        self.assertIn({"match": {"nsfw": {"query": False}}}, body["query"]["bool"]["filter"])

    def test_missing_config_fails(self) -> None:
        result = CliRunner().invoke(cli, ["--config", "does/not/exist.yml", "compile", "cats"])
        self.assertNotEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
