"""CLI package for ClaimSearch.

Click definitions live in `ui`, execution and resource handling in `runner`,
and command logic in `commands`.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from ClaimSearch.cli.runner import CommandRunner
from ClaimSearch.cli.ui import cli


def main() -> None:
    """Run ClaimSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
