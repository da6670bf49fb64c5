"""Query compilation: request -> engine-neutral query tree."""

from __future__ import annotations

from ClaimSearch.query.assembler import build_query

__all__ = ["build_query"]
