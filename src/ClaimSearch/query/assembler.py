"""Query assembly.

Root layout of every compiled query:

- ``should``: the four scoring functions (never required)
- ``must``: one nested bool whose ``should`` holds every text matcher, so at
  least one textual match is required
- ``filter``: conditional filters followed by the bid-state exclusion
"""

from __future__ import annotations

from ClaimSearch.core.nodes import BoolNode
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.query.filters import build_filters
from ClaimSearch.query.matchers import text_matchers
from ClaimSearch.query.scoring import scoring_clauses
from ClaimSearch.utils.log import log


def build_query(request: SearchRequest) -> BoolNode:
    """Compile ``request`` into a fresh query tree.

    Args:
        request: Parsed search request.

    Returns:
        Root bool node.
    """
    minimum_match = BoolNode.of(should=text_matchers(request.s))
    filters = build_filters(request)
    log.debug("Compiled query for s=%r with %d filter(s)", request.s, len(filters))
    return BoolNode.of(
        should=scoring_clauses(),
        must=[minimum_match],
        filter=filters,
    )
