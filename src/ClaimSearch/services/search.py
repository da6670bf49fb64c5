"""Search body construction for the claims index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ClaimSearch.config.scoring import ScoringConfig
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.query.assembler import build_query
from ClaimSearch.serialize.elastic import to_elastic
from ClaimSearch.utils.log import log


@dataclass(slots=True)
class ClaimSearchService:
    """Builds request bodies for the search client.

    Transport is left to the caller; ``index`` names the target index.
    """

    index: str = "claims"
    default_size: int = 10
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def build_query(self, request: SearchRequest) -> dict[str, Any]:
        """Compile ``request`` into the query DSL."""
        return to_elastic(build_query(request), self.scoring)

    def build_body(
        self,
        request: SearchRequest,
        *,
        size: int | None = None,
        offset: int = 0,
    ) -> dict[str, Any]:
        """Build a full search body.

        Args:
            request: Parsed search request.
            size: Page size; the configured default when omitted.
            offset: Number of hits to skip.

        Returns:
            Mapping with ``query``, ``size`` and ``from``.

        Raises:
            ValueError: If ``size`` or ``offset`` is out of range.
        """
        resolved_size = self.default_size if size is None else size
        if resolved_size <= 0:
            raise ValueError("size must be positive")
        if offset < 0:
            raise ValueError("offset must be >= 0")
        log.debug("Building search body: index=%s size=%d from=%d", self.index, resolved_size, offset)
        return {
            "query": self.build_query(request),
            "size": resolved_size,
            "from": offset,
        }
