"""Search service layer for ClaimSearch.

Wires query compilation, scoring parameters and serialization together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ClaimSearch.services.search import ClaimSearchService

if TYPE_CHECKING:
    from ClaimSearch.config import AppConfig


def create_search_service(config: AppConfig) -> ClaimSearchService:
    """Create a search service from application configuration."""
    return ClaimSearchService(
        index=config.search.index,
        default_size=config.search.size,
        scoring=config.scoring,
    )


__all__ = ["ClaimSearchService", "create_search_service"]
