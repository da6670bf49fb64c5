"""Wire-format serializers for compiled query trees."""

from __future__ import annotations

from ClaimSearch.serialize.elastic import to_elastic

__all__ = ["to_elastic"]
