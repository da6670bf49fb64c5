"""Search domain configuration (target index and paging)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ClaimSearch.config.common import (
    check_non_empty,
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)

MAX_PAGE_SIZE = 10_000


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search body settings."""

    index: str
    size: int


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    section = get_section(raw, "search", required=False)
    return SearchConfig(
        index=expect_str(get_optional_value(section, "index", "claims"), "search.index"),
        size=expect_int(get_optional_value(section, "size", 10), "search.size"),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If the index is blank or the page size is out of range.
    """
    check_non_empty(config.index, "search.index")
    if not 0 < config.size <= MAX_PAGE_SIZE:
        raise ValueError(f"search.size must be between 1 and {MAX_PAGE_SIZE}")
