"""Non-scoring filters.

Every builder returns ``None`` when it does not apply, except the bid-state
filter which is always part of a compiled query.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from ClaimSearch.core.nodes import BoolNode, MatchMode, MatchNode, MatchNoneNode, PrefixNode, QueryNode, TermsNode
from ClaimSearch.core.request import SearchRequest
from ClaimSearch.query.text import extract_exact_phrases
from ClaimSearch.utils.log import log


EXCLUDED_BID_STATE = "Accepted"
CONTENT_TYPE_KEYWORD = "content_type.keyword"
EXACT_PHRASE_FIELDS = ("channel", "name", "title", "description")


class MediaType(str, Enum):
    AUDIO = "audio"
    VIDEO = "video"
    TEXT = "text"
    APPLICATION = "application"
    IMAGE = "image"
    CAD = "cad"


class ClaimType(str, Enum):
    """Claim kinds accepted on requests."""

    CHANNEL = "channel"
    FILE = "file"


class IndexedClaimType(str, Enum):
    """Claim kinds as stored in the index."""

    CHANNEL = "channel"
    STREAM = "stream"


_CLAIM_TYPES: Mapping[ClaimType, IndexedClaimType] = MappingProxyType(
    {
        ClaimType.CHANNEL: IndexedClaimType.CHANNEL,
        ClaimType.FILE: IndexedClaimType.STREAM,
    }
)

# Media families matched by MIME prefix; anything else needs an explicit rule.
_PREFIX_MEDIA_TYPES = frozenset(
    {MediaType.AUDIO, MediaType.VIDEO, MediaType.TEXT, MediaType.APPLICATION, MediaType.IMAGE}
)
_EXPLICIT_MEDIA_TYPES: Mapping[MediaType, tuple[str, ...]] = MappingProxyType(
    {MediaType.CAD: ("SKP", "simplify3d_stl")}
)


def _check_lookup_tables() -> None:
    missing_claim = set(ClaimType) - set(_CLAIM_TYPES)
    if missing_claim:
        raise RuntimeError(f"Claim types without index mapping: {sorted(m.value for m in missing_claim)}")
    missing_media = set(MediaType) - _PREFIX_MEDIA_TYPES - set(_EXPLICIT_MEDIA_TYPES)
    if missing_media:
        raise RuntimeError(f"Media types without filter rule: {sorted(m.value for m in missing_media)}")


_check_lookup_tables()


def _parse_enum(enum_cls: type[Enum], value: str) -> Optional[Enum]:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def bid_state_filter() -> BoolNode:
    """Exclude claims whose bid state is ``Accepted``."""
    return BoolNode(must_not=(MatchNode("bid_state", EXCLUDED_BID_STATE),))


def nsfw_filter(nsfw: Optional[bool]) -> Optional[MatchNode]:
    if nsfw is None:
        return None
    return MatchNode("nsfw", nsfw)


def content_type_filter(content_type: Optional[str]) -> Optional[TermsNode]:
    if content_type is None:
        return None
    return TermsNode("content_type", tuple(content_type.split(",")))


def media_type_clauses(media_type: Optional[str]) -> list[QueryNode]:
    """Translate comma-separated media families into OR-able clauses.

    Unknown tokens are dropped.
    """
    if media_type is None:
        return []
    clauses: list[QueryNode] = []
    for token in media_type.split(","):
        parsed = _parse_enum(MediaType, token)
        if parsed is None:
            log.debug("Dropping unknown media type: %r", token)
            continue
        if parsed in _PREFIX_MEDIA_TYPES:
            clauses.append(PrefixNode(CONTENT_TYPE_KEYWORD, f"{parsed.value}/"))
        else:
            clauses.append(TermsNode(CONTENT_TYPE_KEYWORD, _EXPLICIT_MEDIA_TYPES[parsed]))
    return clauses


def media_type_filter(media_type: Optional[str]) -> Optional[QueryNode]:
    """Media type filter.

    A requested media type that yields no usable clause matches nothing, so a
    mistyped value never returns unfiltered results.
    """
    if media_type is None:
        return None
    clauses = media_type_clauses(media_type)
    if not clauses:
        log.debug("No usable media type in %r, forcing empty result", media_type)
        return MatchNoneNode()
    return BoolNode(should=tuple(clauses))


def claim_type_filter(claim_type: Optional[str]) -> Optional[MatchNode]:
    if claim_type is None:
        return None
    parsed = _parse_enum(ClaimType, claim_type)
    if parsed is None:
        log.debug("Ignoring unknown claim type: %r", claim_type)
        return None
    return MatchNode("claim_type", _CLAIM_TYPES[parsed].value)


def channel_id_filter(channel_id: Optional[str]) -> Optional[MatchNode]:
    if channel_id is None:
        return None
    return MatchNode("channel_claim_id", channel_id)


def channel_filter(channel: Optional[str]) -> Optional[BoolNode]:
    """Pattern search on the channel name; the text is used unescaped."""
    if channel is None:
        return None
    return BoolNode(must=(MatchNode("channel", channel, MatchMode.PATTERN),))


def claim_id_filter(claim_id: Optional[str]) -> Optional[MatchNode]:
    if claim_id is None:
        return None
    return MatchNode("claimId", claim_id)


def exact_phrase_filter(text: str) -> Optional[BoolNode]:
    """Require every trailing quoted phrase to appear verbatim in some field."""
    phrases = extract_exact_phrases(text)
    if not phrases:
        return None
    clauses = [
        MatchNode(field, phrase, MatchMode.PHRASE, name=f"{field}-exact")
        for phrase in phrases
        for field in EXACT_PHRASE_FIELDS
    ]
    return BoolNode(should=tuple(clauses))


def build_filters(request: SearchRequest) -> list[QueryNode]:
    """Collect all applicable filters for ``request``.

    Returns:
        Filters in a stable order, always ending with the bid-state filter.
    """
    candidates = (
        exact_phrase_filter(request.s),
        nsfw_filter(request.nsfw),
        content_type_filter(request.content_type),
        media_type_filter(request.media_type),
        claim_type_filter(request.claim_type),
        channel_id_filter(request.channel_id),
        channel_filter(request.channel),
        claim_id_filter(request.claim_id),
    )
    filters: list[QueryNode] = [f for f in candidates if f is not None]
    filters.append(bid_state_filter())
    return filters
