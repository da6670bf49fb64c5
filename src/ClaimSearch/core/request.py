from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Content-discovery request handed over by the API layer.

    Attributes:
        s: Raw query text typed by the user. May be empty.
        media_type: Comma-separated media families (e.g. ``"video,audio"``).
        content_type: Comma-separated exact content types (e.g. ``"video/mp4"``).
        claim_type: Claim kind, ``"channel"`` or ``"file"``.
        channel_id: Claim id of the owning channel.
        channel: Channel name pattern.
        nsfw: Restrict to (or away from) NSFW content.
        claim_id: Exact claim id.
    """

    s: str
    media_type: Optional[str] = None
    content_type: Optional[str] = None
    claim_type: Optional[str] = None
    channel_id: Optional[str] = None
    channel: Optional[str] = None
    nsfw: Optional[bool] = None
    claim_id: Optional[str] = None
