from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Optional

from dateutil import parser as dt_parser


@dataclass(frozen=True, slots=True)
class ClaimDocument:
    """Indexed claim record.

    Attribute names follow Python conventions; `to_document` maps them to the
    field names of the index schema.

    Attributes:
        claim_id: Claim id, also the document id.
        name: Claim name (channel names start with ``@``).
        bid_state: Lifecycle status of the backing bid.
        effective_amount: Effective bid amount of the claim.
        certificate_amount: Effective bid amount of the owning channel.
        transaction_time: Time of the claim transaction; None in mempool.
        release_time: Publisher-declared release time.
        value: Decoded claim metadata.
    """

    claim_id: str
    name: str
    bid_state: str = ""
    channel: Optional[str] = None
    channel_claim_id: Optional[str] = None
    effective_amount: int = 0
    certificate_amount: int = 0
    transaction_time: Optional[datetime] = None
    title: Optional[str] = None
    description: Optional[str] = None
    release_time: Optional[datetime] = None
    content_type: Optional[str] = None
    cert_valid: bool = False
    claim_type: Optional[str] = None
    frame_width: Optional[int] = None
    frame_height: Optional[int] = None
    duration: Optional[int] = None
    nsfw: bool = False
    view_cnt: Optional[int] = None
    sub_cnt: Optional[int] = None
    thumbnail_url: Optional[str] = None
    fee: Optional[float] = None
    value: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", MappingProxyType(dict(self.value)))

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> ClaimDocument:
        """Build a document from a sync row keyed by index field names.

        Timestamps may be datetimes, ISO strings or unix seconds.

        Raises:
            ValueError: If ``claimId`` or ``name`` is missing.
        """
        claim_id = row.get("claimId")
        name = row.get("name")
        if not claim_id or name is None:
            raise ValueError("Claim row requires claimId and name")
        return cls(
            claim_id=str(claim_id),
            name=str(name),
            bid_state=str(row.get("bid_state") or ""),
            channel=row.get("channel"),
            channel_claim_id=row.get("channel_claim_id"),
            effective_amount=int(row.get("effective_amount") or 0),
            certificate_amount=int(row.get("certificate_amount") or 0),
            transaction_time=_parse_time(row.get("transaction_time")),
            title=row.get("title"),
            description=row.get("description"),
            release_time=_parse_time(row.get("release_time")),
            content_type=row.get("content_type"),
            cert_valid=bool(row.get("cert_valid")),
            claim_type=row.get("claim_type"),
            frame_width=row.get("frame_width"),
            frame_height=row.get("frame_height"),
            duration=row.get("duration"),
            nsfw=bool(row.get("nsfw")),
            view_cnt=row.get("view_cnt"),
            sub_cnt=row.get("sub_cnt"),
            thumbnail_url=row.get("thumbnail_url"),
            fee=row.get("fee"),
            value=row.get("value") or {},
        )

    def to_document(self) -> dict[str, Any]:
        """Return the index document, omitting empty values."""
        raw: dict[str, Any] = {
            "claimId": self.claim_id,
            "name": self.name,
            "channel": self.channel,
            "channel_claim_id": self.channel_claim_id,
            "bid_state": self.bid_state,
            "effective_amount": self.effective_amount,
            "transaction_time": _format_time(self.transaction_time),
            "certificate_amount": self.certificate_amount,
            "value": dict(self.value),
            "title": self.title,
            "description": self.description,
            "release_time": _format_time(self.release_time),
            "content_type": self.content_type,
            "cert_valid": self.cert_valid,
            "claim_type": self.claim_type,
            "frame_width": self.frame_width,
            "frame_height": self.frame_height,
            "duration": self.duration,
            "nsfw": self.nsfw,
            "view_cnt": self.view_cnt,
            "sub_cnt": self.sub_cnt,
            "thumbnail_url": self.thumbnail_url,
            "fee": self.fee,
        }
        return {k: v for k, v in raw.items() if v not in (None, "", 0, False, {})}

    def as_json(self) -> str:
        return json.dumps(self.to_document(), ensure_ascii=False, sort_keys=True)

    def index_action(self, index: str) -> list[dict[str, Any]]:
        """Bulk ``index`` action: header line followed by the document."""
        return [{"index": {"_index": index, "_id": self.claim_id}}, self.to_document()]

    def update_action(self, index: str) -> list[dict[str, Any]]:
        """Bulk partial ``update`` action."""
        return [{"update": {"_index": index, "_id": self.claim_id}}, {"doc": self.to_document()}]

    def delete_action(self, index: str) -> list[dict[str, Any]]:
        return [{"delete": {"_index": index, "_id": self.claim_id}}]


def _parse_time(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc) if value else None
    return dt_parser.parse(str(value))


def _format_time(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None
