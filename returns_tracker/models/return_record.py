"""Domain model for a return record and the request that creates one."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from returns_tracker.models.envelope import parse_date, require
from returns_tracker.models.reference import Channel, Store


@dataclass(frozen=True, slots=True)
class ReturnRecord:
    id: int
    tracking: str
    channel_id: int
    store_id: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    channel: Channel
    store: Store

    @property
    def was_updated(self) -> bool:
        return self.updated_at is not None and self.updated_at != self.created_at

    # ---------- mappings ----------
    @classmethod
    def from_api(cls, doc: Dict[str, Any]) -> "ReturnRecord":
        """Build a `ReturnRecord` from one entry of ``return_mobiles``."""
        return cls(
            id=require(doc, "id", int),
            tracking=require(doc, "tracking", str),
            channel_id=require(doc, "channel_id", int),
            store_id=require(doc, "store_id", int),
            created_at=parse_date(doc.get("created_at")),
            updated_at=parse_date(doc.get("updated_at")),
            channel=Channel.from_api(require(doc, "channel", dict)),
            store=Store.from_api(require(doc, "store", dict)),
        )


@dataclass(frozen=True, slots=True)
class CreateReturnRequest:
    channel_id: int
    store_id: int
    tracking: str

    def to_api(self) -> Dict[str, Any]:
        return asdict(self)
