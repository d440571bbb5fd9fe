"""Small reference datasets offered by the pickers: stores and channels."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from returns_tracker.models.envelope import parse_date, require


@dataclass(frozen=True, slots=True)
class SelectableItem:
    """Anything a RemoteSelector can offer. Identity is ``id``."""

    id: int
    code: str
    name: str

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on ``code`` or ``name``."""
        needle = needle.lower()
        return needle in self.code.lower() or needle in self.name.lower()

    def label(self) -> str:
        return f"{self.name} ({self.code})"

    @classmethod
    def from_api(cls, doc: Dict[str, Any]) -> "SelectableItem":
        return cls(
            id=require(doc, "id", int),
            code=require(doc, "code", str),
            name=require(doc, "name", str),
        )


@dataclass(frozen=True, slots=True)
class Store(SelectableItem):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, doc: Dict[str, Any]) -> "Store":
        return cls(
            id=require(doc, "id", int),
            code=require(doc, "code", str),
            name=require(doc, "name", str),
            created_at=parse_date(doc.get("created_at")),
            updated_at=parse_date(doc.get("updated_at")),
        )


@dataclass(frozen=True, slots=True)
class Channel(SelectableItem):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_api(cls, doc: Dict[str, Any]) -> "Channel":
        return cls(
            id=require(doc, "id", int),
            code=require(doc, "code", str),
            name=require(doc, "name", str),
            created_at=parse_date(doc.get("created_at")),
            updated_at=parse_date(doc.get("updated_at")),
        )
