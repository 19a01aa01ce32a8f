"""Receipt models - validated receipts and the score records kept for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class LineItem:
    """A single purchased item."""
    short_description: str
    price: Decimal


@dataclass(frozen=True)
class Receipt:
    """A receipt that has passed validation."""

    retailer: str
    purchase_date: date
    purchase_time: time
    total: Decimal
    items: Tuple[LineItem, ...] = field(default_factory=tuple)

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class ScoreRecord:
    """Points awarded for one accepted receipt.

    `receipt` is the submitted document exactly as it was received, so the
    record can be inspected later without re-deriving it from the parsed form.
    """

    points: int
    receipt: Dict[str, Any]
    created_at: datetime = field(default_factory=datetime.now)


__all__ = ["LineItem", "Receipt", "ScoreRecord"]
