"""Activity items: display-ready summaries of collection and order events.

Activity items are derived per request and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class ActivityKind(Enum):
    COLLECTION = "collection"
    ORDER = "order"


@dataclass(frozen=True)
class ActivityItem:
    """One entry of the activity feed.

    ``synthetic`` marks placeholder entries that do not correspond to any
    stored record; real items always carry ``source_id``.
    """

    kind: ActivityKind
    title: str
    description: str
    timestamp: datetime
    status: str | None = None
    quantity: Decimal | int | None = None
    source_id: str | None = None
    synthetic: bool = False

    def to_dict(self) -> dict:
        data: dict = {
            "type": self.kind.value,
            "title": self.title,
            "description": self.description,
            "date": self.timestamp.isoformat(),
            "status": self.status,
            "quantity": json_number(self.quantity),
            "synthetic": self.synthetic,
        }
        if self.kind is ActivityKind.ORDER:
            data["orderId"] = self.source_id
        else:
            data["collectionId"] = self.source_id
        return data


def format_quantity(value: Decimal | int) -> str:
    """Render a quantity without a trailing exponent or zero padding."""
    if isinstance(value, Decimal):
        return f"{value.normalize():f}"
    return str(value)


def json_number(value: Decimal | int | None) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value
