"""Marketplace orders.

Orders are created at purchase time and moved through their lifecycle by
an external workflow. This package never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ecomarket.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    PAID = "PAID"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


STATUS_PHRASES: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "Waiting for approval",
    OrderStatus.ACCEPTED: "Order accepted",
    OrderStatus.PAID: "Payment received",
    OrderStatus.DELIVERED: "Order delivered",
    OrderStatus.COMPLETED: "Order completed",
    OrderStatus.CANCELLED: "Order cancelled",
}
DEFAULT_STATUS_PHRASE = "Order placed"


def status_phrase(status: str | None) -> str:
    """Human-readable phrase for a stored order status."""
    try:
        return STATUS_PHRASES[OrderStatus(status)]
    except ValueError:
        return DEFAULT_STATUS_PHRASE


@dataclass(frozen=True)
class Order:
    """An order as stored.

    ``status`` is the raw stored text so that values outside
    ``OrderStatus`` still render (as "Order placed").
    """

    id: str
    buyer_id: str
    status: str | None
    total_price: Money
    quantity: int
    created_at: datetime | None
