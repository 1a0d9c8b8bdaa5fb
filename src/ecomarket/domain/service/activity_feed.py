"""Domain service: Activity Feed.

Normalizes collection and order records into ActivityItems and merges
them into a bounded, newest-first feed. Everything here is a pure
function of its inputs plus the injected ``now``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Sequence

from ecomarket.domain.model.account import Role
from ecomarket.domain.model.activity import ActivityItem, ActivityKind, format_quantity
from ecomarket.domain.model.collection import Collection, CollectionStatus
from ecomarket.domain.model.order import Order, OrderStatus, status_phrase

DEFAULT_WASTE_TYPE = "Mixed Waste"
ORDER_REF_LENGTH = 8

# Only this role ever receives placeholder entries, and only when enabled.
SAMPLE_ROLE = Role.INDIVIDUAL


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------


def normalize_collection(collection: Collection, now: datetime | None = None) -> ActivityItem:
    status = collection.status or "scheduled"
    quantity = collection.quantity or Decimal("0")
    return ActivityItem(
        kind=ActivityKind.COLLECTION,
        title=f"Collection {status.lower()}",
        description=f"{collection.waste_type or DEFAULT_WASTE_TYPE} - {format_quantity(quantity)}kg",
        timestamp=collection.date or collection.created_at or now or _utcnow(),
        status=collection.status,
        quantity=quantity,
        source_id=collection.id,
    )


def normalize_order(order: Order, now: datetime | None = None) -> ActivityItem:
    status = order.status or "placed"
    return ActivityItem(
        kind=ActivityKind.ORDER,
        title=f"Order {status.lower()}",
        description=f"Order #{order.id[:ORDER_REF_LENGTH]} - {status_phrase(order.status)}",
        timestamp=order.created_at or now or _utcnow(),
        status=order.status,
        quantity=order.quantity,
        source_id=order.id,
    )


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------


def aggregate(
    collections: Sequence[Collection],
    orders: Sequence[Order],
    cap: int,
    role: Role = Role.INDIVIDUAL,
    include_samples: bool = False,
    now: datetime | None = None,
) -> list[ActivityItem]:
    """Merge collections and orders into a feed of at most *cap* items.

    Items are ordered newest first; ``sorted`` is stable, so items with
    equal timestamps keep their input order (collections before orders).
    """
    if cap <= 0:
        return []
    now = now or _utcnow()

    items = [normalize_collection(c, now) for c in collections]
    items.extend(normalize_order(o, now) for o in orders)
    items = sorted(items, key=lambda item: _sort_key(item.timestamp), reverse=True)[:cap]

    if not items and include_samples and role is SAMPLE_ROLE:
        return sample_activity(now)[:cap]
    return items


def sample_activity(now: datetime) -> list[ActivityItem]:
    """Fixed placeholder feed for accounts with no history yet."""
    return [
        ActivityItem(
            kind=ActivityKind.ORDER,
            title="Order pending",
            description=f"Order #sample01 - {status_phrase(OrderStatus.PENDING.value)}",
            timestamp=now,
            status=OrderStatus.PENDING.value,
            quantity=222,
            synthetic=True,
        ),
        ActivityItem(
            kind=ActivityKind.ORDER,
            title="Order completed",
            description=f"Order #sample02 - {status_phrase(OrderStatus.COMPLETED.value)}",
            timestamp=now - timedelta(days=1),
            status=OrderStatus.COMPLETED.value,
            quantity=150,
            synthetic=True,
        ),
        ActivityItem(
            kind=ActivityKind.COLLECTION,
            title="Collection scheduled",
            description=f"{DEFAULT_WASTE_TYPE} - 5kg",
            timestamp=now - timedelta(days=2),
            status=CollectionStatus.SCHEDULED.value,
            quantity=Decimal("5"),
            synthetic=True,
        ),
    ]


def _sort_key(timestamp: datetime) -> datetime:
    # Stores may hand back naive datetimes; those are read as UTC.
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp
