"""Collection records: scheduled pickups of recyclable material.

Collections are created and advanced by an external workflow. Here they
are read-only input for the activity feed and the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class CollectionStatus(Enum):
    SCHEDULED = "SCHEDULED"
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Collection:
    """A pickup as stored.

    ``status`` is kept as the raw stored text (it may be missing), and
    ``quantity`` is in kilograms, already coerced by the repository.
    """

    id: str
    user_id: str
    waste_type: str | None
    quantity: Decimal
    status: str | None
    date: datetime | None
    created_at: datetime | None
    address: str | None = None
    type: str | None = None
