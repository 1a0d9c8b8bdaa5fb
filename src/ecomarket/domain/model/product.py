"""Product listings in the marketplace.

Listings live in the document store, separately from collections and
orders. Reward points are computed once, when the listing is created.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ecomarket.domain.model.value_objects import Money


@dataclass
class Product:
    id: str | None
    seller_id: str
    name: str
    price: Money
    category: str
    description: str = ""
    image: str | None = None
    quantity: int = 0
    unit: str = "kg"
    plastic_type: str | None = None
    in_stock: bool = True
    is_new: bool = True
    discount: int = 0
    reward_points: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
