"""Dashboard metrics: the role-dependent bag of counters shown to a user."""

from __future__ import annotations

from dataclasses import dataclass, field

from ecomarket.domain.model.activity import ActivityItem
from ecomarket.domain.model.collection import Collection
from ecomarket.domain.model.order import Order
from ecomarket.domain.model.product import Product
from ecomarket.domain.model.value_objects import Money


@dataclass(frozen=True)
class DashboardMetrics:
    """Every field has a zero/empty default so the payload never has gaps."""

    collections: list[Collection] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)
    points: int = 0
    total_collections: int = 0
    total_products: int = 0
    total_orders: int = 0
    total_spent: Money = field(default_factory=Money.zero)
    total_revenue: Money = field(default_factory=Money.zero)
    recent_activity: list[ActivityItem] = field(default_factory=list)
