"""Domain service: Dashboard Metrics Builder.

Derives the summary counters for one account from records that have
already been fetched. The monetary field depends on the role: businesses
see what they spent, collectors see what they earned.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ecomarket.domain.model.account import Role
from ecomarket.domain.model.collection import Collection
from ecomarket.domain.model.metrics import DashboardMetrics
from ecomarket.domain.model.order import Order
from ecomarket.domain.model.product import Product
from ecomarket.domain.model.value_objects import Money
from ecomarket.domain.service.activity_feed import aggregate

DASHBOARD_ACTIVITY_CAP = 5


def build_metrics(
    role: Role,
    collections: Sequence[Collection],
    orders: Sequence[Order],
    products: Sequence[Product],
    points_balance: int | None,
    order_count: int | None = None,
    activity_cap: int = DASHBOARD_ACTIVITY_CAP,
    include_samples: bool = False,
    now: datetime | None = None,
) -> DashboardMetrics:
    """Build the dashboard payload for an account with *role*.

    ``products`` are the listings the caller fetched for this role (a
    collector's own listings, empty otherwise); ``points_balance`` is
    passed through unchanged. ``order_count`` is the buyer's full order
    count when the store reports one; ``orders`` itself is row-capped.
    """
    order_total = Money.total(o.total_price for o in orders)
    return DashboardMetrics(
        collections=list(collections),
        products=list(products),
        orders=list(orders),
        points=max(points_balance or 0, 0),
        total_collections=len(collections),
        total_products=len(products),
        total_orders=len(orders) if order_count is None else max(order_count, 0),
        total_spent=order_total if role is Role.BUSINESS else Money.zero(),
        total_revenue=order_total if role is Role.COLLECTOR else Money.zero(),
        recent_activity=aggregate(
            collections,
            orders,
            cap=activity_cap,
            role=role,
            include_samples=include_samples,
            now=now,
        ),
    )
