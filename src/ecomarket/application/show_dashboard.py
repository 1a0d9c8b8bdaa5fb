"""Application service: Show Dashboard use case (query).

Fans the account, collection, order, order-count and (for collectors)
product reads out concurrently, then hands the fetched records to the
metrics builder.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from ecomarket.application._auth import require_identity
from ecomarket.application.store_reads import gather_reads
from ecomarket.domain.model.account import Identity, Role
from ecomarket.domain.model.metrics import DashboardMetrics
from ecomarket.domain.repository.account_repository import AccountRepository
from ecomarket.domain.repository.collection_repository import CollectionRepository
from ecomarket.domain.repository.order_repository import OrderRepository
from ecomarket.domain.repository.product_repository import ProductRepository
from ecomarket.domain.service.dashboard_metrics import (
    DASHBOARD_ACTIVITY_CAP,
    build_metrics,
)

logger = logging.getLogger(__name__)


class ShowDashboardHandler:

    def __init__(
        self,
        account_repo: AccountRepository,
        collection_repo: CollectionRepository,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        collection_limit: int = 5,
        order_limit: int = 10,
        activity_cap: int = DASHBOARD_ACTIVITY_CAP,
        include_samples: bool = False,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._account_repo = account_repo
        self._collection_repo = collection_repo
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._collection_limit = collection_limit
        self._order_limit = order_limit
        self._activity_cap = activity_cap
        self._include_samples = include_samples
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def handle(self, identity: Identity | None) -> DashboardMetrics:
        identity = require_identity(identity)
        user_id = identity.account_id
        logger.debug("Dashboard requested by %s (%s)", user_id, identity.role.value)

        reads = {
            "account": lambda: self._account_repo.get_by_id(user_id),
            "collections": lambda: self._collection_repo.list_for_user(
                user_id, self._collection_limit
            ),
            "orders": lambda: self._order_repo.list_for_buyer(user_id, self._order_limit),
            "order_count": lambda: self._order_repo.count_for_buyer(user_id),
        }
        if identity.role is Role.COLLECTOR:
            reads["products"] = lambda: self._product_repo.list_for_seller(user_id)

        fetched = gather_reads(reads)
        account = fetched["account"]

        return build_metrics(
            role=identity.role,
            collections=fetched["collections"],
            orders=fetched["orders"],
            products=fetched.get("products", []),
            points_balance=account.points if account is not None else 0,
            order_count=fetched["order_count"],
            activity_cap=self._activity_cap,
            include_samples=self._include_samples,
            now=self._clock(),
        )
