"""Application service: Show Recent Activity use case (query)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from ecomarket.application._auth import require_identity
from ecomarket.application.store_reads import gather_reads
from ecomarket.domain.model.account import Identity
from ecomarket.domain.model.activity import ActivityItem
from ecomarket.domain.repository.collection_repository import CollectionRepository
from ecomarket.domain.repository.order_repository import OrderRepository
from ecomarket.domain.service.activity_feed import aggregate

logger = logging.getLogger(__name__)

FEED_ACTIVITY_CAP = 10


class ShowRecentActivityHandler:

    def __init__(
        self,
        collection_repo: CollectionRepository,
        order_repo: OrderRepository,
        collection_limit: int = 5,
        order_limit: int = 10,
        activity_cap: int = FEED_ACTIVITY_CAP,
        include_samples: bool = False,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._collection_repo = collection_repo
        self._order_repo = order_repo
        self._collection_limit = collection_limit
        self._order_limit = order_limit
        self._activity_cap = activity_cap
        self._include_samples = include_samples
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def handle(self, identity: Identity | None) -> list[ActivityItem]:
        """Return the caller's feed: their own collections and orders only."""
        identity = require_identity(identity)
        user_id = identity.account_id

        fetched = gather_reads(
            {
                "collections": lambda: self._collection_repo.list_for_user(
                    user_id, self._collection_limit
                ),
                "orders": lambda: self._order_repo.list_for_buyer(
                    user_id, self._order_limit
                ),
            }
        )
        activities = aggregate(
            fetched["collections"],
            fetched["orders"],
            cap=self._activity_cap,
            role=identity.role,
            include_samples=self._include_samples,
            now=self._clock(),
        )
        logger.debug("Built %d activity items for %s", len(activities), user_id)
        return activities
