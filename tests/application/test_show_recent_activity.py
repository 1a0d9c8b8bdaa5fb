"""Integration tests for the ShowRecentActivity use case."""

from datetime import datetime, timezone

import pytest

from ecomarket.application.show_recent_activity import ShowRecentActivityHandler
from ecomarket.domain.exceptions import AuthenticationRequired, DataAccessError
from ecomarket.domain.model.account import Identity, Role
from tests.fakes import (
    BrokenOrderRepository,
    FakeCollectionRepository,
    FakeOrderRepository,
    make_collection,
    make_order,
)

NOW = datetime(2024, 4, 1, tzinfo=timezone.utc)


def _handler(collections=None, orders=None, **kwargs) -> ShowRecentActivityHandler:
    return ShowRecentActivityHandler(
        collection_repo=FakeCollectionRepository(collections),
        order_repo=FakeOrderRepository(orders),
        clock=lambda: NOW,
        **kwargs,
    )


class TestShowRecentActivity:

    def test_feed_capped_at_ten(self):
        handler = _handler(
            collections=[make_collection(id=f"c{d}", day=d) for d in range(1, 6)],
            orders=[make_order(id=f"o{d}", day=d) for d in range(10, 20)],
        )
        items = handler.handle(Identity("u1"))
        assert len(items) == 10
        assert items[0].source_id == "o19"

    def test_other_buyers_orders_excluded(self):
        handler = _handler(orders=[make_order(id="o1", buyer_id="u2")])
        assert handler.handle(Identity("u1")) == []

    def test_placeholders_for_individual_when_enabled(self):
        handler = _handler(include_samples=True)
        items = handler.handle(Identity("u1", Role.INDIVIDUAL))
        assert all(i.synthetic for i in items)
        assert handler.handle(Identity("u1", Role.COLLECTOR)) == []

    def test_requires_identity(self):
        with pytest.raises(AuthenticationRequired):
            _handler().handle(None)

    def test_store_failure_is_not_masked(self):
        handler = ShowRecentActivityHandler(
            collection_repo=FakeCollectionRepository([make_collection()]),
            order_repo=BrokenOrderRepository(),
            include_samples=True,
        )
        with pytest.raises(DataAccessError):
            handler.handle(Identity("u1"))
