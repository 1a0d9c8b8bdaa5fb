"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from pathlib import Path

from ecomarket.domain.model.order import Order
from ecomarket.domain.model.value_objects import lenient_int, lenient_money
from ecomarket.domain.repository.order_repository import OrderRepository
from ecomarket.infrastructure.persistence.json_file import (
    JsonFileMixin,
    optional_text,
    parse_timestamp,
    recency_key,
)


class JsonOrderRepository(JsonFileMixin, OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def list_for_buyer(self, buyer_id: str, limit: int) -> list[Order]:
        orders = [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw.get("buyerId") == buyer_id
        ]
        orders.sort(key=lambda o: recency_key(o.created_at), reverse=True)
        return orders[:limit]

    def count_for_buyer(self, buyer_id: str) -> int:
        return sum(1 for raw in self._load_raw() if raw.get("buyerId") == buyer_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            id=str(raw["id"]),
            buyer_id=str(raw["buyerId"]),
            status=optional_text(raw.get("status")),
            total_price=lenient_money(raw.get("totalPrice"), "order total"),
            quantity=lenient_int(raw.get("quantity"), "order quantity"),
            created_at=parse_timestamp(raw.get("createdAt")),
        )
