"""JSON-file-backed implementation of ProductRepository.

Used for local development when no document store is configured.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path

from ecomarket.domain.model.product import Product
from ecomarket.domain.model.value_objects import lenient_int, lenient_money
from ecomarket.domain.repository.product_repository import ProductRepository
from ecomarket.infrastructure.persistence.json_file import (
    JsonFileMixin,
    parse_timestamp,
    recency_key,
)


class JsonProductRepository(JsonFileMixin, ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def list_all(self, category: str | None = None) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if category is None or raw.get("category") == category
        ]

    def list_for_seller(self, seller_id: str, limit: int | None = None) -> list[Product]:
        products = [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw.get("sellerId") == seller_id
        ]
        products.sort(key=lambda p: recency_key(p.created_at), reverse=True)
        return products if limit is None else products[:limit]

    def save(self, product: Product) -> None:
        records = self._read_file()
        product.id = uuid.uuid4().hex
        records.append(self._to_raw(product))
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "sellerId": product.seller_id,
            "name": product.name,
            "price": str(product.price.amount),
            "category": product.category,
            "description": product.description,
            "image": product.image,
            "quantity": product.quantity,
            "unit": product.unit,
            "plasticType": product.plastic_type,
            "inStock": product.in_stock,
            "isNew": product.is_new,
            "discount": product.discount,
            "rewardPoints": product.reward_points,
            "createdAt": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            seller_id=str(raw.get("sellerId") or ""),
            name=raw.get("name", ""),
            price=lenient_money(raw.get("price"), "product price"),
            category=raw.get("category", ""),
            description=raw.get("description", ""),
            image=raw.get("image"),
            quantity=lenient_int(raw.get("quantity"), "product quantity"),
            unit=raw.get("unit") or "kg",
            plastic_type=raw.get("plasticType"),
            in_stock=raw.get("inStock", True),
            is_new=raw.get("isNew", False),
            discount=lenient_int(raw.get("discount"), "discount"),
            reward_points=lenient_int(raw.get("rewardPoints"), "reward points"),
            created_at=parse_timestamp(raw.get("createdAt"))
            or datetime.fromtimestamp(0, timezone.utc),
        )
