"""MongoDB-backed implementation of ProductRepository.

Product listings live in the document store; ``_id`` is an ObjectId and
is exposed to the domain as its hex string.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection as MongoCollection
from pymongo.errors import PyMongoError

from ecomarket.domain.exceptions import DataAccessError
from ecomarket.domain.model.product import Product
from ecomarket.domain.model.value_objects import lenient_int, lenient_money
from ecomarket.domain.repository.product_repository import ProductRepository

PRODUCT_COLLECTION = "Product"


class MongoProductRepository(ProductRepository):

    def __init__(self, collection: MongoCollection) -> None:
        self._collection = collection

    @classmethod
    def connect(cls, uri: str, database: str) -> MongoProductRepository:
        client = MongoClient(uri, serverSelectionTimeoutMS=5000)
        return cls(client[database][PRODUCT_COLLECTION])

    # --- ProductRepository interface ------------------------------------------

    def list_all(self, category: str | None = None) -> list[Product]:
        query = {"category": category} if category else {}
        try:
            return [self._to_domain(doc) for doc in self._collection.find(query)]
        except PyMongoError as exc:
            raise DataAccessError(f"Failed to list products: {exc}") from exc

    def list_for_seller(self, seller_id: str, limit: int | None = None) -> list[Product]:
        try:
            cursor = self._collection.find({"sellerId": seller_id}).sort(
                "createdAt", DESCENDING
            )
            if limit is not None:
                cursor = cursor.limit(limit)
            return [self._to_domain(doc) for doc in cursor]
        except PyMongoError as exc:
            raise DataAccessError(f"Failed to list products for seller: {exc}") from exc

    def save(self, product: Product) -> None:
        doc = self._to_document(product)
        try:
            result = self._collection.insert_one(doc)
        except (PyMongoError, OverflowError) as exc:
            raise DataAccessError(f"Failed to save product: {exc}") from exc
        product.id = str(result.inserted_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_document(product: Product) -> dict:
        # BSON has no plain Decimal; prices are stored as doubles.
        return {
            "sellerId": product.seller_id,
            "name": product.name,
            "price": float(product.price.amount),
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
            "createdAt": product.created_at,
        }

    @staticmethod
    def _to_domain(doc: dict) -> Product:
        created_at = doc.get("createdAt")
        if not isinstance(created_at, datetime):
            created_at = datetime.fromtimestamp(0, timezone.utc)
        return Product(
            id=str(doc["_id"]),
            seller_id=str(doc.get("sellerId", "")),
            name=doc.get("name", ""),
            price=lenient_money(doc.get("price"), "product price"),
            category=doc.get("category", ""),
            description=doc.get("description", ""),
            image=doc.get("image"),
            quantity=lenient_int(doc.get("quantity"), "product quantity"),
            unit=doc.get("unit") or "kg",
            plastic_type=doc.get("plasticType"),
            in_stock=doc.get("inStock", True),
            is_new=doc.get("isNew", False),
            discount=lenient_int(doc.get("discount"), "discount"),
            reward_points=lenient_int(doc.get("rewardPoints"), "reward points"),
            created_at=created_at,
        )
