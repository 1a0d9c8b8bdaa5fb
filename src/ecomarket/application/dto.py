"""Data Transfer Objects: plain containers that cross layer boundaries.

Input DTOs carry request data into handlers; the ``*_payload`` mappers
turn domain objects into the JSON shapes the presentation layer reads.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecomarket.domain.model.account import Account
from ecomarket.domain.model.activity import ActivityItem, json_number
from ecomarket.domain.model.collection import Collection
from ecomarket.domain.model.metrics import DashboardMetrics
from ecomarket.domain.model.order import Order
from ecomarket.domain.model.product import Product
from ecomarket.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductSpec:
    """Input: the form fields of a new listing, as submitted."""

    name: str | None
    price: str | None
    category: str | None
    description: str | None
    quantity: str | None
    plastic_type: str | None
    unit: str | None = None
    discount: str | None = None


@dataclass(frozen=True)
class ImageUpload:
    """Input: an uploaded image file."""

    payload: bytes
    content_type: str
    filename: str


@dataclass(frozen=True)
class ProductListing:
    """Output: a marketplace listing with its seller, when the seller exists."""

    product: Product
    seller: Account | None


# --- Output mapping -----------------------------------------------------------


def money_payload(money: Money) -> int | float:
    return json_number(money.amount)  # type: ignore[return-value]


def activity_payload(items: list[ActivityItem]) -> list[dict]:
    return [item.to_dict() for item in items]


def collection_payload(collection: Collection) -> dict:
    return {
        "id": collection.id,
        "type": collection.type,
        "date": collection.date.isoformat() if collection.date else None,
        "status": collection.status,
        "address": collection.address,
        "wasteType": collection.waste_type,
        "quantity": json_number(collection.quantity),
        "createdAt": collection.created_at.isoformat() if collection.created_at else None,
    }


def order_payload(order: Order) -> dict:
    return {
        "id": order.id,
        "status": order.status,
        "totalPrice": money_payload(order.total_price),
        "createdAt": order.created_at.isoformat() if order.created_at else None,
        "quantity": order.quantity,
        "buyerId": order.buyer_id,
    }


def product_payload(product: Product) -> dict:
    return {
        "id": product.id,
        "sellerId": product.seller_id,
        "name": product.name,
        "price": money_payload(product.price),
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


def seller_payload(seller: Account | None) -> dict | None:
    if seller is None:
        return None
    return {"id": seller.id, "name": seller.name, "userType": seller.role.value}


def listing_payload(listing: ProductListing) -> dict:
    return {**product_payload(listing.product), "seller": seller_payload(listing.seller)}


def dashboard_payload(metrics: DashboardMetrics) -> dict:
    return {
        "collections": [collection_payload(c) for c in metrics.collections],
        "products": [product_payload(p) for p in metrics.products],
        "points": metrics.points,
        "totalCollections": metrics.total_collections,
        "totalProducts": metrics.total_products,
        "totalOrders": metrics.total_orders,
        "recentActivity": activity_payload(metrics.recent_activity),
        "totalSpent": money_payload(metrics.total_spent),
        "totalRevenue": money_payload(metrics.total_revenue),
        "orders": [order_payload(o) for o in metrics.orders],
    }
