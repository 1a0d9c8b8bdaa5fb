"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecomarket.application.create_product import CreateProductHandler
from ecomarket.application.list_products import (
    ListProductsHandler,
    ListSellerProductsHandler,
)
from ecomarket.application.show_dashboard import ShowDashboardHandler
from ecomarket.application.show_recent_activity import ShowRecentActivityHandler
from ecomarket.domain.repository.account_repository import AccountRepository
from ecomarket.domain.repository.collection_repository import CollectionRepository
from ecomarket.domain.repository.image_store import ImageStore
from ecomarket.domain.repository.order_repository import OrderRepository
from ecomarket.domain.repository.product_repository import ProductRepository
from ecomarket.infrastructure.config import Settings
from ecomarket.infrastructure.persistence.json_account_repository import (
    JsonAccountRepository,
)
from ecomarket.infrastructure.persistence.json_collection_repository import (
    JsonCollectionRepository,
)
from ecomarket.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ecomarket.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ecomarket.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from ecomarket.infrastructure.storage.local_image_store import LocalImageStore


def account_repository(settings: Settings) -> AccountRepository:
    return JsonAccountRepository(settings.data_dir / "accounts.json")


def collection_repository(settings: Settings) -> CollectionRepository:
    return JsonCollectionRepository(settings.data_dir / "collections.json")


def order_repository(settings: Settings) -> OrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def product_repository(settings: Settings) -> ProductRepository:
    # Listings go to the document store when one is configured.
    if settings.mongo_uri:
        return MongoProductRepository.connect(settings.mongo_uri, settings.mongo_db)
    return JsonProductRepository(settings.data_dir / "products.json")


def image_store(settings: Settings) -> ImageStore:
    return LocalImageStore(settings.upload_dir)


# --- Handlers -----------------------------------------------------------------


@dataclass(frozen=True)
class Handlers:
    """Every use case, built once per process and shared across requests."""

    dashboard: ShowDashboardHandler
    recent_activity: ShowRecentActivityHandler
    create_product: CreateProductHandler
    list_products: ListProductsHandler
    seller_products: ListSellerProductsHandler


def build_handlers(settings: Settings) -> Handlers:
    accounts = account_repository(settings)
    collections = collection_repository(settings)
    orders = order_repository(settings)
    products = product_repository(settings)

    return Handlers(
        dashboard=ShowDashboardHandler(
            account_repo=accounts,
            collection_repo=collections,
            order_repo=orders,
            product_repo=products,
            collection_limit=settings.collection_row_cap,
            order_limit=settings.order_row_cap,
            activity_cap=settings.dashboard_activity_cap,
            include_samples=settings.sample_activity,
        ),
        recent_activity=ShowRecentActivityHandler(
            collection_repo=collections,
            order_repo=orders,
            collection_limit=settings.collection_row_cap,
            order_limit=settings.order_row_cap,
            activity_cap=settings.feed_activity_cap,
            include_samples=settings.sample_activity,
        ),
        create_product=CreateProductHandler(
            product_repo=products,
            image_store=image_store(settings),
            piece_weight_kg=settings.piece_weight_kg,
        ),
        list_products=ListProductsHandler(product_repo=products, account_repo=accounts),
        seller_products=ListSellerProductsHandler(product_repo=products),
    )
