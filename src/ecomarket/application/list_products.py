"""Application services: product listing queries."""

from __future__ import annotations

from ecomarket.application._auth import require_identity
from ecomarket.application.dto import ProductListing
from ecomarket.application.store_reads import gather_reads
from ecomarket.domain.model.account import Identity
from ecomarket.domain.model.product import Product
from ecomarket.domain.repository.account_repository import AccountRepository
from ecomarket.domain.repository.product_repository import ProductRepository

ALL_CATEGORIES = "all"


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._product_repo = product_repo
        self._account_repo = account_repo

    def handle(self, category: str | None = None) -> list[ProductListing]:
        """List the whole marketplace with each listing's seller.

        ``"all"`` is the same as no filter. A listing whose seller account
        no longer exists is returned with ``seller=None``.
        """
        if not category or category == ALL_CATEGORIES:
            category = None
        products = self._product_repo.list_all(category=category)

        seller_ids = sorted({p.seller_id for p in products})
        sellers = gather_reads(
            {
                seller_id: (lambda seller_id=seller_id: self._account_repo.get_by_id(seller_id))
                for seller_id in seller_ids
            }
        )
        return [ProductListing(product=p, seller=sellers[p.seller_id]) for p in products]


class ListSellerProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, identity: Identity | None) -> list[Product]:
        identity = require_identity(identity)
        return self._product_repo.list_for_seller(identity.account_id)
