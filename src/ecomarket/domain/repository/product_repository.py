"""Abstract repository for marketplace Product listings."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecomarket.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self, category: str | None = None) -> list[Product]:
        """Return every listing, optionally restricted to one category."""

    @abstractmethod
    def list_for_seller(self, seller_id: str, limit: int | None = None) -> list[Product]:
        """Return the seller's listings, newest first."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new listing and assign its ID."""
