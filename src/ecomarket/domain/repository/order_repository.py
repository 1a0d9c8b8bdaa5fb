"""Abstract repository for Order records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecomarket.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_for_buyer(self, buyer_id: str, limit: int) -> list[Order]:
        """Return up to *limit* of the buyer's orders, newest first."""

    @abstractmethod
    def count_for_buyer(self, buyer_id: str) -> int:
        """Return how many orders the buyer has placed in total."""
