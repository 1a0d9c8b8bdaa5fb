"""Abstract repository for Account records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecomarket.domain.model.account import Account


class AccountRepository(ABC):

    @abstractmethod
    def get_by_id(self, account_id: str) -> Account | None:
        """Return an account by its ID, or None if not found."""
