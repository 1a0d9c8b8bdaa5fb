"""Abstract repository for Collection records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecomarket.domain.model.collection import Collection


class CollectionRepository(ABC):

    @abstractmethod
    def list_for_user(self, user_id: str, limit: int) -> list[Collection]:
        """Return up to *limit* of the user's collections, newest first.

        Ordered by scheduled date, falling back to creation time.
        """
