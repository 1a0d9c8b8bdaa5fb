"""Account and role definitions.

Accounts are owned by the external identity provider; this package only
reads the role and the stored points balance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    INDIVIDUAL = "INDIVIDUAL"
    BUSINESS = "BUSINESS"
    COLLECTOR = "COLLECTOR"

    @staticmethod
    def parse(raw: object) -> Role:
        """Resolve a stored role string, defaulting to INDIVIDUAL.

        Matching is case-insensitive; unknown values fall back to the
        default role rather than failing the request.
        """
        if not raw:
            return Role.INDIVIDUAL
        try:
            return Role(str(raw).strip().upper())
        except ValueError:
            return Role.INDIVIDUAL


# Roles allowed to list products on the marketplace.
SELLER_ROLES = frozenset({Role.INDIVIDUAL, Role.COLLECTOR})


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, passed explicitly into every handler."""

    account_id: str
    role: Role = Role.INDIVIDUAL
    email: str | None = None


@dataclass
class Account:
    id: str
    email: str
    name: str
    role: Role = Role.INDIVIDUAL
    points: int = 0
