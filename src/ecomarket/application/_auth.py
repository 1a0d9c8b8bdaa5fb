"""Shared guard for handlers that need an authenticated caller."""

from __future__ import annotations

from ecomarket.domain.exceptions import AuthenticationRequired
from ecomarket.domain.model.account import Identity


def require_identity(identity: Identity | None) -> Identity:
    if identity is None or not identity.account_id:
        raise AuthenticationRequired("Unauthorized")
    return identity
