"""JSON-file-backed implementation of CollectionRepository."""

from __future__ import annotations

from pathlib import Path

from ecomarket.domain.model.collection import Collection
from ecomarket.domain.model.value_objects import lenient_decimal
from ecomarket.domain.repository.collection_repository import CollectionRepository
from ecomarket.infrastructure.persistence.json_file import (
    JsonFileMixin,
    optional_text,
    parse_timestamp,
    recency_key,
)


class JsonCollectionRepository(JsonFileMixin, CollectionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CollectionRepository interface ---------------------------------------

    def list_for_user(self, user_id: str, limit: int) -> list[Collection]:
        collections = [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw.get("userId") == user_id
        ]
        collections.sort(key=lambda c: recency_key(c.date or c.created_at), reverse=True)
        return collections[:limit]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Collection:
        return Collection(
            id=str(raw["id"]),
            user_id=str(raw["userId"]),
            waste_type=optional_text(raw.get("wasteType")),
            quantity=lenient_decimal(raw.get("quantity"), "collection quantity"),
            status=optional_text(raw.get("status")),
            date=parse_timestamp(raw.get("date")),
            created_at=parse_timestamp(raw.get("createdAt")),
            address=optional_text(raw.get("address")),
            type=optional_text(raw.get("type")),
        )
