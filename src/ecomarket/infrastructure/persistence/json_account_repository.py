"""JSON-file-backed implementation of AccountRepository."""

from __future__ import annotations

from pathlib import Path

from ecomarket.domain.model.account import Account, Role
from ecomarket.domain.model.value_objects import lenient_int
from ecomarket.domain.repository.account_repository import AccountRepository
from ecomarket.infrastructure.persistence.json_file import JsonFileMixin, optional_text


class JsonAccountRepository(JsonFileMixin, AccountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_id(self, account_id: str) -> Account | None:
        for raw in self._load_raw():
            if str(raw["id"]) == account_id:
                return self._to_domain(raw)
        return None

    @staticmethod
    def _to_domain(raw: dict) -> Account:
        return Account(
            id=str(raw["id"]),
            email=str(raw.get("email") or ""),
            name=str(raw.get("name") or ""),
            role=Role.parse(optional_text(raw.get("userType"))),
            points=lenient_int(raw.get("points"), "points"),
        )
