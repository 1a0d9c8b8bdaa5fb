"""File helpers shared by the JSON-file repositories."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from ecomarket.domain.exceptions import DataAccessError

logger = logging.getLogger(__name__)


class JsonFileMixin:
    """Keeps a list of raw records in a single JSON file."""

    _file_path: Path

    def _read_file(self) -> list:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Failed to read %s: %s", self._file_path, exc)
            raise DataAccessError(f"Failed to read {self._file_path.name}") from exc
        if not isinstance(records, list):
            raise DataAccessError(f"{self._file_path.name} does not hold a list of records")
        return records

    def _load_raw(self) -> list[dict]:
        """Every record in the file that carries an ``id``."""
        records = self._read_file()
        valid = [r for r in records if isinstance(r, dict) and r.get("id") is not None]
        if len(valid) != len(records):
            logger.warning(
                "Skipped %d malformed records in %s",
                len(records) - len(valid),
                self._file_path.name,
            )
        return valid

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write %s: %s", self._file_path, exc)
            raise DataAccessError(f"Failed to write {self._file_path.name}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise DataAccessError(f"Failed to create {self._file_path}") from exc


def optional_text(raw: object) -> str | None:
    """Stored free-text fields may hold any JSON scalar; read them as text."""
    return None if raw is None else str(raw)


def parse_timestamp(raw: object) -> datetime | None:
    """Read an ISO-8601 timestamp; malformed values are read as missing."""
    if not raw:
        return None
    try:
        return datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Malformed timestamp %r read as missing", raw)
        return None


def recency_key(timestamp: datetime | None) -> float:
    """Sort key (use with reverse=True) that puts undated records last.

    Naive timestamps are read as UTC.
    """
    if timestamp is None:
        return float("-inf")
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.timestamp()
