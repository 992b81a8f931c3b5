"""JSON-file-backed implementation of HistoryRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from contratia.domain.exceptions import PersistenceError
from contratia.domain.model.history import GeneratedLinks, HistoryEntry
from contratia.domain.model.order import OrderKind
from contratia.domain.repository.history_repository import HistoryRepository

DEFAULT_MAX_ENTRIES = 50


class JsonHistoryRepository(HistoryRepository):
    """Newest-first list in one file, capped at ``max_entries``."""

    def __init__(self, file_path: Path, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self._file_path = file_path
        self._max_entries = max_entries

    # --- HistoryRepository interface ------------------------------------------

    def list(self) -> list[HistoryEntry]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def add(self, entry: HistoryEntry) -> None:
        entries = [self._to_raw(entry)] + self._load_raw()
        self._persist_raw(entries[: self._max_entries])

    def remove(self, entry_id: str) -> bool:
        entries = self._load_raw()
        kept = [raw for raw in entries if raw.get("id") != entry_id]
        if len(kept) == len(entries):
            return False
        self._persist_raw(kept)
        return True

    def clear(self) -> None:
        self._persist_raw([])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(entry: HistoryEntry) -> dict:
        return {
            "id": entry.id,
            "contract_number": entry.contract_number,
            "kind": entry.kind.value,
            "client_name": entry.client_name,
            "event_date": entry.event_date,
            "links": entry.links.to_dict(),
            "created_at": entry.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> HistoryEntry:
        try:
            return HistoryEntry(
                id=raw["id"],
                contract_number=raw.get("contract_number", ""),
                kind=OrderKind(raw["kind"]),
                client_name=raw.get("client_name", ""),
                event_date=raw.get("event_date", ""),
                links=GeneratedLinks.from_dict(raw.get("links") or {}),
                created_at=datetime.fromisoformat(raw["created_at"]),
            )
        except (KeyError, ValueError, TypeError) as exc:
            raise PersistenceError(f"Corrupt history entry: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        if not self._file_path.exists():
            return []
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read history from {self._file_path}: {exc}") from exc
        if not isinstance(data, list):
            raise PersistenceError(f"History file {self._file_path} is not a JSON list")
        return data

    def _persist_raw(self, entries: list[dict]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(entries, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write history to {self._file_path}: {exc}") from exc
