"""JSON-file-backed implementation of DraftRepository."""

from __future__ import annotations

import json
from pathlib import Path

from contratia.domain.exceptions import PersistenceError, ValidationError
from contratia.domain.model.order import Order, order_from_dict
from contratia.domain.repository.draft_repository import DraftRepository


class JsonDraftRepository(DraftRepository):
    """All drafts in one file: ``{"draft-music": {...}, ...}``."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- DraftRepository interface --------------------------------------------

    def load(self, key: str) -> Order | None:
        raw = self._load_raw().get(key)
        if raw is None:
            return None
        try:
            return order_from_dict(raw)
        except (ValidationError, TypeError, AttributeError) as exc:
            raise PersistenceError(f"Draft '{key}' is unreadable: {exc}") from exc

    def save(self, key: str, order: Order) -> None:
        drafts = self._load_raw()
        drafts[key] = order.to_dict()
        self._persist_raw(drafts)

    def clear(self, key: str) -> None:
        drafts = self._load_raw()
        if drafts.pop(key, None) is not None:
            self._persist_raw(drafts)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read drafts from {self._file_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceError(f"Drafts file {self._file_path} is not a JSON object")
        return data

    def _persist_raw(self, drafts: dict) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(drafts, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write drafts to {self._file_path}: {exc}") from exc
