"""Application service: browse and prune the generation history."""

from __future__ import annotations

from contratia.domain.exceptions import EntityNotFoundError
from contratia.domain.model.history import HistoryEntry
from contratia.domain.repository.history_repository import HistoryRepository


class HistoryHandler:

    def __init__(self, history_repo: HistoryRepository) -> None:
        self._history_repo = history_repo

    def list(self) -> list[HistoryEntry]:
        return self._history_repo.list()

    def remove(self, entry_id: str) -> None:
        if not self._history_repo.remove(entry_id):
            raise EntityNotFoundError(f"History entry not found: '{entry_id}'")

    def clear(self) -> int:
        """Delete everything; return how many entries were removed."""
        count = len(self._history_repo.list())
        self._history_repo.clear()
        return count
