"""Abstract repository for the contract-generation history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from contratia.domain.model.history import HistoryEntry


class HistoryRepository(ABC):

    @abstractmethod
    def list(self) -> list[HistoryEntry]:
        """All entries, newest first."""

    @abstractmethod
    def add(self, entry: HistoryEntry) -> None:
        """Prepend *entry*, evicting the oldest entries beyond the cap."""

    @abstractmethod
    def remove(self, entry_id: str) -> bool:
        """Delete one entry; return False if no entry had that id."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every entry."""
