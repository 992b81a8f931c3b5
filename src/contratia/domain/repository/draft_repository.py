"""Abstract repository for in-progress order drafts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from contratia.domain.model.order import Order


class DraftRepository(ABC):
    """One draft per key (``draft-<kind>``).

    Implementations raise ``PersistenceError`` when storage is
    unavailable; callers decide whether that is fatal.
    """

    @abstractmethod
    def load(self, key: str) -> Order | None:
        """Return the stored draft, or None if there is none."""

    @abstractmethod
    def save(self, key: str, order: Order) -> None:
        """Store *order* under *key*, replacing any previous draft."""

    @abstractmethod
    def clear(self, key: str) -> None:
        """Forget the draft under *key*; a missing draft is not an error."""
