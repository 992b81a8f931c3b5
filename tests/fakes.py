"""In-memory fakes for the repositories and outbound ports.

These implement the same abstract interfaces as the JSON repositories
and HTTP clients but keep everything in memory. No file I/O, no network.
"""

from __future__ import annotations

from typing import Any

from contratia.application.ports import OrderSubmitter, TextSuggester
from contratia.domain.exceptions import PersistenceError, SuggestionError, TransportError
from contratia.domain.model.history import GeneratedLinks, HistoryEntry
from contratia.domain.model.order import Order, OrderKind
from contratia.domain.repository.draft_repository import DraftRepository
from contratia.domain.repository.history_repository import HistoryRepository


class FakeDraftRepository(DraftRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}
        self.saves = 0

    def load(self, key: str) -> Order | None:
        return self._store.get(key)

    def save(self, key: str, order: Order) -> None:
        self._store[key] = order
        self.saves += 1

    def clear(self, key: str) -> None:
        self._store.pop(key, None)


class BrokenDraftRepository(DraftRepository):
    """Storage that is unavailable: every call fails."""

    def load(self, key: str) -> Order | None:
        raise PersistenceError("storage unavailable")

    def save(self, key: str, order: Order) -> None:
        raise PersistenceError("storage unavailable")

    def clear(self, key: str) -> None:
        raise PersistenceError("storage unavailable")


class FakeHistoryRepository(HistoryRepository):

    def __init__(self, max_entries: int = 50) -> None:
        self._entries: list[HistoryEntry] = []
        self._max_entries = max_entries

    def list(self) -> list[HistoryEntry]:
        return list(self._entries)

    def add(self, entry: HistoryEntry) -> None:
        self._entries = ([entry] + self._entries)[: self._max_entries]

    def remove(self, entry_id: str) -> bool:
        kept = [e for e in self._entries if e.id != entry_id]
        removed = len(kept) != len(self._entries)
        self._entries = kept
        return removed

    def clear(self) -> None:
        self._entries = []


class BrokenHistoryRepository(FakeHistoryRepository):

    def add(self, entry: HistoryEntry) -> None:
        raise PersistenceError("history storage full")


class FakeSubmitter(OrderSubmitter):
    """Records every submission; optionally fails with ``error``."""

    def __init__(
        self,
        links: GeneratedLinks | None = None,
        error: TransportError | None = None,
    ) -> None:
        self.links = links or GeneratedLinks(
            doc_url="https://docs.example.com/d/abc",
            pdf_url="https://drive.example.com/file/abc",
            pdf_download_url="https://drive.example.com/uc?id=abc",
            file_name="Contrato 001.pdf",
        )
        self.error = error
        self.calls: list[tuple[OrderKind, dict[str, Any]]] = []

    def submit(self, kind: OrderKind, payload: dict[str, Any]) -> GeneratedLinks:
        self.calls.append((kind, payload))
        if self.error is not None:
            raise self.error
        return self.links


class FakeSuggester(TextSuggester):

    def __init__(self, reply: str = "  Música en vivo para su evento.  ", fail: bool = False) -> None:
        self.reply = reply
        self.fail = fail
        self.prompts: list[str] = []

    def suggest(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.fail:
            raise SuggestionError("Could not generate the suggestion. Please try again later.")
        return self.reply
