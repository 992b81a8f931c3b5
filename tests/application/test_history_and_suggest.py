"""Tests for the history browser and the text suggestion use case."""

from datetime import datetime, timedelta, timezone

import pytest

from contratia.application.manage_history import HistoryHandler
from contratia.application.suggest_text import MAX_PROMPT_LENGTH, SuggestTextHandler
from contratia.domain.exceptions import EntityNotFoundError, SuggestionError, ValidationError
from contratia.domain.model.history import GeneratedLinks, HistoryEntry
from contratia.domain.model.order import MusicOrder, OrderKind
from tests.fakes import FakeHistoryRepository, FakeSuggester

CREATED = datetime(2026, 10, 19, 18, 0, tzinfo=timezone.utc)


def _entry(number: str, minutes: int = 0) -> HistoryEntry:
    return HistoryEntry.record(
        MusicOrder(contract_number=number, client_name="Ana"),
        event_date="14 de Febrero del 2027",
        links=GeneratedLinks(doc_url=f"https://docs.example.com/{number}"),
        now=CREATED + timedelta(minutes=minutes),
    )


class TestHistoryEntry:

    def test_id_is_number_and_millis(self):
        entry = _entry("042")
        assert entry.id == f"042-{int(CREATED.timestamp() * 1000)}"
        assert entry.kind is OrderKind.MUSIC

    def test_resubmissions_are_distinct(self):
        assert _entry("042").id != _entry("042", minutes=1).id

    def test_links_from_dict_tolerates_missing_keys(self):
        links = GeneratedLinks.from_dict({"doc_url": "https://d", "pdf_url": None})
        assert links == GeneratedLinks(doc_url="https://d")


class TestHistoryHandler:

    def test_newest_first(self):
        repo = FakeHistoryRepository()
        repo.add(_entry("001"))
        repo.add(_entry("002", minutes=1))
        assert [e.contract_number for e in HistoryHandler(repo).list()] == ["002", "001"]

    def test_cap(self):
        repo = FakeHistoryRepository(max_entries=2)
        for minute in range(3):
            repo.add(_entry(f"00{minute}", minutes=minute))
        assert [e.contract_number for e in repo.list()] == ["002", "001"]

    def test_remove(self):
        repo = FakeHistoryRepository()
        entry = _entry("001")
        repo.add(entry)
        HistoryHandler(repo).remove(entry.id)
        assert repo.list() == []

    def test_remove_unknown(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            HistoryHandler(FakeHistoryRepository()).remove("nope")

    def test_clear_returns_count(self):
        repo = FakeHistoryRepository()
        repo.add(_entry("001"))
        repo.add(_entry("002", minutes=1))
        assert HistoryHandler(repo).clear() == 2
        assert repo.list() == []


class TestSuggestText:

    def test_strips_reply(self):
        suggester = FakeSuggester()
        assert SuggestTextHandler(suggester).handle("  Describe un trío  ") == "Música en vivo para su evento."
        assert suggester.prompts == ["Describe un trío"]

    @pytest.mark.parametrize("prompt", ["", "   ", None])
    def test_empty_prompt(self, prompt):
        with pytest.raises(ValidationError, match="Prompt is required"):
            SuggestTextHandler(FakeSuggester()).handle(prompt)

    def test_prompt_too_long(self):
        suggester = FakeSuggester()
        with pytest.raises(ValidationError, match="limit"):
            SuggestTextHandler(suggester).handle("x" * (MAX_PROMPT_LENGTH + 1))
        assert suggester.prompts == []

    def test_service_failure_propagates(self):
        with pytest.raises(SuggestionError):
            SuggestTextHandler(FakeSuggester(fail=True)).handle("Describe un trío")
