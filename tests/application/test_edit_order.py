"""Integration tests for the Start, Edit and Clear draft use cases.

Uses in-memory fake repositories, no file I/O.
"""

from datetime import date

import pytest

from contratia.application.clear_draft import ClearDraftHandler
from contratia.application.edit_order import EditOrderHandler
from contratia.application.start_order import StartOrderHandler
from contratia.domain.exceptions import ValidationError
from contratia.domain.model.order import MusicOrder, OrderKind, SoundOption
from contratia.domain.service.derived_fields import DerivedFieldEngine
from tests.fakes import BrokenDraftRepository, FakeDraftRepository

TODAY = date(2026, 10, 19)


def _setup(repo=None) -> tuple[EditOrderHandler, FakeDraftRepository]:
    repo = repo if repo is not None else FakeDraftRepository()
    return EditOrderHandler(repo, DerivedFieldEngine()), repo


class TestStartOrder:

    def test_fresh_order_when_no_draft(self):
        repo = FakeDraftRepository()
        order = StartOrderHandler(repo, DerivedFieldEngine()).handle(OrderKind.BOOTH, TODAY)
        assert order.kind is OrderKind.BOOTH
        assert order.event_year == "2026"
        assert repo.saves == 0

    def test_resumes_saved_draft(self):
        repo = FakeDraftRepository()
        repo.save("draft-music", MusicOrder(client_name="Ana", remaining_balance="0.00"))
        order = StartOrderHandler(repo, DerivedFieldEngine()).handle(OrderKind.MUSIC, TODAY)
        assert order.client_name == "Ana"

    def test_legacy_draft_is_migrated_and_saved(self):
        repo = FakeDraftRepository()
        repo.save("draft-music", MusicOrder(contract_number="DSE-2025-015"))
        order = StartOrderHandler(repo, DerivedFieldEngine()).handle(OrderKind.MUSIC, TODAY)
        assert order.contract_number == "015"
        assert repo.load("draft-music").contract_number == "015"

    def test_unreadable_storage_starts_fresh(self):
        order = StartOrderHandler(BrokenDraftRepository(), DerivedFieldEngine()).handle(OrderKind.DJ, TODAY)
        assert order.kind is OrderKind.DJ


class TestEditOrder:

    def test_patch_includes_derived_fields(self):
        handler, repo = _setup()
        result = handler.handle(OrderKind.MUSIC, [("total_cost", "500"), ("sound_option", "upgrade")], TODAY)
        assert result.patch["total_cost"] == "500"
        assert result.patch["sound_option"] is SoundOption.UPGRADE
        assert result.patch["remaining_balance"] == "525.00"
        assert repo.load("draft-music").remaining_balance == "525.00"

    def test_toggling_deposit_recomputes_balance(self):
        handler, _ = _setup()
        handler.handle(OrderKind.DJ, [("total_cost", "1000.00")], TODAY)
        result = handler.handle(OrderKind.DJ, [("deposit_applies", "false")], TODAY)
        assert result.order.deposit50 == "0.00"
        assert result.order.balance50 == "1000.00"

    def test_no_op_edit_does_not_save(self):
        handler, repo = _setup()
        handler.handle(OrderKind.MUSIC, [("client_name", "Ana")], TODAY)
        saves = repo.saves
        result = handler.handle(OrderKind.MUSIC, [("client_name", "Ana")], TODAY)
        assert not result.changed
        assert repo.saves == saves

    def test_derived_field_edit_is_ignored(self):
        handler, _ = _setup()
        result = handler.handle(OrderKind.MUSIC, [("remaining_balance", "99.00")], TODAY)
        assert not result.changed

    def test_invalid_edit_saves_nothing(self):
        handler, repo = _setup()
        with pytest.raises(ValidationError):
            handler.handle(OrderKind.MUSIC, [("client_name", "Ana"), ("sound_option", "loud")], TODAY)
        assert repo.load("draft-music") is None

    def test_kinds_keep_separate_drafts(self):
        handler, repo = _setup()
        handler.handle(OrderKind.MUSIC, [("client_name", "Ana")], TODAY)
        handler.handle(OrderKind.BOOTH, [("client_name", "Luis")], TODAY)
        assert repo.load("draft-music").client_name == "Ana"
        assert repo.load("draft-booth").client_name == "Luis"

    def test_storage_failure_keeps_order_in_memory(self):
        handler, _ = _setup(BrokenDraftRepository())
        result = handler.handle(OrderKind.MUSIC, [("client_name", "Ana")], TODAY)
        assert result.order.client_name == "Ana"


class TestClearDraft:

    def test_clear_then_start_is_fresh(self):
        handler, repo = _setup()
        handler.handle(OrderKind.MUSIC, [("client_name", "Ana")], TODAY)
        ClearDraftHandler(repo).handle(OrderKind.MUSIC)
        order = StartOrderHandler(repo, DerivedFieldEngine()).handle(OrderKind.MUSIC, TODAY)
        assert order.client_name == ""
