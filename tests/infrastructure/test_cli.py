"""End-to-end tests for the click CLI against a temporary data directory."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from contratia.domain.model.order import OrderKind
from contratia.infrastructure.cli.main import cli
from contratia.infrastructure.config import Settings

WEBHOOK_POST = "contratia.infrastructure.http.webhook_submitter.requests.post"

VALID_MUSIC = [
    "client_name=Ana Rivera",
    "client_email=ana@example.com",
    "client_phone=787-555-1234",
    "activity_type=Boda",
    "address=Calle Luna 5, San Juan",
    "event_day=14",
    "event_month=febrero",
    "event_year=2099",
    "service_time=7:00 PM",
    "service_description=Trío romántico",
    "total_cost=500",
]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        webhook_urls=((OrderKind.MUSIC, "https://hook.example.com/music"),),
    )


@pytest.fixture
def run(settings, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, list(args), obj=settings)

    return invoke


class TestOrderCommands:

    def test_new_shows_fresh_order(self, run):
        result = run("order", "new", "music")
        assert result.exit_code == 0
        assert "MUSIC order #001" in result.output
        assert "(* computed automatically)" in result.output

    def test_set_reports_derived_changes(self, run):
        result = run("order", "set", "music", "total_cost=500", "deposit_applies=yes")
        assert result.exit_code == 0
        assert "remaining_balance = 375.00" in result.output

    def test_set_persists_between_invocations(self, run, settings):
        run("order", "set", "music", "client_name=Ana Rivera")
        result = run("order", "show", "music")
        assert "Ana Rivera" in result.output
        assert (settings.data_dir / "drafts.json").exists()

    def test_set_same_value_twice(self, run):
        run("order", "set", "booth", "client_name=Ana")
        assert "No changes." in run("order", "set", "booth", "client_name=Ana").output

    def test_set_requires_assignment_syntax(self, run):
        result = run("order", "set", "music", "client_name")
        assert result.exit_code == 2
        assert "Expected 'field=value'" in result.output

    def test_set_invalid_value(self, run):
        result = run("order", "set", "music", "sound_option=loud")
        assert result.exit_code == 1
        assert "Invalid value" in result.output

    def test_new_discards_draft(self, run):
        run("order", "set", "dj", "client_name=Luis")
        assert "Luis" not in run("order", "new", "dj").output

    def test_validate_lists_errors(self, run):
        result = run("order", "validate", "music")
        assert result.exit_code == 1
        assert "client_email:" in result.output

    def test_validate_passes(self, run):
        run("order", "set", "music", *VALID_MUSIC)
        result = run("order", "validate", "music")
        assert result.exit_code == 0
        assert "Order is valid." in result.output

    def test_preview(self, run):
        run("order", "set", "music", "client_name=Ana Rivera", "locale=en")
        result = run("order", "preview", "music")
        assert result.exit_code == 0
        assert "SERVICE AGREEMENT #001" in result.output
        assert "INVOICE" in result.output

    def test_export_docx(self, run, tmp_path):
        target = tmp_path / "out.docx"
        result = run("order", "export", "music", "--format", "docx", "-o", str(target))
        assert result.exit_code == 0
        assert target.read_bytes()[:2] == b"PK"

    def test_export_default_name(self, run, tmp_path):
        result = run("order", "export", "booth")
        assert result.exit_code == 0
        assert (tmp_path / "contrato-booth-001.pdf").read_bytes().startswith(b"%PDF")

    def test_clear(self, run):
        run("order", "set", "music", "client_name=Ana")
        assert "cleared" in run("order", "clear", "music").output
        assert "Ana" not in run("order", "show", "music").output


class TestSubmitAndHistory:

    def test_submit_invalid(self, run):
        result = run("order", "submit", "music")
        assert result.exit_code == 1
        assert "Order has invalid fields" in result.output

    def test_submit_without_webhook(self, run):
        run("order", "set", "booth", *VALID_MUSIC[:-2], "photo_booth_selected=yes")
        result = run("order", "submit", "booth")
        assert result.exit_code == 1
        assert "No webhook configured for booth" in result.output

    def test_submit_records_history(self, run):
        run("order", "set", "music", *VALID_MUSIC)
        response = MagicMock(ok=True, status_code=200, text="{}")
        response.json.return_value = {"success": True, "doc_url": "https://docs.example.com/d/1"}
        with patch(WEBHOOK_POST, return_value=response):
            result = run("order", "submit", "music")
        assert result.exit_code == 0, result.output
        assert "https://docs.example.com/d/1" in result.output

        listing = run("history", "list")
        assert "Ana Rivera" in listing.output
        assert "https://docs.example.com/d/1" in listing.output

    def test_history_empty(self, run):
        assert "No contracts generated yet." in run("history", "list").output

    def test_history_remove_unknown(self, run):
        result = run("history", "remove", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_history_clear(self, run):
        result = run("history", "clear", "--yes")
        assert result.exit_code == 0
        assert "Removed 0 entries." in result.output


class TestSuggest:

    def test_no_endpoint(self, run):
        result = run("suggest", "Describe un trío")
        assert result.exit_code == 1
        assert "No AI suggestion endpoint" in result.output
