"""Tests for the preview, PDF and DOCX renderers.

Each renderer gets the same document tree; the assertions check that
the text it carries survives into every output format.
"""

import dataclasses
import io
from datetime import date

import pytest
from docx import Document

from contratia.domain.document.builder import DocumentBuilder
from contratia.domain.locale import Locale
from contratia.domain.model.order import DjOrder, MusicOrder, SetupType, SoundOption
from contratia.domain.service.derived_fields import DerivedFieldEngine
from contratia.infrastructure.rendering.docx_renderer import DocxRenderer
from contratia.infrastructure.rendering.pdf_renderer import PdfRenderer
from contratia.infrastructure.rendering.preview_renderer import PreviewRenderer, run_style

ISSUED = date(2026, 10, 19)
engine = DerivedFieldEngine()


@pytest.fixture
def order() -> MusicOrder:
    return engine.recompute(MusicOrder(
        locale=Locale.EN,
        contract_number="042",
        client_name="Ana Rivera",
        client_email="ana@example.com",
        client_phone="787-555-1234",
        event_day="14", event_month="febrero", event_year="2027",
        total_cost="500",
        service_description="Trio & strings <live>",
        service_time="7:00 PM",
        sound_option=SoundOption.UPGRADE,
    ))


def _render(renderer, order) -> bytes:
    return renderer.render(DocumentBuilder().build(order, ISSUED), order)


class TestPreviewRenderer:

    def test_plain_text(self, order):
        text = _render(PreviewRenderer(), order).decode("utf-8")
        assert "SERVICE AGREEMENT #042" in text
        assert "1. DEPOSIT AND FINAL PAYMENT" in text
        assert "$650.00" in text
        assert "Balance Due" in text
        assert "\x1b[" not in text

    def test_lists_are_bulleted(self, order):
        text = _render(PreviewRenderer(), order).decode("utf-8")
        assert "• " in text

    def test_styled_output_has_ansi_codes(self, order):
        assert b"\x1b[" in _render(PreviewRenderer(styled=True), order)

    def test_renderer_is_reusable(self, order):
        renderer = PreviewRenderer()
        assert _render(renderer, order) == _render(renderer, order)

    def test_bracketed_user_text_is_kept_verbatim(self, order):
        plain = dataclasses.replace(order, client_name="AnaRuiz")
        bracketed = dataclasses.replace(
            order, client_name="Ana[bold]Ruiz", service_description="Trio [/salsa] en vivo"
        )
        baseline = _render(PreviewRenderer(), plain).decode("utf-8")
        text = _render(PreviewRenderer(), bracketed).decode("utf-8")
        assert "Trio [/salsa] en vivo" in text
        assert text.count("Ana[bold]Ruiz") == baseline.count("AnaRuiz") >= 3

    def test_run_style(self):
        assert run_style(True, True) == "bold italic"
        assert run_style(False, False) == ""


class TestPdfRenderer:

    def test_is_pdf(self, order):
        content = _render(PdfRenderer(), order)
        assert content.startswith(b"%PDF")
        assert content.rstrip().endswith(b"%%EOF")

    def test_uncompressed_contains_clause_text(self, order):
        content = _render(PdfRenderer(compress=False), order)
        assert b"1. DEPOSIT AND FINAL PAYMENT" in content

    def test_escapes_markup_characters(self, order):
        # Would raise a paragraph parse error if "<live>" reached platypus unescaped.
        assert _render(PdfRenderer(), order).startswith(b"%PDF")

    def test_dj_order(self):
        dj = engine.recompute(DjOrder(total_cost="1000", setup_type=SetupType.DELUXE))
        assert _render(PdfRenderer(), dj).startswith(b"%PDF")


class TestDocxRenderer:

    def _open(self, content: bytes):
        return Document(io.BytesIO(content))

    def test_paragraphs(self, order):
        doc = self._open(_render(DocxRenderer(), order))
        texts = [p.text for p in doc.paragraphs]
        assert "D' SHOW EVENTS" in texts
        assert "1. DEPOSIT AND FINAL PAYMENT" in texts
        assert "Thank you for choosing D' Show Events!" in texts

    def test_tables(self, order):
        doc = self._open(_render(DocxRenderer(), order))
        cells = [cell.text for table in doc.tables for row in table.rows for cell in row.cells]
        assert "Professional Sound Upgrade" in cells
        assert "$650.00" in cells
        assert "D' SHOW EVENTS LLC" in cells
        assert "Trio & strings <live>" in cells

    def test_page_size(self, order):
        section = self._open(_render(DocxRenderer(), order)).sections[0]
        assert round(section.page_width.inches, 2) == 8.5
        assert round(section.left_margin.inches, 2) == 1.0

    def test_clause_heading_style(self, order):
        doc = self._open(_render(DocxRenderer(), order))
        headings = [p.text for p in doc.paragraphs if p.style.name == "ClauseHeading"]
        assert headings[0] == "1. DEPOSIT AND FINAL PAYMENT"


class TestCrossFormat:

    def test_same_clauses_everywhere(self, order):
        clauses = [c.heading for c in DocumentBuilder().build(order, ISSUED).clauses]
        preview = _render(PreviewRenderer(width=200), order).decode("utf-8")
        docx_text = "\n".join(p.text for p in Document(io.BytesIO(_render(DocxRenderer(), order))).paragraphs)
        for heading in clauses:
            assert heading in preview
            assert heading in docx_text
