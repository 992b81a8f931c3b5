"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from contratia.application.clear_draft import ClearDraftHandler
from contratia.application.edit_order import EditOrderHandler
from contratia.application.export_document import ExportDocumentHandler
from contratia.application.manage_history import HistoryHandler
from contratia.application.start_order import StartOrderHandler
from contratia.application.submit_order import SubmitOrderHandler
from contratia.application.suggest_text import SuggestTextHandler
from contratia.domain.document.builder import DocumentBuilder
from contratia.domain.pricing import DEFAULT_COMPANY, DEFAULT_PRICING
from contratia.domain.service.derived_fields import DerivedFieldEngine
from contratia.infrastructure.config import Settings
from contratia.infrastructure.http.ai_suggestion_client import AiSuggestionClient
from contratia.infrastructure.http.webhook_submitter import WebhookOrderSubmitter
from contratia.infrastructure.persistence.json_draft_repository import JsonDraftRepository
from contratia.infrastructure.persistence.json_history_repository import JsonHistoryRepository
from contratia.infrastructure.rendering.docx_renderer import DocxRenderer
from contratia.infrastructure.rendering.pdf_renderer import PdfRenderer
from contratia.infrastructure.rendering.preview_renderer import PreviewRenderer


def draft_repository(settings: Settings) -> JsonDraftRepository:
    return JsonDraftRepository(settings.data_dir / "drafts.json")


def history_repository(settings: Settings) -> JsonHistoryRepository:
    return JsonHistoryRepository(settings.data_dir / "history.json", DEFAULT_COMPANY.history_max)


def engine() -> DerivedFieldEngine:
    return DerivedFieldEngine(DEFAULT_PRICING)


def start_order_handler(settings: Settings) -> StartOrderHandler:
    return StartOrderHandler(draft_repository(settings), engine())


def edit_order_handler(settings: Settings) -> EditOrderHandler:
    return EditOrderHandler(draft_repository(settings), engine())


def clear_draft_handler(settings: Settings) -> ClearDraftHandler:
    return ClearDraftHandler(draft_repository(settings))


def export_handler(styled_preview: bool = False) -> ExportDocumentHandler:
    renderers = [PreviewRenderer(styled=styled_preview), PdfRenderer(), DocxRenderer()]
    return ExportDocumentHandler(
        DocumentBuilder(DEFAULT_PRICING, DEFAULT_COMPANY),
        {renderer.format_name: renderer for renderer in renderers},
    )


def submit_order_handler(settings: Settings) -> SubmitOrderHandler:
    submitter = WebhookOrderSubmitter(dict(settings.webhook_urls), timeout=settings.http_timeout)
    return SubmitOrderHandler(submitter, history_repository(settings))


def history_handler(settings: Settings) -> HistoryHandler:
    return HistoryHandler(history_repository(settings))


def suggest_text_handler(settings: Settings) -> SuggestTextHandler:
    return SuggestTextHandler(AiSuggestionClient(settings.ai_endpoint, timeout=settings.http_timeout))
