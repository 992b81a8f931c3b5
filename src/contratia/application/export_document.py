"""Application service: Export Document use case.

Builds the document definition once and hands it, with the order, to
the renderer registered for the requested format.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Mapping

from contratia.application.dto import ExportedDocument
from contratia.domain.document.builder import DocumentBuilder
from contratia.domain.document.renderer import DocumentRenderer
from contratia.domain.exceptions import ValidationError
from contratia.domain.model.order import Order

logger = logging.getLogger(__name__)


class ExportDocumentHandler:

    def __init__(self, builder: DocumentBuilder, renderers: Mapping[str, DocumentRenderer]) -> None:
        self._builder = builder
        self._renderers = dict(renderers)

    @property
    def formats(self) -> list[str]:
        return sorted(self._renderers)

    def handle(self, order: Order, format_name: str, issued_on: date | None = None) -> ExportedDocument:
        renderer = self._renderers.get(format_name)
        if renderer is None:
            raise ValidationError(
                f"Unknown export format '{format_name}'; choose one of {', '.join(self.formats)}",
                field="format",
            )

        document = self._builder.build(order, issued_on)
        content = renderer.render(document, order)
        file_name = export_file_name(order, renderer.extension)
        logger.info("Rendered %s (%d bytes) as %s", file_name, len(content), format_name)
        return ExportedDocument(file_name=file_name, media_type=renderer.media_type, content=content)


def export_file_name(order: Order, extension: str) -> str:
    number = re.sub(r"[^0-9A-Za-z-]+", "", order.contract_number) or "borrador"
    return f"contrato-{order.kind.value}-{number}.{extension}"
