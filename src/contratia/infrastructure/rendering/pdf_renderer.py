"""Paginated PDF output built with reportlab's platypus flowables."""

from __future__ import annotations

import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import (
    KeepTogether,
    ListFlowable,
    ListItem,
    PageBreak,
    SimpleDocTemplate,
    Table as PdfTable,
    TableStyle,
)
from reportlab.platypus import Paragraph as PdfParagraph
from reportlab.platypus import Spacer as PdfSpacer

from contratia.domain.document.nodes import (
    BulletList,
    Clause,
    Header,
    Paragraph,
    Signatures,
    Spacer,
    Summary,
    Table,
)
from contratia.domain.document.renderer import DocumentRenderer
from contratia.domain.model.order import Order
from contratia.infrastructure.rendering.page import (
    BODY_SIZE,
    BRAND_HEX,
    CLAUSE_SIZE,
    CONTENT_WIDTH_PT,
    FONT_BOLD,
    FONT_FAMILY,
    HEADER_SIZE,
    HIGHLIGHT_HEX,
    LINE_GAP_PT,
    MARGIN_PT,
    PAGE_HEIGHT_PT,
    PAGE_WIDTH_PT,
    SIGNATURE_LINE,
    SUBTITLE_SIZE,
)

BRAND = colors.HexColor(BRAND_HEX)


def _markup(text: str, bold: bool = False, italic: bool = False) -> str:
    """Escape *text* for platypus paragraph markup and apply emphasis."""
    out = escape(text).replace("\n", "<br/>")
    if bold:
        out = f"<b>{out}</b>"
    if italic:
        out = f"<i>{out}</i>"
    return out


class PdfRenderer(DocumentRenderer):
    format_name = "pdf"
    extension = "pdf"
    media_type = "application/pdf"

    def __init__(self, compress: bool = True) -> None:
        self._compress = compress
        self._story: list = []
        self._title = ""
        self._styles = self._build_styles()

    @staticmethod
    def _build_styles() -> dict[str, ParagraphStyle]:
        sample = getSampleStyleSheet()
        body = ParagraphStyle(
            "ContractBody",
            parent=sample["Normal"],
            fontName=FONT_FAMILY,
            fontSize=BODY_SIZE,
            leading=BODY_SIZE * 1.4,
            alignment=TA_JUSTIFY,
            spaceAfter=4,
        )
        return {
            "body": body,
            "title": ParagraphStyle(
                "ContractTitle",
                parent=sample["Heading1"],
                fontName=FONT_BOLD,
                fontSize=HEADER_SIZE,
                textColor=BRAND,
                alignment=TA_CENTER,
                spaceAfter=4,
            ),
            "subtitle": ParagraphStyle(
                "ContractSubtitle",
                parent=body,
                fontName=FONT_BOLD,
                fontSize=SUBTITLE_SIZE,
                alignment=TA_CENTER,
                spaceAfter=12,
            ),
            "clause": ParagraphStyle(
                "ClauseHeading",
                parent=body,
                fontName=FONT_BOLD,
                fontSize=CLAUSE_SIZE,
                textColor=BRAND,
                alignment=0,
                spaceBefore=8,
                spaceAfter=4,
            ),
            "cell": ParagraphStyle("Cell", parent=body, alignment=0, spaceAfter=0),
            "head": ParagraphStyle(
                "HeadCell", parent=body, alignment=0, spaceAfter=0, textColor=colors.white
            ),
        }

    # --- Lifecycle ------------------------------------------------------------

    def begin(self, order: Order) -> None:
        self._story = []
        self._title = f"{order.kind.value} {order.contract_number}".strip()

    def page_break(self) -> None:
        self._story.append(PageBreak())

    def finish(self) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=(PAGE_WIDTH_PT, PAGE_HEIGHT_PT),
            leftMargin=MARGIN_PT,
            rightMargin=MARGIN_PT,
            topMargin=MARGIN_PT,
            bottomMargin=MARGIN_PT,
            title=self._title,
            pageCompression=1 if self._compress else 0,
        )
        doc.build(self._story)
        return buffer.getvalue()

    # --- Node visitors --------------------------------------------------------

    def visit_header(self, node: Header) -> None:
        self._story.append(PdfParagraph(_markup(node.title), self._styles["title"]))
        if node.subtitle:
            self._story.append(PdfParagraph(_markup(node.subtitle), self._styles["subtitle"]))

    def visit_paragraph(self, node: Paragraph) -> None:
        markup = "".join(
            _markup(run.text, run.bold, run.italic) + ("<br/>" if run.line_break else "")
            for run in node.runs
        )
        self._story.append(PdfParagraph(markup, self._styles["body"]))

    def visit_list(self, node: BulletList) -> None:
        items = [
            ListItem(PdfParagraph(_markup(item), self._styles["body"]), leftIndent=18)
            for item in node.items
        ]
        self._story.append(
            ListFlowable(
                items,
                bulletType="1" if node.ordered else "bullet",
                start=None if node.ordered else "•",
                leftIndent=18,
                bulletFontName=FONT_FAMILY,
                bulletFontSize=BODY_SIZE,
            )
        )

    def visit_clause_heading(self, node: Clause) -> None:
        self._story.append(PdfParagraph(_markup(node.heading), self._styles["clause"]))

    def visit_summary(self, node: Summary) -> None:
        if node.title:
            self._story.append(PdfParagraph(_markup(node.title), self._styles["clause"]))
        cell = self._styles["cell"]
        rows = [
            [PdfParagraph(_markup(label, bold=True), cell), PdfParagraph(_markup(value), cell)]
            for label, value in node.details
        ]
        if not rows:
            return
        table = PdfTable(rows, colWidths=[CONTENT_WIDTH_PT * 0.4, CONTENT_WIDTH_PT * 0.6])
        commands = [
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
            ("LINEBELOW", (0, 0), (-1, -2), 0.25, colors.lightgrey),
        ]
        if node.highlight_last:
            commands += [
                ("BACKGROUND", (0, -1), (-1, -1), colors.HexColor(HIGHLIGHT_HEX)),
                ("LINEABOVE", (0, -1), (-1, -1), 1, BRAND),
            ]
        table.setStyle(TableStyle(commands))
        self._story.append(KeepTogether([table, PdfSpacer(1, LINE_GAP_PT / 2)]))

    def visit_signatures(self, node: Signatures) -> None:
        cell = self._styles["cell"]
        rows = [
            [SIGNATURE_LINE, SIGNATURE_LINE],
            [PdfParagraph(_markup(node.client_label), cell), PdfParagraph(_markup(node.provider_name, bold=True), cell)],
            ["", PdfParagraph(_markup(node.provider_label), cell)],
        ]
        table = PdfTable(rows, colWidths=[CONTENT_WIDTH_PT / 2] * 2)
        table.setStyle(TableStyle([("FONTNAME", (0, 0), (-1, -1), FONT_FAMILY)]))
        self._story.append(KeepTogether([PdfSpacer(1, LINE_GAP_PT * 3), table]))

    def visit_spacer(self, node: Spacer) -> None:
        self._story.append(PdfSpacer(1, LINE_GAP_PT * node.lines))

    def visit_table(self, node: Table) -> None:
        cell = self._styles["cell"]
        head = self._styles["head"]
        data = [[PdfParagraph(_markup(h, bold=True), head) for h in node.headers]]
        data += [[PdfParagraph(_markup(value), cell) for value in row] for row in node.rows]
        widths = [CONTENT_WIDTH_PT * 0.75, CONTENT_WIDTH_PT * 0.25] if len(node.headers) == 2 else None
        table = PdfTable(data, colWidths=widths, repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), BRAND),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("ALIGN", (-1, 1), (-1, -1), "RIGHT"),
        ]))
        self._story += [PdfSpacer(1, LINE_GAP_PT / 2), table, PdfSpacer(1, LINE_GAP_PT / 2)]
