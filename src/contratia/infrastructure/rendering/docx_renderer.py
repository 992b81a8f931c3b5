"""Word-processor output built with python-docx."""

from __future__ import annotations

import io

from docx import Document
from docx.enum.style import WD_STYLE_TYPE
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

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
    BRAND_RGB,
    CLAUSE_SIZE,
    FONT_FAMILY,
    HEADER_SIZE,
    HIGHLIGHT_HEX,
    MARGIN_IN,
    PAGE_HEIGHT_IN,
    PAGE_WIDTH_IN,
    SIGNATURE_LINE,
    SUBTITLE_SIZE,
)


def _shade(cell, hex_color: str) -> None:
    """Fill a table cell background."""
    shading = OxmlElement("w:shd")
    shading.set(qn("w:val"), "clear")
    shading.set(qn("w:color"), "auto")
    shading.set(qn("w:fill"), hex_color.lstrip("#"))
    cell._tc.get_or_add_tcPr().append(shading)


class DocxRenderer(DocumentRenderer):
    format_name = "docx"
    extension = "docx"
    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def __init__(self) -> None:
        self._doc = None

    @property
    def doc(self):
        if self._doc is None:
            raise RuntimeError("begin() must be called before rendering nodes")
        return self._doc

    # --- Lifecycle ------------------------------------------------------------

    def begin(self, order: Order) -> None:
        self._doc = Document()
        self._doc.core_properties.title = f"{order.kind.value} {order.contract_number}".strip()
        for section in self._doc.sections:
            section.page_width = Inches(PAGE_WIDTH_IN)
            section.page_height = Inches(PAGE_HEIGHT_IN)
            section.left_margin = section.right_margin = Inches(MARGIN_IN)
            section.top_margin = section.bottom_margin = Inches(MARGIN_IN)
        self._setup_styles()

    def page_break(self) -> None:
        self.doc.add_page_break()

    def finish(self) -> bytes:
        buffer = io.BytesIO()
        self.doc.save(buffer)
        return buffer.getvalue()

    def _setup_styles(self) -> None:
        styles = self.doc.styles
        normal = styles["Normal"]
        normal.font.name = FONT_FAMILY
        normal.font.size = Pt(BODY_SIZE)
        normal.paragraph_format.space_after = Pt(4)

        if "ClauseHeading" not in [s.name for s in styles]:
            clause = styles.add_style("ClauseHeading", WD_STYLE_TYPE.PARAGRAPH)
            clause.base_style = normal
            clause.font.bold = True
            clause.font.size = Pt(CLAUSE_SIZE)
            clause.font.color.rgb = RGBColor(*BRAND_RGB)
            clause.paragraph_format.space_before = Pt(8)
            clause.paragraph_format.space_after = Pt(4)
            clause.paragraph_format.keep_with_next = True

    # --- Node visitors --------------------------------------------------------

    def visit_header(self, node: Header) -> None:
        title = self.doc.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = title.add_run(node.title)
        run.bold = True
        run.font.size = Pt(HEADER_SIZE)
        run.font.color.rgb = RGBColor(*BRAND_RGB)
        if node.subtitle:
            subtitle = self.doc.add_paragraph()
            subtitle.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = subtitle.add_run(node.subtitle)
            run.bold = True
            run.font.size = Pt(SUBTITLE_SIZE)

    def visit_paragraph(self, node: Paragraph) -> None:
        paragraph = self.doc.add_paragraph()
        paragraph.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
        for item in node.runs:
            run = paragraph.add_run(item.text)
            run.bold = item.bold
            run.italic = item.italic
            if item.line_break:
                run.add_break()

    def visit_list(self, node: BulletList) -> None:
        style = "List Number" if node.ordered else "List Bullet"
        for item in node.items:
            self.doc.add_paragraph(item, style=style)

    def visit_clause_heading(self, node: Clause) -> None:
        self.doc.add_paragraph(node.heading, style="ClauseHeading")

    def visit_summary(self, node: Summary) -> None:
        if node.title:
            self.doc.add_paragraph(node.title, style="ClauseHeading")
        if not node.details:
            return
        table = self.doc.add_table(rows=len(node.details), cols=2)
        table.style = "Table Grid"
        last = len(node.details) - 1
        for index, (label, value) in enumerate(node.details):
            label_cell, value_cell = table.rows[index].cells
            label_cell.text = label
            value_cell.text = value
            label_cell.paragraphs[0].runs[0].bold = True
            if node.highlight_last and index == last:
                value_cell.paragraphs[0].runs[0].bold = True
                for cell in (label_cell, value_cell):
                    _shade(cell, HIGHLIGHT_HEX)
        self.doc.add_paragraph()

    def visit_signatures(self, node: Signatures) -> None:
        self.doc.add_paragraph()
        self.doc.add_paragraph()
        table = self.doc.add_table(rows=3, cols=2)
        cells = [row.cells for row in table.rows]
        cells[0][0].text = SIGNATURE_LINE
        cells[0][1].text = SIGNATURE_LINE
        cells[1][0].text = node.client_label
        cells[1][1].text = node.provider_name
        cells[1][1].paragraphs[0].runs[0].bold = True
        cells[2][1].text = node.provider_label

    def visit_spacer(self, node: Spacer) -> None:
        for _ in range(node.lines):
            self.doc.add_paragraph()

    def visit_table(self, node: Table) -> None:
        table = self.doc.add_table(rows=1 + len(node.rows), cols=len(node.headers))
        table.style = "Table Grid"
        for index, header in enumerate(node.headers):
            cell = table.rows[0].cells[index]
            cell.text = header
            run = cell.paragraphs[0].runs[0]
            run.bold = True
            run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)
            _shade(cell, "#%02X%02X%02X" % BRAND_RGB)
        for row_index, row in enumerate(node.rows, start=1):
            for col_index, value in enumerate(row):
                table.rows[row_index].cells[col_index].text = value
                if col_index == len(row) - 1:
                    table.rows[row_index].cells[col_index].paragraphs[0].alignment = WD_ALIGN_PARAGRAPH.RIGHT
        self.doc.add_paragraph()
