"""Terminal preview of the contract and invoice, rendered with rich.

The same visitor produces either an ANSI-styled preview for the
terminal or a plain-text export (``styled=False``).
"""

from __future__ import annotations

import io

from rich import box
from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

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
from contratia.infrastructure.rendering.page import BRAND_HEX, SIGNATURE_LINE

PREVIEW_WIDTH = 100


def run_style(bold: bool, italic: bool) -> str:
    """Return the rich style string for a text run."""
    parts = [name for flag, name in ((bold, "bold"), (italic, "italic")) if flag]
    return " ".join(parts)


class PreviewRenderer(DocumentRenderer):
    format_name = "preview"
    extension = "txt"
    media_type = "text/plain; charset=utf-8"

    def __init__(self, styled: bool = False, width: int = PREVIEW_WIDTH) -> None:
        self._styled = styled
        self._width = width
        self._console: Console | None = None

    @property
    def console(self) -> Console:
        if self._console is None:
            raise RuntimeError("begin() must be called before rendering nodes")
        return self._console

    # --- Lifecycle ------------------------------------------------------------

    def begin(self, order: Order) -> None:
        self._console = Console(
            file=io.StringIO(),
            record=True,
            width=self._width,
            force_terminal=self._styled,
            color_system="truecolor" if self._styled else None,
            highlight=False,
            markup=False,
        )

    def page_break(self) -> None:
        self.console.line()
        self.console.rule(style=BRAND_HEX)
        self.console.line()

    def finish(self) -> bytes:
        return self.console.export_text(styles=self._styled).encode("utf-8")

    # --- Node visitors --------------------------------------------------------

    def visit_header(self, node: Header) -> None:
        self.console.print(Text(node.title, style=f"bold {BRAND_HEX}", justify="center"))
        if node.subtitle:
            self.console.print(Text(node.subtitle, style="bold", justify="center"))
        self.console.line()

    def visit_paragraph(self, node: Paragraph) -> None:
        text = Text()
        for run in node.runs:
            text.append(run.text, style=run_style(run.bold, run.italic))
            if run.line_break:
                text.append("\n")
        self.console.print(text)

    def visit_list(self, node: BulletList) -> None:
        for index, item in enumerate(node.items, start=1):
            marker = f"{index}." if node.ordered else "•"
            self.console.print(Text(f"  {marker} {item}"))

    def visit_clause_heading(self, node: Clause) -> None:
        self.console.line()
        self.console.print(Text(node.heading, style=f"bold {BRAND_HEX}"))

    def visit_summary(self, node: Summary) -> None:
        self.console.line()
        if node.title:
            self.console.print(Text(node.title, style=f"bold {BRAND_HEX}"))
        grid = RichTable.grid(padding=(0, 2))
        grid.add_column(style="bold", no_wrap=True)
        grid.add_column()
        last = len(node.details) - 1
        for index, (label, value) in enumerate(node.details):
            emphasis = node.highlight_last and index == last
            grid.add_row(
                Text(label, style=f"bold {BRAND_HEX}" if emphasis else "bold"),
                Text(value, style=f"bold {BRAND_HEX}" if emphasis else ""),
            )
        self.console.print(grid)

    def visit_signatures(self, node: Signatures) -> None:
        self.console.line(2)
        grid = RichTable.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(Text(SIGNATURE_LINE), Text(SIGNATURE_LINE))
        grid.add_row(Text(node.client_label), Text(node.provider_name, style="bold"))
        grid.add_row(Text(""), Text(node.provider_label))
        self.console.print(grid)

    def visit_spacer(self, node: Spacer) -> None:
        self.console.line(node.lines)

    def visit_table(self, node: Table) -> None:
        table = RichTable(box=box.SIMPLE_HEAVY, expand=True, header_style=f"bold {BRAND_HEX}")
        for index, header in enumerate(node.headers):
            justify = "right" if index == len(node.headers) - 1 else "left"
            table.add_column(Text(header), justify=justify)
        for row in node.rows:
            table.add_row(*(Text(cell) for cell in row))
        self.console.print(table)
