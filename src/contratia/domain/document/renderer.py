"""Abstract renderer over the document tree.

Concrete renderers (preview, PDF, DOCX) live in infrastructure and
implement one ``visit_*`` method per node kind.  ``render`` walks the
contract, asks for a page break, then walks the invoice.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from contratia.domain.document.nodes import (
    BulletList,
    Clause,
    DocumentDefinition,
    DocumentNode,
    Header,
    Paragraph,
    Signatures,
    Spacer,
    Summary,
    Table,
)
from contratia.domain.model.order import Order


class DocumentRenderer(ABC):
    """Port: turns a document definition into an exportable artifact."""

    #: short format name used by the CLI and the export handler
    format_name: str = ""
    media_type: str = "application/octet-stream"
    extension: str = ""

    def render(self, document: DocumentDefinition, order: Order) -> bytes:
        self.begin(order)
        for node in document.contract:
            self.visit(node)
        self.page_break()
        for node in document.invoice:
            self.visit(node)
        return self.finish()

    def visit(self, node: DocumentNode) -> None:
        if isinstance(node, Header):
            self.visit_header(node)
        elif isinstance(node, Paragraph):
            self.visit_paragraph(node)
        elif isinstance(node, BulletList):
            self.visit_list(node)
        elif isinstance(node, Clause):
            self.visit_clause(node)
        elif isinstance(node, Summary):
            self.visit_summary(node)
        elif isinstance(node, Signatures):
            self.visit_signatures(node)
        elif isinstance(node, Spacer):
            self.visit_spacer(node)
        elif isinstance(node, Table):
            self.visit_table(node)
        else:
            raise TypeError(f"Unsupported document node: {type(node).__name__}")

    def visit_clause(self, node: Clause) -> None:
        """Default: the numbered heading, then each content block."""
        self.visit_clause_heading(node)
        for block in node.content:
            self.visit(block)

    # --- Lifecycle ------------------------------------------------------------

    @abstractmethod
    def begin(self, order: Order) -> None: ...

    @abstractmethod
    def page_break(self) -> None: ...

    @abstractmethod
    def finish(self) -> bytes: ...

    # --- Node visitors --------------------------------------------------------

    @abstractmethod
    def visit_header(self, node: Header) -> None: ...

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> None: ...

    @abstractmethod
    def visit_list(self, node: BulletList) -> None: ...

    @abstractmethod
    def visit_clause_heading(self, node: Clause) -> None: ...

    @abstractmethod
    def visit_summary(self, node: Summary) -> None: ...

    @abstractmethod
    def visit_signatures(self, node: Signatures) -> None: ...

    @abstractmethod
    def visit_spacer(self, node: Spacer) -> None: ...

    @abstractmethod
    def visit_table(self, node: Table) -> None: ...
