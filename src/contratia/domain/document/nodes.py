"""Renderer-agnostic document tree.

Nodes carry display data only: no styling, no layout units.  Every
renderer walks the same tree, so adding a node kind here means adding
a ``visit_*`` method to ``DocumentRenderer``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class TextRun:
    """A span of text with inline emphasis.

    ``line_break`` ends the current line after this run.
    """

    text: str
    bold: bool = False
    italic: bool = False
    line_break: bool = False


@dataclass(frozen=True)
class Header:
    title: str
    subtitle: str = ""


@dataclass(frozen=True)
class Paragraph:
    runs: tuple[TextRun, ...]

    @staticmethod
    def of(text: str, bold: bool = False, italic: bool = False) -> Paragraph:
        return Paragraph((TextRun(text, bold=bold, italic=italic),))

    @property
    def text(self) -> str:
        return "".join(run.text + ("\n" if run.line_break else "") for run in self.runs)


@dataclass(frozen=True)
class BulletList:
    items: tuple[str, ...]
    ordered: bool = False


@dataclass(frozen=True)
class Spacer:
    lines: int = 1


@dataclass(frozen=True)
class Table:
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class Summary:
    """A titled block of ``(label, value)`` pairs.

    When ``highlight_last`` is set, renderers emphasise the final pair
    (used for the invoice balance due).
    """

    title: str
    details: tuple[tuple[str, str], ...]
    highlight_last: bool = False


@dataclass(frozen=True)
class Signatures:
    """Manual client line on the left, named provider on the right."""

    client_label: str
    provider_name: str
    provider_label: str


@dataclass(frozen=True)
class Clause:
    number: int
    title: str
    content: tuple[BlockNode, ...] = field(default_factory=tuple)

    @property
    def heading(self) -> str:
        return f"{self.number}. {self.title}"


BlockNode = Union[Paragraph, BulletList, Spacer, Table]
DocumentNode = Union[Header, Paragraph, BulletList, Clause, Summary, Signatures, Spacer, Table]


@dataclass(frozen=True)
class DocumentDefinition:
    """The contract followed by its invoice addendum."""

    contract: tuple[DocumentNode, ...]
    invoice: tuple[DocumentNode, ...]

    @property
    def clauses(self) -> list[Clause]:
        return [node for node in self.contract if isinstance(node, Clause)]
