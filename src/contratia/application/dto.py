"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from contratia.domain.model.history import GeneratedLinks
from contratia.domain.model.order import Order

__all__ = ["EditResult", "ExportedDocument", "GeneratedLinks", "SubmissionResult"]


@dataclass(frozen=True)
class EditResult:
    """Output: the order after an edit plus the fields that changed.

    ``patch`` includes both the user's edits and any derived fields the
    engine rewrote; it is empty when nothing changed.
    """

    order: Order
    patch: dict[str, Any] = field(default_factory=dict)

    @property
    def changed(self) -> bool:
        return bool(self.patch)


@dataclass(frozen=True)
class ExportedDocument:
    file_name: str
    media_type: str
    content: bytes


@dataclass(frozen=True)
class SubmissionResult:
    history_id: str
    links: GeneratedLinks
