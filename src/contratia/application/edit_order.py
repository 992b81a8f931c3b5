"""Application service: Edit Order use case.

One call is one edit flow: apply the user's edits, run the engine once,
diff, and persist the draft only if something actually changed.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable

from contratia.application.dto import EditResult
from contratia.application.start_order import StartOrderHandler, save_draft
from contratia.domain.model.order import Order, OrderKind, apply_edit
from contratia.domain.repository.draft_repository import DraftRepository
from contratia.domain.service.derived_fields import DerivedFieldEngine, diff


class EditOrderHandler:

    def __init__(self, draft_repo: DraftRepository, engine: DerivedFieldEngine) -> None:
        self._draft_repo = draft_repo
        self._engine = engine
        self._start = StartOrderHandler(draft_repo, engine)

    def handle(
        self,
        kind: OrderKind,
        edits: Iterable[tuple[str, Any]],
        today: date | None = None,
    ) -> EditResult:
        """Apply *edits* in order to the kind's current draft.

        An invalid edit raises ``ValidationError`` before anything is
        saved, so the stored draft never holds a partial edit.
        """
        before = self._start.handle(kind, today)
        return self.apply(before, edits, today)

    def apply(
        self,
        before: Order,
        edits: Iterable[tuple[str, Any]],
        today: date | None = None,
    ) -> EditResult:
        edited = before
        for field, value in edits:
            edited = apply_edit(edited, field, value, today)

        after = self._engine.recompute(edited)
        patch = diff(before, after)
        if patch:
            save_draft(self._draft_repo, after)
        return EditResult(order=after, patch=patch)
