"""Application service: Start Order use case.

Resumes the saved draft for a kind, or starts a fresh order.  Loading
runs the derived-field engine once, which also applies the one-way
contract-number migration to legacy drafts.
"""

from __future__ import annotations

import logging
from datetime import date

from contratia.domain.exceptions import PersistenceError
from contratia.domain.model.order import Order, OrderKind, draft_key_for, new_order
from contratia.domain.repository.draft_repository import DraftRepository
from contratia.domain.service.derived_fields import DerivedFieldEngine

logger = logging.getLogger(__name__)


class StartOrderHandler:

    def __init__(self, draft_repo: DraftRepository, engine: DerivedFieldEngine) -> None:
        self._draft_repo = draft_repo
        self._engine = engine

    def handle(self, kind: OrderKind, today: date | None = None) -> Order:
        key = draft_key_for(kind)
        try:
            stored = self._draft_repo.load(key)
        except PersistenceError as exc:
            logger.warning("Could not load draft %s, starting fresh: %s", key, exc)
            stored = None

        if stored is None or stored.kind is not kind:
            return self._engine.recompute(new_order(kind, today))

        order = self._engine.recompute(stored)
        if order != stored:
            save_draft(self._draft_repo, order)
        return order


def save_draft(draft_repo: DraftRepository, order: Order) -> None:
    """Persist a draft; storage failures are logged, never raised."""
    try:
        draft_repo.save(order.draft_key, order)
    except PersistenceError as exc:
        logger.warning("Could not save draft %s, keeping it in memory: %s", order.draft_key, exc)
