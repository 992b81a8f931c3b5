"""Application service: Clear Draft use case."""

from __future__ import annotations

from contratia.domain.model.order import OrderKind, draft_key_for
from contratia.domain.repository.draft_repository import DraftRepository


class ClearDraftHandler:

    def __init__(self, draft_repo: DraftRepository) -> None:
        self._draft_repo = draft_repo

    def handle(self, kind: OrderKind) -> None:
        self._draft_repo.clear(draft_key_for(kind))
