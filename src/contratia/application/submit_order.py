"""Application service: Submit Order use case.

Validate, flatten to the kind's webhook payload, post it, and record
the generated links in the history.  Nothing is recorded unless the
remote workflow reports success.
"""

from __future__ import annotations

import logging
from datetime import datetime

from contratia.application.dto import SubmissionResult
from contratia.application.ports import OrderSubmitter
from contratia.application.submission_payload import build_payload
from contratia.application.validate_order import ValidateOrderHandler
from contratia.domain.exceptions import PersistenceError
from contratia.domain.locale import catalog_for
from contratia.domain.model.history import HistoryEntry
from contratia.domain.model.order import Order
from contratia.domain.repository.history_repository import HistoryRepository
from contratia.domain.validation import business_now

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(
        self,
        submitter: OrderSubmitter,
        history_repo: HistoryRepository,
        validator: ValidateOrderHandler | None = None,
    ) -> None:
        self._submitter = submitter
        self._history_repo = history_repo
        self._validator = validator or ValidateOrderHandler()

    def handle(self, order: Order, now: datetime | None = None) -> SubmissionResult:
        """Submit a fully derived order.

        Raises ``OrderValidationError`` before any network call, and
        ``TransportError`` if the workflow fails.  Re-invoking after a
        failure is the retry.
        """
        self._validator.handle(order, now)

        current = business_now(now)
        payload = build_payload(order, today=current.date())
        links = self._submitter.submit(order.kind, payload)
        logger.info(
            "Submitted %s contract %s for %s",
            order.kind.value, order.contract_number, order.client_name,
        )

        catalog = catalog_for(order.locale)
        entry = HistoryEntry.record(
            order,
            event_date=catalog.format_date(order.event_day, order.event_month, order.event_year),
            links=links,
            now=current,
        )
        try:
            self._history_repo.add(entry)
        except PersistenceError as exc:
            logger.warning("Could not record history entry %s: %s", entry.id, exc)

        return SubmissionResult(history_id=entry.id, links=links)
