"""Record of a successfully generated contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from contratia.domain.model.order import Order, OrderKind


@dataclass(frozen=True)
class GeneratedLinks:
    """Where the remote workflow stored the generated documents."""

    doc_url: str
    pdf_url: str = ""
    pdf_download_url: str = ""
    file_name: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "doc_url": self.doc_url,
            "pdf_url": self.pdf_url,
            "pdf_download_url": self.pdf_download_url,
            "file_name": self.file_name,
        }

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> GeneratedLinks:
        return GeneratedLinks(
            doc_url=str(raw.get("doc_url") or ""),
            pdf_url=str(raw.get("pdf_url") or ""),
            pdf_download_url=str(raw.get("pdf_download_url") or ""),
            file_name=str(raw.get("file_name") or ""),
        )


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    contract_number: str
    kind: OrderKind
    client_name: str
    event_date: str  # localized long form, as shown on the contract
    links: GeneratedLinks
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def record(order: Order, event_date: str, links: GeneratedLinks, now: datetime | None = None) -> HistoryEntry:
        """Create the entry for a submission that just succeeded.

        The id is the contract number plus the creation time in
        milliseconds, which keeps resubmissions of one contract distinct.
        """
        created_at = now or datetime.now(timezone.utc)
        millis = int(created_at.timestamp() * 1000)
        return HistoryEntry(
            id=f"{order.contract_number}-{millis}",
            contract_number=order.contract_number,
            kind=order.kind,
            client_name=order.client_name,
            event_date=event_date,
            links=links,
            created_at=created_at,
        )
