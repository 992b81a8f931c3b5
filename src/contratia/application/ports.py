"""Outbound ports the application layer depends on.

Concrete adapters live in ``contratia.infrastructure.http``; tests use
the in-memory fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from contratia.domain.model.history import GeneratedLinks
from contratia.domain.model.order import OrderKind


class OrderSubmitter(ABC):

    @abstractmethod
    def submit(self, kind: OrderKind, payload: dict[str, Any]) -> GeneratedLinks:
        """Post *payload* to the workflow for *kind*.

        Raises ``TransportError`` for any failure: no retries.
        """


class TextSuggester(ABC):

    @abstractmethod
    def suggest(self, prompt: str) -> str:
        """Return suggested text for *prompt*; raises ``SuggestionError``."""
