"""Order submission to the document-generation workflow webhooks.

Each order kind posts to its own webhook.  Every failure mode (no URL,
network error, timeout, non-2xx, non-JSON, unsuccessful body) becomes
one ``TransportError``; nothing is retried here.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

from contratia.application.ports import OrderSubmitter
from contratia.domain.exceptions import TransportError
from contratia.domain.model.history import GeneratedLinks
from contratia.domain.model.order import OrderKind

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
MAX_LOGGED_BODY = 200


class WebhookOrderSubmitter(OrderSubmitter):

    def __init__(self, webhook_urls: Mapping[OrderKind, str], timeout: float = DEFAULT_TIMEOUT) -> None:
        self._webhook_urls = dict(webhook_urls)
        self._timeout = timeout

    def submit(self, kind: OrderKind, payload: dict[str, Any]) -> GeneratedLinks:
        url = self._webhook_urls.get(kind)
        if not url:
            raise TransportError(f"No webhook configured for {kind.value} contracts")

        try:
            response = requests.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as exc:
            logger.error("Webhook for %s timed out after %ss", kind.value, self._timeout)
            raise TransportError(f"The contract service did not answer within {self._timeout:g}s") from exc
        except requests.exceptions.RequestException as exc:
            logger.error("Webhook for %s failed: %s", kind.value, exc)
            raise TransportError(f"Could not reach the contract service: {exc}") from exc

        body = response.text or ""
        if not response.ok:
            logger.error(
                "Webhook for %s returned %s: %s",
                kind.value, response.status_code, body[:MAX_LOGGED_BODY],
            )
            raise TransportError(
                f"Server error {response.status_code}. Response: {body[:MAX_LOGGED_BODY]}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as exc:
            logger.error("Webhook for %s returned non-JSON body: %s", kind.value, body[:MAX_LOGGED_BODY])
            raise TransportError(
                f"The webhook response is not valid JSON. Received: \"{body[:MAX_LOGGED_BODY]}\"",
                status_code=response.status_code,
            ) from exc

        if not isinstance(result, dict) or not result.get("success") or not result.get("doc_url"):
            message = result.get("message") if isinstance(result, dict) else None
            logger.error("Webhook for %s reported failure: %s", kind.value, body[:MAX_LOGGED_BODY])
            raise TransportError(
                message or "The workflow response was not successful or did not contain the expected links",
                status_code=response.status_code,
            )

        return GeneratedLinks.from_dict(result)
