"""Client for the AI suggestion proxy.

The proxy holds the model API key and does the rate limiting; this
client only posts ``{"prompt": ...}`` and reads ``{"suggestion": ...}``.
"""

from __future__ import annotations

import logging

import requests

from contratia.application.ports import TextSuggester
from contratia.domain.exceptions import SuggestionError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class AiSuggestionClient(TextSuggester):

    def __init__(self, endpoint: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._endpoint = endpoint
        self._timeout = timeout

    def suggest(self, prompt: str) -> str:
        if not self._endpoint:
            raise SuggestionError("No AI suggestion endpoint is configured")

        try:
            response = requests.post(self._endpoint, json={"prompt": prompt}, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as exc:
            status = getattr(getattr(exc, "response", None), "status_code", None)
            logger.error("AI suggestion request failed (status %s): %s", status, exc)
            raise SuggestionError("Could not generate the suggestion. Please try again later.") from exc
        except ValueError as exc:
            logger.error("AI suggestion response is not JSON: %s", response.text[:200])
            raise SuggestionError("Could not generate the suggestion. Please try again later.") from exc

        suggestion = data.get("suggestion") if isinstance(data, dict) else None
        if not isinstance(suggestion, str) or not suggestion.strip():
            logger.error("AI suggestion response had no suggestion: %s", str(data)[:200])
            raise SuggestionError("Could not generate the suggestion. Please try again later.")
        return suggestion.strip()
