"""Application service: AI text suggestion for free-text fields."""

from __future__ import annotations

from contratia.application.ports import TextSuggester
from contratia.domain.exceptions import ValidationError

MAX_PROMPT_LENGTH = 2000


class SuggestTextHandler:

    def __init__(self, suggester: TextSuggester) -> None:
        self._suggester = suggester

    def handle(self, prompt: str) -> str:
        prompt = (prompt or "").strip()
        if not prompt:
            raise ValidationError("Prompt is required", field="prompt")
        if len(prompt) > MAX_PROMPT_LENGTH:
            raise ValidationError(
                f"Prompt is {len(prompt)} characters; the limit is {MAX_PROMPT_LENGTH}",
                field="prompt",
            )
        return self._suggester.suggest(prompt).strip()
