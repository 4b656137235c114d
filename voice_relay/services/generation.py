"""Gemini-backed reply generation."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class GeminiTextGenerator:
    """Wraps a configured `google.generativeai.GenerativeModel`.

    The system prompt is bound into the model at construction, so a call only
    carries the user's utterance.
    """

    def __init__(self, *, model: Any) -> None:
        self._model = model

    async def generate(self, text: str) -> str:
        response = await self._model.generate_content_async(text)
        reply = response.text or ""
        logger.info("reply: generated %s chars", len(reply))
        return reply


__all__ = ["GeminiTextGenerator"]
