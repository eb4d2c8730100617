"""Gemini (Google GenAI) completion client.

Sends one prompt, awaits the complete generated text and returns it. The
provider is treated as non-streaming: chunking for the caller happens
afterwards in ``chat_relay.streaming``.

Expects GEMINI_API_KEY in the environment unless an explicit key is passed.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from google import genai

from chat_relay.config import DEFAULT_MODEL
from chat_relay.errors import UpstreamFailure
from chat_relay.llm_base import LLMClient

LOG = logging.getLogger(__name__)


class GeminiClient(LLMClient):
    """Async client for Google Gemini (GenAI).

    - ``api_key`` falls back to the GEMINI_API_KEY environment variable;
      construction fails with ``RuntimeError`` when neither is set.
    - ``generate(...)`` returns the provider's text verbatim.
    """

    def __init__(self, api_key: Optional[str] = None, default_model: Optional[str] = DEFAULT_MODEL):
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY")
        if not self.api_key:
            raise RuntimeError("GEMINI_API_KEY is not set")
        self.default_model = default_model

        try:
            self._client = genai.Client(api_key=self.api_key)
        except Exception as exc:
            raise RuntimeError("Failed to initialize GenAI client: %s" % exc) from exc

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """Generate text for the given prompt."""
        model_id = model or self.default_model
        if not model_id:
            raise ValueError("model must be provided either via constructor or argument")

        LOG.debug("Calling Gemini model=%s prompt_chars=%d", model_id, len(prompt))
        try:
            response = await self._client.aio.models.generate_content(
                model=model_id,
                contents=prompt,
            )
        except Exception as exc:
            raise UpstreamFailure() from exc

        # Blocked prompts and empty candidates come back without text
        text = getattr(response, "text", None)
        if not isinstance(text, str):
            raise UpstreamFailure()
        return text


__all__ = ["GeminiClient"]
