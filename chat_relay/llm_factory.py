"""Completion client factory: returns the right client based on configuration.

The provider is selected by the ``LLM_PROVIDER`` environment variable.
Only ``gemini`` is currently supported.

Callers should use ``get_llm_client()`` instead of instantiating
``GeminiClient`` directly so the provider can be swapped by configuration
alone.
"""
from __future__ import annotations

import logging
from typing import Optional

from chat_relay.config import LLM_PROVIDER
from chat_relay.llm_base import LLMClient

LOG = logging.getLogger(__name__)


def get_llm_client(
    *,
    provider: Optional[str] = None,
    default_model: Optional[str] = None,
) -> LLMClient:
    """Instantiate and return the configured completion client.

    Parameters
    ----------
    provider : str | None
        Override ``LLM_PROVIDER`` env var for this call.
    default_model : str | None
        Override the provider's default model for this instance.
    """
    prov = (provider or LLM_PROVIDER).lower().strip()

    if prov == "gemini":
        from chat_relay.gemini_client import GeminiClient
        kwargs: dict = {}
        if default_model:
            kwargs["default_model"] = default_model
        client = GeminiClient(**kwargs)
        LOG.info("Using Gemini completion client (model=%s)", client.default_model)
        return client

    raise ValueError(
        f"Unknown LLM_PROVIDER '{prov}'. "
        "Supported values: gemini"
    )


__all__ = ["get_llm_client", "LLM_PROVIDER"]
