"""Abstract base class for completion clients.

Every upstream backend must implement this thin interface so the request
handler stays provider-agnostic and tests can substitute a fake.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class LLMClient(ABC):
    """Minimal contract that all completion backends must satisfy."""

    default_model: Optional[str]

    @abstractmethod
    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """Return the full model response as a single string.

        Implementations raise ``chat_relay.errors.UpstreamFailure`` for any
        transport or provider-side error. No retries are attempted.
        """


__all__ = ["LLMClient"]
