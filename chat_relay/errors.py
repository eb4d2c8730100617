"""Error taxonomy for the chat endpoint.

Every failure that reaches the caller is one of three variants, raised at
the site where it happens and rendered by the exception handler in
``chat_relay.main`` as ``{"error": <message>}`` with the variant's status.
"""
from __future__ import annotations

import math
from typing import Optional


class ChatRelayError(Exception):
    """Base class; subclasses fix the HTTP status and public message."""

    status_code: int = 500
    default_message: str = "Failed to generate content"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ChatRelayError):
    """Malformed request body."""

    status_code = 400
    default_message = "Invalid request body"


class QuotaExceeded(ChatRelayError):
    """One of the per-client quota windows is exhausted."""

    status_code = 429
    default_message = "Rate limit exceeded"

    def __init__(self, retry_after: Optional[float] = None):
        self.retry_after: Optional[int] = None
        message = None
        if retry_after is not None:
            self.retry_after = max(0, math.ceil(retry_after))
            message = f"Rate limit exceeded. Try again in {self.retry_after} seconds."
        super().__init__(message)


class UpstreamFailure(ChatRelayError):
    """Provider/transport error, or anything else we could not classify."""

    status_code = 500
    default_message = "Failed to generate content"


__all__ = ["ChatRelayError", "InvalidInput", "QuotaExceeded", "UpstreamFailure"]
