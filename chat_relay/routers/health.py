"""Router for the health probe."""

import os

from fastapi import APIRouter

from chat_relay.config import DEFAULT_MODEL

router = APIRouter(tags=["health"])


@router.get("/health")
def health_endpoint():
    """Report liveness and whether the upstream credential is configured.

    Not subject to quota; never calls the provider.
    """
    gemini = {
        "status": "configured" if os.environ.get("GEMINI_API_KEY") else "not_configured",
        "model": DEFAULT_MODEL,
    }
    return {"status": "healthy", "checks": {"gemini": gemini}}
