"""FastAPI app exposing a rate-limited chat completion endpoint.

Endpoints:
  OPTIONS /  -> 204, CORS preflight
  POST /     -> { "messages": [{"role": ..., "content": ...}], "stream": bool }
  GET /health

Response:
  200: { "content": "..." }  or  text/event-stream of data: {"content": "..."}
  400/429/500: { "error": "message" }
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chat_relay.config import CORS_HEADERS
from chat_relay.errors import ChatRelayError, QuotaExceeded, UpstreamFailure
from chat_relay.llm_base import LLMClient
from chat_relay.logging_config import setup_logging
from chat_relay.models import ErrorResponse
from chat_relay.rate_limit import QuotaTracker
from chat_relay.routers import chat, health

LOG = logging.getLogger(__name__)


def create_app(
    llm_client: Optional[LLMClient] = None,
    quota_tracker: Optional[QuotaTracker] = None,
) -> FastAPI:
    """Build the application.

    ``llm_client`` defaults to the configured provider, created lazily on
    the first request. ``quota_tracker`` defaults to a fresh in-memory
    tracker owned by this app instance.
    """
    setup_logging()

    app = FastAPI(title="Gemini Chat Relay")
    app.state.llm_client = llm_client
    app.state.quota_tracker = quota_tracker or QuotaTracker()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        LOG.info("Incoming request: %s %s", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception as exc:
            LOG.exception("Error handling request %s %s: %s", request.method, request.url.path, exc)
            raise
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        LOG.info("Response %s for %s %s", response.status_code, request.method, request.url.path)
        return response

    @app.exception_handler(ChatRelayError)
    async def chat_relay_error_handler(request: Request, exc: ChatRelayError):
        headers = dict(CORS_HEADERS)
        if isinstance(exc, QuotaExceeded) and exc.retry_after is not None:
            headers["Retry-After"] = str(exc.retry_after)
        body = ErrorResponse(error=exc.message).model_dump()
        return JSONResponse(body, status_code=exc.status_code, headers=headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        LOG.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            ErrorResponse(error=UpstreamFailure.default_message).model_dump(),
            status_code=500,
            headers=CORS_HEADERS,
        )

    app.include_router(health.router)
    app.include_router(chat.router)
    return app


app = create_app()
