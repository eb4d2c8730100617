"""Router for the conversation endpoint (``OPTIONS /`` and ``POST /``).

A POST goes through: client id → body validation → quota check → prompt
→ upstream completion → JSON reply or SSE stream. Failures raise one of
the ``chat_relay.errors`` variants, rendered by the app's exception handler.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError

from chat_relay.config import CORS_HEADERS, UNKNOWN_CLIENT_ID
from chat_relay.errors import ChatRelayError, InvalidInput, UpstreamFailure
from chat_relay.llm_base import LLMClient
from chat_relay.llm_factory import get_llm_client
from chat_relay.models import CompletionResponse, ConversationRequest
from chat_relay.prompt_builder import build_prompt
from chat_relay.streaming import stream_events

LOG = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

STREAM_HEADERS = {
    **CORS_HEADERS,
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def client_identifier(request: Request) -> str:
    return (
        request.headers.get("x-forwarded-for")
        or request.headers.get("x-real-ip")
        or UNKNOWN_CLIENT_ID
    )


def resolve_llm_client(app: FastAPI) -> LLMClient:
    """Return the app's completion client, building the default one on first use."""
    if app.state.llm_client is None:
        app.state.llm_client = get_llm_client()
    return app.state.llm_client


async def parse_conversation(request: Request) -> ConversationRequest:
    try:
        payload = await request.json()
    except ValueError as exc:
        raise InvalidInput() from exc
    try:
        return ConversationRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInput() from exc


@router.options("/")
async def preflight() -> Response:
    return Response(status_code=204, headers=CORS_HEADERS)


@router.post("/")
async def chat_endpoint(request: Request):
    """Forward a conversation to the completion provider.

    The body is validated before any quota is charged: a malformed request
    gets 400 whatever the caller's budget and costs nothing.
    """
    client_id = client_identifier(request)
    req = await parse_conversation(request)
    request.app.state.quota_tracker.check(client_id)

    prompt = build_prompt(req.messages)

    try:
        llm = resolve_llm_client(request.app)
        content = await llm.generate(prompt)
    except Exception as exc:
        LOG.exception("Completion failed for client %s", client_id)
        if isinstance(exc, ChatRelayError):
            raise
        raise UpstreamFailure() from exc

    LOG.info(
        "Completed %d messages for client %s (stream=%s, chars=%d)",
        len(req.messages), client_id, req.stream, len(content),
    )

    if req.stream:
        return StreamingResponse(
            stream_events(content, is_disconnected=request.is_disconnected),
            headers=STREAM_HEADERS,
        )
    return JSONResponse(CompletionResponse(content=content).model_dump(), headers=CORS_HEADERS)
