"""Pydantic request/response models for the chat endpoint."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel


class Message(BaseModel):
    # Free-form role: "user", "assistant", "system", or anything the caller sends.
    role: str
    content: str


class ConversationRequest(BaseModel):
    messages: List[Message]
    stream: bool = False


class CompletionResponse(BaseModel):
    content: str


class ErrorResponse(BaseModel):
    error: str
