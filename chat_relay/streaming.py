"""Re-chunk a finished completion into a paced Server-Sent Events stream.

The upstream text arrives in one piece. It is split on whitespace and
regrouped into short runs of words. A run closes when its buffered length
(words plus one trailing space each) reaches ``STREAM_CHUNK_SIZE``, or when
it ends a sentence. The threshold is soft: the word that crosses it stays
in the run, so a chunk can overshoot by up to one word.

Each chunk becomes one ``data: {"content": "..."}`` frame. There is no
terminal sentinel; the stream simply closes after the last chunk.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import AsyncIterator, Awaitable, Callable, Iterator, Optional

from chat_relay import config

LOG = logging.getLogger(__name__)

SENTENCE_ENDINGS = (".", "!", "?")


class ChunkBuffer:
    """Accumulates words and hands back a chunk whenever one closes."""

    def __init__(self, chunk_size: int):
        self.chunk_size = chunk_size
        self._buffer = ""

    def push(self, word: str) -> Optional[str]:
        self._buffer += f"{word} "
        if len(self._buffer) >= self.chunk_size or self._buffer.rstrip().endswith(SENTENCE_ENDINGS):
            return self.flush()
        return None

    def flush(self) -> Optional[str]:
        chunk = self._buffer.strip()
        self._buffer = ""
        return chunk or None


def iter_chunks(text: str, chunk_size: Optional[int] = None) -> Iterator[str]:
    """Yield the chunks of ``text`` in order, without pacing."""
    buf = ChunkBuffer(config.STREAM_CHUNK_SIZE if chunk_size is None else chunk_size)
    for word in text.split():
        chunk = buf.push(word)
        if chunk:
            yield chunk
    tail = buf.flush()
    if tail:
        yield tail


def format_event(chunk: str) -> str:
    return f"data: {json.dumps({'content': chunk}, ensure_ascii=False)}\n\n"


async def stream_events(
    text: str,
    *,
    chunk_size: Optional[int] = None,
    delay: Optional[float] = None,
    is_disconnected: Optional[Callable[[], Awaitable[bool]]] = None,
) -> AsyncIterator[str]:
    """Yield SSE frames for ``text``, sleeping ``delay`` seconds after each word.

    ``is_disconnected`` is polled before every word; once it reports the
    caller is gone the generator returns without emitting anything else.
    """
    buf = ChunkBuffer(config.STREAM_CHUNK_SIZE if chunk_size is None else chunk_size)
    pause = config.STREAM_WORD_DELAY if delay is None else delay
    sent = 0

    try:
        for word in text.split():
            if is_disconnected is not None and await is_disconnected():
                LOG.info("Client disconnected after %d chunks; stopping stream", sent)
                return
            chunk = buf.push(word)
            if chunk:
                yield format_event(chunk)
                sent += 1
            await asyncio.sleep(pause)

        tail = buf.flush()
        if tail:
            yield format_event(tail)
            sent += 1
    except asyncio.CancelledError:
        LOG.info("Stream cancelled after %d chunks", sent)
        raise
    except Exception:
        # Headers are already sent; the only option left is to end early.
        LOG.exception("Stream failed after %d chunks", sent)
        return

    LOG.debug("Stream finished: %d chunks", sent)


__all__ = ["ChunkBuffer", "iter_chunks", "format_event", "stream_events", "SENTENCE_ENDINGS"]
