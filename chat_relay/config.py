"""Centralized configuration for the chat relay service.

All tunables are read from the environment (optionally populated from a
``.env`` file at the project root) so nothing is hardcoded across modules.
"""
import os
from pathlib import Path

# Try to load .env file from project root
try:
    from dotenv import load_dotenv
    env_path = Path(__file__).resolve().parents[1] / ".env"
    load_dotenv(env_path)
except ImportError:
    pass

# Upstream provider
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini").lower().strip()
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

# Per-client quotas, in `limits` notation. Checked in this order.
RATE_LIMIT_PER_MINUTE = os.getenv("RATE_LIMIT_PER_MINUTE", "15/minute")
RATE_LIMIT_PER_HOUR = os.getenv("RATE_LIMIT_PER_HOUR", "250/hour")
RATE_LIMIT_PER_DAY = os.getenv("RATE_LIMIT_PER_DAY", "500/day")
RATE_LIMITS = (RATE_LIMIT_PER_MINUTE, RATE_LIMIT_PER_HOUR, RATE_LIMIT_PER_DAY)

# Sentinel used when no client address header is present
UNKNOWN_CLIENT_ID = "unknown-ip"

# Streaming
STREAM_CHUNK_SIZE = int(os.getenv("STREAM_CHUNK_SIZE", "20"))
STREAM_WORD_DELAY = float(os.getenv("STREAM_WORD_DELAY", "0.1"))

# CORS headers attached to every response
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
