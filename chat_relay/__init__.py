"""Rate-limited chat completion relay.

Modules grouped by responsibility:
- rate_limit: per-client fixed-window quotas
- prompt_builder: conversation → prompt text
- gemini_client / llm_factory: upstream completion provider
- streaming: re-chunking a completion into SSE frames
- routers: HTTP surface (chat endpoint, health probe)
"""
