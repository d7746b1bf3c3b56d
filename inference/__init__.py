"""
Upstream boundary layer for chat-completion calls.

This package keeps the HTTP handlers agnostic of the upstream provider.

Supported backends:
- OpenRouterClient: OpenRouter's OpenAI-compatible chat-completions API

Example usage:
    from inference import OpenRouterClient

    client = OpenRouterClient(api_key="sk-or-...")
    stream = await client.stream_chat("Tell me about volcanoes")
    async for chunk in stream.iter_chunks():
        ...
"""

from .types import ChatMessage, UpstreamChatRequest, UpstreamChatResponse
from .errors import (
    MalformedUpstreamResponse,
    UpstreamError,
    UpstreamHttpError,
    UpstreamUnreachable,
)
from .stream import ChatStream
from .base import UpstreamClient
from .openrouter import OpenRouterClient

__all__ = [
    "ChatMessage",
    "UpstreamChatRequest",
    "UpstreamChatResponse",
    "UpstreamError",
    "UpstreamUnreachable",
    "UpstreamHttpError",
    "MalformedUpstreamResponse",
    "ChatStream",
    "UpstreamClient",
    "OpenRouterClient",
]
