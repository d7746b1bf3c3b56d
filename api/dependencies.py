"""
Process-wide singletons handed to the routers through FastAPI dependencies.

Tests swap them with app.dependency_overrides.
"""

from typing import Optional

from fastapi import Depends

from config import Config
from inference import OpenRouterClient, UpstreamClient
from topics import SuggestionsService, TopicCache

# Storage for singletons (initialized once)
_upstream_client: Optional[UpstreamClient] = None
_topic_cache: Optional[TopicCache] = None


def get_upstream_client() -> UpstreamClient:
    """Get or create the upstream client (singleton)."""
    global _upstream_client
    if _upstream_client is None:
        _upstream_client = OpenRouterClient(
            api_key=Config.OPENROUTER_API_KEY,
            model_name=Config.OPENROUTER_MODEL,
            base_url=Config.OPENROUTER_BASE_URL,
            timeout=Config.UPSTREAM_TIMEOUT_S,
        )
    return _upstream_client


def get_topic_cache() -> TopicCache:
    """Get or create the topic cache (singleton, process lifetime)."""
    global _topic_cache
    if _topic_cache is None:
        _topic_cache = TopicCache(ttl_s=Config.SUGGESTIONS_TTL_S)
    return _topic_cache


def get_suggestions_service(
    client: UpstreamClient = Depends(get_upstream_client),
    cache: TopicCache = Depends(get_topic_cache),
) -> SuggestionsService:
    return SuggestionsService(client=client, cache=cache)


async def close_upstream_client() -> None:
    """Release the upstream connection pool on shutdown."""
    global _upstream_client
    if _upstream_client is not None:
        await _upstream_client.aclose()
        _upstream_client = None
