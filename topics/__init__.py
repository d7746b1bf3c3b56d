"""
Suggested-topics layer: TTL cache, JSON-array extraction and the service
that ties them to the upstream client.
"""

from .topic_cache import DEFAULT_TTL_S, TopicCache, TopicCacheEntry
from .extraction import ExtractionError, extract_json_array
from .service import FALLBACK_TOPICS, SuggestionsService

__all__ = [
    "DEFAULT_TTL_S",
    "TopicCache",
    "TopicCacheEntry",
    "ExtractionError",
    "extract_json_array",
    "FALLBACK_TOPICS",
    "SuggestionsService",
]
