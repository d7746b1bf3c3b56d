"""
Suggested-topics service.

Flow:
  cache hit  -> cached topics, no upstream call
  cache miss -> upstream (buffered) -> extract_json_array -> cache.set
  any failure -> FALLBACK_TOPICS, cache left untouched so the next request retries

Failures are logged and absorbed; callers always get a list back.
"""

import logging
import time
from typing import Callable, List

from inference import UpstreamClient, UpstreamError, UpstreamHttpError
from prompting import SUGGESTED_TOPIC_COUNT, build_suggestions_prompt

from .extraction import ExtractionError, extract_json_array
from .topic_cache import TopicCache, TopicCacheEntry

logger = logging.getLogger(__name__)

FALLBACK_TOPICS: List[str] = [
    "The Silk Road",
    "Quantum Computing",
    "History of Coffee",
    "Bioluminescence",
    "Ancient Inventions",
]


class SuggestionsService:
    """
    Serves suggested topics from a TopicCache, refreshing from upstream when stale.

    Concurrent refreshes are not coalesced: two requests hitting a stale cache
    each call upstream and the later write wins.
    """

    def __init__(
        self,
        client: UpstreamClient,
        cache: TopicCache,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.cache = cache
        self._clock = clock

    async def get_topics(self) -> List[str]:
        now = self._clock()

        cached = self.cache.fresh_topics(now)
        if cached is not None:
            logger.debug("Suggested topics served from cache")
            return list(cached)

        if not self.client.is_configured:
            logger.error("Upstream API key is not configured; serving fallback topics")
            return list(FALLBACK_TOPICS)

        try:
            topics = await self._fetch_topics()
        except UpstreamHttpError as e:
            logger.error(f"Upstream error fetching suggestions ({e.status_code}): {e.body}")
            return list(FALLBACK_TOPICS)
        except (UpstreamError, ExtractionError) as e:
            logger.error(f"Error fetching suggested topics: {e}")
            return list(FALLBACK_TOPICS)

        self.cache.set(TopicCacheEntry.create(fetched_at=now, topics=topics))
        logger.info(f"Suggested topics refreshed ({len(topics)} topics)")
        return topics

    async def _fetch_topics(self) -> List[str]:
        response = await self.client.complete_chat(build_suggestions_prompt())
        topics = extract_json_array(response.content)
        if len(topics) != SUGGESTED_TOPIC_COUNT:
            raise ExtractionError(
                f"Expected {SUGGESTED_TOPIC_COUNT} topics, got {len(topics)}"
            )
        return topics
