"""
tests/unit/test_suggestions_service.py

Tests for SuggestionsService cache / refresh / fallback behaviour.

Verifies:
✔ Fresh cache is served without an upstream call
✔ Stale or empty cache triggers exactly one refresh
✔ Successful refresh replaces the cache entry wholesale
✔ Upstream failures and unparseable output return the fallback list
✔ Repeated failures leave the cache exactly as it was
✔ Missing API key returns the fallback without any network call
"""

import httpx
import pytest

from conftest import completion_json
from topics import (
    DEFAULT_TTL_S,
    FALLBACK_TOPICS,
    SuggestionsService,
    TopicCache,
    TopicCacheEntry,
)

T0 = 1_700_000_000.0
CACHED = ["Deep Sea Creatures", "Roman Roads", "Sleep Science", "Chocolate", "Volcanoes", "Origami"]
FRESH = ["Coral Reefs", "Medieval Castles", "Black Holes", "Tea Ceremonies", "Jazz Origins", "Robot Dogs"]


class FakeClock:
    def __init__(self, now: float):
        self.now = now

    def __call__(self) -> float:
        return self.now


def topics_response(topics=FRESH, prose=True):
    array = "[" + ", ".join(f'"{t}"' for t in topics) + "]"
    content = f"Sure! Here are some topics:\n{array}\nHave fun!" if prose else array
    return httpx.Response(200, json=completion_json(content))


@pytest.fixture
def cache():
    return TopicCache(ttl_s=DEFAULT_TTL_S)


@pytest.fixture
def clock():
    return FakeClock(T0)


class TestCacheHit:
    @pytest.mark.asyncio
    async def test_fresh_cache_skips_upstream(self, make_client, recorder, cache, clock):
        cache.set(TopicCacheEntry.create(T0, CACHED))
        clock.now = T0 + DEFAULT_TTL_S - 0.001
        service = SuggestionsService(make_client(lambda r: topics_response()), cache, clock)

        assert await service.get_topics() == CACHED
        assert recorder.call_count == 0

    @pytest.mark.asyncio
    async def test_returned_list_is_a_copy(self, make_client, cache, clock):
        cache.set(TopicCacheEntry.create(T0, CACHED))
        service = SuggestionsService(make_client(lambda r: topics_response()), cache, clock)

        topics = await service.get_topics()
        topics.append("Mutated")

        assert cache.get().topics == tuple(CACHED)


class TestRefresh:
    @pytest.mark.asyncio
    async def test_stale_cache_refreshes(self, make_client, recorder, cache, clock):
        cache.set(TopicCacheEntry.create(T0, CACHED))
        clock.now = T0 + DEFAULT_TTL_S + 0.001
        service = SuggestionsService(make_client(lambda r: topics_response()), cache, clock)

        assert await service.get_topics() == FRESH
        assert recorder.call_count == 1
        assert cache.get() == TopicCacheEntry.create(clock.now, FRESH)

    @pytest.mark.asyncio
    async def test_empty_cache_refreshes(self, make_client, recorder, cache, clock):
        service = SuggestionsService(make_client(lambda r: topics_response()), cache, clock)

        assert await service.get_topics() == FRESH
        assert recorder.call_count == 1

    @pytest.mark.asyncio
    async def test_empty_entry_with_recent_timestamp_refreshes(self, make_client, recorder, cache, clock):
        cache.set(TopicCacheEntry.create(T0, []))
        service = SuggestionsService(make_client(lambda r: topics_response()), cache, clock)

        assert await service.get_topics() == FRESH
        assert recorder.call_count == 1

    @pytest.mark.asyncio
    async def test_refreshed_cache_serves_next_request(self, make_client, recorder, cache, clock):
        service = SuggestionsService(make_client(lambda r: topics_response()), cache, clock)

        await service.get_topics()
        clock.now += 60
        assert await service.get_topics() == FRESH
        assert recorder.call_count == 1

    @pytest.mark.asyncio
    async def test_uses_buffered_suggestions_prompt(self, make_client, recorder, cache, clock):
        service = SuggestionsService(make_client(lambda r: topics_response()), cache, clock)
        await service.get_topics()

        payload = recorder.payload()
        assert payload["stream"] is False
        assert "exactly 6" in payload["messages"][0]["content"]


class TestFallback:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, text="internal error"),
            httpx.Response(429, json={"error": "rate limited"}),
            httpx.Response(200, json=completion_json("I cannot do that.")),
            httpx.Response(200, json=completion_json('["Only", "Three", "Topics"]')),
            httpx.Response(200, json={"unexpected": "shape"}),
        ],
    )
    async def test_failure_returns_fallback(self, make_client, cache, clock, response):
        service = SuggestionsService(make_client(lambda r: response), cache, clock)

        assert await service.get_topics() == FALLBACK_TOPICS
        assert cache.get() is None

    @pytest.mark.asyncio
    async def test_transport_failure_returns_fallback(self, make_client, cache, clock):
        def handler(request):
            raise httpx.ConnectError("unreachable")

        service = SuggestionsService(make_client(handler), cache, clock)
        assert await service.get_topics() == FALLBACK_TOPICS

    @pytest.mark.asyncio
    async def test_repeated_failures_leave_cache_untouched(self, make_client, recorder, cache, clock):
        stale = TopicCacheEntry.create(T0, CACHED)
        cache.set(stale)
        clock.now = T0 + DEFAULT_TTL_S * 2
        service = SuggestionsService(
            make_client(lambda r: httpx.Response(502, text="bad gateway")), cache, clock
        )

        for _ in range(5):
            assert await service.get_topics() == FALLBACK_TOPICS

        assert cache.get() is stale
        assert recorder.call_count == 5

    @pytest.mark.asyncio
    async def test_missing_api_key_skips_network(self, make_client, recorder, cache, clock):
        service = SuggestionsService(
            make_client(lambda r: topics_response(), api_key=""), cache, clock
        )

        assert await service.get_topics() == FALLBACK_TOPICS
        assert recorder.call_count == 0
        assert cache.get() is None

    @pytest.mark.asyncio
    async def test_fallback_list_is_a_copy(self, make_client, cache, clock):
        service = SuggestionsService(
            make_client(lambda r: httpx.Response(500)), cache, clock
        )
        topics = await service.get_topics()
        topics.clear()
        assert len(FALLBACK_TOPICS) == 5
