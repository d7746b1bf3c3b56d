"""
Single-slot, time-to-live cache for the suggested-topics list.

One process-wide instance is wired in api.dependencies; tests build their own.
Entries are replaced wholesale and never mutated, so concurrent refreshes
resolve as "last writer wins" without a lock.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

DEFAULT_TTL_S: float = 24 * 60 * 60


@dataclass(frozen=True)
class TopicCacheEntry:
    fetched_at: float            # epoch seconds
    topics: Tuple[str, ...] = ()

    @classmethod
    def create(cls, fetched_at: float, topics: Sequence[str]) -> "TopicCacheEntry":
        return cls(fetched_at=fetched_at, topics=tuple(topics))

    def age(self, now: float) -> float:
        return now - self.fetched_at

    def is_fresh(self, now: float, ttl_s: float) -> bool:
        # An empty entry is never fresh, whatever its timestamp.
        return bool(self.topics) and self.age(now) < ttl_s


class TopicCache:
    """Holds the last successfully generated topic list."""

    def __init__(self, ttl_s: float = DEFAULT_TTL_S):
        self.ttl_s = ttl_s
        self._entry: Optional[TopicCacheEntry] = None

    def get(self) -> Optional[TopicCacheEntry]:
        return self._entry

    def set(self, entry: TopicCacheEntry) -> None:
        self._entry = entry

    def fresh_topics(self, now: float) -> Optional[Tuple[str, ...]]:
        """Return cached topics if the entry is still fresh, else None."""
        entry = self._entry
        if entry is not None and entry.is_fresh(now, self.ttl_s):
            return entry.topics
        return None
