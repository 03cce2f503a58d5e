"""Bounded TTL cache for ranked match lists."""

import logging
import time
from typing import Callable, Hashable

from cachetools import FIFOCache

from config import settings
from models.schemas.candidate_profile import MatchCriteria
from models.schemas.job_match import EnhancedJobMatch

logger = logging.getLogger(__name__)

CacheKey = tuple[str, tuple[str, ...], str, str]


def cache_key(criteria: MatchCriteria) -> CacheKey:
    """Key a ranking request by candidate, sorted skills, location and work type."""
    return (
        criteria.candidate_id,
        tuple(sorted(criteria.skills)),
        criteria.location or "",
        criteria.work_type or "",
    )


class MatchCache:
    """Ranked results keyed per candidate request.

    Entries expire ``ttl_seconds`` after they were stored. When full, the
    oldest stored entry is evicted first. Both limits default to settings.
    ``clock`` is injectable so tests can move time forward deterministically.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.match_cache_ttl_seconds
        self._clock = clock
        self._entries: FIFOCache = FIFOCache(maxsize=max_entries or settings.match_cache_max_entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def get(self, key: Hashable) -> list[EnhancedJobMatch] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, matches = entry
        if self._clock() - stored_at >= self.ttl_seconds:
            del self._entries[key]
            return None
        return matches

    def set(self, key: Hashable, matches: list[EnhancedJobMatch]) -> None:
        # Re-storing a key restarts its TTL and its place in eviction order
        self._entries.pop(key, None)
        self._entries[key] = (self._clock(), list(matches))

    def invalidate_candidate(self, candidate_id: str) -> int:
        """Drop every entry whose key starts with ``candidate_id``."""
        stale = [key for key in self._entries if key[0] == candidate_id]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.info("Invalidated %d cached match lists for %s", len(stale), candidate_id)
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
