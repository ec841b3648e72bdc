"""Match repository implementation."""
import logging

from domain.entities import MatchStats
from domain.interfaces import IJsonFetcher, IMatchRepository
from infrastructure.cache import TTLCache

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Read-through access to per-match stats."""

    def __init__(self, fetcher: IJsonFetcher, match_stats_cache: TTLCache):
        self.fetcher = fetcher
        self.match_stats_cache = match_stats_cache

    async def get_match_stats(self, match_id: str) -> MatchStats:
        """
        Get stats for a finished match, keyed by ``match_id``.

        Concurrent callers may both miss and both fetch; the second write
        stores the same value.
        """
        cached = self.match_stats_cache.get(match_id)
        if cached is not None:
            return cached

        payload = await self.fetcher.fetch_json(f"/matches/{match_id}/stats")
        stats = MatchStats.from_api(match_id, payload)
        self.match_stats_cache.set(match_id, stats)
        return stats
