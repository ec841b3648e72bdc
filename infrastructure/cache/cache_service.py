"""The three process-wide caches in front of the FACEIT API."""
import time
from typing import Dict

from config import settings
from .ttl_cache import CacheStats, Clock, TTLCache


class CacheService:
    """
    Owns the match-stats, player-history and player-seasons caches.

    Construct one per process and pass it to the repositories and services
    that need it. ``start``/``stop`` control the sweeper tasks.
    """

    def __init__(
        self,
        *,
        match_stats_ttl: float = settings.MATCH_STATS_TTL,
        match_stats_check_period: float = settings.MATCH_STATS_CHECK_PERIOD,
        player_history_ttl: float = settings.PLAYER_HISTORY_TTL,
        player_history_check_period: float = settings.PLAYER_HISTORY_CHECK_PERIOD,
        player_seasons_ttl: float = settings.PLAYER_SEASONS_TTL,
        player_seasons_check_period: float = settings.PLAYER_SEASONS_CHECK_PERIOD,
        clock: Clock = time.monotonic,
    ):
        self.match_stats = TTLCache("match_stats", match_stats_ttl, match_stats_check_period, clock=clock)
        self.player_history = TTLCache(
            "player_history", player_history_ttl, player_history_check_period, clock=clock
        )
        self.player_seasons = TTLCache(
            "player_seasons", player_seasons_ttl, player_seasons_check_period, clock=clock
        )

    @property
    def caches(self) -> tuple[TTLCache, ...]:
        return (self.match_stats, self.player_history, self.player_seasons)

    def start(self) -> None:
        for cache in self.caches:
            cache.start_sweeper()

    async def stop(self) -> None:
        for cache in self.caches:
            await cache.stop_sweeper()

    def flush_all(self) -> None:
        for cache in self.caches:
            cache.flush_all()

    def stats(self) -> Dict[str, CacheStats]:
        return {cache.name: cache.stats() for cache in self.caches}
