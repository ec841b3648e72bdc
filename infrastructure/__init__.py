"""Infrastructure layer - API client, caches and repositories."""
from .api import FaceitAPIClient, RetryPolicy
from .cache import CacheService, TTLCache
from .repositories import MatchRepository, PlayerRepository, TeamRepository

__all__ = [
    'FaceitAPIClient',
    'RetryPolicy',
    'CacheService',
    'TTLCache',
    'PlayerRepository',
    'MatchRepository',
    'TeamRepository',
]
