"""Domain interfaces."""
from .fetcher import IJsonFetcher
from .repository import IMatchRepository, IPlayerRepository

__all__ = ['IJsonFetcher', 'IMatchRepository', 'IPlayerRepository']
