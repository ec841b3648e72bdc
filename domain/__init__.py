"""Domain layer - Business entities, enums, and interfaces."""
from .entities import (
    CompetitionInfo,
    MatchHistoryItem,
    MatchStats,
    MultiKills,
    PlayerMatchStats,
    PlayerSeasonStats,
)
from .enums import CompetitionType, Game, Organizer
from .interfaces import IJsonFetcher, IMatchRepository, IPlayerRepository

__all__ = [
    # Entities
    'MatchHistoryItem',
    'MatchStats',
    'PlayerMatchStats',
    'CompetitionInfo',
    'PlayerSeasonStats',
    'MultiKills',
    # Enums
    'Organizer',
    'CompetitionType',
    'Game',
    # Interfaces
    'IJsonFetcher',
    'IPlayerRepository',
    'IMatchRepository',
]
