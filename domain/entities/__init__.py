"""Domain entities."""
from .match_history import MatchHistoryItem
from .match_stats import MatchRound, MatchStats, PlayerMatchStats, TeamMatchStats
from .competition import CompetitionInfo
from .season_stats import MultiKills, PlayerSeasonStats

__all__ = [
    'MatchHistoryItem',
    'MatchStats',
    'MatchRound',
    'TeamMatchStats',
    'PlayerMatchStats',
    'CompetitionInfo',
    'PlayerSeasonStats',
    'MultiKills',
]
