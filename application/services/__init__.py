"""Application services."""
from .competition_service import CompetitionService, group_competitions
from .season_stats_service import SeasonStatsService, aggregate_season_stats
from .stats_service import FaceitStatsService

__all__ = [
    'CompetitionService',
    'SeasonStatsService',
    'FaceitStatsService',
    'group_competitions',
    'aggregate_season_stats',
]
