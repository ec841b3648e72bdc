"""Application layer - services built on the repositories."""
from .services import CompetitionService, FaceitStatsService, SeasonStatsService

__all__ = [
    'CompetitionService',
    'SeasonStatsService',
    'FaceitStatsService',
]
