"""Repository implementations."""
from .player_repository import PlayerRepository
from .match_repository import MatchRepository
from .team_repository import TeamRepository

__all__ = [
    'PlayerRepository',
    'MatchRepository',
    'TeamRepository',
]
