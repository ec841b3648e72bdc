"""Domain enumerations."""
from .organizer import Organizer
from .competition_type import CompetitionType
from .game import Game

__all__ = [
    'Organizer',
    'CompetitionType',
    'Game',
]
