"""Game identifiers accepted by the FACEIT Data API."""
from enum import Enum


class Game(Enum):
    CS2 = "cs2"
    CSGO = "csgo"
