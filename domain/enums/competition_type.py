"""Competition type enumeration."""
from enum import Enum


class CompetitionType(Enum):
    """Values FACEIT reports in ``competition_type``."""

    CHAMPIONSHIP = "championship"
    MATCHMAKING = "matchmaking"
    HUB = "hub"
