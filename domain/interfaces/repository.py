"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities import MatchHistoryItem, MatchStats


class IPlayerRepository(ABC):
    """Interface for player history data."""

    @abstractmethod
    async def get_history_paginated(
        self,
        player_id: str,
        game: str,
        max_matches: Optional[int] = None,
    ) -> List[MatchHistoryItem]:
        """Get up to ``max_matches`` history items, newest first."""
        pass


class IMatchRepository(ABC):
    """Interface for per-match stats."""

    @abstractmethod
    async def get_match_stats(self, match_id: str) -> MatchStats:
        """Get the stats of a finished match."""
        pass
