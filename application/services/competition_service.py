"""Grouping of a player's match history into competitions."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.logging import get_logger
from domain.entities import CompetitionInfo, MatchHistoryItem
from domain.enums import CompetitionType, Organizer
from domain.interfaces import IPlayerRepository
from infrastructure.cache import TTLCache


def group_competitions(
    history: Iterable[MatchHistoryItem],
    organizer_id: Optional[str] = None,
    competition_type: Optional[str] = None,
) -> List[CompetitionInfo]:
    """
    Fold history items into one ``CompetitionInfo`` per ``competition_id``.

    Items not matching the optional organizer/type filter are skipped before
    grouping. Output order is first-seen order in ``history``.
    """
    competitions: Dict[str, CompetitionInfo] = {}
    for match in history:
        if not match.matches_filter(organizer_id, competition_type):
            continue
        info = competitions.get(match.competition_id)
        if info is None:
            competitions[match.competition_id] = CompetitionInfo(
                competition_id=match.competition_id,
                competition_name=match.competition_name,
                competition_type=match.competition_type,
                organizer_id=match.organizer_id,
                match_count=1,
            )
        else:
            info.match_count += 1
    return list(competitions.values())


class CompetitionService:
    """Lists the competitions a player has taken part in."""

    def __init__(self, player_repo: IPlayerRepository, seasons_cache: TTLCache):
        self.player_repo = player_repo
        self.seasons_cache = seasons_cache
        self._log = get_logger(__name__, service="competitions")

    async def list_competitions(
        self,
        player_id: str,
        game: str,
        organizer_id: Optional[str] = None,
        competition_type: Optional[str] = None,
    ) -> List[CompetitionInfo]:
        """Recompute the grouping from the (cached) paginated history."""
        history = await self.player_repo.get_history_paginated(player_id, game)
        competitions = group_competitions(history, organizer_id, competition_type)
        self._log.debug(
            lambda: f"grouped {len(history)} matches into {len(competitions)} competitions "
            f"organizer={organizer_id} type={competition_type}"
        )
        return competitions

    async def get_esea_seasons(self, player_id: str, game: str) -> List[CompetitionInfo]:
        """ESEA championship seasons, read-through the seasons cache."""
        cache_key = (player_id, game)
        cached = self.seasons_cache.get(cache_key)
        if cached is not None:
            return [CompetitionInfo(**c.to_dict()) for c in cached]

        seasons = await self.list_competitions(
            player_id,
            game,
            organizer_id=Organizer.ESEA.organizer_id,
            competition_type=CompetitionType.CHAMPIONSHIP.value,
        )
        self.seasons_cache.set(cache_key, tuple(CompetitionInfo(**s.to_dict()) for s in seasons))
        return seasons
