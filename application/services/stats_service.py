"""Facade wiring the FACEIT client, caches, repositories and services."""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from config import settings
from domain.entities import CompetitionInfo, MatchHistoryItem, PlayerSeasonStats
from domain.interfaces import IJsonFetcher
from infrastructure.api import FaceitAPIClient
from infrastructure.cache import CacheService
from infrastructure.repositories import MatchRepository, PlayerRepository, TeamRepository
from .competition_service import CompetitionService
from .season_stats_service import SeasonStatsService


class FaceitStatsService:
    """
    Entry point for a serving layer.

    Construct once per process. Use as an async context manager to start the
    cache sweepers and close the HTTP client on exit; the methods also work
    without entering the context.
    """

    def __init__(
        self,
        fetcher: Optional[IJsonFetcher] = None,
        caches: Optional[CacheService] = None,
        *,
        max_matches: Optional[int] = None,
    ):
        self.fetcher = fetcher if fetcher is not None else FaceitAPIClient()
        self.caches = caches if caches is not None else CacheService()
        self.player_repo = PlayerRepository(
            self.fetcher,
            self.caches.player_history,
            default_max_matches=(
                max_matches if max_matches is not None else settings.MAX_MATCHES_PER_AGGREGATION
            ),
        )
        self.match_repo = MatchRepository(self.fetcher, self.caches.match_stats)
        self.team_repo = TeamRepository(self.fetcher)
        self.competitions = CompetitionService(self.player_repo, self.caches.player_seasons)
        self.seasons = SeasonStatsService(self.player_repo, self.match_repo)

    async def __aenter__(self) -> "FaceitStatsService":
        self.caches.start()
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    async def close(self) -> None:
        await self.caches.stop()
        if isinstance(self.fetcher, FaceitAPIClient):
            await self.fetcher.aclose()

    # ── Players ────────────────────────────────────────────────────────

    async def get_player(self, player_id: str) -> Dict[str, Any]:
        return await self.player_repo.get_player(player_id)

    async def search_players(
        self, nickname: str, game: str = settings.DEFAULT_GAME, limit: int = 10, offset: int = 0
    ) -> Dict[str, Any]:
        return await self.player_repo.search_players(nickname, game, limit=limit, offset=offset)

    async def get_player_history(
        self, player_id: str, game: str = settings.DEFAULT_GAME, max_matches: Optional[int] = None
    ) -> List[MatchHistoryItem]:
        return await self.player_repo.get_history_paginated(player_id, game, max_matches)

    # ── Competitions ───────────────────────────────────────────────────

    async def get_player_competitions(
        self,
        player_id: str,
        game: str = settings.DEFAULT_GAME,
        organizer_id: Optional[str] = None,
        competition_type: Optional[str] = None,
    ) -> List[CompetitionInfo]:
        return await self.competitions.list_competitions(
            player_id, game, organizer_id=organizer_id, competition_type=competition_type
        )

    async def get_player_esea_seasons(
        self, player_id: str, game: str = settings.DEFAULT_GAME
    ) -> List[CompetitionInfo]:
        return await self.competitions.get_esea_seasons(player_id, game)

    async def get_player_stats_for_competition(
        self, player_id: str, competition_id: str, game: str = settings.DEFAULT_GAME
    ) -> PlayerSeasonStats:
        return await self.seasons.get_player_season_stats(player_id, competition_id, game)

    # ── Teams ──────────────────────────────────────────────────────────

    async def get_team(self, team_id: str) -> Dict[str, Any]:
        return await self.team_repo.get_team(team_id)

    async def search_teams(self, name: str, limit: int = 10, offset: int = 0) -> Dict[str, Any]:
        return await self.team_repo.search_teams(name, limit=limit, offset=offset)

    def cache_stats(self) -> Dict[str, Dict[str, int]]:
        return {name: asdict(s) for name, s in self.caches.stats().items()}
