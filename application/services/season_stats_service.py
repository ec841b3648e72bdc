"""Season aggregation: fold per-match stat lines into one season summary."""
from __future__ import annotations

import asyncio
import math
from typing import List, Mapping, Optional, Sequence

from core.logging import get_logger, log_context
from domain.entities import MultiKills, PlayerMatchStats, PlayerSeasonStats
from domain.interfaces import IMatchRepository, IPlayerRepository

SUMMED_FIELDS = ("Kills", "Deaths", "Assists", "MVPs", "Triple Kills", "Quadro Kills", "Penta Kills")
AVERAGED_FIELDS = ("K/D Ratio", "ADR", "Headshots %")


def parse_stat(stats: Mapping[str, str], key: str) -> float:
    """Parse a raw stat value; absent, unparseable or non-finite values count as 0."""
    try:
        value = float(stats.get(key, "0"))
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like JavaScript's Math.round: floor(x * 10**digits + 0.5), on the binary float."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def aggregate_season_stats(
    player_id: str,
    competition_id: str,
    competition_name: str,
    lines: Sequence[PlayerMatchStats],
) -> PlayerSeasonStats:
    """Reduce the surviving per-match stat lines of one player."""
    played = len(lines)
    wins = sum(1 for line in lines if line.won)

    def total(key: str) -> float:
        return sum(parse_stat(line.player_stats, key) for line in lines)

    def average(key: str) -> float:
        if not played:
            return 0.0
        return round_half_up(total(key) / played, 2)

    return PlayerSeasonStats(
        player_id=player_id,
        competition_id=competition_id,
        competition_name=competition_name,
        matches_played=played,
        wins=wins,
        losses=played - wins,
        win_rate=int(round_half_up(wins / played * 100)) if played else 0,
        kills=total("Kills"),
        deaths=total("Deaths"),
        assists=total("Assists"),
        kd_ratio=average("K/D Ratio"),
        adr=average("ADR"),
        headshot_pct=average("Headshots %"),
        mvps=total("MVPs"),
        multi_kills=MultiKills(
            triples=total("Triple Kills"),
            quads=total("Quadro Kills"),
            aces=total("Penta Kills"),
        ),
    )


class SeasonStatsService:
    """
    Builds a player's season summary for one competition.

    Per-match stats are fetched concurrently. A match whose stats cannot be
    fetched or do not contain the player is left out of every aggregate;
    only a failure of the history fetch itself fails the call.
    """

    def __init__(self, player_repo: IPlayerRepository, match_repo: IMatchRepository):
        self.player_repo = player_repo
        self.match_repo = match_repo
        self._log = get_logger(__name__, service="season-stats")

    async def get_player_season_stats(
        self,
        player_id: str,
        competition_id: str,
        game: str,
    ) -> PlayerSeasonStats:
        with log_context(player_id=player_id, competition_id=competition_id):
            history = await self.player_repo.get_history_paginated(player_id, game)
            matches = [m for m in history if m.competition_id == competition_id]
            if not matches:
                self._log.info("no matches in competition")
                return PlayerSeasonStats.empty(player_id, competition_id)

            results = await asyncio.gather(
                *(self._player_line(m.match_id, player_id) for m in matches)
            )
            lines: List[PlayerMatchStats] = [r for r in results if r is not None]

            season = aggregate_season_stats(
                player_id, competition_id, matches[0].competition_name, lines
            )
            self._log.info(
                lambda: f"aggregated {season.matches_played}/{len(matches)} matches "
                f"wins={season.wins} losses={season.losses}"
            )
            return season

    async def _player_line(self, match_id: str, player_id: str) -> Optional[PlayerMatchStats]:
        try:
            stats = await self.match_repo.get_match_stats(match_id)
        except Exception as exc:
            self._log.debug(lambda: f"match {match_id} omitted: {type(exc).__name__}: {exc}")
            return None
        line = stats.find_player(player_id)
        if line is None:
            self._log.debug(lambda: f"match {match_id} omitted: player not in first round")
        return line
