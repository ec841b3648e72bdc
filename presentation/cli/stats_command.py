from __future__ import annotations

import argparse
import json
import sys
from typing import Any, List, Optional, TextIO

from config import settings
from core.errors import ApiError
from core.logging import StructuredLogger, get_logger
from domain.enums import Game, Organizer
from application.services import FaceitStatsService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="faceit-stats",
        description="Query FACEIT player, team and season statistics.",
    )
    parser.add_argument(
        "--game",
        default=settings.DEFAULT_GAME,
        choices=[g.value for g in Game],
        help="game id (default: %(default)s)",
    )
    parser.add_argument("--compact", action="store_true", help="print JSON on one line")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("search-players", help="search players by nickname")
    p.add_argument("nickname")
    p.add_argument("--limit", type=int, default=10)

    p = sub.add_parser("player", help="show a player profile")
    p.add_argument("player_id")

    p = sub.add_parser("seasons", help="list a player's ESEA seasons")
    p.add_argument("player_id")

    p = sub.add_parser("competitions", help="list a player's competitions")
    p.add_argument("player_id")
    p.add_argument("--organizer", dest="organizer_id", default=None)
    p.add_argument("--type", dest="competition_type", default=None)

    p = sub.add_parser("stats", help="season stats for one competition")
    p.add_argument("player_id")
    p.add_argument("competition_id")

    p = sub.add_parser("team", help="show a team")
    p.add_argument("team_id")

    p = sub.add_parser("search-teams", help="search teams by name")
    p.add_argument("name")
    p.add_argument("--limit", type=int, default=10)

    return parser


class StatsCommand:
    """Runs one CLI subcommand against the stats facade and prints JSON."""

    def __init__(self, service: Optional[FaceitStatsService] = None, out: TextIO = sys.stdout) -> None:
        self.service = service
        self.out = out
        self.logger: StructuredLogger = get_logger(__name__, service="cli")

    async def _dispatch(self, service: FaceitStatsService, args: argparse.Namespace) -> Any:
        cmd = args.command
        if cmd == "search-players":
            return await service.search_players(args.nickname, args.game, limit=args.limit)
        if cmd == "player":
            return await service.get_player(args.player_id)
        if cmd == "seasons":
            seasons = await service.get_player_esea_seasons(args.player_id, args.game)
            return {
                "player_id": args.player_id,
                "organizer_id": Organizer.ESEA.organizer_id,
                "seasons": [s.to_dict() for s in seasons],
            }
        if cmd == "competitions":
            competitions = await service.get_player_competitions(
                args.player_id, args.game, args.organizer_id, args.competition_type
            )
            return [c.to_dict() for c in competitions]
        if cmd == "stats":
            stats = await service.get_player_stats_for_competition(
                args.player_id, args.competition_id, args.game
            )
            return stats.to_dict()
        if cmd == "team":
            return await service.get_team(args.team_id)
        if cmd == "search-teams":
            return await service.search_teams(args.name, limit=args.limit)
        raise ValueError(f"unknown command: {cmd}")

    def _print(self, payload: Any, compact: bool) -> None:
        if compact:
            text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        else:
            text = json.dumps(payload, indent=2, ensure_ascii=False)
        print(text, file=self.out)

    async def run(self, argv: List[str]) -> int:
        args = build_parser().parse_args(argv)
        service = self.service or FaceitStatsService()
        try:
            async with service:
                payload = await self._dispatch(service, args)
        except ApiError as exc:
            self.logger.error(lambda: f"{args.command} failed: {exc}")
            self._print({"error": {"message": str(exc), "status": exc.status_code}}, args.compact)
            return 1
        self._print(payload, args.compact)
        return 0
