"""Tests for the stats CLI command."""

from __future__ import annotations

import io
import json

import pytest

from application.services import FaceitStatsService
from core.errors import UpstreamError
from presentation.cli import StatsCommand, build_parser
from tests.conftest import ESEA_ID, history_item, match_stats_payload


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def command(fetcher, caches, out) -> StatsCommand:
    return StatsCommand(FaceitStatsService(fetcher, caches), out=out)


def test_parser_requires_a_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_defaults_game():
    args = build_parser().parse_args(["stats", "p1", "comp"])
    assert (args.game, args.player_id, args.competition_id) == ("cs2", "p1", "comp")


@pytest.mark.asyncio
async def test_stats_prints_season_json(command, upstream, out):
    upstream.history["p1"] = [history_item("m1", competition_id="A", competition_name="ESEA S50")]
    upstream.match_stats["m1"] = match_stats_payload("p1", {"Kills": "21", "Result": "1"})

    code = await command.run(["--compact", "stats", "p1", "A"])

    payload = json.loads(out.getvalue())
    assert code == 0
    assert payload["kills"] == 21
    assert payload["competition_name"] == "ESEA S50"
    assert payload["multi_kills"] == {"triples": 0, "quads": 0, "aces": 0}


@pytest.mark.asyncio
async def test_seasons_wraps_organizer(command, upstream, out):
    upstream.history["p1"] = [history_item("m1", competition_id="A")]

    assert await command.run(["seasons", "p1"]) == 0

    payload = json.loads(out.getvalue())
    assert payload["player_id"] == "p1"
    assert payload["organizer_id"] == ESEA_ID
    assert payload["seasons"][0]["match_count"] == 1


@pytest.mark.asyncio
async def test_api_error_prints_status_and_exits_non_zero(command, fetcher, out):
    fetcher.fetch_json.side_effect = UpstreamError(404, "Team not found")

    code = await command.run(["team", "t1"])

    assert code == 1
    assert json.loads(out.getvalue())["error"]["status"] == 404
