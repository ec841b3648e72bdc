"""Tests for grouping history into competitions and the ESEA season cache."""

from __future__ import annotations

import pytest

from application.services import CompetitionService, group_competitions
from domain.entities import MatchHistoryItem
from infrastructure.repositories import PlayerRepository
from tests.conftest import ESEA_ID, history_item


def items(*raw):
    return [MatchHistoryItem.from_api(r) for r in raw]


SAMPLE = (
    history_item("m1", competition_id="A", competition_name="ESEA S50", organizer_id=ESEA_ID),
    history_item("m2", competition_id="A", competition_name="ESEA S50", organizer_id=ESEA_ID),
    history_item(
        "m3",
        competition_id="B",
        competition_name="5v5 Queue",
        competition_type="matchmaking",
        organizer_id="X",
    ),
)


class TestGroupCompetitions:
    def test_esea_championship_filter(self):
        result = group_competitions(items(*SAMPLE), organizer_id=ESEA_ID, competition_type="championship")

        assert [c.to_dict() for c in result] == [
            {
                "competition_id": "A",
                "competition_name": "ESEA S50",
                "competition_type": "championship",
                "organizer_id": ESEA_ID,
                "match_count": 2,
            }
        ]

    def test_without_filter_keeps_first_seen_order(self):
        raw = (SAMPLE[2],) + SAMPLE[:2] + (history_item("m4", competition_id="B", organizer_id="X"),)

        result = group_competitions(items(*raw))

        assert [(c.competition_id, c.match_count) for c in result] == [("B", 2), ("A", 2)]

    def test_type_filter_alone(self):
        result = group_competitions(items(*SAMPLE), competition_type="matchmaking")
        assert [c.competition_id for c in result] == ["B"]

    def test_filter_is_exact_string_equality(self):
        assert group_competitions(items(*SAMPLE), competition_type="Championship") == []

    def test_first_item_seeds_name_and_type(self):
        raw = (
            history_item("m1", competition_id="A", competition_name="Newest name"),
            history_item("m2", competition_id="A", competition_name="Older name"),
        )
        assert group_competitions(items(*raw))[0].competition_name == "Newest name"


@pytest.fixture
def service(fetcher, caches) -> CompetitionService:
    repo = PlayerRepository(fetcher, caches.player_history)
    return CompetitionService(repo, caches.player_seasons)


class TestCompetitionService:
    @pytest.mark.asyncio
    async def test_esea_seasons(self, service, upstream):
        upstream.history["p1"] = list(SAMPLE)

        seasons = await service.get_esea_seasons("p1", "cs2")

        assert [(s.competition_id, s.match_count) for s in seasons] == [("A", 2)]

    @pytest.mark.asyncio
    async def test_esea_seasons_are_cached_per_player_and_game(self, service, upstream, caches):
        upstream.history["p1"] = list(SAMPLE)

        await service.get_esea_seasons("p1", "cs2")
        caches.player_history.flush_all()
        again = await service.get_esea_seasons("p1", "cs2")

        assert len(upstream.calls) == 1
        assert again[0].match_count == 2

    @pytest.mark.asyncio
    async def test_cached_seasons_are_not_shared_mutable_objects(self, service, upstream):
        upstream.history["p1"] = list(SAMPLE)

        first = await service.get_esea_seasons("p1", "cs2")
        first[0].match_count = 99

        assert (await service.get_esea_seasons("p1", "cs2"))[0].match_count == 2

    @pytest.mark.asyncio
    async def test_filtered_listing_bypasses_season_cache(self, service, upstream, caches):
        upstream.history["p1"] = list(SAMPLE)

        await service.list_competitions("p1", "cs2", organizer_id="X")
        caches.player_history.flush_all()
        result = await service.list_competitions("p1", "cs2", organizer_id="X")

        assert len(upstream.calls) == 2
        assert len(caches.player_seasons) == 0
        assert [c.competition_id for c in result] == ["B"]
