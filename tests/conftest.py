"""Shared fixtures: fake clock, caches and a routed stub for the JSON fetcher."""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from domain.interfaces import IJsonFetcher
from infrastructure.cache import CacheService

ESEA_ID = "08b06cfc-74d0-454b-9a51-feda4b6b18da"


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def history_item(
    match_id: str,
    competition_id: str = "comp-a",
    competition_name: str = "ESEA S50 Open",
    competition_type: str = "championship",
    organizer_id: str = ESEA_ID,
    finished_at: int = 1_700_000_000,
) -> Dict[str, Any]:
    return {
        "match_id": match_id,
        "competition_id": competition_id,
        "competition_name": competition_name,
        "competition_type": competition_type,
        "organizer_id": organizer_id,
        "finished_at": finished_at,
    }


def match_stats_payload(player_id: str, stats: Dict[str, str], teammates: int = 1) -> Dict[str, Any]:
    """A one-round stats body with the player on the second team."""
    filler = [{"player_id": f"other-{i}", "player_stats": {"Kills": "1"}} for i in range(teammates)]
    return {
        "rounds": [
            {
                "teams": [
                    {"players": filler},
                    {"players": filler + [{"player_id": player_id, "player_stats": stats}]},
                ]
            }
        ]
    }


class Upstream:
    """In-memory upstream keyed by endpoint pattern; records every call."""

    def __init__(self) -> None:
        self.history: Dict[str, List[Dict[str, Any]]] = {}
        self.match_stats: Dict[str, Any] = {}
        self.other: Dict[str, Any] = {}
        self.calls: List[tuple[str, Optional[Dict[str, Any]]]] = []

    def handle(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append((endpoint, dict(params) if params else None))
        m = re.fullmatch(r"/players/([^/]+)/history", endpoint)
        if m:
            items = self.history.get(m.group(1), [])
            offset, limit = int(params["offset"]), int(params["limit"])
            return {"items": items[offset:offset + limit], "start": offset, "end": offset + limit}
        m = re.fullmatch(r"/matches/([^/]+)/stats", endpoint)
        if m:
            body = self.match_stats[m.group(1)]
            if isinstance(body, Exception):
                raise body
            return body
        body = self.other[endpoint]
        if isinstance(body, Exception):
            raise body
        return body

    def calls_to(self, pattern: str) -> List[tuple[str, Optional[Dict[str, Any]]]]:
        return [c for c in self.calls if re.fullmatch(pattern, c[0])]


@pytest.fixture(autouse=True)
def api_key(monkeypatch) -> str:
    monkeypatch.setenv("FACEIT_API_KEY", "test-api-key")
    return "test-api-key"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def caches(clock: FakeClock) -> CacheService:
    return CacheService(clock=clock)


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def fetcher(upstream: Upstream) -> AsyncMock:
    mock = AsyncMock(spec=IJsonFetcher)
    mock.fetch_json.side_effect = upstream.handle
    return mock


@pytest.fixture
def make_history() -> Callable[..., List[Dict[str, Any]]]:
    def _make(count: int, **kwargs: Any) -> List[Dict[str, Any]]:
        return [history_item(f"match-{i}", **kwargs) for i in range(count)]

    return _make
