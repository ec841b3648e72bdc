"""Team repository implementation."""
from typing import Any, Dict

from domain.interfaces import IJsonFetcher


class TeamRepository:
    """Pass-through team lookups; team data is not cached."""

    def __init__(self, fetcher: IJsonFetcher):
        self.fetcher = fetcher

    async def get_team(self, team_id: str) -> Dict[str, Any]:
        return await self.fetcher.fetch_json(f"/teams/{team_id}")

    async def search_teams(self, name: str, limit: int = 10, offset: int = 0) -> Dict[str, Any]:
        return await self.fetcher.fetch_json(
            "/search/teams",
            {"nickname": name, "offset": offset, "limit": limit},
        )
