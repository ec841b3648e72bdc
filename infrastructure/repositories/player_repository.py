"""Player repository implementation."""
import logging
from typing import Any, Dict, List, Optional

from config import settings
from core.errors import NetworkError
from domain.entities import MatchHistoryItem
from domain.interfaces import IJsonFetcher, IPlayerRepository
from infrastructure.api import page_items
from infrastructure.cache import TTLCache

logger = logging.getLogger(__name__)


class PlayerRepository(IPlayerRepository):
    """Repository for player profiles and match history using the FACEIT API."""

    def __init__(
        self,
        fetcher: IJsonFetcher,
        history_cache: TTLCache,
        *,
        page_size: int = settings.HISTORY_PAGE_SIZE,
        default_max_matches: int = settings.MAX_MATCHES_PER_AGGREGATION,
    ):
        """
        Initialize player repository.

        Args:
            fetcher: Upstream JSON fetcher (normally ``FaceitAPIClient``)
            history_cache: Cache for paginated history, keyed by
                ``(player_id, game, max_matches)``
            page_size: Largest ``limit`` upstream accepts per page
            default_max_matches: Cap used when the caller gives none
        """
        self.fetcher = fetcher
        self.history_cache = history_cache
        self.page_size = page_size
        self.default_max_matches = default_max_matches

    async def get_history_paginated(
        self,
        player_id: str,
        game: str,
        max_matches: Optional[int] = None,
    ) -> List[MatchHistoryItem]:
        """
        Get a player's match history, newest first, up to ``max_matches`` items.

        Pages of ``min(page_size, remaining)`` are requested from offset 0
        until enough items are collected or a short page signals the end of
        upstream data. Fetcher errors propagate unchanged.

        Args:
            player_id: FACEIT player id
            game: Game id, e.g. ``cs2``
            max_matches: Upper bound on returned items

        Returns:
            History items in upstream order
        """
        if max_matches is None:
            max_matches = self.default_max_matches
        if max_matches <= 0:
            return []

        cache_key = (player_id, game, max_matches)
        cached = self.history_cache.get(cache_key)
        if cached is not None:
            return list(cached)

        items: List[MatchHistoryItem] = []
        offset = 0
        while len(items) < max_matches:
            limit = min(self.page_size, max_matches - len(items))
            payload = await self.fetcher.fetch_json(
                f"/players/{player_id}/history",
                {"game": game, "offset": offset, "limit": limit},
            )
            page = page_items(payload)
            try:
                items.extend(MatchHistoryItem.from_api(raw) for raw in page[:limit])
            except (KeyError, TypeError, ValueError) as exc:
                logger.error(f"Unparseable history item for player {player_id} at offset {offset}: {exc!r}")
                raise NetworkError(f"unparseable history item: {exc!r}") from exc
            offset += len(page)
            logger.debug(
                f"history page player={player_id} offset={offset} got={len(page)}/{limit} total={len(items)}"
            )
            if len(page) < limit:
                break

        self.history_cache.set(cache_key, tuple(items))
        return items

    async def get_player(self, player_id: str) -> Dict[str, Any]:
        """Get a player's profile as returned by upstream."""
        return await self.fetcher.fetch_json(f"/players/{player_id}")

    async def search_players(
        self,
        nickname: str,
        game: str = settings.DEFAULT_GAME,
        limit: int = 10,
        offset: int = 0,
    ) -> Dict[str, Any]:
        """Search players by nickname. Returns upstream's ``{items: [...]}`` body."""
        return await self.fetcher.fetch_json(
            "/search/players",
            {"nickname": nickname, "game": game, "offset": offset, "limit": limit},
        )
