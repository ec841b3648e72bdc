"""Per-match statistics as returned by /matches/{id}/stats."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class PlayerMatchStats:
    """One player's stat line. Values are kept as the raw strings upstream sends."""

    player_id: str
    player_stats: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PlayerMatchStats":
        stats = data.get('player_stats') or {}
        return cls(
            player_id=data['player_id'],
            player_stats=MappingProxyType({str(k): str(v) for k, v in stats.items()}),
        )

    @property
    def won(self) -> bool:
        return self.player_stats.get('Result', '').strip() == '1'


@dataclass(frozen=True)
class TeamMatchStats:
    players: tuple[PlayerMatchStats, ...] = ()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "TeamMatchStats":
        return cls(players=tuple(PlayerMatchStats.from_api(p) for p in data.get('players') or []))


@dataclass(frozen=True)
class MatchRound:
    teams: tuple[TeamMatchStats, ...] = ()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "MatchRound":
        return cls(teams=tuple(TeamMatchStats.from_api(t) for t in data.get('teams') or []))


@dataclass(frozen=True)
class MatchStats:
    """Stats for a finished match. Immutable, keyed by ``match_id``."""

    match_id: str
    rounds: tuple[MatchRound, ...] = ()

    @classmethod
    def from_api(cls, match_id: str, data: Dict[str, Any]) -> "MatchStats":
        return cls(
            match_id=match_id,
            rounds=tuple(MatchRound.from_api(r) for r in data.get('rounds') or []),
        )

    def find_player(self, player_id: str) -> Optional[PlayerMatchStats]:
        """Locate a player's line in the first round entry, scanning every team."""
        if not self.rounds:
            return None
        for team in self.rounds[0].teams:
            for player in team.players:
                if player.player_id == player_id:
                    return player
        return None
