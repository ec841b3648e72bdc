"""Season-level aggregate of one player's performance in one competition."""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class MultiKills:
    triples: float = 0
    quads: float = 0
    aces: float = 0


@dataclass(frozen=True)
class PlayerSeasonStats:
    """
    Invariant: ``wins + losses == matches_played``. Matches whose stats could
    not be retrieved are excluded from all three.
    """

    player_id: str
    competition_id: str
    competition_name: str = ""
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: int = 0          # percent, rounded half up
    kills: float = 0
    deaths: float = 0
    assists: float = 0
    kd_ratio: float = 0        # per-match average, 2 decimals
    adr: float = 0
    headshot_pct: float = 0
    mvps: float = 0
    multi_kills: MultiKills = field(default_factory=MultiKills)

    @classmethod
    def empty(cls, player_id: str, competition_id: str) -> "PlayerSeasonStats":
        return cls(player_id=player_id, competition_id=competition_id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
