"""Competition summary derived from a player's match history."""
from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class CompetitionInfo:
    competition_id: str
    competition_name: str
    competition_type: str
    organizer_id: str
    match_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
