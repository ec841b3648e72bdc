"""Match history entry as returned by /players/{id}/history."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MatchHistoryItem:
    """One match a player took part in. Identity is ``match_id``."""

    match_id: str
    competition_id: str
    competition_name: str
    competition_type: str
    organizer_id: str
    finished_at: int  # Unix timestamp seconds

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "MatchHistoryItem":
        return cls(
            match_id=data['match_id'],
            competition_id=data.get('competition_id', ''),
            competition_name=data.get('competition_name', ''),
            competition_type=data.get('competition_type', ''),
            organizer_id=data.get('organizer_id', ''),
            finished_at=int(data.get('finished_at') or 0),
        )

    def matches_filter(self, organizer_id: str | None = None, competition_type: str | None = None) -> bool:
        """Exact-equality check against the optional organizer/type filter."""
        if organizer_id is not None and self.organizer_id != organizer_id:
            return False
        if competition_type is not None and self.competition_type != competition_type:
            return False
        return True
