"""Known competition organizers."""
from enum import Enum


class Organizer(Enum):
    """Organizers identified by their stable FACEIT organizer id."""

    ESEA = "08b06cfc-74d0-454b-9a51-feda4b6b18da"

    @property
    def organizer_id(self) -> str:
        return self.value
