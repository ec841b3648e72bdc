"""Capability interface for reading JSON from the upstream API."""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class IJsonFetcher(ABC):
    """Anything that can GET an endpoint and return its decoded JSON body.

    Implementations raise ``core.errors.ApiError`` subclasses on failure.
    """

    @abstractmethod
    async def fetch_json(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET ``endpoint`` (relative to the API base) and return parsed JSON."""
        pass
