"""Error taxonomy for upstream access.

Every failure the FACEIT client can produce is an ``ApiError``. Each class
carries the HTTP status the serving layer should answer with, so a routing
layer can translate errors without knowing about upstream details.
"""
from __future__ import annotations


class ApiError(Exception):
    """Base class for failures talking to the FACEIT Data API."""

    status_code: int = 500


class ConfigError(ApiError):
    """A required setting (the API credential) is missing."""

    status_code = 500


class RateLimitError(ApiError):
    """Upstream kept answering 429 after every allowed attempt."""

    status_code = 429

    def __init__(self, attempts: int, body: str = "") -> None:
        self.attempts = attempts
        self.body = body
        super().__init__(f"FACEIT API rate limit exceeded after {attempts} attempts: {body}")


class UpstreamError(ApiError):
    """Upstream answered with a non-2xx status other than 429."""

    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(f"FACEIT API error ({status}): {body}")

    @property
    def status_code(self) -> int:  # type: ignore[override]
        if 400 <= self.status < 500:
            return self.status
        return 502


class NetworkError(UpstreamError):
    """The request never produced a usable response (transport or JSON failure)."""

    def __init__(self, message: str) -> None:
        super().__init__(0, message)
