"""Backoff schedule for rate-limited requests."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from config import settings


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """
    Bounded exponential backoff.

    ``max_attempts`` counts every request including the first, so the default
    of 3 means at most two sleeps.
    """

    max_attempts: int = 3
    backoff_base_ms: int = 1000
    backoff_factor: float = 2.0

    @classmethod
    def from_settings(cls) -> "RetryPolicy":
        return cls(
            max_attempts=max(1, settings.MAX_RETRIES),
            backoff_base_ms=settings.RETRY_BACKOFF_BASE_MS,
            backoff_factor=settings.RETRY_BACKOFF_FACTOR,
        )

    def should_retry(self, attempt: int) -> bool:
        return attempt < self.max_attempts

    def backoff_seconds(self, attempt: int) -> float:
        """Delay after the ``attempt``-th failed request (1-based)."""
        return self.backoff_base_ms * math.pow(self.backoff_factor, attempt - 1) / 1000.0

    def delay_seconds(self, attempt: int, retry_after: Optional[str] = None) -> float:
        """Honour a numeric ``Retry-After`` header, else fall back to the schedule."""
        if retry_after is not None:
            try:
                seconds = float(retry_after.strip())
            except ValueError:
                seconds = -1.0
            if seconds >= 0 and math.isfinite(seconds):
                return seconds
        return self.backoff_seconds(attempt)
