"""In-process key/value cache with per-instance TTL and passive expiry."""
import asyncio
import logging
import time
from contextlib import suppress
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class _Entry:
    value: Any
    inserted_at: float


@dataclass(frozen=True)
class CacheStats:
    hits: int
    misses: int
    keys: int


class TTLCache:
    """
    Entries are valid while ``now - inserted_at < ttl``. An expired entry is
    treated as absent on lookup even before the sweeper has removed it.
    Entries are never mutated: ``set`` replaces the whole entry.
    """

    def __init__(
        self,
        name: str,
        ttl_seconds: float,
        check_period_seconds: float,
        *,
        clock: Clock = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if check_period_seconds <= 0:
            raise ValueError("check_period_seconds must be positive")
        self.name = name
        self.ttl_seconds = ttl_seconds
        self.check_period_seconds = check_period_seconds
        self._clock = clock
        self._entries: Dict[Hashable, _Entry] = {}
        self._hits = 0
        self._misses = 0
        self._sweeper: Optional[asyncio.Task] = None

    def __len__(self) -> int:
        return len(self._entries)

    def _is_live(self, entry: _Entry, now: float) -> bool:
        return now - entry.inserted_at < self.ttl_seconds

    def get(self, key: Hashable) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None or not self._is_live(entry, self._clock()):
            self._misses += 1
            logger.debug(f"cache-miss {self.name} key={key}")
            return None
        self._hits += 1
        logger.debug(f"cache-hit {self.name} key={key}")
        return entry.value

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = _Entry(value=value, inserted_at=self._clock())

    def flush_all(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def stats(self) -> CacheStats:
        return CacheStats(hits=self._hits, misses=self._misses, keys=len(self._entries))

    def sweep(self) -> int:
        """Drop expired entries. Returns the number removed."""
        now = self._clock()
        expired = [k for k, e in self._entries.items() if not self._is_live(e, now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"cache-sweep {self.name} purged={len(expired)} remaining={len(self._entries)}")
        return len(expired)

    # ── Sweeper task ──────────────────────────────────────────────────

    @property
    def sweeping(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()

    def start_sweeper(self) -> None:
        """Start the periodic sweep on the running event loop."""
        if self.sweeping:
            return
        self._sweeper = asyncio.get_running_loop().create_task(
            self._sweep_forever(), name=f"cache-sweeper-{self.name}"
        )

    async def stop_sweeper(self) -> None:
        task, self._sweeper = self._sweeper, None
        if task is None:
            return
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self.check_period_seconds)
            self.sweep()
