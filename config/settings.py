"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

from core.errors import ConfigError

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    ─── CACHE LIFETIMES ──────────────────────────────────────────────────
    Match stats: 24 h (a finished match never changes).
    Player history and the season lists derived from it: 5 min.
    ──────────────────────────────────────────────────────────────────────
    """

    FACEIT_API_KEY:  str = os.getenv('FACEIT_API_KEY', '')
    FACEIT_API_BASE: str = os.getenv('FACEIT_API_BASE', 'https://open.faceit.com/data/v4')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT:       int   = _env_int('REQUEST_TIMEOUT', 30)
    MAX_RETRIES:           int   = _env_int('MAX_RETRIES', 3)          # total attempts on 429
    RETRY_BACKOFF_BASE_MS: int   = _env_int('RETRY_BACKOFF_BASE_MS', 1000)
    RETRY_BACKOFF_FACTOR:  float = _env_float('RETRY_BACKOFF_FACTOR', 2.0)

    # ── History pagination ─────────────────────────────────────────────────
    # FACEIT refuses limit > 100 on /players/{id}/history
    HISTORY_PAGE_SIZE:           int = 100
    MAX_MATCHES_PER_AGGREGATION: int = _env_int('MAX_MATCHES_PER_AGGREGATION', 200)

    # ── Caches (seconds) ───────────────────────────────────────────────────
    MATCH_STATS_TTL:             int = _env_int('MATCH_STATS_TTL', 86400)
    MATCH_STATS_CHECK_PERIOD:    int = _env_int('MATCH_STATS_CHECK_PERIOD', 3600)
    PLAYER_HISTORY_TTL:          int = _env_int('PLAYER_HISTORY_TTL', 300)
    PLAYER_HISTORY_CHECK_PERIOD: int = _env_int('PLAYER_HISTORY_CHECK_PERIOD', 60)
    PLAYER_SEASONS_TTL:          int = _env_int('PLAYER_SEASONS_TTL', 300)
    PLAYER_SEASONS_CHECK_PERIOD: int = _env_int('PLAYER_SEASONS_CHECK_PERIOD', 60)

    DEFAULT_GAME: str = os.getenv('DEFAULT_GAME', 'cs2')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def resolve_api_key(cls) -> str:
        """Return the upstream credential, preferring the live environment."""
        api_key = os.getenv('FACEIT_API_KEY') or cls.FACEIT_API_KEY
        if not api_key:
            raise ConfigError(
                "FACEIT_API_KEY environment variable is not set. "
                "Set it in the environment or in config/.env."
            )
        return api_key


settings = Settings()
