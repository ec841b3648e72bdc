"""Cross-cutting concerns: errors and logging."""
from .errors import ApiError, ConfigError, NetworkError, RateLimitError, UpstreamError

__all__ = [
    'ApiError',
    'ConfigError',
    'NetworkError',
    'RateLimitError',
    'UpstreamError',
]
