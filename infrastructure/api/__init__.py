"""Infrastructure API module."""
from .faceit_client import FaceitAPIClient, page_items
from .retry_policy import RetryPolicy

__all__ = [
    'FaceitAPIClient',
    'RetryPolicy',
    'page_items',
]
