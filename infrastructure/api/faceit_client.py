"""FACEIT Data API client."""
import asyncio
import importlib.util
import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

import httpx

from config import settings
from core.errors import NetworkError, RateLimitError, UpstreamError
from domain.interfaces import IJsonFetcher
from .retry_policy import RetryPolicy

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class FaceitAPIClient(IJsonFetcher):
    """
    Asynchronous FACEIT Data API client.

    Every request carries bearer auth and ``Accept: application/json``. A 429
    is retried with backoff up to ``retry_policy.max_attempts`` total
    requests; any other non-2xx fails immediately. Retries are local to the
    call: nothing is queued against other in-flight requests.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        retry_policy: Optional[RetryPolicy] = None,
        sleep: Sleep = asyncio.sleep,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self.base_url = (base_url or settings.FACEIT_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.retry_policy = retry_policy or RetryPolicy.from_settings()
        self._sleep = sleep
        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._ensure_session()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    async def aclose(self) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    def _ensure_session(self) -> httpx.AsyncClient:
        if self.session is None:
            # http2 only when the optional h2 package is installed
            http2 = self._transport is None and importlib.util.find_spec("h2") is not None
            self.session = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                http2=http2,
            )
        return self.session

    def _headers(self) -> Dict[str, str]:
        api_key = self._api_key or settings.resolve_api_key()
        return {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }

    async def fetch_json(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        headers = self._headers()  # ConfigError before any network call
        session = self._ensure_session()
        policy = self.retry_policy

        attempt = 1
        while True:
            try:
                response = await session.get(endpoint, params=params, headers=headers)
            except httpx.TransportError as exc:
                logger.error(f"Network error for {endpoint}: {exc}")
                raise NetworkError(f"{type(exc).__name__}: {exc}") from exc

            if response.status_code == 429:
                if not policy.should_retry(attempt):
                    logger.error(f"429 on {endpoint}, giving up after {attempt} attempts")
                    raise RateLimitError(attempts=attempt, body=response.text)
                delay = policy.delay_seconds(attempt, response.headers.get("Retry-After"))
                logger.warning(f"429 rate-limited on {endpoint}: attempt {attempt}, waiting {delay:.2f}s")
                await self._sleep(delay)
                attempt += 1
                continue

            if not response.is_success:
                logger.warning(f"HTTP {response.status_code} for {endpoint}")
                raise UpstreamError(response.status_code, response.text)

            try:
                return response.json()
            except ValueError as exc:
                raise NetworkError(f"invalid JSON from {endpoint}: {exc}") from exc


def page_items(payload: Any) -> List[Dict[str, Any]]:
    """Return the ``items`` list of a paged response, or ``[]`` when absent."""
    if isinstance(payload, dict):
        items = payload.get("items")
        if isinstance(items, list):
            return items
    return []
