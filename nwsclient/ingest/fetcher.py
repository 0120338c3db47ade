"""Cached GET path shared by every NWS operation, with retry and backoff."""

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any

import httpx

from nwsclient.ingest.errors import NwsApiError
from nwsclient.ingest.ttl_cache import TtlCache

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 4  # 1 initial + 3 retries
DEFAULT_RETRY_BASE_DELAY = 1.0


class CachedFetcher:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        user_agent: str,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_base_delay: float = DEFAULT_RETRY_BASE_DELAY,
        clock: Callable[[], float] = time.time,
        cache: TtlCache | None = None,
    ):
        self.http = http_client
        self.user_agent = user_agent
        self.max_attempts = max_attempts
        self.retry_base_delay = retry_base_delay
        self.clock = clock
        self.cache = cache if cache is not None else TtlCache()

    async def fetch(self, url: str, ttl_seconds: float) -> Any:
        """Return the JSON body at url, from cache while the entry is live.

        Server errors (5xx) and transport/parse failures are retried with
        exponential backoff; any other non-2xx status raises immediately.
        """
        now = self.clock()
        cached = self.cache.get(url, now)
        if cached is not None:
            logger.debug("Cache hit for %s", url)
            return cached.value

        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}
        last_error: NwsApiError | None = None

        for attempt in range(self.max_attempts):
            if attempt > 0:
                delay = self.retry_base_delay * (2 ** (attempt - 1))
                logger.debug("Retrying %s in %.1fs", url, delay)
                await asyncio.sleep(delay)

            try:
                resp = await self.http.get(url, headers=headers)
            except httpx.RequestError as e:
                last_error = NwsApiError(f"Network error: {e}", 0, url, True)
                logger.warning(
                    "%s for %s (attempt %d/%d)",
                    last_error.message, url, attempt + 1, self.max_attempts,
                )
                continue

            if not resp.is_success:
                retryable = resp.status_code >= 500
                error = NwsApiError(
                    f"NWS API error {resp.status_code}: {resp.reason_phrase}",
                    resp.status_code,
                    url,
                    retryable,
                )
                if not retryable:
                    logger.error(
                        "%s for %s (status %d)", error.message, url, resp.status_code
                    )
                    raise error
                last_error = error
                logger.warning(
                    "%s for %s (attempt %d/%d)",
                    error.message, url, attempt + 1, self.max_attempts,
                )
                continue

            try:
                data = resp.json()
            except ValueError as e:
                last_error = NwsApiError(f"Malformed response body: {e}", 0, url, True)
                logger.warning(
                    "%s for %s (attempt %d/%d)",
                    last_error.message, url, attempt + 1, self.max_attempts,
                )
                continue

            self.cache.set(url, data, now + ttl_seconds)
            return data

        if last_error is None:
            raise NwsApiError("Unknown error", 0, url, False)
        raise last_error
