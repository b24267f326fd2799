"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ..core.exceptions import ProviderError, RateLimitError

logger = logging.getLogger(__name__)

# 418 is what some exchanges send once a client keeps ignoring 429s.
RATE_LIMIT_STATUSES = frozenset({418, 429})


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_fallback: float = 1.0,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_retries = max_retries
        self.retry_fallback = retry_fallback
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning decoded JSON.

        Rate-limited responses are retried after their Retry-After delay.

        Raises:
            RateLimitError: If still rate limited after max_retries retries
            ProviderError: For any other non-success status
        """
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        attempt = 0
        while True:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status in RATE_LIMIT_STATUSES:
                    retry_after = self._retry_after(response)
                    if attempt >= self.max_retries:
                        raise RateLimitError(
                            f"Rate limited by {url} after {attempt} retries",
                            retry_after=retry_after,
                        )
                    attempt += 1
                    logger.warning(
                        "http_rate_limited",
                        extra={"url": url, "retry_after": retry_after, "attempt": attempt},
                    )
                else:
                    if response.status >= 400:
                        raise ProviderError(
                            f"GET {url} failed with HTTP {response.status}",
                            status_code=response.status,
                        )
                    return await response.json()
            await asyncio.sleep(retry_after)

    def _retry_after(self, response: Any) -> float:
        value = response.headers.get("Retry-After")
        if value is None:
            return self.retry_fallback
        try:
            return float(value)
        except ValueError:
            return self.retry_fallback

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
