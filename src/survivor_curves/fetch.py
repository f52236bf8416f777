"""Rate-limited page fetcher for the published life tables."""
from __future__ import annotations

import httpx
import structlog

from .config import DEFAULT_URL_TEMPLATE
from .errors import FetchFailed
from .net import AsyncRateLimiter

logger = structlog.get_logger(__name__)


class LifeTablePageFetcher:
    """Fetch one life-table page per year through a shared rate limiter.

    Example:
        limiter = AsyncRateLimiter(RateLimitConfig(min_interval=0.5))
        async with LifeTablePageFetcher(limiter) as fetcher:
            html = await fetcher.fetch_year(1950)
    """

    def __init__(
        self,
        limiter: AsyncRateLimiter,
        client: httpx.AsyncClient | None = None,
        url_template: str = DEFAULT_URL_TEMPLATE,
        timeout: float = 30.0,
        user_agent: str = "survivor-curves",
    ) -> None:
        self.limiter = limiter
        self.url_template = url_template
        self._timeout = timeout
        self._user_agent = user_agent
        self._client = client
        self._owns_client = client is None

    def url_for(self, year: int) -> str:
        return self.url_template.format(year=year)

    async def fetch(self, url: str) -> str:
        """GET a page body as text.

        Raises:
            FetchFailed: On an invalid URL, timeout, transport failure or non-2xx status
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                headers={"User-Agent": self._user_agent},
            )
            self._owns_client = True

        async with self.limiter.slot():
            logger.info("lifetable.fetch", url=url)
            try:
                resp = await self._client.get(url)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise FetchFailed(
                    url, f"HTTP {e.response.status_code}", e.response.status_code
                ) from e
            except httpx.TimeoutException as e:
                raise FetchFailed(url, "request timed out") from e
            except httpx.HTTPError as e:
                raise FetchFailed(url, str(e) or type(e).__name__) from e
            except httpx.InvalidURL as e:
                raise FetchFailed(url, f"invalid URL: {e}") from e
            return resp.text

    async def fetch_year(self, year: int) -> str:
        try:
            return await self.fetch(self.url_for(year))
        except FetchFailed as exc:
            exc.year = year
            raise

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> LifeTablePageFetcher:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        await self.close()
        return False
