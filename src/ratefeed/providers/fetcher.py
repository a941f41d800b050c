"""
Feed Fetcher

Performs a single GET per call and returns the response body as text.
Transport problems are translated into FetchError here and nowhere else.
"""

import logging

import httpx

from ratefeed.config import Settings, get_settings
from ratefeed.providers.base import FetchError, InvalidArgumentError

logger = logging.getLogger(__name__)


class FeedFetcher:
    """
    Thin wrapper around one long-lived httpx.AsyncClient.

    The client is safe for overlapping requests, so a single fetcher can be
    shared by concurrent callers. A client passed in by the caller is left
    open on ``aclose()``; one created here is closed.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None
    ):
        if client is None:
            settings = settings or get_settings()
            client = httpx.AsyncClient(
                timeout=settings.request_timeout,
                headers={"User-Agent": settings.user_agent},
                follow_redirects=True,
            )
            self._owns_client = True
        else:
            self._owns_client = False
        self.client = client

    async def fetch(self, url: str) -> str:
        """
        Download a feed.

        Args:
            url: Absolute feed URL

        Returns:
            Full response body decoded as text

        Raises:
            InvalidArgumentError: If url is empty
            FetchError: On non-2xx status or any transport failure
        """
        if not url:
            raise InvalidArgumentError("URL cannot be null or empty.", "url")

        try:
            response = await self.client.get(url)
            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            raise FetchError(
                message=f"Failed to retrieve data from {url}: HTTP {e.response.status_code}",
                url=url,
                error_type=f"HTTP_{e.response.status_code}",
                details={"status_code": e.response.status_code}
            ) from e

        except httpx.TimeoutException as e:
            raise FetchError(
                message=f"Failed to retrieve data from {url}: request timeout",
                url=url,
                error_type="TIMEOUT"
            ) from e

        except httpx.HTTPError as e:
            raise FetchError(
                message=f"Failed to retrieve data from {url}: {e}",
                url=url,
                error_type="NETWORK"
            ) from e

        logger.info(f"Fetched {len(response.content)} bytes from {url}")
        return response.text

    async def health_check(self, url: str) -> bool:
        """Check if a feed URL is reachable and responding."""
        try:
            response = await self.client.get(url)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "FeedFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
