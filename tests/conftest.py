"""
Shared fixtures for ratefeed tests.

HTTP is faked with httpx.MockTransport; every request the fake server sees
is recorded so tests can assert on the exact fetch sequence.
"""

import httpx
import pytest

from ratefeed.providers import FeedFetcher

COMMON_URL = "https://feeds.test/daily.txt"
OTHER_URL = "https://feeds.test/fx_rates.txt"

COMMON_FEED = (
    "16 Oct 2026 #200\n"
    "Country|Currency|Amount|Code|Rate\n"
    "Australia|dollar|1|AUD|15.268\n"
    "EMU|euro|1|EUR|24.330\n"
    "Japan|yen|100|JPY|15.457\n"
    "USA|dollar|1|USD|21.345\n"
)

OTHER_FEED = (
    "30.09.2026 #9\n"
    "Country|Currency|Amount|Code|Rate\n"
    "Afghanistan|afghani|100|AFN|33.781\n"
    "Philippines|peso|100|PHP|37.410\n"
    "USA|dollar|1|USD|21.400\n"
)


class FakeFeedServer:
    """Serves canned bodies per URL and records each request."""

    def __init__(self, routes: dict[str, tuple[int, str]]):
        self.routes = routes
        self.requested: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url not in self.routes:
            return httpx.Response(404, text="not found")
        status, body = self.routes[url]
        return httpx.Response(status, text=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def feed_server() -> FakeFeedServer:
    return FakeFeedServer({
        COMMON_URL: (200, COMMON_FEED),
        OTHER_URL: (200, OTHER_FEED),
    })


@pytest.fixture
def fetcher(feed_server: FakeFeedServer) -> FeedFetcher:
    return FeedFetcher(client=feed_server.client())
