"""
Exchange Rate Provider with Common/Other Feed Fallback

The "common" feed is queried first. The "other" feed is queried only when
the common feed produced fewer rates than currencies were requested.
"""

import logging
import time
from collections.abc import Iterable

from ratefeed.config import Settings, get_settings
from ratefeed.models import Currency, ExchangeRate
from ratefeed.providers.base import BaseRateProvider, InvalidArgumentError
from ratefeed.providers.extractor import RateExtractor
from ratefeed.providers.fetcher import FeedFetcher

logger = logging.getLogger(__name__)


class ExchangeRateProvider(BaseRateProvider):
    """
    Returns exchange rates among the requested currencies that are defined
    by the source. Rates are never calculated: if the source declares
    "CZK/USD" but not "USD/CZK", no "USD/CZK" rate is produced from
    1 / "CZK/USD". Currencies the source does not quote are ignored.
    """

    PROVIDER_NAME = "feed"

    def __init__(
        self,
        common_currencies_url: str,
        other_currencies_url: str,
        fetcher: FeedFetcher | None = None,
        extractor: RateExtractor | None = None,
        settings: Settings | None = None
    ):
        if not common_currencies_url:
            raise InvalidArgumentError(
                "Common currencies URL cannot be null or empty.",
                "common_currencies_url"
            )
        if not other_currencies_url:
            raise InvalidArgumentError(
                "Other currencies URL cannot be null or empty.",
                "other_currencies_url"
            )

        self.common_currencies_url = common_currencies_url
        self.other_currencies_url = other_currencies_url
        # A fetcher created here is closed by aclose(); an injected one is not.
        if fetcher is None:
            fetcher = FeedFetcher(settings=settings)
            self._owns_fetcher = True
        else:
            self._owns_fetcher = False
        self.fetcher = fetcher
        self.extractor = extractor or RateExtractor()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ExchangeRateProvider":
        """Build a provider for the feeds configured in the environment."""
        settings = settings or get_settings()
        return cls(
            common_currencies_url=settings.common_currencies_url,
            other_currencies_url=settings.other_currencies_url,
            settings=settings,
        )

    async def get_rates(
        self,
        currencies: Iterable[Currency] | None
    ) -> list[ExchangeRate]:
        """
        Fetch rates for the requested currencies.

        The other feed is consulted when the common feed returned fewer
        rates than currencies were requested. This is a count heuristic:
        it does not check which currencies are missing, so a common feed
        with extra matches can hide a currency that only the other feed
        quotes, and the other feed may be queried in vain.

        Args:
            currencies: Currencies of interest; None or empty yields []

        Returns:
            Rates from the common feed followed by rates from the other
            feed, in feed order. The same currency may appear twice.

        Raises:
            FetchError: If either required feed cannot be retrieved
        """
        if currencies is None:
            return []
        requested = list(currencies)
        if not requested:
            return []

        start_time = time.time()

        rates = await self._fetch_and_extract(self.common_currencies_url, requested)
        logger.info(f"Common feed: {len(rates)} rate(s) for {len(requested)} requested currencies")

        if len(requested) > len(rates):
            other_rates = await self._fetch_and_extract(self.other_currencies_url, requested)
            logger.info(f"Other feed: {len(other_rates)} additional rate(s)")
            rates.extend(other_rates)

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(f"✅ Returned {len(rates)} rate(s) ({latency_ms}ms)")
        return rates

    async def _fetch_and_extract(
        self,
        url: str,
        currencies: list[Currency]
    ) -> list[ExchangeRate]:
        try:
            content = await self.fetcher.fetch(url)
        except Exception as e:
            logger.warning(f"❌ Feed {url} failed: {e}")
            raise
        return self.extractor.extract(content, currencies)

    async def health_check(self) -> dict[str, bool]:
        """Check reachability of both feeds."""
        return {
            "common": await self.fetcher.health_check(self.common_currencies_url),
            "other": await self.fetcher.health_check(self.other_currencies_url),
        }

    async def aclose(self) -> None:
        if self._owns_fetcher:
            await self.fetcher.aclose()
