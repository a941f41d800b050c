"""
ratefeed Providers Module

Fetch a feed, extract the requested rates, fall back from the common feed
to the other feed.
"""

from ratefeed.providers.base import (
    BaseRateProvider,
    FetchError,
    InvalidArgumentError,
    RateProviderError,
)
from ratefeed.providers.extractor import RateExtractor
from ratefeed.providers.fetcher import FeedFetcher
from ratefeed.providers.exchange_rate_provider import ExchangeRateProvider

__all__ = [
    "BaseRateProvider",
    "FetchError",
    "InvalidArgumentError",
    "RateProviderError",
    "RateExtractor",
    "FeedFetcher",
    "ExchangeRateProvider",
]
