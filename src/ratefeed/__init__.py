"""
ratefeed - source-declared exchange rates from pipe-delimited text feeds.

Only rates explicitly published by the feed are returned; nothing is
inverted or cross-calculated.
"""

__version__ = "1.0.0"

from ratefeed.models import Currency, ExchangeRate
from ratefeed.providers import (
    ExchangeRateProvider,
    FetchError,
    InvalidArgumentError,
    RateProviderError,
)

__all__ = [
    "__version__",
    "Currency",
    "ExchangeRate",
    "ExchangeRateProvider",
    "FetchError",
    "InvalidArgumentError",
    "RateProviderError",
]
