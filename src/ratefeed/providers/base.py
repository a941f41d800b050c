"""
Base Rate Provider Interface and Errors

Transport failures surface as FetchError; bad arguments surface as
InvalidArgumentError before any I/O happens.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from ratefeed.models import Currency, ExchangeRate


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing or empty."""

    def __init__(self, message: str, argument: str):
        super().__init__(message)
        self.argument = argument


class RateProviderError(Exception):
    """Base exception for rate provider errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.provider = provider
        self.error_type = error_type
        self.details = details or {}


class FetchError(RateProviderError):
    """A feed could not be retrieved (bad status, timeout, network failure)."""

    def __init__(
        self,
        message: str,
        url: str,
        provider: str = "feed",
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(
            message=message,
            provider=provider,
            error_type=error_type,
            details={"url": url, **(details or {})}
        )
        self.url = url


class BaseRateProvider(ABC):
    """
    Abstract base class for exchange rate providers.

    Implementations return only rates declared by their source.
    """

    PROVIDER_NAME: str = "base"

    @abstractmethod
    async def get_rates(
        self,
        currencies: Iterable[Currency] | None
    ) -> list[ExchangeRate]:
        """
        Fetch source-declared rates for the requested currencies.

        Raises:
            RateProviderError: If the source cannot be reached
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release transport resources."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
