"""
Rate Extractor - parse pipe-delimited feed text into ExchangeRate objects

Record layout (one per line)::

    country|currency name|amount|code|rate
    Japan|yen|100|JPY|15.457

Only the amount, code and rate fields are used. Lines that do not look like
a record (date header, column titles, blank lines) or quote a currency the
caller did not ask for are skipped. Skipping is never an error.
"""

import logging
import re
from collections.abc import Iterable
from decimal import Decimal

from pydantic import ValidationError

from ratefeed.models import Currency, ExchangeRate
from ratefeed.providers.base import InvalidArgumentError

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)

# Amounts are 32-bit signed integers in the feed
AMOUNT_MIN = -(2 ** 31)
AMOUNT_MAX = 2 ** 31 - 1


def parse_amount(value: str) -> int | None:
    """Parse a 32-bit whole number, tolerating surrounding whitespace."""
    value = value.strip()
    if not _INTEGER.fullmatch(value):
        return None
    amount = int(value)
    if not AMOUNT_MIN <= amount <= AMOUNT_MAX:
        return None
    return amount


def parse_rate(value: str) -> Decimal | None:
    """
    Parse a plain decimal literal such as ``21.345``.

    Exponents, NaN, Infinity and digit separators are rejected so the
    result is always a finite Decimal with the precision of the source.
    """
    value = value.strip()
    if not _DECIMAL.fullmatch(value):
        return None
    return Decimal(value)


class RateExtractor:
    """Filter feed records down to the requested currencies."""

    FIELD_COUNT = 5
    AMOUNT_FIELD = 2
    CODE_FIELD = 3
    RATE_FIELD = 4
    CODE_LENGTH = 3

    def extract(
        self,
        content: str,
        currencies: Iterable[Currency]
    ) -> list[ExchangeRate]:
        """
        Extract rates declared in ``content`` for the requested currencies.

        Args:
            content: Raw feed body
            currencies: Currencies of interest (may be empty)

        Returns:
            ExchangeRate per valid matching line, in line order

        Raises:
            InvalidArgumentError: If content is empty or currencies is None
        """
        if not content:
            raise InvalidArgumentError("Content cannot be null or empty.", "content")
        if currencies is None:
            raise InvalidArgumentError("Currencies cannot be null.", "currencies")

        codes = {currency.code for currency in currencies}
        rates: list[ExchangeRate] = []

        for line_no, line in enumerate(content.split("\n"), start=1):
            fields = line.split("|")
            if len(fields) != self.FIELD_COUNT:
                continue

            code = fields[self.CODE_FIELD]
            if len(code) != self.CODE_LENGTH or code not in codes:
                continue

            amount = parse_amount(fields[self.AMOUNT_FIELD])
            rate = parse_rate(fields[self.RATE_FIELD])
            if amount is None or rate is None:
                logger.debug(f"Skipping line {line_no}: unparsable amount or rate {line!r}")
                continue

            try:
                rates.append(
                    ExchangeRate(currency=Currency(code), amount=amount, rate=rate)
                )
            except ValidationError as e:
                logger.debug(f"Skipping line {line_no}: {e.error_count()} invalid field(s) {line!r}")

        return rates
