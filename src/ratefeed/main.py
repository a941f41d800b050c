"""
ratefeed Command Line Entry Point

Prints the rates the feeds declare for the currencies given on the command
line, one per line, common feed first.

Usage:
    ratefeed USD EUR JPY
    ratefeed PHP --common-url https://example.org/daily.txt
"""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from ratefeed import __version__
from ratefeed.config import get_settings
from ratefeed.models import Currency, ExchangeRate
from ratefeed.providers import (
    ExchangeRateProvider,
    InvalidArgumentError,
    RateProviderError,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def currency_arg(value: str) -> Currency:
    try:
        return Currency(value)
    except ValidationError:
        raise argparse.ArgumentTypeError(
            f"invalid currency code {value!r} (expected three uppercase letters)"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="ratefeed",
        description="Show exchange rates declared by the configured feeds"
    )
    parser.add_argument(
        "currencies", nargs="+", type=currency_arg, metavar="CODE",
        help="Currency codes to look up, e.g. USD EUR"
    )
    parser.add_argument("--common-url", default=settings.common_currencies_url,
                        help="Feed queried first")
    parser.add_argument("--other-url", default=settings.other_currencies_url,
                        help="Feed queried when the first one falls short")
    parser.add_argument("--log-level", default=settings.log_level.upper(),
                        type=str.upper, choices=LOG_LEVELS,
                        help="Logging level (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def run(args: argparse.Namespace) -> list[ExchangeRate]:
    provider = ExchangeRateProvider(
        common_currencies_url=args.common_url,
        other_currencies_url=args.other_url,
        settings=get_settings(),
    )
    async with provider:
        return await provider.get_rates(args.currencies)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )

    try:
        rates = asyncio.run(run(args))
    except (RateProviderError, InvalidArgumentError) as e:
        logger.error(f"❌ {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    for rate in rates:
        print(rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
