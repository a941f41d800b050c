"""
ratefeed Data Models

All rates are held as decimal.Decimal and are never routed through float.
Both models are immutable value objects: equal when their fields are equal,
and hashable so they can live in sets.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Currency(BaseModel):
    """
    A currency identified by its three-letter ISO 4217 code.

    Codes are compared case-sensitively, so ``Currency("USD")`` only ever
    matches feed records quoting ``USD``.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(
        pattern=r"^[A-Z]{3}$",
        description="Three uppercase letters, e.g. USD"
    )

    def __init__(self, code: str, **data: Any):
        super().__init__(code=code, **data)

    def __str__(self) -> str:
        return self.code


class ExchangeRate(BaseModel):
    """
    A quotation exactly as declared by the feed.

    ``amount`` units of ``currency`` are worth ``rate`` units of the feed's
    reference currency. Example: amount=100, currency=JPY, rate=15.457
    means "100 yen = 15.457 units of the reference currency".
    """

    model_config = ConfigDict(frozen=True)

    currency: Currency
    amount: int = Field(gt=0, description="Unit size the rate applies to")
    rate: Decimal = Field(ge=Decimal("0"), description="Exact declared rate")

    @field_validator("rate", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: Any) -> Decimal:
        """Ensure the rate is Decimal without float rounding."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return Decimal(str(v))
        return v

    def __str__(self) -> str:
        return f"{self.amount} {self.currency} = {self.rate}"
