"""
ratefeed Configuration Management

Feed locations and transport settings are read from environment variables
(prefix ``RATEFEED_``) or a local ``.env`` file. See ``.env.example``.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ratefeed import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # === Feed Configuration ===
    common_currencies_url: str = Field(
        default=(
            "https://www.cnb.cz/en/financial-markets/foreign-exchange-market/"
            "central-bank-exchange-rate-fixing/central-bank-exchange-rate-fixing/daily.txt"
        ),
        description="Feed covering the commonly traded currencies (queried first)"
    )
    other_currencies_url: str = Field(
        default=(
            "https://www.cnb.cz/en/financial-markets/foreign-exchange-market/"
            "fx-rates-of-other-currencies/fx-rates-of-other-currencies/fx_rates.txt"
        ),
        description="Feed covering the remaining currencies (fallback)"
    )

    # === Transport ===
    request_timeout: float = Field(default=10.0, gt=0, description="Seconds per request")
    user_agent: str = Field(default=f"ratefeed/{__version__}")

    # === Logging ===
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="RATEFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
