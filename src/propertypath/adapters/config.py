# src/propertypath/adapters/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Boundary defaults (used when a request omits the field)
    # -----------------------------
    DEFAULT_HORIZON_YEARS: int = Field(default=30)
    DEFAULT_INTEREST_RATE: float = Field(default=0.055)

    # Portfolio acquisition policy
    PORTFOLIO_DEPOSIT_FRACTION: float = Field(default=0.10)
    PORTFOLIO_FEES_FRACTION: float = Field(default=0.05)
    PORTFOLIO_REFINANCE_LIMIT: float = Field(default=0.80)

    model_config = SettingsConfigDict(
        env_prefix="PROPERTYPATH_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "DEFAULT_INTEREST_RATE",
        "PORTFOLIO_DEPOSIT_FRACTION",
        "PORTFOLIO_FEES_FRACTION",
        "PORTFOLIO_REFINANCE_LIMIT",
        mode="before",
    )
    @classmethod
    def _to_non_negative_fraction(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, str):
            v = v.strip().replace("%", "")
        try:
            f = float(v)
        except Exception as err:
            raise ValueError("rate must be numeric or percent-like") from err
        if f > 1.0:
            f = f / 100.0
        if f < 0:
            raise ValueError("rate must be non-negative")
        return f

    @field_validator("DEFAULT_HORIZON_YEARS", mode="before")
    @classmethod
    def _horizon_non_negative(cls, v: Any) -> Any:
        n = int(v)
        if n < 0:
            raise ValueError("DEFAULT_HORIZON_YEARS must be >= 0")
        return n


config = AppConfig()
