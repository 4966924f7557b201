"""
Toolkit configuration using Pydantic Settings.

Every business-rule constant can be overridden from the environment
(``DEALKIT_DSCR_INTEREST_RATE=0.07``) or from the env file. The env file
itself is chosen by the unprefixed ``APP_ENV`` variable.
"""

import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Toolkit settings loaded from environment variables."""

    # Financing defaults (percentages 0-100, rates as decimals)
    default_down_payment_percent: float = Field(60, ge=0, le=100)
    default_dscr_percent: float = Field(70, ge=0, le=100)
    default_seller_financing_percent: float = Field(40, ge=0, le=100)
    dscr_interest_rate: float = Field(0.075, ge=0)
    seller_financing_rate: float = Field(0.0, ge=0)
    standard_amortization_years: int = Field(30, gt=0)

    # Transaction costs (decimals of price)
    assignment_fee_percent: float = 0.05
    net_to_buyer_base_percent: float = 0.10
    transaction_cost_percent: float = 0.0625
    additional_cost_percent: float = 0.03

    # Property income
    assisted_living_revenue_per_bedroom: float = Field(1500, ge=0)
    str_net_income_percent: float = 0.55
    str_fallback_gross_yield: float = 0.10

    # Defaults
    default_bedroom_count: int = Field(10, ge=0)
    default_cap_rate: float = Field(0.05, gt=0)
    default_property_type: str = "multifamily"

    # Price solver
    solver_tolerance: float = Field(0.001, gt=0)
    solver_max_iterations: int = Field(50, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="DEALKIT_",
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
