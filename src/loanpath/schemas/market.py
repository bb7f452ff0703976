# This project was developed with assistance from AI tools.
"""Market rate schemas."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class GoldRateSnapshot(BaseModel):
    """Today's bullion prices as display strings (never parsed numerically)."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    gold_22k: str = Field(alias="gold22k", description="22k gold per 10g.")
    gold_24k: str = Field(alias="gold24k", description="24k gold per 10g.")
    silver_1kg: str = Field(alias="silver1kg", description="Silver per kg.")
    location: str = ""


class RateTrend(str, enum.Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class MarketRate(BaseModel):
    """Indicative rate band for a loan category on the public dashboard."""

    loan_type: str
    rate_range: str
    trend: RateTrend
