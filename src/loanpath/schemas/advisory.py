# This project was developed with assistance from AI tools.
"""Advisory service contract: the request we send and the offers we get back.

Response models accept the camelCase keys the advisory schema asks the model
to emit (``bankName``, ``recommendedCars`` ...) and serialize as snake_case.
Field ranges are not checked; only the types are trusted.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_WIRE_CONFIG = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class AdvisoryRequest(BaseModel):
    """A fully built advisory call. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    schema_version: str
    messages: list[dict[str, str]]
    response_schema: dict[str, Any]
    dti_ratio_pct: float | None
    include_car_recommendations: bool = False


class LoanOffer(BaseModel):
    """A lender offer as suggested by the advisory service."""

    model_config = _WIRE_CONFIG

    bank_name: str = Field(alias="bankName")
    interest_rate: float = Field(alias="interestRate", description="Annual rate in %.")
    processing_fee: str = Field(default="", alias="processingFee")
    max_tenure: str = Field(default="", alias="maxTenure")
    features: list[str] = Field(default_factory=list)
    match_score: float = Field(default=0, alias="matchScore")
    official_web_url: str | None = Field(default=None, alias="officialWebUrl")


class CarRecommendation(BaseModel):
    """A vehicle that fits the requested budget (car loans only)."""

    model_config = _WIRE_CONFIG

    model_name: str = Field(alias="modelName")
    price: str = ""
    mileage: str = ""
    category: str = ""
    fuel_type: str = Field(default="", alias="fuelType")


class AdvisoryResult(BaseModel):
    """Normalized advisory response.

    ``degraded`` is True when the service failed and the fallback advice was
    substituted.
    """

    model_config = ConfigDict(populate_by_name=True)

    offers: list[LoanOffer] = Field(default_factory=list)
    advice: str = ""
    recommended_cars: list[CarRecommendation] | None = Field(
        default=None, alias="recommendedCars"
    )
    degraded: bool = False
