# This project was developed with assistance from AI tools.
"""EMI and affordability calculator schemas."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class EmiRequest(BaseModel):
    """Input for the public EMI calculator."""

    model_config = ConfigDict(allow_inf_nan=False)

    principal: float = Field(gt=0)
    annual_rate_pct: float = Field(ge=0, le=60)
    term_months: int = Field(ge=1, le=600)


class AmortizationResult(BaseModel):
    """Monthly installment and totals for a fully amortizing loan."""

    principal: float
    annual_rate_pct: float
    term_months: int
    monthly_installment: float
    total_payment: float
    total_interest: float


class DtiFlag(str, enum.Enum):
    OK = "ok"
    HIGH = "high"
    UNDEFINED = "undefined"


class AffordabilityResult(BaseModel):
    """Income and obligation load for a profile, before lender rates are known."""

    total_monthly_income: float
    estimated_new_installment: float
    total_obligations: float
    dti_ratio_pct: float | None = Field(
        description="Obligations / income * 100. None when income is zero.",
    )
    dti_flag: DtiFlag
    dti_warning: str | None = None


class EmiPreview(BaseModel):
    """Whole-rupee EMI shown beside the form sliders, at the fixed preview rate."""

    principal: float
    term_months: int
    annual_rate_pct: float
    monthly_installment: int
