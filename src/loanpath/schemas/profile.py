# This project was developed with assistance from AI tools.
"""Loan profile schemas -- the data a user submits for analysis."""

import enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Slider ranges offered by the form. LoanProfile enforces positivity only;
# the EMI preview endpoint is limited to these ranges.
PRINCIPAL_BOUNDS: tuple[int, int] = (50_000, 10_000_000)
TERM_BOUNDS: tuple[int, int] = (6, 360)


class EmploymentType(str, enum.Enum):
    SALARIED = "Salaried"
    SELF_EMPLOYED = "Self-Employed"


class IncomeProof(str, enum.Enum):
    MUTUAL_FUNDS = "Mutual Funds"
    FIXED_DEPOSITS = "Fixed Deposits"
    BUSINESS_TURNOVER = "Business Turnover"


class LoanType(str, enum.Enum):
    CAR = "Car Loan"
    HOME = "Home Loan"
    GOLD = "Gold Loan"
    PERSONAL = "Personal Loan"
    OTHER = "Other Request"


class OtherIncome(BaseModel):
    """A secondary monthly income line (rent, freelance, ...)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    source: str = Field(default="", max_length=100)
    amount: float = Field(ge=0)


class LoanProfile(BaseModel):
    """A submitted loan profile. Immutable for the lifetime of one analysis."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    employment_type: EmploymentType = EmploymentType.SALARIED
    income_proof: IncomeProof = IncomeProof.MUTUAL_FUNDS
    primary_income: float = Field(gt=0, description="Monthly primary income (INR).")
    other_incomes: list[OtherIncome] = Field(default_factory=list)

    loan_type: LoanType = LoanType.CAR
    custom_loan_label: str | None = Field(
        default=None,
        max_length=80,
        description="Required when loan_type is 'Other Request'.",
    )
    loan_amount: float = Field(gt=0, description="Requested principal (INR).")
    down_payment: float | None = Field(default=None, ge=0)
    duration_months: int = Field(ge=1, description="Loan term in months.")
    existing_emi: float = Field(default=0, ge=0)
    cibil_score: int | None = Field(default=None, ge=300, le=900)

    @model_validator(mode="after")
    def _check_custom_label(self) -> "LoanProfile":
        label = (self.custom_loan_label or "").strip()
        if self.loan_type is LoanType.OTHER and not label:
            raise ValueError("custom_loan_label is required when loan_type is 'Other Request'")
        if self.loan_type is not LoanType.OTHER and label:
            raise ValueError("custom_loan_label is only allowed when loan_type is 'Other Request'")
        return self

    @property
    def total_other_income(self) -> float:
        return sum(item.amount for item in self.other_incomes)

    @property
    def total_monthly_income(self) -> float:
        return self.primary_income + self.total_other_income

    @property
    def loan_label(self) -> str:
        """Effective loan type name shown to the user and the advisor."""
        if self.loan_type is LoanType.OTHER:
            return f"{self.loan_type.value} ({self.custom_loan_label.strip()})"
        return self.loan_type.value


class Location(BaseModel):
    """Caller coordinates used for the nearby-vendor search."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
