# This project was developed with assistance from AI tools.
"""Analysis session schemas."""

import enum
from datetime import datetime

from pydantic import BaseModel, Field

from .advisory import CarRecommendation, LoanOffer
from .calculator import AffordabilityResult, AmortizationResult
from .market import GoldRateSnapshot
from .profile import Location, LoanProfile
from .vendors import VendorCandidate


class SessionState(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"


class CreditBand(str, enum.Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"


class CreditSummary(BaseModel):
    """CIBIL gauge data. ``assumed`` is True when the user gave no score."""

    score: int
    band: CreditBand
    gauge_pct: float = Field(description="Position of the score on the 300-900 scale, 0-100.")
    assumed: bool


class AnalysisSubmission(BaseModel):
    """Body of a submit request."""

    profile: LoanProfile
    location: Location | None = Field(
        default=None,
        description="Caller coordinates; the default city is used when omitted.",
    )


class AnalysisResults(BaseModel):
    """Everything shown after a successful analysis."""

    profile: LoanProfile
    affordability: AffordabilityResult
    offers: list[LoanOffer]
    best_offer: LoanOffer | None
    advice: str
    advisory_degraded: bool = False
    recommended_cars: list[CarRecommendation] | None = None
    vendors: list[VendorCandidate] = Field(default_factory=list)
    gold_rates: GoldRateSnapshot | None = None
    projection: AmortizationResult = Field(
        description="EMI at the best offered rate (or the fallback rate without offers).",
    )
    credit: CreditSummary
    location: Location


class ComparedOffer(BaseModel):
    """One side of an offer comparison."""

    index: int = Field(description="Position of the offer in the displayed list.")
    offer: LoanOffer
    projection: AmortizationResult | None = Field(
        default=None,
        description="EMI for the profile at this offer's rate; None when the rate is unusable.",
    )


class OfferComparison(BaseModel):
    """Two displayed offers side by side."""

    offers: list[ComparedOffer]


class ComparisonSelection(BaseModel):
    """Offers picked for comparison (at most two, oldest pick replaced first)."""

    selected: list[int]
    comparison: OfferComparison | None = None


class SessionSnapshot(BaseModel):
    """Current state of an analysis session."""

    session_id: str
    state: SessionState
    submissions: int
    results: AnalysisResults | None = None
    last_error: str | None = None
    compare_selection: list[int] = Field(default_factory=list)
    updated_at: datetime
