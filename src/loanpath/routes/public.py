# This project was developed with assistance from AI tools.
"""Public calculator routes -- pure computation, no external calls."""

from fastapi import APIRouter, HTTPException, Query

from ..schemas.calculator import (
    AffordabilityResult,
    AmortizationResult,
    EmiPreview,
    EmiRequest,
)
from ..schemas.market import MarketRate
from ..schemas.profile import PRINCIPAL_BOUNDS, TERM_BOUNDS, LoanProfile
from ..services.affordability import evaluate
from ..services.calculator import PREVIEW_RATE_PCT, compute_amortization, projected_installment
from ..services.market_rates import MARKET_RATES

router = APIRouter()


@router.get("/market-rates", response_model=list[MarketRate])
async def list_market_rates() -> list[MarketRate]:
    """Indicative rate bands for the market dashboard."""
    return MARKET_RATES


@router.post("/emi", response_model=AmortizationResult)
async def calculate_emi(req: EmiRequest) -> AmortizationResult:
    """Monthly installment, total payment, and total interest for a loan.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1) with r the monthly rate; a 0% rate
    gives P / n.
    """
    try:
        return compute_amortization(req.principal, req.annual_rate_pct, req.term_months)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/emi-preview", response_model=EmiPreview)
async def preview_emi(
    principal: float = Query(ge=PRINCIPAL_BOUNDS[0], le=PRINCIPAL_BOUNDS[1]),
    term_months: int = Query(ge=TERM_BOUNDS[0], le=TERM_BOUNDS[1]),
) -> EmiPreview:
    """Live EMI preview for the form sliders, within the slider ranges."""
    return EmiPreview(
        principal=principal,
        term_months=term_months,
        annual_rate_pct=PREVIEW_RATE_PCT,
        monthly_installment=projected_installment(principal, term_months),
    )


@router.post("/affordability", response_model=AffordabilityResult)
async def calculate_affordability(profile: LoanProfile) -> AffordabilityResult:
    """Debt-to-income for a profile at the placeholder estimate rate."""
    try:
        return evaluate(profile)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
