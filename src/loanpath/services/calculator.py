# This project was developed with assistance from AI tools.
"""EMI (amortization) calculation logic.

Pure math, no I/O. Shared by the public API route, the affordability
evaluator and the results summary.
"""

import math

from ..schemas.calculator import AmortizationResult

# Rate used for the live form preview before any lender rate is known.
PREVIEW_RATE_PCT = 9.0


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")


def monthly_installment(principal: float, annual_rate_pct: float, term_months: int) -> float:
    """Equated monthly installment for a fully amortizing loan.

    P * r * (1+r)^n / ((1+r)^n - 1) with r = annual% / 12 / 100; a zero rate
    degenerates to P / n.
    """
    _require_finite("principal", principal)
    _require_finite("annual_rate_pct", annual_rate_pct)
    _require_finite("term_months", term_months)
    if principal <= 0:
        raise ValueError(f"principal must be positive, got {principal}")
    if annual_rate_pct < 0:
        raise ValueError(f"annual_rate_pct cannot be negative, got {annual_rate_pct}")
    if isinstance(term_months, bool) or int(term_months) != term_months or term_months < 1:
        raise ValueError(f"term_months must be a whole number >= 1, got {term_months}")
    n = int(term_months)

    monthly_rate = annual_rate_pct / 12 / 100
    if monthly_rate == 0:
        return principal / n

    compound = (1 + monthly_rate) ** n
    return principal * monthly_rate * compound / (compound - 1)


def compute_amortization(
    principal: float, annual_rate_pct: float, term_months: int
) -> AmortizationResult:
    """Installment, total payment and total interest for a loan.

    Raises:
        ValueError: principal <= 0, negative rate, term < 1, or non-finite input.
    """
    installment = monthly_installment(principal, annual_rate_pct, term_months)
    total_payment = installment * term_months
    return AmortizationResult(
        principal=principal,
        annual_rate_pct=annual_rate_pct,
        term_months=int(term_months),
        monthly_installment=installment,
        total_payment=total_payment,
        total_interest=total_payment - principal,
    )


def projected_installment(principal: float, term_months: int) -> int:
    """Whole-rupee EMI at the preview rate, as shown next to the form sliders."""
    return round(monthly_installment(principal, PREVIEW_RATE_PCT, term_months))
