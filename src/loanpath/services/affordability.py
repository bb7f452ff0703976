# This project was developed with assistance from AI tools.
"""Affordability evaluation.

Pure computation, no I/O. Estimates the new installment at a conservative
placeholder rate so risk can be judged before any lender rate is known.
"""

from ..core.config import settings
from ..schemas.calculator import AffordabilityResult, DtiFlag
from ..schemas.profile import LoanProfile
from .calculator import monthly_installment

# Above this ratio the advisor is told to warn about an EMI trap.
HIGH_DTI_THRESHOLD_PCT = 50.0


def evaluate(profile: LoanProfile, estimate_rate_pct: float | None = None) -> AffordabilityResult:
    """Aggregate income and obligations into a debt-to-income ratio.

    A profile with zero total income yields ``dti_ratio_pct=None`` and the
    ``undefined`` flag instead of a NaN or infinite ratio.
    """
    rate = settings.ESTIMATE_RATE_PCT if estimate_rate_pct is None else estimate_rate_pct
    total_income = profile.total_monthly_income
    estimated = monthly_installment(profile.loan_amount, rate, profile.duration_months)
    total_obligations = profile.existing_emi + estimated

    if total_income <= 0:
        return AffordabilityResult(
            total_monthly_income=total_income,
            estimated_new_installment=estimated,
            total_obligations=total_obligations,
            dti_ratio_pct=None,
            dti_flag=DtiFlag.UNDEFINED,
            dti_warning="No monthly income declared; debt-to-income cannot be assessed.",
        )

    dti_ratio = total_obligations / total_income * 100

    dti_flag = DtiFlag.OK
    dti_warning = None
    if dti_ratio > HIGH_DTI_THRESHOLD_PCT:
        dti_flag = DtiFlag.HIGH
        dti_warning = (
            f"EMIs would take {dti_ratio:.1f}% of monthly income, above the "
            f"{HIGH_DTI_THRESHOLD_PCT:.0f}% comfort limit. Watch out for an EMI trap."
        )

    return AffordabilityResult(
        total_monthly_income=total_income,
        estimated_new_installment=estimated,
        total_obligations=total_obligations,
        dti_ratio_pct=dti_ratio,
        dti_flag=dti_flag,
        dti_warning=dti_warning,
    )
