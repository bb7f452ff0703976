# This project was developed with assistance from AI tools.
"""Results summary: best offer, EMI projection, credit band, offer comparison.

Pure functions, no I/O. Offers keep the advisory service's order for
display; the best offer is chosen by rate, not by position.
"""

import math

from ..schemas.advisory import AdvisoryResult, LoanOffer
from ..schemas.calculator import AffordabilityResult
from ..schemas.market import GoldRateSnapshot
from ..schemas.profile import Location, LoanProfile
from ..schemas.session import (
    AnalysisResults,
    ComparedOffer,
    CreditBand,
    CreditSummary,
    OfferComparison,
)
from ..schemas.vendors import VendorCandidate
from .calculator import compute_amortization

# Rate used for the projection when the advisory service returned no offers.
NO_OFFER_RATE_PCT = 10.0
ASSUMED_CIBIL_SCORE = 750
CIBIL_RANGE = (300, 900)


def _usable_rate(offer: LoanOffer) -> bool:
    return math.isfinite(offer.interest_rate) and offer.interest_rate >= 0


def select_best_offer(offers: list[LoanOffer]) -> LoanOffer | None:
    """Lowest interest rate wins; ties keep the earlier offer.

    Offers with a negative or non-finite rate are never chosen.
    """
    usable = [offer for offer in offers if _usable_rate(offer)]
    if not usable:
        return None
    return min(usable, key=lambda offer: offer.interest_rate)


def credit_summary(cibil_score: int | None) -> CreditSummary:
    score = ASSUMED_CIBIL_SCORE if cibil_score is None else cibil_score
    if score > 750:
        band = CreditBand.EXCELLENT
    elif score > 650:
        band = CreditBand.GOOD
    else:
        band = CreditBand.NEEDS_IMPROVEMENT
    low, high = CIBIL_RANGE
    return CreditSummary(
        score=score,
        band=band,
        gauge_pct=(score - low) / (high - low) * 100,
        assumed=cibil_score is None,
    )


def build_results(
    profile: LoanProfile,
    affordability: AffordabilityResult,
    advisory: AdvisoryResult,
    vendors: list[VendorCandidate],
    gold_rates: GoldRateSnapshot | None,
    location: Location,
) -> AnalysisResults:
    best = select_best_offer(advisory.offers)
    rate = best.interest_rate if best is not None else NO_OFFER_RATE_PCT
    projection = compute_amortization(profile.loan_amount, rate, profile.duration_months)
    return AnalysisResults(
        profile=profile,
        affordability=affordability,
        offers=advisory.offers,
        best_offer=best,
        advice=advisory.advice,
        advisory_degraded=advisory.degraded,
        recommended_cars=advisory.recommended_cars,
        vendors=vendors,
        gold_rates=gold_rates,
        projection=projection,
        credit=credit_summary(profile.cibil_score),
        location=location,
    )


def toggle_comparison(selected: list[int], index: int) -> list[int]:
    """Pick or unpick an offer for comparison.

    Picking an already selected offer removes it. A third pick replaces the
    oldest one, so at most two offers are ever selected.
    """
    if index in selected:
        return [i for i in selected if i != index]
    if len(selected) < 2:
        return [*selected, index]
    return [selected[-1], index]


def compare_offers(results: AnalysisResults, first: int, second: int) -> OfferComparison:
    """Put two displayed offers side by side, each with its own EMI projection.

    Raises:
        ValueError: an index is outside the offer list, or both are the same.
    """
    count = len(results.offers)
    for index in (first, second):
        if not 0 <= index < count:
            raise ValueError(f"Offer index {index} out of range (0-{count - 1})")
    if first == second:
        raise ValueError("Pick two different offers to compare")

    profile = results.profile
    sides = []
    for index in (first, second):
        offer = results.offers[index]
        projection = None
        if _usable_rate(offer):
            projection = compute_amortization(
                profile.loan_amount, offer.interest_rate, profile.duration_months
            )
        sides.append(ComparedOffer(index=index, offer=offer, projection=projection))
    return OfferComparison(offers=sides)
