# This project was developed with assistance from AI tools.
"""Prompt templates and response schemas for the external advisory service.

Keeps prompt construction separate from the advisory service so prompts
and schemas can be reviewed and iterated on independently. The schemas are
fixed contracts: bump ``ADVISORY_SCHEMA_VERSION`` when a field changes.
"""

import re
from typing import Any

from ..schemas.advisory import AdvisoryRequest
from ..schemas.calculator import AffordabilityResult, DtiFlag
from ..schemas.profile import IncomeProof, LoanProfile, LoanType
from ..schemas.vendors import VendorSegment

ADVISORY_SCHEMA_VERSION = "2024-06.1"
ADVISORY_SCHEMA_NAME = "loan_advisory"
MARKET_RATE_SCHEMA_NAME = "bullion_rates"

OFFER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "bankName": {"type": "string", "description": "Lender name"},
        "interestRate": {"type": "number", "description": "Annual interest rate in %"},
        "processingFee": {"type": "string", "description": "Processing fee in INR or %"},
        "maxTenure": {"type": "string", "description": "Longest tenure offered"},
        "features": {"type": "array", "items": {"type": "string"}},
        "matchScore": {"type": "number", "description": "Suitability score out of 100"},
        "officialWebUrl": {"type": "string", "description": "URL to apply"},
    },
    "required": ["bankName", "interestRate", "processingFee", "maxTenure", "features",
                 "matchScore"],
}

CAR_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "modelName": {"type": "string"},
        "price": {"type": "string", "description": "Approx on-road price in INR"},
        "mileage": {"type": "string", "description": "ARAI mileage"},
        "category": {"type": "string"},
        "fuelType": {"type": "string"},
    },
    "required": ["modelName", "price", "mileage", "category", "fuelType"],
}

ADVISORY_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "offers": {"type": "array", "items": OFFER_SCHEMA},
        "advice": {"type": "string", "description": "Practical advice, max 80 words"},
        "recommendedCars": {"type": "array", "items": CAR_SCHEMA},
    },
    "required": ["offers", "advice"],
}

MARKET_RATE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "gold22k": {"type": "string", "description": "Current price of 22k gold per 10g in INR"},
        "gold24k": {"type": "string", "description": "Current price of 24k gold per 10g in INR"},
        "silver1kg": {"type": "string", "description": "Current price of silver per 1kg in INR"},
        "location": {"type": "string", "description": "City or region for these rates"},
    },
    "required": ["gold22k", "gold24k", "silver1kg", "location"],
}

SYSTEM_PROMPT = (
    "You are a friendly, street-smart Indian financial advisor (Desi style). "
    "You compare loan offers from Indian banks and NBFCs for the user's profile "
    "and respond ONLY with JSON matching the provided schema."
)

# Search phrases handed to the place-search service per vendor segment.
VENDOR_QUERIES: dict[VendorSegment, str] = {
    VendorSegment.JEWELLERY: (
        "Trusted Jewellery Showrooms like Tanishq, Kalyan Jewellers, Malabar Gold"
    ),
    VendorSegment.LUXURY: "Mercedes, BMW or Audi Car Showroom",
    VendorSegment.MID_TIER: "Tata, Mahindra or Toyota Car Showroom",
    VendorSegment.ECONOMY: "Maruti Suzuki or Hyundai Car Showroom",
}


# Digits before the last three, grouped in pairs: 1234567 -> 12,34,567.
_LAKH_GROUPS_RE = re.compile(r"\B(?=(\d{2})+$)")


def _inr(amount: float) -> str:
    """Whole rupees with Indian digit grouping (₹8,00,000)."""
    digits = f"{amount:.0f}"
    head, tail = digits[:-3], digits[-3:]
    if head:
        tail = f"{_LAKH_GROUPS_RE.sub(',', head)},{tail}"
    return f"₹{tail}"


def _profile_section(profile: LoanProfile, affordability: AffordabilityResult) -> str:
    other = ", ".join(f"{i.source or 'Other'}: {_inr(i.amount)}" for i in profile.other_incomes)
    cibil = (
        str(profile.cibil_score)
        if profile.cibil_score is not None
        else "Not Provided (Assume average ~700-750)"
    )
    dti = (
        f"{affordability.dti_ratio_pct:.1f}%"
        if affordability.dti_ratio_pct is not None
        else "Unknown (no income declared)"
    )
    lines = [
        "User Profile:",
        f"- Type: {profile.employment_type.value}",
        f"- Primary Income Proof: {profile.income_proof.value}",
        f"- Monthly Primary Income: {_inr(profile.primary_income)}",
        f"- Other Incomes: {other or 'None'}",
        f"- Total Monthly Income: {_inr(affordability.total_monthly_income)}",
        f"- Existing EMI Burden: {_inr(profile.existing_emi)}",
        f"- CIBIL Score: {cibil}",
        "",
        "Loan Request:",
        f"- Type: {profile.loan_label}",
        f"- Principal Amount: {_inr(profile.loan_amount)}",
    ]
    if profile.down_payment:
        lines.append(f"- Down Payment Ready: {_inr(profile.down_payment)}")
    lines += [
        f"- Duration: {profile.duration_months} months",
        f"- Estimated New EMI: {_inr(affordability.estimated_new_installment)}",
        f"- Calculated DTI Ratio: {dti}",
    ]
    return "\n".join(lines)


def _task_section(
    profile: LoanProfile, affordability: AffordabilityResult, include_cars: bool
) -> str:
    offer_rules = [
        "1. Generate 3 realistic bank/vendor offers suitable for the Indian market.",
        "   - Provide a valid 'officialWebUrl' for each lender's loan application page.",
    ]
    if profile.income_proof is IncomeProof.BUSINESS_TURNOVER:
        offer_rules.append("   - Income is business turnover: favour Kotak, IDFC, or NBFCs.")
    if profile.cibil_score is not None and profile.cibil_score > 750:
        offer_rules.append("   - CIBIL is high (>750): include HDFC/SBI/ICICI at lower rates.")

    advice_rules = [
        "2. Provide 'Desi Financial Advice' (max 80 words).",
        "   - Use friendly Indian English (e.g. 'Bhai', 'Listen na', 'Market standard').",
        "   - Be practical.",
    ]
    if affordability.dti_flag is DtiFlag.HIGH:
        advice_rules.append("   - DTI is high: warn them clearly about the 'EMI trap'.")
    if profile.down_payment:
        advice_rules.append("   - They have a down payment ready: appreciate it.")

    rules = offer_rules + advice_rules
    rules.append("3. Ensure interest rates are realistic for the current Indian economy.")
    if include_cars:
        rules.append(
            "4. Suggest 3 popular Indian car models that fit this budget "
            "(principal + down payment approx) as 'recommendedCars', with on-road "
            "price, mileage, and fuel type."
        )
    else:
        rules.append("Do not include 'recommendedCars'.")
    return "Task:\n" + "\n".join(rules)


def build_request(profile: LoanProfile, affordability: AffordabilityResult) -> AdvisoryRequest:
    """Assemble the advisory request for a profile. No I/O."""
    include_cars = profile.loan_type is LoanType.CAR
    user_msg = "\n\n".join(
        [
            _profile_section(profile, affordability),
            _task_section(profile, affordability, include_cars),
            "Output as JSON.",
        ]
    )
    return AdvisoryRequest(
        schema_version=ADVISORY_SCHEMA_VERSION,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_msg},
        ],
        response_schema=ADVISORY_RESPONSE_SCHEMA,
        dti_ratio_pct=affordability.dti_ratio_pct,
        include_car_recommendations=include_cars,
    )


def build_market_rate_messages() -> list[dict[str, str]]:
    """Fixed question for today's gold and silver rates."""
    return [
        {
            "role": "system",
            "content": "You report Indian bullion prices. Respond ONLY with JSON "
            "matching the provided schema.",
        },
        {
            "role": "user",
            "content": "What are the current gold rates (22k and 24k per 10g) and "
            "silver rate (per 1kg) in India today?",
        },
    ]


def build_vendor_query(segment: VendorSegment) -> str:
    """Free-text place-search query for a vendor segment."""
    return f"Top rated {VENDOR_QUERIES[segment]} near me in India"
