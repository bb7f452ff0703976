# This project was developed with assistance from AI tools.
"""Tests for advisory request building."""

import pytest
from pydantic import ValidationError

from loanpath.schemas.vendors import VendorSegment
from loanpath.services.advisory_prompts import (
    ADVISORY_RESPONSE_SCHEMA,
    ADVISORY_SCHEMA_VERSION,
    build_request,
    build_vendor_query,
)
from loanpath.services.affordability import evaluate

from .factories import make_profile


def _user_message(request) -> str:
    return next(m["content"] for m in request.messages if m["role"] == "user")


def _build(**overrides):
    profile = make_profile(**overrides)
    return build_request(profile, evaluate(profile))


def test_request_carries_schema_and_dti():
    profile = make_profile()
    affordability = evaluate(profile)
    request = build_request(profile, affordability)

    assert request.schema_version == ADVISORY_SCHEMA_VERSION
    assert request.response_schema is ADVISORY_RESPONSE_SCHEMA
    assert request.dti_ratio_pct == affordability.dti_ratio_pct
    assert f"{affordability.dti_ratio_pct:.1f}%" in _user_message(request)


def test_schema_names_every_offer_field():
    offer_fields = ADVISORY_RESPONSE_SCHEMA["properties"]["offers"]["items"]["properties"]
    assert set(offer_fields) == {
        "bankName",
        "interestRate",
        "processingFee",
        "maxTenure",
        "features",
        "matchScore",
        "officialWebUrl",
    }
    assert ADVISORY_RESPONSE_SCHEMA["required"] == ["offers", "advice"]


def test_car_loan_requests_vehicle_recommendations():
    request = _build()
    assert request.include_car_recommendations is True
    assert "recommendedCars" in _user_message(request)


def test_home_loan_does_not_request_cars():
    request = _build(loan_type="Home Loan")
    assert request.include_car_recommendations is False
    assert "Do not include 'recommendedCars'" in _user_message(request)


def test_profile_details_are_serialized():
    msg = _user_message(
        _build(
            employment_type="Self-Employed",
            income_proof="Business Turnover",
            other_incomes=[{"source": "Rent", "amount": 20000}],
            down_payment=200000,
            cibil_score=790,
        )
    )
    assert "Self-Employed" in msg
    assert "Rent: ₹20,000" in msg
    assert "Down Payment Ready: ₹2,00,000" in msg
    assert "CIBIL Score: 790" in msg
    assert "Kotak, IDFC, or NBFCs" in msg
    assert "HDFC/SBI/ICICI" in msg
    assert "appreciate it" in msg


@pytest.mark.parametrize(
    ("amount", "shown"),
    [
        (999, "₹999"),
        (80_000, "₹80,000"),
        (800_000, "₹8,00,000"),
        (10_000_000, "₹1,00,00,000"),
    ],
)
def test_amounts_use_indian_digit_grouping(amount, shown):
    msg = _user_message(_build(loan_amount=amount))
    assert f"Principal Amount: {shown}\n" in msg


def test_missing_cibil_is_described_as_assumed_average():
    msg = _user_message(_build())
    assert "Not Provided" in msg
    assert "Other Incomes: None" in msg


def test_high_dti_adds_emi_trap_warning():
    msg = _user_message(_build(primary_income=25000))
    assert "EMI trap" in msg


def test_custom_loan_label_is_used():
    msg = _user_message(_build(loan_type="Other Request", custom_loan_label="Education"))
    assert "Other Request (Education)" in msg


def test_request_is_frozen():
    request = _build()
    with pytest.raises(ValidationError):
        request.schema_version = "other"


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        (VendorSegment.JEWELLERY, "Tanishq"),
        (VendorSegment.LUXURY, "Mercedes"),
        (VendorSegment.MID_TIER, "Mahindra"),
        (VendorSegment.ECONOMY, "Maruti Suzuki"),
    ],
)
def test_vendor_query_per_segment(segment, expected):
    assert expected in build_vendor_query(segment)
