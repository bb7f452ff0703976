# This project was developed with assistance from AI tools.
"""Tests for LoanProfile validation and derived fields."""

import math

import pytest
from pydantic import ValidationError

from loanpath.schemas.profile import LoanProfile, LoanType

from .factories import DEFAULT_PROFILE, make_profile


def test_total_monthly_income_sums_all_sources():
    profile = make_profile(other_incomes=[{"source": "Rent", "amount": 12_500}])
    assert profile.total_monthly_income == 87_500


def test_other_loan_requires_custom_label():
    with pytest.raises(ValidationError, match="custom_loan_label is required"):
        make_profile(loan_type="Other Request")


def test_other_loan_rejects_blank_label():
    with pytest.raises(ValidationError):
        make_profile(loan_type="Other Request", custom_loan_label="   ")


def test_standard_loan_rejects_custom_label():
    with pytest.raises(ValidationError, match="only allowed"):
        make_profile(loan_type="Home Loan", custom_loan_label="Boat")


def test_loan_label_includes_custom_text():
    profile = make_profile(loan_type="Other Request", custom_loan_label="Education")
    assert profile.loan_type is LoanType.OTHER
    assert profile.loan_label == "Other Request (Education)"
    assert make_profile().loan_label == "Car Loan"


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("loan_amount", 0),
        ("loan_amount", -1),
        ("duration_months", 0),
        ("existing_emi", -100),
        ("cibil_score", 250),
        ("cibil_score", 901),
        ("primary_income", math.inf),
        ("loan_amount", math.nan),
    ],
)
def test_invalid_fields_are_rejected(field, value):
    with pytest.raises(ValidationError):
        LoanProfile.model_validate({**DEFAULT_PROFILE, field: value})


def test_negative_other_income_is_rejected():
    with pytest.raises(ValidationError):
        make_profile(other_incomes=[{"source": "Rent", "amount": -1}])


def test_profile_is_immutable():
    profile = make_profile()
    with pytest.raises(ValidationError):
        profile.loan_amount = 1
