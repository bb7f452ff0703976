# This project was developed with assistance from AI tools.
"""Tests for the bullion-rate lookup."""

import json

import pytest

from loanpath.services.market_rates import MARKET_RATES, fetch_gold_rates

from .factories import FakeBackend, service_down


@pytest.mark.asyncio
async def test_gold_rates_parsed_as_display_strings():
    backend = FakeBackend()
    snapshot = await fetch_gold_rates(backend)

    assert snapshot.gold_22k == "₹66,500"
    assert snapshot.gold_24k == "₹72,550"
    assert snapshot.silver_1kg == "₹88,000"
    assert snapshot.location == "New Delhi"
    assert backend.tasks() == ["market_rates"]


@pytest.mark.asyncio
async def test_numeric_prices_kept_as_strings():
    raw = json.dumps({"gold22k": 66500, "gold24k": 72550, "silver1kg": 88000, "location": "Pune"})
    snapshot = await fetch_gold_rates(FakeBackend(gold=raw))
    assert snapshot.gold_22k == "66500"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "gold",
    [service_down(), "no idea", json.dumps({"gold22k": "1"}), json.dumps([1, 2])],
)
async def test_failures_return_none(gold):
    assert await fetch_gold_rates(FakeBackend(gold=gold)) is None


def test_dashboard_catalog():
    assert {rate.loan_type for rate in MARKET_RATES} == {"Home Loan", "Car Loan", "Personal Loan"}
