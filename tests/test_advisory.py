# This project was developed with assistance from AI tools.
"""Tests for advisory response interpretation and the degrade-to-fallback policy."""

import json

import pytest

from loanpath.inference.client import ServiceError
from loanpath.services.advisory import (
    FALLBACK_ADVICE,
    fetch_advisory,
    interpret,
    parse_advisory_response,
    strip_json_fences,
)
from loanpath.services.affordability import evaluate

from .factories import FakeBackend, advisory_payload, make_profile, offer_payload, service_down

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseAdvisoryResponse:
    def test_parses_offers_in_service_order(self):
        result = parse_advisory_response(advisory_payload())
        assert [o.bank_name for o in result.offers] == ["ICICI Bank", "HDFC Bank"]
        assert result.offers[1].interest_rate == 8.9
        assert result.offers[0].processing_fee == "0.5% + GST"
        assert result.degraded is False

    def test_parses_recommended_cars(self):
        raw = advisory_payload(
            recommendedCars=[
                {
                    "modelName": "Maruti Brezza",
                    "price": "₹9.5 Lakh",
                    "mileage": "19.8 kmpl",
                    "category": "SUV",
                    "fuelType": "Petrol",
                }
            ]
        )
        result = parse_advisory_response(raw)
        assert result.recommended_cars[0].model_name == "Maruti Brezza"
        assert result.recommended_cars[0].fuel_type == "Petrol"

    def test_numeric_display_strings_are_coerced(self):
        raw = advisory_payload([offer_payload(processingFee=5000, maxTenure=84)])
        offer = parse_advisory_response(raw).offers[0]
        assert offer.processing_fee == "5000"
        assert offer.max_tenure == "84"

    def test_out_of_range_values_are_not_validated(self):
        raw = advisory_payload([offer_payload(matchScore=140, interestRate=55)])
        offer = parse_advisory_response(raw).offers[0]
        assert offer.match_score == 140
        assert offer.interest_rate == 55

    def test_fenced_json_is_accepted(self):
        raw = f"```json\n{advisory_payload()}\n```"
        assert len(parse_advisory_response(raw).offers) == 2

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "",
            "   ",
            "not json at all",
            json.dumps(["offers"]),
            json.dumps({"offers": [{"interestRate": 9}], "advice": "x"}),
            json.dumps({"offers": "none", "advice": "x"}),
        ],
    )
    def test_unusable_content_raises_service_error(self, raw):
        with pytest.raises(ServiceError):
            parse_advisory_response(raw)


class TestStripJsonFences:
    def test_clean_json_unchanged(self):
        assert strip_json_fences('{"a": 1}') == '{"a": 1}'

    def test_plain_fence_stripped(self):
        assert strip_json_fences('```\n{"a": 1}\n```') == '{"a": 1}'


# ---------------------------------------------------------------------------
# Fallback policy
# ---------------------------------------------------------------------------


def test_interpret_never_raises_on_garbage():
    result = interpret("<html>502 Bad Gateway</html>")
    assert result.offers == []
    assert result.advice == FALLBACK_ADVICE
    assert result.degraded is True


def test_interpret_fills_missing_advice():
    result = interpret(json.dumps({"offers": [offer_payload()], "advice": ""}))
    assert len(result.offers) == 1
    assert result.advice == FALLBACK_ADVICE
    assert result.degraded is False


def test_interpret_drops_offers_with_non_finite_numbers():
    raw = advisory_payload(
        [
            offer_payload("Weird Bank", float("nan")),
            offer_payload("Good Bank", 8.5),
            offer_payload("Odd Bank", 9.0, matchScore=float("inf")),
        ]
    )
    assert "NaN" in raw

    result = interpret(raw)

    assert [o.bank_name for o in result.offers] == ["Good Bank"]
    assert result.degraded is False


@pytest.mark.asyncio
async def test_fetch_advisory_falls_back_on_service_error():
    profile = make_profile()
    backend = FakeBackend(advisory=service_down())

    result = await fetch_advisory(profile, evaluate(profile), backend)

    assert result.offers == []
    assert result.advice == FALLBACK_ADVICE
    assert result.degraded is True


@pytest.mark.asyncio
async def test_fetch_advisory_sends_built_request():
    profile = make_profile()
    backend = FakeBackend()

    result = await fetch_advisory(profile, evaluate(profile), backend, session_id="s-1")

    assert len(result.offers) == 2
    task, call = backend.calls[0]
    assert task == "advisory"
    assert call["schema_name"] == "loan_advisory"
    assert call["messages"][0]["role"] == "system"


@pytest.mark.asyncio
async def test_cars_dropped_for_non_car_loans():
    profile = make_profile(loan_type="Personal Loan")
    raw = advisory_payload(
        recommendedCars=[
            {"modelName": "X", "price": "1", "mileage": "1", "category": "c", "fuelType": "f"}
        ]
    )
    result = await fetch_advisory(profile, evaluate(profile), FakeBackend(advisory=raw))
    assert result.recommended_cars is None
