# This project was developed with assistance from AI tools.
"""Test data builders and a scriptable stand-in for the external services."""

import asyncio
import json
from typing import Any

from loanpath.inference.client import ServiceError
from loanpath.schemas.profile import LoanProfile

DEFAULT_PROFILE: dict[str, Any] = {
    "employment_type": "Salaried",
    "income_proof": "Mutual Funds",
    "primary_income": 75000,
    "other_incomes": [],
    "loan_type": "Car Loan",
    "loan_amount": 800000,
    "duration_months": 60,
    "existing_emi": 0,
}


def make_profile(**overrides: Any) -> LoanProfile:
    """Build a validated LoanProfile from the default form values."""
    return LoanProfile.model_validate({**DEFAULT_PROFILE, **overrides})


def offer_payload(bank: str = "HDFC Bank", rate: float = 8.9, **overrides: Any) -> dict:
    payload = {
        "bankName": bank,
        "interestRate": rate,
        "processingFee": "0.5% + GST",
        "maxTenure": "7 years",
        "features": ["No foreclosure charges"],
        "matchScore": 88,
        "officialWebUrl": "https://www.hdfcbank.com/personal/borrow/popular-loans/car-loan",
    }
    payload.update(overrides)
    return payload


def advisory_payload(offers: list[dict] | None = None, **extra: Any) -> str:
    body = {
        "offers": offers
        if offers is not None
        else [offer_payload("ICICI Bank", 9.1), offer_payload("HDFC Bank", 8.9)],
        "advice": "Bhai, EMI is comfortable. Go for it, but keep an emergency fund.",
    }
    body.update(extra)
    return json.dumps(body)


GOLD_PAYLOAD = json.dumps(
    {
        "gold22k": "₹66,500",
        "gold24k": "₹72,550",
        "silver1kg": "₹88,000",
        "location": "New Delhi",
    }
)


def place(title: str, uri: str | None, **extra: Any) -> dict:
    return {"title": title, "place_id": f"pid-{title}", "uri": uri, **extra}


class FakeBackend:
    """Records calls and replays scripted responses or errors per task."""

    def __init__(
        self,
        advisory: str | Exception = "",
        gold: str | Exception = GOLD_PAYLOAD,
        places: list[dict] | Exception | None = None,
        delay: float = 0.0,
    ):
        self.advisory = advisory or advisory_payload()
        self.gold = gold
        self.places = places if places is not None else []
        self.delay = delay
        self.calls: list[tuple[str, Any]] = []

    async def complete_json(self, messages, *, schema, schema_name, task, session_id=None):
        self.calls.append((task, {"messages": messages, "schema_name": schema_name}))
        if self.delay:
            await asyncio.sleep(self.delay)
        response = self.advisory if task == "advisory" else self.gold
        if isinstance(response, Exception):
            raise response
        return response

    async def search_places(self, query, latitude, longitude):
        self.calls.append(("places", {"query": query, "lat": latitude, "lng": longitude}))
        if isinstance(self.places, Exception):
            raise self.places
        return self.places

    def tasks(self) -> list[str]:
        return [task for task, _ in self.calls]


def service_down() -> ServiceError:
    return ServiceError("connection refused")
