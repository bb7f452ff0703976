# This project was developed with assistance from AI tools.
"""Advisory response interpretation.

Offers and advice come from an external LLM. Any failure -- transport,
empty body, non-JSON, or a type mismatch against the response schema --
degrades to an empty offer list and a fixed fallback advice string. The
caller never sees the error.
"""

import json
import logging
import math
import re

from pydantic import ValidationError

from ..inference.backend import AdvisoryBackend
from ..inference.client import ServiceError
from ..schemas.advisory import AdvisoryRequest, AdvisoryResult, LoanOffer
from ..schemas.calculator import AffordabilityResult
from ..schemas.profile import LoanProfile
from .advisory_prompts import ADVISORY_SCHEMA_NAME, build_request

logger = logging.getLogger(__name__)

FALLBACK_ADVICE = "Bhai, servers are busy right now. Try again in a bit!"

# Matches ```json ... ``` or ``` ... ``` fences that LLMs often wrap around JSON.
_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def strip_json_fences(text: str) -> str:
    """Remove markdown code fences wrapping JSON output."""
    stripped = text.strip()
    m = _FENCE_RE.match(stripped)
    return m.group(1).strip() if m else stripped


def fallback_result() -> AdvisoryResult:
    return AdvisoryResult(offers=[], advice=FALLBACK_ADVICE, degraded=True)


def parse_advisory_response(raw: str | None) -> AdvisoryResult:
    """Parse raw advisory JSON into an ``AdvisoryResult``.

    Raises:
        ServiceError: empty, unparsable, or schema-mismatched content.
    """
    if not raw or not raw.strip():
        raise ServiceError("advisory service returned no content")
    try:
        payload = json.loads(strip_json_fences(raw))
    except json.JSONDecodeError as exc:
        raise ServiceError(f"advisory response is not JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ServiceError("advisory response is not a JSON object")
    try:
        return AdvisoryResult.model_validate(payload)
    except ValidationError as exc:
        raise ServiceError(f"advisory response does not match schema: {exc}") from exc


def _is_finite(offer: LoanOffer) -> bool:
    return math.isfinite(offer.interest_rate) and math.isfinite(offer.match_score)


def interpret(raw: str | None) -> AdvisoryResult:
    """Parse an advisory response, substituting the fallback on any failure."""
    try:
        result = parse_advisory_response(raw)
    except ServiceError:
        logger.warning("Unusable advisory response, using fallback advice", exc_info=True)
        return fallback_result()
    # NaN/Infinity survive json.loads but cannot be displayed or re-serialized.
    finite = [offer for offer in result.offers if _is_finite(offer)]
    if len(finite) < len(result.offers):
        logger.warning(
            "Dropped %d offers with non-finite numbers", len(result.offers) - len(finite)
        )
        result.offers = finite
    # A response without advice text is still usable for its offers.
    if not result.advice.strip():
        result.advice = FALLBACK_ADVICE
    return result


async def request_advisory(
    request: AdvisoryRequest,
    backend: AdvisoryBackend,
    *,
    session_id: str | None = None,
) -> AdvisoryResult:
    """Send a built request to the backend and interpret the response."""
    try:
        raw = await backend.complete_json(
            request.messages,
            schema=request.response_schema,
            schema_name=ADVISORY_SCHEMA_NAME,
            task="advisory",
            session_id=session_id,
        )
    except ServiceError:
        logger.warning("Advisory service call failed, using fallback advice", exc_info=True)
        return fallback_result()

    result = interpret(raw)
    if not request.include_car_recommendations:
        result.recommended_cars = None
    return result


async def fetch_advisory(
    profile: LoanProfile,
    affordability: AffordabilityResult,
    backend: AdvisoryBackend,
    *,
    session_id: str | None = None,
) -> AdvisoryResult:
    """Build, send, and interpret the advisory request for a profile."""
    request = build_request(profile, affordability)
    result = await request_advisory(request, backend, session_id=session_id)
    logger.info(
        "Advisory for %s: %d offers%s",
        profile.loan_label,
        len(result.offers),
        " (degraded)" if result.degraded else "",
    )
    return result
