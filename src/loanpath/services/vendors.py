# This project was developed with assistance from AI tools.
"""Nearby vendor lookup (car showrooms, jewellers).

Segment selection is a fixed decision table on loan type and amount; only
Car and Gold loans trigger a search. Place-search failures degrade to an
empty list.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from ..inference.backend import AdvisoryBackend
from ..inference.client import ServiceError
from ..schemas.profile import LoanType
from ..schemas.vendors import DEFAULT_VENDOR_RATING, VendorCandidate, VendorSegment
from .advisory_prompts import build_vendor_query

logger = logging.getLogger(__name__)

MAX_VENDORS = 5
LUXURY_CAR_THRESHOLD = 3_000_000
MID_TIER_CAR_THRESHOLD = 1_500_000


def select_segment(loan_type: LoanType, loan_amount: float) -> VendorSegment | None:
    """Return the vendor segment for a loan, or None when no search applies."""
    if loan_type is LoanType.GOLD:
        return VendorSegment.JEWELLERY
    if loan_type is LoanType.CAR:
        if loan_amount > LUXURY_CAR_THRESHOLD:
            return VendorSegment.LUXURY
        if loan_amount > MID_TIER_CAR_THRESHOLD:
            return VendorSegment.MID_TIER
        return VendorSegment.ECONOMY
    return None


def dedupe_candidates(
    candidates: Iterable[VendorCandidate], limit: int = MAX_VENDORS
) -> list[VendorCandidate]:
    """Drop repeated source URIs (first seen wins) and cap the list at ``limit``.

    Candidates without a source URI cannot collide and are always kept.
    """
    seen: set[str] = set()
    unique: list[VendorCandidate] = []
    for candidate in candidates:
        if candidate.source_uri is not None:
            if candidate.source_uri in seen:
                continue
            seen.add(candidate.source_uri)
        unique.append(candidate)
    return unique[:limit]


def _to_candidate(place: dict[str, Any]) -> VendorCandidate | None:
    name = place.get("title")
    if not name:
        return None
    rating = place.get("rating")
    try:
        return VendorCandidate(
            name=name,
            address=place.get("address") or place.get("place_id") or "",
            rating=str(rating) if rating is not None else DEFAULT_VENDOR_RATING,
            user_ratings_total=place.get("user_ratings_total") or 0,
            source_uri=place.get("uri"),
        )
    except ValidationError:
        logger.warning("Skipping malformed place %r", name, exc_info=True)
        return None


async def locate(
    latitude: float,
    longitude: float,
    loan_amount: float,
    loan_type: LoanType,
    backend: AdvisoryBackend,
) -> list[VendorCandidate]:
    """Find up to five vendors near the caller for a Car or Gold loan."""
    segment = select_segment(loan_type, loan_amount)
    if segment is None:
        return []

    query = build_vendor_query(segment)
    try:
        places = await backend.search_places(query, latitude, longitude)
    except ServiceError:
        logger.warning("Vendor search failed for segment %s", segment.value, exc_info=True)
        return []

    candidates = [c for c in (_to_candidate(p) for p in places) if c is not None]
    vendors = dedupe_candidates(candidates)
    logger.info(
        "Vendor search (%s): %d places, %d kept", segment.value, len(places), len(vendors)
    )
    return vendors
