# This project was developed with assistance from AI tools.
"""Nearby vendor (showroom / jeweller) schemas."""

import enum

from pydantic import BaseModel

DEFAULT_VENDOR_RATING = "4.5"


class VendorSegment(str, enum.Enum):
    JEWELLERY = "jewellery"
    LUXURY = "luxury"
    MID_TIER = "mid_tier"
    ECONOMY = "economy"


class VendorCandidate(BaseModel):
    """A place returned by the place-search service.

    ``address`` holds the formatted address when the service returns one,
    otherwise the place identifier.
    """

    name: str
    address: str
    rating: str = DEFAULT_VENDOR_RATING
    user_ratings_total: int = 0
    source_uri: str | None = None
