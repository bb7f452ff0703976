# This project was developed with assistance from AI tools.
"""Market rates: live bullion prices and the static public dashboard.

Gold and silver prices come from the advisory LLM as display strings; any
failure yields ``None`` rather than an error.
"""

import json
import logging

from pydantic import ValidationError

from ..inference.backend import AdvisoryBackend
from ..inference.client import ServiceError
from ..schemas.market import GoldRateSnapshot, MarketRate, RateTrend
from .advisory import strip_json_fences
from .advisory_prompts import (
    MARKET_RATE_SCHEMA,
    MARKET_RATE_SCHEMA_NAME,
    build_market_rate_messages,
)

logger = logging.getLogger(__name__)

MARKET_RATES: list[MarketRate] = [
    MarketRate(loan_type="Home Loan", rate_range="8.35% - 9.15%", trend=RateTrend.STABLE),
    MarketRate(loan_type="Car Loan", rate_range="8.75% - 11.00%", trend=RateTrend.DOWN),
    MarketRate(loan_type="Personal Loan", rate_range="10.49% - 15.00%", trend=RateTrend.UP),
]


async def fetch_gold_rates(
    backend: AdvisoryBackend, *, session_id: str | None = None
) -> GoldRateSnapshot | None:
    """Ask the market-rate service for today's gold and silver prices."""
    try:
        raw = await backend.complete_json(
            build_market_rate_messages(),
            schema=MARKET_RATE_SCHEMA,
            schema_name=MARKET_RATE_SCHEMA_NAME,
            task="market_rates",
            session_id=session_id,
        )
        return GoldRateSnapshot.model_validate(json.loads(strip_json_fences(raw)))
    except ServiceError:
        logger.warning("Gold rate lookup failed", exc_info=True)
    except (json.JSONDecodeError, ValidationError):
        logger.warning("Gold rate response unusable", exc_info=True)
    return None
