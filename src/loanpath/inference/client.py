# This project was developed with assistance from AI tools.
"""Thin clients for the external services behind an analysis.

- Structured completions go through the openai Python SDK with a
  configurable base_url, so any OpenAI-compatible endpoint (OpenAI, vLLM,
  LlamaStack, ...) can play the advisory role.
- Place search calls the Google Places Text Search API over httpx.

Every transport, timeout, or SDK failure surfaces as ``ServiceError``.
"""

import logging
from typing import Any

import httpx
from openai import AsyncOpenAI, OpenAIError

from ..core.config import settings
from ..observability import build_trace_kwargs, get_openai_client_class
from .config import get_model_config, get_task_tier

logger = logging.getLogger(__name__)

_PLACES_FIELD_MASK = ",".join(
    [
        "places.id",
        "places.displayName",
        "places.formattedAddress",
        "places.rating",
        "places.userRatingCount",
        "places.googleMapsUri",
    ]
)


class ServiceError(Exception):
    """An external advisory, market-rate, or place-search call failed."""


# Per-tier client cache (avoids re-creating HTTP connections)
_clients: dict[str, AsyncOpenAI] = {}


def _get_client(tier: str) -> AsyncOpenAI:
    """Return a cached AsyncOpenAI client for the given model tier."""
    if tier not in _clients:
        model_cfg = get_model_config(tier)
        client_cls = get_openai_client_class()
        _clients[tier] = client_cls(
            base_url=model_cfg["endpoint"],
            api_key=model_cfg.get("api_key") or settings.LLM_API_KEY,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            max_retries=0,
        )
    return _clients[tier]


def clear_client_cache() -> None:
    """Clear cached clients (useful after config reload)."""
    _clients.clear()


async def get_json_completion(
    messages: list[dict[str, str]],
    *,
    schema: dict[str, Any],
    schema_name: str,
    task: str,
    session_id: str | None = None,
) -> str:
    """Get a completion constrained to ``schema`` and return its raw JSON text."""
    tier = get_task_tier(task)
    client = _get_client(tier)
    model_cfg = get_model_config(tier)

    try:
        response = await client.chat.completions.create(
            model=model_cfg["model_name"],
            messages=messages,
            response_format={
                "type": "json_schema",
                "json_schema": {"name": schema_name, "schema": schema, "strict": False},
            },
            **build_trace_kwargs(session_id=session_id, tags=[task]),
        )
    except OpenAIError as exc:
        raise ServiceError(f"{task} completion failed: {exc}") from exc

    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise ServiceError(f"{task} completion returned no content")
    return content


def _normalize_place(place: dict[str, Any]) -> dict[str, Any]:
    display_name = place.get("displayName") or {}
    return {
        "title": display_name.get("text") if isinstance(display_name, dict) else None,
        "place_id": place.get("id"),
        "uri": place.get("googleMapsUri"),
        "address": place.get("formattedAddress"),
        "rating": place.get("rating"),
        "user_ratings_total": place.get("userRatingCount"),
    }


async def search_places(
    query: str,
    latitude: float,
    longitude: float,
    *,
    max_results: int = 10,
) -> list[dict[str, Any]]:
    """Text search biased to a coordinate pair.

    Returns place dicts with ``title``, ``place_id`` and ``uri`` keys (plus
    ``address``, ``rating`` and ``user_ratings_total`` when available), or an
    empty list when no PLACES_API_KEY is configured.
    """
    if not settings.PLACES_API_KEY:
        logger.info("PLACES_API_KEY not set, skipping place search")
        return []

    body = {
        "textQuery": query,
        "maxResultCount": max_results,
        "locationBias": {
            "circle": {
                "center": {"latitude": latitude, "longitude": longitude},
                "radius": settings.PLACES_SEARCH_RADIUS_M,
            }
        },
    }
    headers = {
        "X-Goog-Api-Key": settings.PLACES_API_KEY,
        "X-Goog-FieldMask": _PLACES_FIELD_MASK,
    }

    try:
        async with httpx.AsyncClient(
            base_url=settings.PLACES_BASE_URL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        ) as http:
            response = await http.post("/places:searchText", json=body, headers=headers)
            response.raise_for_status()
            payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise ServiceError(f"place search failed: {exc}") from exc

    places = payload.get("places", []) if isinstance(payload, dict) else None
    if not isinstance(places, list):
        raise ServiceError("place search returned an unexpected payload")
    return [_normalize_place(p) for p in places if isinstance(p, dict)]
