# This project was developed with assistance from AI tools.
"""Narrow seam between analysis logic and the external services.

Services depend on ``AdvisoryBackend`` only, so the provider can be swapped
(or stubbed in tests) without touching prompt building, fallback policy,
dedup, or segment rules.
"""

from typing import Any, Protocol

from . import client


class AdvisoryBackend(Protocol):
    async def complete_json(
        self,
        messages: list[dict[str, str]],
        *,
        schema: dict[str, Any],
        schema_name: str,
        task: str,
        session_id: str | None = None,
    ) -> str:
        """Return raw JSON text conforming to ``schema``. Raises ServiceError."""
        ...

    async def search_places(
        self, query: str, latitude: float, longitude: float
    ) -> list[dict[str, Any]]:
        """Return place dicts with title/place_id/uri keys. Raises ServiceError."""
        ...


class OpenAIAdvisoryBackend:
    """Default backend: OpenAI-compatible completions + Google Places search."""

    async def complete_json(
        self,
        messages: list[dict[str, str]],
        *,
        schema: dict[str, Any],
        schema_name: str,
        task: str,
        session_id: str | None = None,
    ) -> str:
        return await client.get_json_completion(
            messages,
            schema=schema,
            schema_name=schema_name,
            task=task,
            session_id=session_id,
        )

    async def search_places(
        self, query: str, latitude: float, longitude: float
    ) -> list[dict[str, Any]]:
        return await client.search_places(query, latitude, longitude)


_backend: AdvisoryBackend | None = None


def get_advisory_backend() -> AdvisoryBackend:
    """Return the process-wide backend, creating the default on first use."""
    global _backend  # noqa: PLW0603
    if _backend is None:
        _backend = OpenAIAdvisoryBackend()
    return _backend


def set_advisory_backend(backend: AdvisoryBackend | None) -> None:
    """Install a different backend (``None`` restores the default on next use)."""
    global _backend  # noqa: PLW0603
    _backend = backend
