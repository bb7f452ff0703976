# This project was developed with assistance from AI tools.
"""LangFuse observability integration.

When LANGFUSE_PUBLIC_KEY and LANGFUSE_SECRET_KEY are set, LLM calls go
through the ``langfuse.openai`` drop-in client so every advisory and
market-rate completion is traced. Session IDs travel as ``metadata`` keys
(``langfuse_session_id``, ``langfuse_tags``) on each completion call.

Tracing degrades to a no-op with a warning when not configured and never
blocks an analysis on a tracing error.
"""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


def _is_configured() -> bool:
    """Return True when both LangFuse keys are set."""
    from .core.config import settings

    return bool(settings.LANGFUSE_PUBLIC_KEY and settings.LANGFUSE_SECRET_KEY)


def get_openai_client_class() -> type[AsyncOpenAI]:
    """Return the AsyncOpenAI class to instantiate, traced when LangFuse is active."""
    if not _is_configured():
        return AsyncOpenAI
    try:
        from langfuse.openai import AsyncOpenAI as TracedAsyncOpenAI

        return TracedAsyncOpenAI
    except Exception:
        logger.warning("Failed to load LangFuse OpenAI wrapper, tracing disabled", exc_info=True)
        return AsyncOpenAI


def build_trace_kwargs(
    *,
    session_id: str | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Extra completion kwargs carrying trace metadata, or empty dict.

    Only the LangFuse wrapper understands the ``metadata`` kwarg, so nothing
    is returned unless tracing is configured.
    """
    if not _is_configured():
        return {}

    metadata: dict[str, Any] = {}
    if session_id:
        metadata["langfuse_session_id"] = session_id
    if tags:
        metadata["langfuse_tags"] = tags
    return {"metadata": metadata} if metadata else {}


def flush_langfuse() -> None:
    """Flush pending LangFuse events.  No-op if unconfigured."""
    if not _is_configured():
        return
    try:
        from langfuse import get_client

        get_client().flush()
    except Exception:
        logger.debug("LangFuse flush failed", exc_info=True)


def log_observability_status() -> None:
    """Log whether LangFuse tracing is active or disabled. Call at startup."""
    from .core.config import settings

    if _is_configured():
        logger.warning(
            "LangFuse tracing: ACTIVE (host=%s)",
            settings.LANGFUSE_HOST or "https://cloud.langfuse.com",
        )
    else:
        logger.warning("LangFuse tracing: DISABLED (keys not configured)")
