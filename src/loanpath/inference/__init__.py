# This project was developed with assistance from AI tools.
"""Inference module -- external service clients, backend seam, and config loading."""

from .backend import AdvisoryBackend, get_advisory_backend, set_advisory_backend
from .client import ServiceError, get_json_completion, search_places
from .config import get_model_config, get_task_tier

__all__ = [
    "AdvisoryBackend",
    "ServiceError",
    "get_advisory_backend",
    "get_json_completion",
    "get_model_config",
    "get_task_tier",
    "search_places",
    "set_advisory_backend",
]
