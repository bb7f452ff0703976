# This project was developed with assistance from AI tools.
"""Model routing configuration loader.

Reads config/models.yaml, substitutes ${ENV_VAR:-default} placeholders,
validates required fields, and supports mtime-based hot-reload so config
changes take effect without restarting the server.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Load .env into os.environ so YAML ${VAR} placeholders resolve correctly.
# pydantic-settings reads .env into its Settings object but doesn't set
# os.environ; the YAML config loader needs actual env vars.
load_dotenv()

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "models.yaml"
_cached_config: dict[str, Any] | None = None
_cached_mtime: float = 0.0

_ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::-(.*?))?\}")

REQUIRED_MODEL_FIELDS = {"provider", "model_name", "endpoint"}

# Every task the service sends to an LLM must be routed to a tier.
KNOWN_TASKS = frozenset({"advisory", "market_rates"})


def _substitute_env_vars(value: str) -> str:
    """Replace ${VAR:-default} patterns with environment values."""

    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), match.group(2) or "")

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars(obj: Any) -> Any:
    """Recursively resolve env var placeholders in a config tree."""
    if isinstance(obj, str):
        return _substitute_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _resolve_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_resolve_env_vars(item) for item in obj]
    return obj


def _validate_config(config: Any) -> None:
    """Check the models and tasks sections reference each other consistently."""
    if not isinstance(config, dict):
        raise ValueError("models.yaml must be a mapping")

    models = config.get("models")
    if not models or not isinstance(models, dict):
        raise ValueError("models.yaml must contain a 'models' section with at least one model")

    for name, model in models.items():
        if not isinstance(model, dict):
            raise ValueError(f"Model '{name}' must be a mapping")
        missing = REQUIRED_MODEL_FIELDS - set(model.keys())
        if missing:
            raise ValueError(f"Model '{name}' is missing required fields: {sorted(missing)}")

    tasks = config.get("tasks")
    if not tasks or not isinstance(tasks, dict):
        raise ValueError("models.yaml must contain a 'tasks' section")

    unrouted = KNOWN_TASKS - set(tasks.keys())
    if unrouted:
        raise ValueError(f"No model tier configured for tasks: {sorted(unrouted)}")

    for task, tier in tasks.items():
        if tier not in models:
            raise ValueError(f"Task '{task}' routes to tier '{tier}' which is not in 'models'")


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load and validate models.yaml from disk."""
    config_path = path or _CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Model config not found: {config_path}")

    config = _resolve_env_vars(yaml.safe_load(config_path.read_text()))
    _validate_config(config)
    return config


def get_config(path: Path | None = None) -> dict[str, Any]:
    """Return cached config, reloading if the file's mtime has changed."""
    global _cached_config, _cached_mtime  # noqa: PLW0603
    config_path = path or _CONFIG_PATH

    try:
        current_mtime = config_path.stat().st_mtime
    except FileNotFoundError:
        if _cached_config is not None:
            logger.warning("Config file disappeared, using cached config")
            return _cached_config
        raise

    if _cached_config is None or current_mtime > _cached_mtime:
        logger.info("Loading model config from %s", config_path)
        _cached_config = load_config(config_path)
        _cached_mtime = current_mtime

        # Invalidate cached HTTP clients so they pick up new endpoints/keys
        from .client import clear_client_cache

        clear_client_cache()

    return _cached_config


def get_model_config(tier: str, path: Path | None = None) -> dict[str, Any]:
    """Return config for a specific model tier (e.g. 'fast_small', 'capable_large')."""
    models = get_config(path)["models"]
    if tier not in models:
        raise KeyError(f"Unknown model tier '{tier}'. Available: {list(models.keys())}")
    return models[tier]


def get_task_tier(task: str, path: Path | None = None) -> str:
    """Return the model tier a task ('advisory', 'market_rates') is routed to."""
    tasks = get_config(path)["tasks"]
    if task not in tasks:
        raise KeyError(f"Unknown task '{task}'. Available: {list(tasks.keys())}")
    return tasks[task]
