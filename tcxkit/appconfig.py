"""Application configuration defaults and helpers.

Configuration is resolved on every ``load_config()`` call:
  1. Built-in defaults (``DEFAULT_CONFIG``).
  2. The first JSON config file found in ``_FILE_PATHS``, key by key.
  3. ``TCXKIT_*`` environment variables (a ``.env`` file is loaded by the
     CLI entry point through python-dotenv).

No config file is required; the CLI always boots with defaults.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIG: dict[str, Any] = {
    "home_timezone": "UTC",
    "debug": False,
    "tablefmt": "simple",
}

# Candidate JSON config file locations (searched in order)
_FILE_PATHS: list[Path] = [
    Path("tcxkit_config.json"),
    Path("../tcxkit_config.json"),
]

_ENV_OVERRIDES: dict[str, str] = {
    "TCXKIT_HOME_TIMEZONE": "home_timezone",
    "TCXKIT_DEBUG": "debug",
    "TCXKIT_TABLEFMT": "tablefmt",
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_from_file() -> dict[str, Any] | None:
    """Try each candidate path; return parsed JSON or ``None``."""
    for path in _FILE_PATHS:
        if path.exists():
            try:
                with open(path) as f:
                    return json.load(f)
            except (OSError, json.JSONDecodeError) as exc:
                logger.warning("Ignoring unreadable config file %s: %s", path, exc)
    return None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "y", "on")


def _load_from_env() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is None or value == "":
            continue
        overrides[key] = _parse_bool(value) if key == "debug" else value
    return overrides


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config() -> dict[str, Any]:
    """Return the effective configuration (defaults < file < environment)."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    file_cfg = _load_from_file()
    if file_cfg:
        config.update(file_cfg)
    config.update(_load_from_env())
    return config


def save_config(config: dict[str, Any], path: Path | None = None) -> Path:
    """Write *config* as JSON to *path* (default: the first candidate path)."""
    target = path or _FILE_PATHS[0]
    with open(target, "w") as f:
        json.dump(config, f, indent=2)
        f.write("\n")
    logger.debug("Saved configuration to %s", target)
    return target
