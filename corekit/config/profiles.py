"""API profile models and YAML loader.

A profile bundles the per-environment networking settings (base URL, common
headers and parameters, timeout, debug logging) so an app can switch between
staging and production by name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ApiProfile(BaseModel):
    """Networking settings for one named environment."""

    base_url: str = Field(min_length=1)
    timeout_seconds: float = Field(default=20, ge=1)
    common_headers: dict[str, str] = {}
    common_parameters: dict[str, Any] = {}
    debug_log_enabled: bool = True


def load_api_profiles(yaml_path: str) -> dict[str, ApiProfile]:
    """Parse an API profiles YAML file into typed ApiProfile objects.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        A dict mapping profile names to ApiProfile instances. Returns an empty
        dict when the file is missing, unparseable, or has no ``profiles`` key.
    """
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("API profiles file not found at %s", yaml_path)
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse API profiles YAML at %s: %s", yaml_path, exc)
        return {}

    if not isinstance(raw, dict) or not isinstance(raw.get("profiles"), dict):
        logger.warning("API profiles YAML missing 'profiles' key at %s", yaml_path)
        return {}

    profiles: dict[str, ApiProfile] = {}
    for name, config in raw["profiles"].items():
        try:
            profiles[name] = ApiProfile.model_validate(config)
        except Exception as exc:
            logger.error("Invalid API profile '%s': %s, skipping", name, exc)

    return profiles
