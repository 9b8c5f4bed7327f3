"""Pydantic Settings for CoreKit clients.

All environment variables use the COREKIT_ prefix.
Example: COREKIT_BASE_URL=https://api.example.com, COREKIT_TIMEOUT_SECONDS=10
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

# Profiles shipped inside the package
BUNDLED_API_PROFILES = Path(__file__).with_name("api_profiles.yaml")


class CoreKitSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Networking
    base_url: str  # e.g. "https://api.example.com"
    timeout_seconds: float = Field(default=20, ge=1)
    common_headers: dict[str, str] = {}
    common_parameters: dict[str, Any] = {}

    # Logging
    debug_log_enabled: bool = True
    log_level: str = "INFO"

    # Named API profiles (staging, production, ...)
    api_profiles_path: str = str(BUNDLED_API_PROFILES)

    model_config = {"env_prefix": "COREKIT_"}
