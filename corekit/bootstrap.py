"""Startup wiring: settings → logging → ApiProvider.

Call ``create_provider`` once when the app starts. It validates the
environment, configures logging from ``COREKIT_LOG_LEVEL`` and builds the
provider either from the environment or from a named API profile.
"""

from __future__ import annotations

import logging

import httpx

from corekit.config.profiles import load_api_profiles
from corekit.config.settings import CoreKitSettings
from corekit.logging_config import configure_logging
from corekit.networking.configuration import ApiConfiguration, ApiDecrypter
from corekit.networking.provider import ApiProvider

logger = logging.getLogger(__name__)


def create_provider(
    settings: CoreKitSettings | None = None,
    profile: str | None = None,
    interceptor: httpx.Auth | None = None,
    decrypter: ApiDecrypter | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApiProvider:
    """Build an ApiProvider for the current environment.

    Args:
        settings: Pre-built settings; read from the environment when omitted.
        profile: Name of a profile in ``settings.api_profiles_path``. When
            given, the profile replaces the environment's networking values.
        interceptor: Optional ``httpx.Auth`` applied to every request.
        decrypter: Optional decrypter for encrypted envelopes.
        transport: Optional ``httpx`` transport (tests use MockTransport).

    Raises:
        ValueError: ``profile`` is not defined in the profiles file.
    """
    settings = settings or CoreKitSettings()  # type: ignore[call-arg]
    configure_logging(settings.log_level)

    if profile is None:
        config = ApiConfiguration.from_settings(
            settings, interceptor=interceptor, decrypter=decrypter
        )
    else:
        profiles = load_api_profiles(settings.api_profiles_path)
        if profile not in profiles:
            raise ValueError(
                f"Unknown API profile '{profile}' in {settings.api_profiles_path}"
            )
        config = ApiConfiguration.from_profile(
            profiles[profile], interceptor=interceptor, decrypter=decrypter
        )

    logger.info("API provider ready for %s", config.base_url)
    return ApiProvider(config, transport=transport)
