"""Configuration module: settings and API profiles."""

from corekit.config.profiles import ApiProfile, load_api_profiles
from corekit.config.settings import CoreKitSettings

__all__ = [
    "ApiProfile",
    "CoreKitSettings",
    "load_api_profiles",
]
