"""Client-wide networking configuration.

One ``ApiConfiguration`` is supplied per ``ApiProvider`` and treated as
read-only for the lifetime of the provider.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

import httpx

if TYPE_CHECKING:
    from corekit.config.profiles import ApiProfile
    from corekit.config.settings import CoreKitSettings


@runtime_checkable
class ApiDecrypter(Protocol):
    """Reverses the server-side encryption applied to an envelope's ``data``."""

    def decrypt(self, data: bytes) -> bytes: ...


@dataclass(frozen=True)
class ApiConfiguration:
    """Base URL, common headers/parameters and optional capabilities.

    Parameters
    ----------
    base_url:
        Default base URL for every endpoint (e.g. "https://api.example.com").
    common_headers:
        Headers sent with every request; endpoint headers win on collision.
    common_parameters:
        Parameters sent with every request; endpoint parameters win on collision.
    timeout:
        Per-request timeout in seconds (default 20).
    interceptor:
        Optional ``httpx.Auth`` that adapts each outgoing request.
    decrypter:
        Optional decrypter for envelopes flagged ``is_encrypted``.
    debug_log_enabled:
        Emit request/response traces (default True).
    """

    base_url: str
    common_headers: Mapping[str, str] = field(default_factory=dict)
    common_parameters: Mapping[str, Any] = field(default_factory=dict)
    timeout: float = 20.0
    interceptor: httpx.Auth | None = None
    decrypter: ApiDecrypter | None = None
    debug_log_enabled: bool = True

    @classmethod
    def from_settings(
        cls,
        settings: CoreKitSettings,
        interceptor: httpx.Auth | None = None,
        decrypter: ApiDecrypter | None = None,
    ) -> ApiConfiguration:
        """Build a configuration from environment-backed settings."""
        return cls(
            base_url=settings.base_url,
            common_headers=dict(settings.common_headers),
            common_parameters=dict(settings.common_parameters),
            timeout=settings.timeout_seconds,
            interceptor=interceptor,
            decrypter=decrypter,
            debug_log_enabled=settings.debug_log_enabled,
        )

    @classmethod
    def from_profile(
        cls,
        profile: ApiProfile,
        interceptor: httpx.Auth | None = None,
        decrypter: ApiDecrypter | None = None,
    ) -> ApiConfiguration:
        """Build a configuration from a named YAML profile."""
        return cls(
            base_url=profile.base_url,
            common_headers=dict(profile.common_headers),
            common_parameters=dict(profile.common_parameters),
            timeout=profile.timeout_seconds,
            interceptor=interceptor,
            decrypter=decrypter,
            debug_log_enabled=profile.debug_log_enabled,
        )
