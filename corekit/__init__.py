"""CoreKit: networking envelope layer, color codec and session state for client apps."""

from corekit.auth import (
    AuthManager,
    AuthStateError,
    BearerTokenInterceptor,
    SessionState,
    get_auth_manager,
)
from corekit.bootstrap import create_provider
from corekit.color import Color
from corekit.logging_config import configure_logging
from corekit.networking import (
    ApiConfiguration,
    ApiDecrypter,
    ApiEndpoint,
    ApiError,
    ApiProvider,
    ApiResponse,
    BusinessError,
    DecodingError,
    EmptyPayload,
    Endpoint,
    HTTPMethod,
    NoResponseError,
    ParameterEncoding,
    TransportError,
    UnknownError,
)

__all__ = [
    "ApiConfiguration",
    "ApiDecrypter",
    "ApiEndpoint",
    "ApiError",
    "ApiProvider",
    "ApiResponse",
    "AuthManager",
    "AuthStateError",
    "BearerTokenInterceptor",
    "BusinessError",
    "Color",
    "DecodingError",
    "EmptyPayload",
    "Endpoint",
    "HTTPMethod",
    "NoResponseError",
    "ParameterEncoding",
    "SessionState",
    "TransportError",
    "UnknownError",
    "configure_logging",
    "create_provider",
    "get_auth_manager",
]
