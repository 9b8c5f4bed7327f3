"""Typed request/response envelope layer over httpx."""

from corekit.networking.configuration import ApiConfiguration, ApiDecrypter
from corekit.networking.endpoint import ApiEndpoint, Endpoint, HTTPMethod, ParameterEncoding
from corekit.networking.envelope import (
    SUCCESS_CODES,
    ApiResponse,
    EmptyPayload,
    decode_envelope,
)
from corekit.networking.errors import (
    ApiError,
    BusinessError,
    DecodingError,
    NoResponseError,
    TransportError,
    UnknownError,
)
from corekit.networking.logger import NetworkLogger, curl_command
from corekit.networking.provider import ApiProvider
from corekit.networking.request_builder import MergedRequest, merge_request

__all__ = [
    "SUCCESS_CODES",
    "ApiConfiguration",
    "ApiDecrypter",
    "ApiEndpoint",
    "ApiError",
    "ApiProvider",
    "ApiResponse",
    "BusinessError",
    "DecodingError",
    "EmptyPayload",
    "Endpoint",
    "HTTPMethod",
    "MergedRequest",
    "NetworkLogger",
    "NoResponseError",
    "ParameterEncoding",
    "TransportError",
    "UnknownError",
    "curl_command",
    "decode_envelope",
    "merge_request",
]
