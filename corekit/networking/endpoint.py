"""Endpoint descriptors.

An endpoint is anything exposing ``base_url``, ``path``, ``method``,
``parameters``, ``headers`` and ``encoding``. ``Endpoint`` covers the common
case; multi-case APIs can be frozen dataclasses exposing the same attributes
as properties (see ``ApiEndpoint``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Protocol, runtime_checkable


class HTTPMethod(str, Enum):
    """HTTP request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ParameterEncoding(str, Enum):
    """How merged parameters are placed on the wire."""

    JSON = "json"
    URL = "url"


@runtime_checkable
class ApiEndpoint(Protocol):
    """Capability set describing one API call."""

    @property
    def base_url(self) -> str | None: ...

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> HTTPMethod: ...

    @property
    def parameters(self) -> Mapping[str, Any]: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def encoding(self) -> ParameterEncoding: ...


@dataclass(frozen=True)
class Endpoint:
    """Plain immutable endpoint descriptor."""

    path: str
    method: HTTPMethod = HTTPMethod.GET
    parameters: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    encoding: ParameterEncoding = ParameterEncoding.JSON
    base_url: str | None = None  # Overrides the configuration's base URL
