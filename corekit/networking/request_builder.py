"""Merge an endpoint with the client configuration into one concrete request.

Merging rules:
- endpoint ``base_url`` overrides the configuration's
- parameters: common first, endpoint keys overwrite on collision
- headers: common plus endpoint, endpoint value replaces a same-named header
- GET with JSON encoding is downgraded to URL encoding (no body on GET)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from corekit.networking.configuration import ApiConfiguration
from corekit.networking.endpoint import ApiEndpoint, HTTPMethod, ParameterEncoding

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"

# Methods whose URL-encoded parameters go into the query string.
_QUERY_METHODS = frozenset({HTTPMethod.GET, HTTPMethod.HEAD, HTTPMethod.DELETE})


@dataclass(frozen=True)
class MergedRequest:
    """Call-local request built from an endpoint and a configuration."""

    method: HTTPMethod
    url: str
    headers: httpx.Headers
    parameters: dict[str, Any]
    encoding: ParameterEncoding

    def httpx_kwargs(self) -> dict[str, Any]:
        """Render the request as keyword arguments for ``httpx.AsyncClient.request``."""
        headers = httpx.Headers(self.headers)
        kwargs: dict[str, Any] = {"method": self.method.value, "url": self.url}

        if self.encoding is ParameterEncoding.JSON:
            headers.setdefault("Content-Type", JSON_CONTENT_TYPE)
            kwargs["content"] = json.dumps(
                self.parameters, separators=(",", ":"), default=str
            ).encode("utf-8")
        elif self.parameters:
            pairs = form_pairs(self.parameters)
            if self.method in _QUERY_METHODS:
                kwargs["params"] = pairs
            else:
                headers.setdefault("Content-Type", FORM_CONTENT_TYPE)
                kwargs["content"] = urlencode(pairs).encode("utf-8")

        kwargs["headers"] = headers
        return kwargs


def join_url(base_url: str, path: str) -> str:
    """Append ``path`` to ``base_url`` as a path component."""
    if not path:
        return base_url
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def form_pairs(parameters: dict[str, Any]) -> list[tuple[str, str]]:
    """Flatten parameters into form pairs.

    Nested mappings use ``key[sub]`` and sequences use ``key[]``; booleans are
    sent as ``1``/``0``; ``None`` values are dropped.
    """
    pairs: list[tuple[str, str]] = []
    for key in sorted(parameters):
        _append_pairs(pairs, key, parameters[key])
    return pairs


def _append_pairs(pairs: list[tuple[str, str]], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, dict):
        for sub_key in sorted(value):
            _append_pairs(pairs, f"{key}[{sub_key}]", value[sub_key])
    elif isinstance(value, (list, tuple)):
        for item in value:
            _append_pairs(pairs, f"{key}[]", item)
    elif isinstance(value, bool):
        pairs.append((key, "1" if value else "0"))
    else:
        pairs.append((key, str(value)))


def merge_request(endpoint: ApiEndpoint, config: ApiConfiguration) -> MergedRequest:
    """Combine ``endpoint`` and ``config`` into a fresh ``MergedRequest``. Never raises."""
    base_url = endpoint.base_url or config.base_url
    method = HTTPMethod(endpoint.method)
    encoding = ParameterEncoding(endpoint.encoding)

    parameters: dict[str, Any] = dict(config.common_parameters)
    parameters.update(endpoint.parameters)

    headers = httpx.Headers(dict(config.common_headers))
    for name, value in endpoint.headers.items():
        headers[name] = value

    if method is HTTPMethod.GET and encoding is ParameterEncoding.JSON:
        encoding = ParameterEncoding.URL

    return MergedRequest(
        method=method,
        url=join_url(base_url, endpoint.path),
        headers=headers,
        parameters=parameters,
        encoding=encoding,
    )
