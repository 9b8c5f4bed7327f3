"""Request engine: merge, send, decode, map failures.

``ApiProvider.request`` performs exactly one HTTP call per invocation and never
retries. It shapes the request and translates the outcome into ``data`` or an
``ApiError``.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, overload

import httpx

from corekit.networking.configuration import ApiConfiguration
from corekit.networking.endpoint import ApiEndpoint
from corekit.networking.envelope import ApiResponse, decode_envelope
from corekit.networking.errors import (
    ApiError,
    BusinessError,
    NoResponseError,
    TransportError,
    UnknownError,
)
from corekit.networking.logger import NetworkLogger
from corekit.networking.request_builder import merge_request

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiProvider:
    """Issues endpoint calls against one ``ApiConfiguration``.

    Parameters
    ----------
    config:
        Client-wide configuration, read-only per call.
    transport:
        Optional ``httpx`` transport. Tests pass ``httpx.MockTransport``;
        production code leaves it unset to use the default network transport.
    """

    def __init__(
        self,
        config: ApiConfiguration,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._network_logger = NetworkLogger(enabled=config.debug_log_enabled)

    @property
    def config(self) -> ApiConfiguration:
        return self._config

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self._config.timeout,
            auth=self._config.interceptor,
            event_hooks=self._network_logger.event_hooks,
        )

    @overload
    async def request(self, endpoint: ApiEndpoint, data_type: type[T]) -> T: ...

    @overload
    async def request(self, endpoint: ApiEndpoint, data_type: Any) -> Any: ...

    async def request(self, endpoint: ApiEndpoint, data_type: Any) -> Any:
        """Perform the call and return the envelope's ``data`` as ``data_type``.

        Raises
        ------
        NoResponseError
            The envelope succeeded but carried no ``data``.
        BusinessError, DecodingError, TransportError, UnknownError
            See ``request_raw``.
        """
        response = await self.request_raw(endpoint, data_type)
        if response.data is None:
            raise NoResponseError()
        return response.data

    async def request_raw(self, endpoint: ApiEndpoint, data_type: Any) -> ApiResponse[Any]:
        """Perform the call and return the full successful envelope.

        Raises
        ------
        BusinessError
            The envelope decoded but its ``code`` is not a success code.
        DecodingError
            Bytes arrived but the envelope or payload could not be decoded.
        TransportError
            DNS, connect, timeout, reset, or a non-2xx HTTP status.
        UnknownError
            Any other exception, kept as ``cause``.
        """
        merged = merge_request(endpoint, self._config)

        try:
            async with self._client() as client:
                http_response = await client.request(**merged.httpx_kwargs())
            self._network_logger.log_response(http_response)
            http_response.raise_for_status()
            envelope = decode_envelope(
                http_response.content, data_type, decrypter=self._config.decrypter
            )
        except ApiError:
            raise
        except httpx.HTTPError as exc:
            logger.warning("Request %s %s failed: %s", merged.method.value, merged.url, exc)
            raise TransportError(exc) from exc
        except Exception as exc:
            logger.error(
                "Unexpected error during %s %s: %s", merged.method.value, merged.url, exc
            )
            raise UnknownError(exc) from exc

        if not envelope.is_success:
            logger.info(
                "Business error from %s: code=%d trace_id=%s",
                merged.url,
                envelope.code,
                envelope.trace_id,
                extra={"trace_id": envelope.trace_id},
            )
            raise BusinessError(envelope.code, envelope.message)

        return envelope
