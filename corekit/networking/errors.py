"""Error taxonomy for the request engine.

Every failure surfaced by ``ApiProvider`` is an ``ApiError`` subclass:

- ``NoResponseError``: successful envelope without ``data``
- ``DecodingError``: bytes arrived but the envelope or payload did not parse
- ``TransportError``: network-level failure (DNS, timeout, reset, non-2xx)
- ``BusinessError``: valid envelope carrying a failure ``code``
- ``UnknownError``: anything else, with the original cause preserved
"""

from __future__ import annotations


class ApiError(Exception):
    """Base error for all request-engine failures."""

    message: str = "Request failed"

    def __init__(self, message: str | None = None, cause: BaseException | None = None) -> None:
        self.message = message or self.__class__.message
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause


class NoResponseError(ApiError):
    """Server returned a successful envelope with no data."""

    message = "Server returned no data."


class DecodingError(ApiError):
    """Response body or payload could not be decoded."""

    message = "Failed to decode response"

    def __init__(self, cause: BaseException | None = None, message: str | None = None) -> None:
        if message is None and cause is not None:
            message = f"Failed to decode response: {cause}"
        super().__init__(message, cause=cause)


class TransportError(ApiError):
    """Network-level failure reported by the HTTP transport."""

    message = "Network request failed"

    def __init__(self, cause: BaseException | None = None, message: str | None = None) -> None:
        if message is None and cause is not None:
            message = str(cause) or None
        super().__init__(message, cause=cause)


class BusinessError(ApiError):
    """Envelope decoded fine but its ``code`` signals failure."""

    message = "Operation failed with business error."

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = code
        self.server_message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"BusinessError(code={self.code!r}, message={self.server_message!r})"


class UnknownError(ApiError):
    """Unexpected exception that matches no known failure shape."""

    message = "Unknown error"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or None, cause=cause)
