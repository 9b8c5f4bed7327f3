"""Uniform server envelope and its decoder.

Every API response is wrapped as:
{ code: int, message: str | None, data: T | None, trace_id: str | None, is_encrypted: bool }

``code`` 0 and 200 both mean success. When ``is_encrypted`` is set, ``data``
is a base64 string that must go through the caller's decrypter before it is
parsed as ``T``.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from corekit.networking.configuration import ApiDecrypter
from corekit.networking.errors import DecodingError

T = TypeVar("T")

# Business-layer success codes. Both are honoured: some backends answer with
# RPC-style 0, others mirror HTTP 200.
SUCCESS_CODES = frozenset({0, 200})


class _WireEnvelope(BaseModel):
    """Envelope as it appears on the wire, before ``data`` is typed."""

    code: int
    message: str | None = None
    data: Any = None
    trace_id: str | None = None
    is_encrypted: bool = False

    @field_validator("is_encrypted", mode="before")
    @classmethod
    def _non_bool_means_plain(cls, value: Any) -> bool:
        return value if isinstance(value, bool) else False


class EmptyPayload(BaseModel):
    """Placeholder payload for calls whose ``data`` is irrelevant."""


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Decoded envelope with a typed ``data`` payload."""

    code: int
    message: str | None = None
    data: T | None = None
    trace_id: str | None = None
    is_encrypted: bool = False

    @property
    def is_success(self) -> bool:
        return self.code in SUCCESS_CODES


@lru_cache(maxsize=256)
def _cached_adapter(data_type: Any) -> TypeAdapter:
    return TypeAdapter(data_type)


def _adapter(data_type: Any) -> TypeAdapter:
    try:
        return _cached_adapter(data_type)
    except TypeError:
        # Unhashable type expressions cannot be cache keys
        return TypeAdapter(data_type)


def decode_envelope(
    body: bytes | str,
    data_type: Any,
    decrypter: ApiDecrypter | None = None,
) -> ApiResponse[Any]:
    """Parse ``body`` into an ``ApiResponse`` whose ``data`` is ``data_type``.

    Raises
    ------
    DecodingError
        Malformed JSON, schema mismatch, an encrypted payload without a
        decrypter, invalid base64, or a failing decrypter.
    """
    try:
        wire = _WireEnvelope.model_validate_json(body)
    except ValidationError as exc:
        raise DecodingError(exc) from exc

    data = _decode_data(wire, data_type, decrypter)
    return ApiResponse(
        code=wire.code,
        message=wire.message,
        data=data,
        trace_id=wire.trace_id,
        is_encrypted=wire.is_encrypted,
    )


def _decode_data(wire: _WireEnvelope, data_type: Any, decrypter: ApiDecrypter | None) -> Any:
    if wire.is_encrypted and decrypter is None:
        raise DecodingError(message="Envelope data is encrypted but no decrypter is configured")
    if wire.data is None:
        return None

    adapter = _adapter(data_type)

    if not wire.is_encrypted:
        try:
            return adapter.validate_python(wire.data)
        except ValidationError as exc:
            raise DecodingError(exc) from exc

    if not isinstance(wire.data, str):
        raise DecodingError(message="Encrypted envelope data must be a base64 string")

    try:
        ciphertext = base64.b64decode(wire.data, validate=True)
    except binascii.Error as exc:
        raise DecodingError(exc) from exc

    try:
        plaintext = decrypter.decrypt(ciphertext)
    except Exception as exc:
        raise DecodingError(exc, message=f"Failed to decrypt response data: {exc}") from exc

    try:
        return adapter.validate_json(plaintext)
    except ValidationError as exc:
        raise DecodingError(exc) from exc
