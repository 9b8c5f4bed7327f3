"""Unit tests for the request-engine error taxonomy."""

from __future__ import annotations

import httpx
import pytest

from corekit.networking.errors import (
    ApiError,
    BusinessError,
    DecodingError,
    NoResponseError,
    TransportError,
    UnknownError,
)


class TestDefaultMessages:
    def test_no_response(self):
        assert str(NoResponseError()) == "Server returned no data."

    def test_business_error_falls_back_without_message(self):
        err = BusinessError(5000)
        assert err.code == 5000
        assert err.server_message is None
        assert str(err) == "Operation failed with business error."

    def test_business_error_surfaces_server_message_verbatim(self):
        err = BusinessError(4001, "Token Expired")
        assert str(err) == "Token Expired"
        assert repr(err) == "BusinessError(code=4001, message='Token Expired')"

    def test_decoding_error_mentions_cause(self):
        err = DecodingError(ValueError("unexpected token"))
        assert str(err) == "Failed to decode response: unexpected token"

    def test_transport_error_uses_cause_text(self):
        cause = httpx.ConnectError("Connection refused")
        assert str(TransportError(cause)) == "Connection refused"

    def test_unknown_error_uses_cause_text(self):
        assert str(UnknownError(RuntimeError("boom"))) == "boom"

    def test_unknown_error_with_blank_cause_uses_default(self):
        assert str(UnknownError(RuntimeError())) == "Unknown error"


class TestCauseChaining:
    @pytest.mark.parametrize(
        "error_cls", [DecodingError, TransportError, UnknownError]
    )
    def test_cause_is_kept_and_chained(self, error_cls: type[ApiError]):
        cause = ValueError("root")
        err = error_cls(cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_all_errors_share_base(self):
        for err in (
            NoResponseError(),
            DecodingError(),
            TransportError(),
            BusinessError(1),
            UnknownError(RuntimeError("x")),
        ):
            assert isinstance(err, ApiError)
