"""Tests for quantum_rng.adapters.quantum_api: request contract and error classification."""

import asyncio

import httpx
import pytest

from conftest import envelope
from quantum_rng.adapters.quantum_api import classify_status, parse_envelope
from quantum_rng.core.domain.errors import (
    ApiRejectedError,
    ErrorKind,
    NetworkError,
    NetworkOtherError,
    ParseFailureError,
    RateLimitedError,
    ServiceUnavailableError,
    UnauthorizedError,
)


def _fetch(transport, count=3, api_key="k1"):
    return asyncio.run(transport.fetch_integers(count, api_key=api_key))


# --- request contract ---

class TestRequest:
    def test_sends_count_key_and_user_agent(self, make_api_transport):
        transport, seen = make_api_transport(lambda req: httpx.Response(200, json=envelope([1, 2, 3])))

        assert _fetch(transport, count=3, api_key="secret") == [1, 2, 3]

        assert len(seen) == 1
        request = seen[0]
        assert request.method == "GET"
        assert request.url.host == "qrng.test"
        assert request.url.path == "/api/v1/random"
        assert request.url.params["count"] == "3"
        assert request.headers["x-api-key"] == "secret"
        assert request.headers["user-agent"] == "QuantumRNG-Python-SDK/test"

    def test_proof_is_optional(self, make_api_transport):
        transport, _ = make_api_transport(lambda req: httpx.Response(200, json=envelope([7], proof=False)))
        assert _fetch(transport, count=1) == [7]


# --- HTTP status classification ---

class TestStatusClassification:
    @pytest.mark.parametrize(
        "status,error_type,kind",
        [
            (401, UnauthorizedError, ErrorKind.UNAUTHORIZED),
            (429, RateLimitedError, ErrorKind.RATE_LIMITED),
            (500, ServiceUnavailableError, ErrorKind.SERVICE_UNAVAILABLE),
            (503, ServiceUnavailableError, ErrorKind.SERVICE_UNAVAILABLE),
            (404, NetworkOtherError, ErrorKind.NETWORK_OTHER),
        ],
    )
    def test_status_maps_to_error(self, make_api_transport, status, error_type, kind):
        # Body is not JSON: classification must not try to parse it.
        transport, seen = make_api_transport(lambda req: httpx.Response(status, text="<html>oops</html>"))

        with pytest.raises(error_type) as exc_info:
            _fetch(transport)

        assert exc_info.value.kind is kind
        assert exc_info.value.status_code == status
        assert len(seen) == 1

    def test_messages(self):
        assert classify_status(401).message == "invalid API key"
        assert classify_status(429).message == "rate limit exceeded, retry later"
        assert classify_status(502).message == "service temporarily unavailable"
        assert classify_status(404, "Not Found").message == "HTTP 404 Not Found"

    def test_other_status_is_a_network_error(self):
        assert isinstance(classify_status(400, "Bad Request"), NetworkError)


# --- transport failures ---

class TestTransportFailures:
    def test_connect_error(self, make_api_transport):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport, _ = make_api_transport(handler)
        with pytest.raises(NetworkError) as exc_info:
            _fetch(transport)
        assert exc_info.value.kind is ErrorKind.NETWORK
        assert "Unable to connect" in exc_info.value.message

    def test_timeout(self, make_api_transport):
        def handler(request):
            raise httpx.ReadTimeout("read timed out", request=request)

        transport, _ = make_api_transport(handler)
        with pytest.raises(NetworkError) as exc_info:
            _fetch(transport)
        assert exc_info.value.kind is ErrorKind.NETWORK
        assert "timed out" in exc_info.value.message


# --- envelope parsing ---

class TestParseEnvelope:
    def test_success(self):
        assert parse_envelope(b'{"success": true, "count": 2, "data": [5, -5]}') == [5, -5]

    def test_unsuccessful_is_rejected(self):
        with pytest.raises(ApiRejectedError):
            parse_envelope(b'{"success": false, "count": 0}')

    def test_success_without_data_is_rejected(self):
        with pytest.raises(ApiRejectedError):
            parse_envelope(b'{"success": true, "count": 1}')

    def test_malformed_json(self):
        with pytest.raises(ParseFailureError) as exc_info:
            parse_envelope(b"not json")
        assert exc_info.value.message.startswith("Failed to parse API response")

    def test_schema_mismatch(self):
        with pytest.raises(ParseFailureError):
            parse_envelope(b'{"success": true, "count": 1, "data": ["x"]}')

    def test_value_outside_int32(self):
        with pytest.raises(ParseFailureError):
            parse_envelope(b'{"success": true, "count": 1, "data": [4294967295]}')

    @pytest.mark.parametrize(
        "body",
        [
            b'{"success": "true", "count": 1, "data": [5]}',
            b'{"success": true, "count": "1", "data": [5]}',
            b'{"success": true, "count": 1, "data": ["5"]}',
            b'{"success": true, "count": 1, "data": [5.0]}',
            b'{"success": "true", "count": "1", "data": ["5"]}',
        ],
    )
    def test_string_or_float_values_not_coerced(self, body):
        with pytest.raises(ParseFailureError):
            parse_envelope(body)

    def test_unknown_fields_ignored(self):
        assert parse_envelope(b'{"success": true, "count": 1, "data": [1], "extra": 3}') == [1]

    def test_parse_failure_over_http(self, make_api_transport):
        transport, _ = make_api_transport(lambda req: httpx.Response(200, text="{broken"))
        with pytest.raises(ParseFailureError):
            _fetch(transport)
