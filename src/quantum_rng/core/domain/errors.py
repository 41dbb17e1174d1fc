"""Error taxonomy for the quantum-rng SDK.

Every failure the SDK can report is a `QuantumRNGError` carrying an
`ErrorKind`. Callers can either catch the concrete subclass or branch on
`exc.kind`; both stay stable across releases. Nothing in the SDK retries,
so the caller decides on any retry/backoff policy.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of failure surfaced to callers."""

    NOT_INITIALIZED = "not_initialized"
    INVALID_ARGUMENT = "invalid_argument"
    NETWORK = "network"
    NETWORK_OTHER = "network_other"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    SERVICE_UNAVAILABLE = "service_unavailable"
    API_REJECTED = "api_rejected"
    PARSE_FAILURE = "parse_failure"

    def is_local(self) -> bool:
        """True for errors raised before any network attempt."""

        return self in (ErrorKind.NOT_INITIALIZED, ErrorKind.INVALID_ARGUMENT)


class QuantumRNGError(Exception):
    """Base class for all SDK errors."""

    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class NotInitializedError(QuantumRNGError):
    kind = ErrorKind.NOT_INITIALIZED


class InvalidArgumentError(QuantumRNGError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT


class NetworkError(QuantumRNGError):
    """DNS failure, refused connection or timeout."""

    kind = ErrorKind.NETWORK


class NetworkOtherError(NetworkError):
    """Non-2xx status without a dedicated category (e.g. 400, 404)."""

    kind = ErrorKind.NETWORK_OTHER


class UnauthorizedError(QuantumRNGError):
    kind = ErrorKind.UNAUTHORIZED


class RateLimitedError(QuantumRNGError):
    kind = ErrorKind.RATE_LIMITED


class ServiceUnavailableError(QuantumRNGError):
    kind = ErrorKind.SERVICE_UNAVAILABLE


class ApiRejectedError(QuantumRNGError):
    """Well-formed envelope that did not carry usable data."""

    kind = ErrorKind.API_REJECTED


class ParseFailureError(QuantumRNGError):
    """Malformed JSON or schema mismatch in a 2xx response."""

    kind = ErrorKind.PARSE_FAILURE
