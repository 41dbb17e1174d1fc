"""Shared fixtures for the quantum-rng test suite."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from quantum_rng.adapters.http_client import build_async_client
from quantum_rng.adapters.quantum_api import QuantumApiTransport
from quantum_rng.core.config import AppSettings

BASE_URL = "https://qrng.test/api/v1/random"


class FakeTransport:
    """In-memory `RandomTransport` that records every call."""

    def __init__(self, responses: list[list[int]] | None = None, error: Exception | None = None) -> None:
        self.calls: list[tuple[int, str]] = []
        self._responses = list(responses or [])
        self._error = error
        self.closed = False

    async def fetch_integers(self, count: int, *, api_key: str) -> list[int]:
        self.calls.append((count, api_key))
        if self._error is not None:
            raise self._error
        if self._responses:
            return self._responses.pop(0)
        return list(range(count))

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from the developer's .env files."""
    return AppSettings(
        _env_file=None,
        api_key=None,
        base_url=BASE_URL,
        http_timeout_seconds=5.0,
        user_agent="QuantumRNG-Python-SDK/test",
    )


@pytest.fixture
def make_api_transport(settings) -> Callable[..., tuple[QuantumApiTransport, list[httpx.Request]]]:
    """Build a real transport whose HTTP layer is an `httpx.MockTransport`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = build_async_client(settings, transport=httpx.MockTransport(_record))
        return QuantumApiTransport(settings, client=client), seen

    return _make


def envelope(data, *, success: bool = True, count: int | None = None, proof: bool = True) -> dict:
    body: dict = {"success": success, "count": len(data) if count is None else count, "data": data}
    if proof:
        body["proof"] = {
            "source": "NIST Randomness Beacon",
            "pulseUri": "https://beacon.nist.gov/beacon/2.0/pulse/1",
            "timestamp": "2025-01-01T00:00:00Z",
        }
    return body
