"""SDK facade: the `QuantumRandom` client.

The client owns the only mutable state of the SDK, the API key. It moves
from *uninitialized* to *ready* once `initialize` records a non-empty key,
and to *closed* after `aclose`. Every generation call:

1. validates its arguments locally (no I/O on failure),
2. performs at most one request through a `RandomTransport`,
3. maps the raw integers into the requested shape.

Errors are raised as `QuantumRNGError` subclasses and never retried here.
Concurrent calls on one client are independent; the key is written once and
only read afterwards, so no locking is needed.
"""

from __future__ import annotations

import logging
from types import TracebackType

from quantum_rng.adapters.quantum_api import QuantumApiTransport
from quantum_rng.core.config import AppSettings
from quantum_rng.core.domain.errors import (
    ApiRejectedError,
    InvalidArgumentError,
    NotInitializedError,
)
from quantum_rng.core.domain.models import MAX_COUNT, MIN_COUNT
from quantum_rng.core.interfaces.transport import RandomTransport
from quantum_rng.core.mapping import (
    map_range,
    map_unit_floats,
    to_range_value,
    to_range_value_unbiased,
    to_unit_float,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DRAWS = 8


def _validate_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"Count must be an integer, got {type(count).__name__}")
    if count < MIN_COUNT or count > MAX_COUNT:
        raise InvalidArgumentError(f"Count must be between {MIN_COUNT} and {MAX_COUNT}")


def _validate_range(minimum: int, maximum: int) -> None:
    if minimum >= maximum:
        raise InvalidArgumentError("Min value must be less than max value")


class QuantumRandom:
    """Client for the quantum randomness service.

    Construct it with an API key, or construct it empty and call
    `initialize` later. A custom `transport` replaces the HTTP client
    (useful for tests and alternative providers).
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: AppSettings | None = None,
        transport: RandomTransport | None = None,
        max_draws: int = DEFAULT_MAX_DRAWS,
    ) -> None:
        if transport is None:
            settings = settings or AppSettings()
            transport = QuantumApiTransport(settings)
        self._settings = settings
        self._transport: RandomTransport = transport
        self._api_key: str | None = None
        self._closed = False
        self._max_draws = max_draws
        if api_key is not None:
            self.initialize(api_key)

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "QuantumRandom":
        """Build a client, initialized when `settings.api_key` is set."""

        settings = settings or AppSettings()
        client = cls(settings=settings)
        if settings.api_key:
            client.initialize(settings.api_key)
        return client

    def initialize(self, api_key: str) -> None:
        """Record the API key; the client is ready afterwards."""

        if not api_key or not api_key.strip():
            raise InvalidArgumentError("API key cannot be empty")
        self._api_key = api_key.strip()
        logger.info("QuantumRNG SDK initialized successfully")

    @property
    def is_initialized(self) -> bool:
        return self._api_key is not None and not self._closed

    @property
    def settings(self) -> AppSettings | None:
        """Settings in use; None when a custom transport was injected without them."""

        return self._settings

    def _require_key(self) -> str:
        if self._closed:
            raise NotInitializedError("QuantumRNG client has been closed")
        if self._api_key is None:
            raise NotInitializedError(
                "QuantumRNG SDK not initialized. Call initialize(api_key) first."
            )
        return self._api_key

    async def get_integers(self, count: int) -> list[int]:
        """Fetch `count` raw signed 32-bit integers (1..1000)."""

        api_key = self._require_key()
        _validate_count(count)

        numbers = await self._transport.fetch_integers(count, api_key=api_key)
        if len(numbers) != count:
            raise ApiRejectedError(
                f"API returned {len(numbers)} integers, expected {count}"
            )
        return numbers

    async def _draw_one(self) -> int:
        numbers = await self.get_integers(1)
        return numbers[0]

    async def get_integer_in_range(
        self,
        minimum: int,
        maximum: int,
        *,
        unbiased: bool = False,
    ) -> int:
        """Single integer in ``[minimum, maximum]`` (inclusive).

        Default mapping is ``min + abs(raw) % span``, which carries modulo
        bias. ``unbiased=True`` uses rejection sampling instead and may spend
        more than one request per value (up to `max_draws`).
        """

        _validate_range(minimum, maximum)

        if not unbiased:
            return to_range_value(await self._draw_one(), minimum, maximum)

        for _ in range(self._max_draws):
            value = to_range_value_unbiased(await self._draw_one(), minimum, maximum)
            if value is not None:
                return value
            logger.debug("Rejected biased draw, requesting another integer")
        raise ApiRejectedError(
            f"No unbiased value for [{minimum}, {maximum}] after {self._max_draws} draws"
        )

    async def get_float(self) -> float:
        """Single float in ``[0.0, 1.0]``."""

        return to_unit_float(await self._draw_one())

    async def get_integers_in_range(self, minimum: int, maximum: int, count: int) -> list[int]:
        """`count` range-mapped integers from one batch request."""

        _validate_range(minimum, maximum)
        return map_range(await self.get_integers(count), minimum, maximum)

    async def get_floats(self, count: int) -> list[float]:
        """`count` floats in ``[0.0, 1.0]`` from one batch request."""

        return map_unit_floats(await self.get_integers(count))

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "QuantumRandom":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
