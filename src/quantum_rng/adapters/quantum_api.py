"""Transporte HTTP hacia la API de aleatoriedad cuántica.

Responsabilidad:
- Construir la petición `GET <base_url>?count=N` con la API key en `x-api-key`.
- Validar el sobre JSON como `RandomResponse`.
- Clasificar fallos de red/HTTP en la taxonomía de `core.domain.errors`.

Un solo intento por llamada: la política de reintentos es del llamador.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from quantum_rng.adapters.http_client import build_async_client
from quantum_rng.core.config import AppSettings
from quantum_rng.core.domain.errors import (
    ApiRejectedError,
    NetworkError,
    NetworkOtherError,
    ParseFailureError,
    QuantumRNGError,
    RateLimitedError,
    ServiceUnavailableError,
    UnauthorizedError,
)
from quantum_rng.core.domain.models import RandomResponse
from quantum_rng.core.interfaces.transport import RandomTransport

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


def classify_status(status_code: int, reason: str = "") -> QuantumRNGError:
    """Traduce un status HTTP no-2xx a un error tipado (sin leer el body)."""

    if status_code == 401:
        return UnauthorizedError("invalid API key", status_code=status_code)
    if status_code == 429:
        return RateLimitedError("rate limit exceeded, retry later", status_code=status_code)
    if status_code >= 500:
        return ServiceUnavailableError("service temporarily unavailable", status_code=status_code)
    detail = f"HTTP {status_code} {reason}".strip()
    return NetworkOtherError(detail, status_code=status_code)


def parse_envelope(body: bytes | str) -> list[int]:
    """Valida el sobre JSON y devuelve los enteros.

    - JSON inválido o esquema incorrecto => `ParseFailureError`.
    - `success == False` o sin `data` => `ApiRejectedError`.
    """

    try:
        envelope = RandomResponse.model_validate_json(body)
    except ValidationError as exc:
        raise ParseFailureError(f"Failed to parse API response: {exc}") from exc

    if not envelope.success or envelope.data is None:
        raise ApiRejectedError(
            "API returned unsuccessful response. Check your API key and account status."
        )

    source = envelope.proof.source if envelope.proof else None
    logger.info(f"Received {len(envelope.data)} quantum random numbers from {source or 'unknown source'}")
    return list(envelope.data)


class QuantumApiTransport(RandomTransport):
    """Cliente del endpoint `/api/v1/random`.

    `client` permite reutilizar conexiones (o inyectar un `httpx.MockTransport`);
    si no se pasa, cada llamada abre y cierra su propio `httpx.AsyncClient`.
    Un `client` inyectado sigue siendo del llamador: el transporte nunca lo cierra.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def fetch_integers(self, count: int, *, api_key: str) -> list[int]:
        headers = {API_KEY_HEADER: api_key}
        params = {"count": count}
        logger.debug(f"Requesting {count} integers from {self._settings.base_url}")

        try:
            if self._client is not None:
                response = await self._client.get(self._settings.base_url, params=params, headers=headers)
            else:
                async with build_async_client(self._settings) as client:
                    response = await client.get(self._settings.base_url, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning(f"Quantum RNG request timed out: {exc!r}")
            raise NetworkError(
                f"Request timed out after {self._settings.http_timeout_seconds:g}s. Please try again."
            ) from exc
        except httpx.ConnectError as exc:
            logger.warning(f"Quantum RNG connection failed: {exc!r}")
            raise NetworkError(
                f"Unable to connect to Quantum RNG service. Check your internet connection. ({exc})"
            ) from exc
        except httpx.TransportError as exc:
            logger.warning(f"Quantum RNG transport error: {exc!r}")
            raise NetworkError(f"Network error: {exc}") from exc

        if not response.is_success:
            error = classify_status(response.status_code, response.reason_phrase)
            logger.warning(f"Quantum RNG request failed: {error!r}")
            raise error

        return parse_envelope(response.content)
