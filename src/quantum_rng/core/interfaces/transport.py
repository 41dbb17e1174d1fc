"""Contrato del transporte de enteros aleatorios.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP real por un fake en tests o por otro
  proveedor sin tocar la fachada.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomTransport(Protocol):
    """Contrato mínimo para obtener enteros crudos.

    Reglas de diseño:
    - `fetch_integers` es asíncrono porque hace exactamente un round trip de red.
    - Un solo intento por llamada: nada de reintentos en esta capa.
    - Los fallos se lanzan como `QuantumRNGError` ya clasificados.
    """

    async def fetch_integers(self, count: int, *, api_key: str) -> list[int]:
        """Pide `count` enteros con signo de 32 bits al servicio."""

        ...
