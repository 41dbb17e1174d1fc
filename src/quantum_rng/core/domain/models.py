"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta del sobre JSON que devuelve el servicio sin
  acoplar el Core a librerías de I/O.
- Modo estricto: `"1"` no es un entero ni `"true"` un booleano.
- Un fallo de esquema se convierte en un único tipo de excepción
  (`ValidationError`) fácil de clasificar en el transporte.

Nota:
- Estos modelos describen *qué* devuelve el servicio, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Rango permitido por request (inclusive).
MIN_COUNT = 1
MAX_COUNT = 1000

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class RandomProof(BaseModel):
    """Origen declarado de la aleatoriedad.

    No se verifica criptográficamente: solo se conserva para trazabilidad/logs.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    source: str | None = Field(
        default=None,
        description="Fuente declarada (p.ej. un beacon cuántico).",
    )
    pulse_uri: str | None = Field(
        default=None,
        alias="pulseUri",
        description="URI del pulso concreto usado por el servicio.",
    )
    timestamp: str | None = Field(
        default=None,
        description="Momento del pulso según el servicio.",
    )


class RandomResponse(BaseModel):
    """Sobre JSON devuelto por el endpoint de números aleatorios.

    Invariante esperada (no garantizada): si `success` es True, `data` existe
    y `len(data) == count`. Quien consuma el modelo debe comprobarlo.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)

    success: bool = Field(
        ...,
        description="Indica si el servicio aceptó la petición.",
    )
    count: int = Field(
        default=0,
        ge=0,
        description="Cantidad de enteros declarada por el servicio.",
    )
    data: list[Int32] | None = Field(
        default=None,
        description="Enteros con signo de 32 bits, en orden.",
    )
    proof: RandomProof | None = Field(
        default=None,
        description="Prueba/origen opcional de la aleatoriedad.",
    )
