"""Cliente Python para el servicio de números aleatorios cuánticos.

Uso típico::

    import asyncio
    from quantum_rng import QuantumRandom

    async def main() -> None:
        async with QuantumRandom("my-api-key") as qrng:
            roll = await qrng.get_integer_in_range(1, 100)

    asyncio.run(main())
"""

__version__ = "1.0.0"

from quantum_rng.core.domain.errors import (  # noqa: E402
    ApiRejectedError,
    ErrorKind,
    InvalidArgumentError,
    NetworkError,
    NetworkOtherError,
    NotInitializedError,
    ParseFailureError,
    QuantumRNGError,
    RateLimitedError,
    ServiceUnavailableError,
    UnauthorizedError,
)
from quantum_rng.core.services.quantum_random import QuantumRandom  # noqa: E402

__all__ = [
    "ApiRejectedError",
    "ErrorKind",
    "InvalidArgumentError",
    "NetworkError",
    "NetworkOtherError",
    "NotInitializedError",
    "ParseFailureError",
    "QuantumRNGError",
    "QuantumRandom",
    "RateLimitedError",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "__version__",
]
