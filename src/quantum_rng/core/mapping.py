"""Value mapping from raw 32-bit integers to derived shapes.

Pure functions, no I/O. Each mapping consumes exactly one raw integer from
an already fetched batch.

Known statistical defect: `to_range_value` reduces `abs(raw)` modulo the
span, so spans that do not evenly divide 2**31 favour the low end of the
range (modulo bias). The formula is kept for parity with the other SDKs of
the service. `to_range_value_unbiased` is the opt-in rejection-sampling
alternative.
"""

from __future__ import annotations

from typing import Iterable

UINT32_MAX = 0xFFFFFFFF
_UINT32_SPACE = UINT32_MAX + 1


def _span(minimum: int, maximum: int) -> int:
    if minimum >= maximum:
        raise ValueError("Min value must be less than max value")
    return maximum - minimum + 1


def to_range_value(raw: int, minimum: int, maximum: int) -> int:
    """Map `raw` into ``[minimum, maximum]`` as ``min + abs(raw) % span``.

    Biased for spans that do not divide the input domain; see module docs.
    Python integers do not overflow, so ``raw = -2**31`` is safe.
    """

    return minimum + (abs(raw) % _span(minimum, maximum))


def to_range_value_unbiased(raw: int, minimum: int, maximum: int) -> int | None:
    """Rejection-sampling variant of `to_range_value`.

    Works on the unsigned 32-bit view of `raw`. Returns ``None`` when the
    value falls in the tail that would introduce bias; the caller must draw
    another raw integer.
    """

    span = _span(minimum, maximum)
    value = raw & UINT32_MAX
    if span >= _UINT32_SPACE:
        # Wider than one draw can cover: keep the plain reduction.
        return minimum + value
    limit = _UINT32_SPACE - (_UINT32_SPACE % span)
    if value >= limit:
        return None
    return minimum + (value % span)


def to_unit_float(raw: int) -> float:
    """Reinterpret `raw` as unsigned 32-bit and normalise to ``[0.0, 1.0]``."""

    return (raw & UINT32_MAX) / UINT32_MAX


def map_range(raws: Iterable[int], minimum: int, maximum: int) -> list[int]:
    _span(minimum, maximum)
    return [to_range_value(raw, minimum, maximum) for raw in raws]


def map_unit_floats(raws: Iterable[int]) -> list[float]:
    return [to_unit_float(raw) for raw in raws]
