"""Headwind/tailwind and crosswind decomposition, and polar vector composition."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from airnav.models import (
    Headwind,
    LeftCross,
    PolarVector,
    RightCross,
    Tailwind,
    WindComponents,
)

logger = logging.getLogger(__name__)

CALM = PolarVector(direction=0, speed=0.0)


def round_half_away(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals, ties away from zero (2.675 -> 2.68)."""
    exact = Decimal(repr(value))
    if not exact.is_finite():
        return value
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def _normalize_offset(offset: int) -> int:
    """Wrap an angular offset into (-180, 180]."""
    offset %= 360
    return offset - 360 if offset > 180 else offset


def decompose(vector: PolarVector, reference_heading: int) -> WindComponents:
    """Resolve a vector into base and cross components relative to a heading.

    A positive base is a headwind, anything else a tailwind; a positive
    cross is from the right, anything else from the left. Zero resolves
    to Tailwind(0) / LeftCross(0).
    """
    offset = _normalize_offset(vector.direction - reference_heading)
    complement = 90 - offset

    base_raw = round_half_away(vector.speed * math.cos(math.radians(offset)))
    cross_raw = round_half_away(vector.speed * math.cos(math.radians(complement)))

    base = Headwind(magnitude=base_raw) if base_raw > 0 else Tailwind(magnitude=abs(base_raw))
    cross = RightCross(magnitude=cross_raw) if cross_raw > 0 else LeftCross(magnitude=abs(cross_raw))

    return WindComponents(base=base, cross=cross)


def compose(vector_a: PolarVector, vector_b: PolarVector) -> PolarVector:
    """Add two polar vectors using the law of cosines and the law of sines.

    The magnitude comes from the vector triangle with interior angle
    ``|180 - |diff||``; the angular correction from ``asin`` takes the sign
    of the direction difference and is truncated toward zero before being
    added to ``vector_a.direction``.

    Collinear opposing vectors of equal speed have no resultant direction;
    they return the calm vector (direction 0, speed 0).
    """
    v1 = vector_a.speed
    v2 = vector_b.speed
    diff = vector_a.direction - vector_b.direction
    # cos/sin are periodic, so reducing mod 360 keeps huge ints convertible
    alpha = math.radians(abs(180 - abs(diff)) % 360)

    # Work in units of the larger speed so squaring cannot overflow
    scale = max(v1, v2)
    if scale == 0.0:
        logger.debug("Degenerate composition of %s and %s, returning calm", vector_a, vector_b)
        return CALM
    a = v1 / scale
    b = v2 / scale

    unit_resultant = math.sqrt(max(0.0, a * a + b * b - 2 * a * b * math.cos(alpha)))
    if unit_resultant == 0.0:
        logger.debug("Degenerate composition of %s and %s, returning calm", vector_a, vector_b)
        return CALM

    # Floating-point error can push the ratio fractionally past 1
    ratio = max(-1.0, min(1.0, b * math.sin(alpha) / unit_resultant))
    correction = math.copysign(math.degrees(math.asin(ratio)), -1.0 if diff < 0 else 1.0)

    return PolarVector(
        direction=vector_a.direction + math.trunc(correction),
        speed=round_half_away(scale * unit_resultant),
    )
