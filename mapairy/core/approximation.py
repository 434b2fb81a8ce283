"""
Piecewise rational approximation primitives.

The density, distribution and quantile evaluators all reduce to the same
operation: pick the segment covering the argument, shift the argument to
the segment origin and evaluate a Padé approximant there. This module
provides that operation over the tables in mapairy.utils.coefficients.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from mapairy.utils.types import PadeCoefficients


@dataclass(frozen=True)
class Segment:
    """
    One piece of a piecewise approximation.

    Attributes:
        upper: Inclusive upper end of the argument range covered
        origin: Point the approximant is expanded around
        coefficients: Padé approximant for this range
        reflected: Evaluate in (origin - x) instead of (x - origin)
    """
    upper: float
    origin: float
    coefficients: PadeCoefficients
    reflected: bool = False


def polynomial(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate a polynomial with ascending coefficients by Horner's rule."""
    result = 0.0
    for c in reversed(coefficients):
        result = result * x + c
    return result


def pade(x: float, coefficients: PadeCoefficients) -> float:
    """
    Evaluate a Padé approximant P(x)/Q(x).

    Args:
        x: Shifted argument within the approximant's fitted range
        coefficients: Numerator and denominator tables

    Returns:
        The rational function value
    """
    return polynomial(x, coefficients.numer) / polynomial(x, coefficients.denom)


def piecewise_pade(x: float, segments: Sequence[Segment]) -> float:
    """
    Evaluate the first segment whose upper bound covers x.

    Segments must be ordered by increasing upper bound.

    Raises:
        ValueError: If x exceeds the last segment's upper bound
    """
    for segment in segments:
        if x <= segment.upper:
            if segment.reflected:
                return pade(segment.origin - x, segment.coefficients)
            return pade(x - segment.origin, segment.coefficients)

    raise ValueError(f"Argument {x} is beyond the last segment ({segments[-1].upper})")


def pow_minus3d2(x: float) -> float:
    """
    x^(-3/2) for positive x.

    Formed from 1/x so that no intermediate overflows; the result only
    underflows once x^(-3/2) itself is below the smallest subnormal.
    """
    r = 1.0 / x
    return r * math.sqrt(r)


def left_tail_exponent(x: float) -> float:
    """Exponent -2x^3/27 governing the decay of the left tail at -x."""
    return -(2.0 * x * x * x) / 27.0
