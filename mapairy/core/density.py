"""
Map-Airy probability density function with regime-wise evaluation.

The Map-Airy law is the maximally skewed stable distribution with
stability index 3/2. Its left tail decays like exp(-2|x|^3/27) while its
right tail follows the power law x^(-5/2), so no single formula is
accurate over the whole real line. The density is evaluated by:

    x > 64          asymptotic series in u = x^(-3/2), times u/x
    0 <= x <= 64    rational approximants on doubling segments
    -2 <= x < 0     rational approximants on unit segments
    -32 <= x < -2   rational approximant times sqrt(|x|)·exp(-2|x|^3/27)
    x < -32         exactly zero (the exponential factor underflows)
"""

import math

from mapairy.core.approximation import (
    Segment,
    left_tail_exponent,
    pade,
    piecewise_pade,
    pow_minus3d2,
)
from mapairy.core.validation import check_argument
from mapairy.utils.coefficients import (
    PDF_MINUS_1_0,
    PDF_MINUS_16_32,
    PDF_MINUS_2_1,
    PDF_MINUS_2_4,
    PDF_MINUS_4_8,
    PDF_MINUS_8_16,
    PDF_PLUS_0_1,
    PDF_PLUS_16_32,
    PDF_PLUS_1_2,
    PDF_PLUS_2_4,
    PDF_PLUS_32_64,
    PDF_PLUS_4_8,
    PDF_PLUS_8_16,
    PDF_PLUS_LIMIT,
)
from mapairy.utils.constants import (
    CENTRAL_UPPER_LIMIT,
    LEFT_DIRECT_LIMIT,
    LEFT_UNDERFLOW_LIMIT,
)

_RIGHT_SEGMENTS = (
    Segment(1.0, 0.0, PDF_PLUS_0_1),
    Segment(2.0, 1.0, PDF_PLUS_1_2),
    Segment(4.0, 2.0, PDF_PLUS_2_4),
    Segment(8.0, 4.0, PDF_PLUS_4_8),
    Segment(16.0, 8.0, PDF_PLUS_8_16),
    Segment(32.0, 16.0, PDF_PLUS_16_32),
    Segment(64.0, 32.0, PDF_PLUS_32_64),
)

# Indexed by |x|
_LEFT_DIRECT_SEGMENTS = (
    Segment(1.0, 1.0, PDF_MINUS_1_0, reflected=True),
    Segment(2.0, 2.0, PDF_MINUS_2_1, reflected=True),
)

_LEFT_TAIL_SEGMENTS = (
    Segment(4.0, 2.0, PDF_MINUS_2_4),
    Segment(8.0, 4.0, PDF_MINUS_4_8),
    Segment(16.0, 8.0, PDF_MINUS_8_16),
    Segment(32.0, 16.0, PDF_MINUS_16_32),
)


def _right_density(x: float) -> float:
    """Density at x >= 0."""
    if x <= CENTRAL_UPPER_LIMIT:
        return piecewise_pade(x, _RIGHT_SEGMENTS)

    # Underflows to an exact zero past x ≈ 1e129
    u = pow_minus3d2(x)
    return pade(u, PDF_PLUS_LIMIT) * u / x


def _left_density(x: float) -> float:
    """Density at -x for x > 0."""
    if x <= LEFT_DIRECT_LIMIT:
        return piecewise_pade(x, _LEFT_DIRECT_SEGMENTS)
    if x <= LEFT_UNDERFLOW_LIMIT:
        v = piecewise_pade(x, _LEFT_TAIL_SEGMENTS)
        return v * math.sqrt(x) * math.exp(left_tail_exponent(x))

    return 0.0


def density(x: float) -> float:
    """
    Map-Airy probability density function.

    Args:
        x: Finite point at which to evaluate the density

    Returns:
        Non-negative density value; exactly 0.0 once the left tail
        underflows or the right tail drops below the smallest double

    Raises:
        NonFiniteInputError: If x is NaN or infinite

    Examples:
        >>> round(density(0.0), 12)
        0.197516171847
        >>> density(-40.0)
        0.0
        >>> 0.0 < density(2.0 ** 64) < 1e-40
        True
    """
    check_argument(x)

    if x >= 0.0:
        value = _right_density(x)
    else:
        value = _left_density(-x)

    return max(value, 0.0)
