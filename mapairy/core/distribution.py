"""
Map-Airy cumulative distribution function and its complement.

Both tails are computed directly rather than as one minus the other:

    x >= 0   the upper tail P(X > x) is approximated; the lower
             probability is 1 - tail, which is accurate since the
             tail never exceeds 1/3 here
    x < 0    the lower tail P(X <= x) is approximated; the upper
             probability is 1 - tail, accurate since the tail never
             exceeds 2/3 here

Right of 64 the upper tail follows the asymptotic series in
u = x^(-3/2), so CCDF(2^64) is a small positive number instead of the
zero that 1 - CDF would produce. Left of -32 the lower tail is below the
smallest representable double and is returned as exactly zero.
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
    CDF_MINUS_1_0,
    CDF_MINUS_16_32,
    CDF_MINUS_2_1,
    CDF_MINUS_2_4,
    CDF_MINUS_4_8,
    CDF_MINUS_8_16,
    CDF_PLUS_0_1,
    CDF_PLUS_16_32,
    CDF_PLUS_1_2,
    CDF_PLUS_2_4,
    CDF_PLUS_32_64,
    CDF_PLUS_4_8,
    CDF_PLUS_8_16,
    CDF_PLUS_LIMIT,
)
from mapairy.utils.constants import (
    CENTRAL_UPPER_LIMIT,
    LEFT_DIRECT_LIMIT,
    LEFT_UNDERFLOW_LIMIT,
)

_UPPER_TAIL_SEGMENTS = (
    Segment(1.0, 0.0, CDF_PLUS_0_1),
    Segment(2.0, 1.0, CDF_PLUS_1_2),
    Segment(4.0, 2.0, CDF_PLUS_2_4),
    Segment(8.0, 4.0, CDF_PLUS_4_8),
    Segment(16.0, 8.0, CDF_PLUS_8_16),
    Segment(32.0, 16.0, CDF_PLUS_16_32),
    Segment(64.0, 32.0, CDF_PLUS_32_64),
)

# Indexed by |x|
_LOWER_DIRECT_SEGMENTS = (
    Segment(1.0, 1.0, CDF_MINUS_1_0, reflected=True),
    Segment(2.0, 2.0, CDF_MINUS_2_1, reflected=True),
)

_LOWER_TAIL_SEGMENTS = (
    Segment(4.0, 2.0, CDF_MINUS_2_4),
    Segment(8.0, 4.0, CDF_MINUS_4_8),
    Segment(16.0, 8.0, CDF_MINUS_8_16),
    Segment(32.0, 16.0, CDF_MINUS_16_32),
)


def upper_tail(x: float) -> float:
    """
    P(X > x) for x >= 0.

    Args:
        x: Non-negative argument

    Returns:
        Upper tail probability in [0, 1/3]
    """
    if x <= CENTRAL_UPPER_LIMIT:
        return piecewise_pade(x, _UPPER_TAIL_SEGMENTS)

    u = pow_minus3d2(x)
    return pade(u, CDF_PLUS_LIMIT) * u


def lower_tail(x: float) -> float:
    """
    P(X <= -x) for x > 0.

    Args:
        x: Magnitude of a negative argument

    Returns:
        Lower tail probability in [0, 2/3]
    """
    if x <= LEFT_DIRECT_LIMIT:
        return piecewise_pade(x, _LOWER_DIRECT_SEGMENTS)
    if x <= LEFT_UNDERFLOW_LIMIT:
        v = piecewise_pade(x, _LOWER_TAIL_SEGMENTS)
        return v * math.exp(left_tail_exponent(x)) / x

    return 0.0


def distribution(x: float, complement: bool = False) -> float:
    """
    Map-Airy cumulative distribution function.

    Args:
        x: Finite point at which to evaluate the distribution
        complement: If True, return P(X > x) instead of P(X <= x)

    Returns:
        Probability in [0, 1]

    Raises:
        NonFiniteInputError: If x is NaN or infinite

    Examples:
        >>> distribution(0.0)  # 2/3 of the mass lies left of the origin
        0.6666666666666667
        >>> distribution(0.0, complement=True)
        0.3333333333333333
        >>> 0.0 < distribution(2.0 ** 64, complement=True) < 1e-28
        True

    Notes:
        distribution(x) + distribution(x, complement=True) == 1 to within
        rounding for every finite x.
    """
    check_argument(x)

    if x >= 0.0:
        tail = upper_tail(x)
        value = tail if complement else 1.0 - tail
    else:
        tail = lower_tail(-x)
        value = 1.0 - tail if complement else tail

    return min(max(value, 0.0), 1.0)
