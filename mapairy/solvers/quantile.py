"""
Quantile solver with automatic method selection.

This module provides the high-level interface for inverting the Map-Airy
distribution function. A rational approximation supplies the starting
point, the safeguarded Newton iteration refines it, and Brent's method
is kept as a fallback.
"""

import logging
import math
from typing import Iterable, Optional

from mapairy.core.approximation import pade
from mapairy.core.validation import check_probability
from mapairy.solvers.bracket import normalize_probability
from mapairy.solvers.brent import brent_quantile
from mapairy.solvers.newton_bisection import newton_bisection_quantile
from mapairy.utils.coefficients import (
    QUANTILE_LOWER_0P125_0P25,
    QUANTILE_LOWER_0P25_0P375,
    QUANTILE_LOWER_0P375_0P5,
    QUANTILE_LOWER_EXPM128_256,
    QUANTILE_LOWER_EXPM16_32,
    QUANTILE_LOWER_EXPM256_512,
    QUANTILE_LOWER_EXPM32_64,
    QUANTILE_LOWER_EXPM3_4,
    QUANTILE_LOWER_EXPM4_8,
    QUANTILE_LOWER_EXPM512_1024,
    QUANTILE_LOWER_EXPM64_128,
    QUANTILE_LOWER_EXPM8_16,
    QUANTILE_UPPER_0P125_0P25,
    QUANTILE_UPPER_0P25_0P5,
    QUANTILE_UPPER_EXPM16_32,
    QUANTILE_UPPER_EXPM32_48,
    QUANTILE_UPPER_EXPM3_4,
    QUANTILE_UPPER_EXPM4_8,
    QUANTILE_UPPER_EXPM8_16,
)
from mapairy.utils.constants import QUANTILE_CENTRAL_LOWER, UPPER_TAIL_COEFFICIENT
from mapairy.utils.exceptions import ConvergenceError
from mapairy.utils.types import QuantileResult

logger = logging.getLogger(__name__)

# (smallest binary exponent covered, scaling exponent, approximant)
_UPPER_LOG_SEGMENTS = (
    (-4, 3, QUANTILE_UPPER_EXPM3_4),
    (-8, 4, QUANTILE_UPPER_EXPM4_8),
    (-16, 8, QUANTILE_UPPER_EXPM8_16),
    (-32, 16, QUANTILE_UPPER_EXPM16_32),
    (-48, 32, QUANTILE_UPPER_EXPM32_48),
)

_LOWER_LOG_SEGMENTS = (
    (-4, 3, QUANTILE_LOWER_EXPM3_4),
    (-8, 4, QUANTILE_LOWER_EXPM4_8),
    (-16, 8, QUANTILE_LOWER_EXPM8_16),
    (-32, 16, QUANTILE_LOWER_EXPM16_32),
    (-64, 32, QUANTILE_LOWER_EXPM32_64),
    (-128, 64, QUANTILE_LOWER_EXPM64_128),
    (-256, 128, QUANTILE_LOWER_EXPM128_256),
    (-512, 256, QUANTILE_LOWER_EXPM256_512),
    (-1024, 512, QUANTILE_LOWER_EXPM512_1024),
)

# Inverts CCDF(x) ~ x^(-3/2) / sqrt(2π), i.e. x = (2π)^(-1/3) q^(-2/3)
_UPPER_LIMIT_SCALE = UPPER_TAIL_COEFFICIENT ** (2.0 / 3.0)


def _binary_exponent(x: float) -> int:
    """floor(log2(x)) for positive x, exact for subnormals."""
    return math.frexp(x)[1] - 1


def _log_segment_value(t: float, segments) -> Optional[float]:
    exponent = _binary_exponent(t)
    for min_exponent, shift, coefficients in segments:
        if exponent >= min_exponent:
            return pade(-math.log2(math.ldexp(t, shift)), coefficients)
    return None


def _upper_quantile_approximation(q: float) -> float:
    """Approximate x with CCDF(x) = q for q <= 1/2."""
    if q >= QUANTILE_CENTRAL_LOWER:
        if q <= 0.25:
            return pade(q - 0.125, QUANTILE_UPPER_0P125_0P25)
        return pade(q - 0.25, QUANTILE_UPPER_0P25_0P5)

    v = _log_segment_value(q, _UPPER_LOG_SEGMENTS)
    if v is None:
        v = _UPPER_LIMIT_SCALE

    return v / q ** (2.0 / 3.0)


def _lower_quantile_approximation(p: float) -> float:
    """Approximate x with CDF(x) = p for p <= 1/2."""
    if p >= QUANTILE_CENTRAL_LOWER:
        if p <= 0.25:
            return pade(p - 0.125, QUANTILE_LOWER_0P125_0P25)
        if p <= 0.375:
            return pade(p - 0.25, QUANTILE_LOWER_0P25_0P375)
        return pade(p - 0.375, QUANTILE_LOWER_0P375_0P5)

    y = _log_segment_value(p, _LOWER_LOG_SEGMENTS)
    if y is None:
        return -math.inf
    return y


def pade_quantile_approximation(p: float, complement: bool = False) -> float:
    """
    Rational approximation of the Map-Airy quantile function.

    This provides a closed-form starting point for the root-finder. It is
    accurate to a few ulps over most of (0, 1) but is not refined against
    the distribution function.

    Args:
        p: Probability in (0, 1)
        complement: If True, approximate x with CCDF(x) = p

    Returns:
        Approximate quantile; -inf for lower tail probabilities below
        2^-1024, where the tables end

    Raises:
        NonFiniteInputError: If p is NaN or infinite
        DomainError: If p is not strictly between 0 and 1
    """
    check_probability(p)

    target, upper = normalize_probability(p, complement)
    if upper:
        return _upper_quantile_approximation(target)
    return _lower_quantile_approximation(target)


def asymptotic_lower_quantile(p: float) -> float:
    """
    Leading-order lower tail quantile from CDF(x) ~ exp(-2|x|^3/27).

    Solving -ln p = 2|x|^3/27 gives x = -(13.5·(-ln p))^(1/3). Used where
    the rational tables no longer apply.
    """
    return -((13.5 * -math.log(p)) ** (1.0 / 3.0))


def get_initial_guess(p: float, complement: bool = False) -> float:
    """
    Generate a finite starting point for quantile refinement.

    Uses the rational approximation wherever it is defined and falls back
    to the asymptotic lower tail formula for probabilities below 2^-1024.

    Args:
        p: Probability in (0, 1)
        complement: Whether p is an upper tail probability

    Returns:
        Finite initial quantile estimate
    """
    guess = pade_quantile_approximation(p, complement)
    if math.isfinite(guess):
        return guess

    target, _ = normalize_probability(p, complement)
    return asymptotic_lower_quantile(target)


def solve_quantile(
    p: float,
    complement: bool = False,
    method: str = "auto",
    initial_guess: Optional[float] = None,
) -> QuantileResult:
    """
    Solve for the quantile with automatic method selection.

    This is the main entry point for quantile calculation when the caller
    wants convergence details. It automatically:
    1. Validates the probability
    2. Generates a starting point (if not provided)
    3. Tries the safeguarded Newton iteration first (quadratic convergence)
    4. Falls back to Brent if the Newton iteration fails

    Args:
        p: Probability in (0, 1)
        complement: If True, solve CCDF(x) = p instead of CDF(x) = p
        method: Solver method - "auto" (default), "newton", or "brent"
        initial_guess: Starting point (auto-generated if None)

    Returns:
        QuantileResult containing:
            - value: Solved quantile
            - iterations: Number of iterations used
            - method: Method that produced the value
            - success: True if converged, False otherwise
            - message: Detailed information about convergence

    Raises:
        NonFiniteInputError: If p is NaN or infinite
        DomainError: If p is not strictly between 0 and 1
        ValueError: If method is not one of the supported names

    Examples:
        >>> result = solve_quantile(2.0 / 3.0)
        >>> abs(result.value) < 1e-12, result.method
        (True, 'newton-bisection')
    """
    check_probability(p)
    if method not in ("auto", "newton", "brent"):
        raise ValueError(f"Method must be 'auto', 'newton' or 'brent', got {method!r}")

    if initial_guess is None:
        initial_guess = get_initial_guess(p, complement)
    elif not math.isfinite(initial_guess):
        raise ValueError(f"Initial guess must be finite, got {initial_guess}")

    if method in ("auto", "newton"):
        newton_result = newton_bisection_quantile(p, complement, initial_guess)

        if newton_result.success or method == "newton":
            return newton_result

        logger.debug("Newton-bisection failed for p=%r: %s", p, newton_result.message)

    return brent_quantile(p, complement, initial_guess)


def quantile(p: float, complement: bool = False) -> float:
    """
    Map-Airy quantile function (inverse of the distribution function).

    Args:
        p: Probability in (0, 1)
        complement: If True, return x with P(X > x) = p; use this for
            upper tail probabilities too small to represent as 1 - p

    Returns:
        x such that distribution(x, complement) == p

    Raises:
        NonFiniteInputError: If p is NaN or infinite
        DomainError: If p is not strictly between 0 and 1
        ConvergenceError: If no solver converged

    Examples:
        >>> round(quantile(0.5), 10)  # median
        -0.7167106855
        >>> quantile(2.0 ** -128, complement=True) > 1e25
        True
    """
    result = solve_quantile(p, complement)
    if not result.success:
        logger.warning("Quantile solver failed for p=%r (complement=%s): %s", p, complement, result.message)
        raise ConvergenceError(
            f"Quantile did not converge for p={p} (complement={complement}): {result.message}",
            result=result,
        )
    return result.value


def quantile_vectorized(probabilities: Iterable[float], complement: bool = False) -> list[float]:
    """
    Evaluate the quantile function for several probabilities.

    Args:
        probabilities: Probabilities in (0, 1)
        complement: Applied to every probability

    Returns:
        List of quantiles in input order

    Raises:
        Same errors as quantile(), for the first offending element
    """
    return [quantile(p, complement) for p in probabilities]
