"""
Input validation for the distribution evaluators.
"""

import math

from mapairy.utils.exceptions import DomainError, NonFiniteInputError


def check_argument(x: float) -> None:
    """
    Validate a distribution argument.

    Args:
        x: Point at which the density or distribution is evaluated

    Raises:
        NonFiniteInputError: If x is NaN or infinite
    """
    if not math.isfinite(x):
        raise NonFiniteInputError(f"Argument must be finite, got x={x}")


def check_probability(p: float) -> None:
    """
    Validate a probability passed to the quantile function.

    Args:
        p: Probability (or its complement) to invert

    Raises:
        NonFiniteInputError: If p is NaN or infinite
        DomainError: If p is not strictly between 0 and 1
    """
    if not math.isfinite(p):
        raise NonFiniteInputError(f"Probability must be finite, got p={p}")
    if not 0.0 < p < 1.0:
        raise DomainError(f"Probability must lie in the open interval (0, 1), got p={p}")
