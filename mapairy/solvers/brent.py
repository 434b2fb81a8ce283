"""
Brent's method for quantile inversion.

This module implements Brent's method (a hybrid bisection/inverse quadratic
interpolation algorithm) as a robust fallback when the Newton iteration
fails. Brent's method is guaranteed to converge once the root is
bracketed, though it does not use the density and is slower near the root.
"""

import logging

from scipy.optimize import brentq

from mapairy.solvers.bracket import find_bracket, normalize_probability, tail_objective
from mapairy.utils.constants import (
    BRENT_ABS_TOLERANCE,
    BRENT_MAX_ITERATIONS,
    BRENT_REL_TOLERANCE,
)
from mapairy.utils.types import QuantileResult

logger = logging.getLogger(__name__)


def brent_quantile(
    p: float,
    complement: bool,
    initial_guess: float,
    rel_tolerance: float = BRENT_REL_TOLERANCE,
    max_iterations: int = BRENT_MAX_ITERATIONS,
) -> QuantileResult:
    """
    Solve CDF(x) = p (or CCDF(x) = p) using Brent's method.

    Brent's method is a root-finding algorithm that combines:
    - Bisection (reliable but slow)
    - Inverse quadratic interpolation (fast when applicable)
    - Secant method (intermediate speed/reliability)

    The bracket is grown around initial_guess with the same search the
    Newton solver uses, so the two methods always work on the same
    interval.

    Args:
        p: Probability in (0, 1), already validated
        complement: Whether p is an upper tail probability
        initial_guess: Point to grow the bracket from
        rel_tolerance: Relative tolerance on x (scipy's minimum is 4·eps)
        max_iterations: Maximum Brent iterations

    Returns:
        QuantileResult with value, iterations, method, success flag
    """
    target, upper = normalize_probability(p, complement)

    def objective(x: float) -> float:
        """
        Relative tail residual; increasing in x with a single root.
        """
        return tail_objective(x, target, upper)

    bracket = find_bracket(target, upper, initial_guess)
    if bracket is None:
        return QuantileResult(
            value=initial_guess,
            probability=p,
            complement=complement,
            iterations=0,
            method="brent",
            success=False,
            message=f"Brent method failed: could not bracket root from x0={initial_guess!r}",
        )

    if bracket.lo == bracket.hi:
        return QuantileResult(
            value=bracket.lo,
            probability=p,
            complement=complement,
            iterations=0,
            method="brent",
            success=True,
            message="Initial guess is an exact root",
        )

    root, info = brentq(
        objective,
        bracket.lo,
        bracket.hi,
        xtol=BRENT_ABS_TOLERANCE,
        rtol=rel_tolerance,
        maxiter=max_iterations,
        full_output=True,
        disp=False,
    )

    if not info.converged:
        logger.debug("brentq stopped with flag %r for p=%r", info.flag, p)
        return QuantileResult(
            value=root,
            probability=p,
            complement=complement,
            iterations=info.iterations,
            method="brent",
            success=False,
            message=f"Brent method failed: {info.flag}",
        )

    residual = abs(objective(root))

    return QuantileResult(
        value=root,
        probability=p,
        complement=complement,
        iterations=info.iterations,
        method="brent",
        success=True,
        message=f"Converged with relative residual {residual:.2e}",
    )
