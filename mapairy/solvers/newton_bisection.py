"""
Safeguarded Newton-Raphson method for quantile inversion.

This module implements Newton's method on the tail equation with a
bisection fallback. The density is the exact derivative of the
distribution function, so Newton steps converge quadratically near the
root; the bracket guarantees progress where the density is too flat for
a Newton step to stay inside it (far tails, steep left decay).
"""

import logging
import math

from mapairy.solvers.bracket import (
    find_bracket,
    normalize_probability,
    tail_derivative,
    tail_objective,
)
from mapairy.utils.constants import (
    MACHINE_EPSILON,
    QUANTILE_ARGUMENT_ULPS,
    QUANTILE_MAX_ITERATIONS,
    QUANTILE_REL_TOLERANCE,
    QUANTILE_RESIDUAL_TOLERANCE,
)
from mapairy.utils.types import QuantileResult

logger = logging.getLogger(__name__)


def newton_bisection_quantile(
    p: float,
    complement: bool,
    initial_guess: float,
    max_iterations: int = QUANTILE_MAX_ITERATIONS,
    rel_tolerance: float = QUANTILE_REL_TOLERANCE,
    residual_tolerance: float = QUANTILE_RESIDUAL_TOLERANCE,
    argument_ulps: float = QUANTILE_ARGUMENT_ULPS,
) -> QuantileResult:
    """
    Solve CDF(x) = p (or CCDF(x) = p) by Newton iteration inside a bracket.

    Each iteration evaluates the relative residual f(x) and shrinks the
    bracket to the side of x that still contains the root. The Newton
    update

        x_{n+1} = x_n - f(x_n) / f'(x_n),   f'(x) = density(x) / t

    is taken when it lands strictly inside the bracket and the residual is
    shrinking at least as fast as bisection would shrink it; otherwise the
    bracket is bisected.

    Args:
        p: Probability in (0, 1), already validated
        complement: Whether p is an upper tail probability
        initial_guess: Starting point for bracket search and iteration
        max_iterations: Maximum number of Newton/bisection steps
        rel_tolerance: Convergence tolerance on x relative to |x|
        residual_tolerance: Convergence tolerance on |f(x)|, which is
            already relative to the target probability
        argument_ulps: Residuals no larger than the change caused by
            this many ulps of x also count as converged

    Returns:
        QuantileResult with value, iterations, method, success flag

    Notes:
        - Returns success=False if no bracket can be established
        - Returns success=False if max_iterations is reached
        - Bisection halves the bracket every step it is used, so the loop
          terminates even when every Newton step is rejected
    """
    target, upper = normalize_probability(p, complement)

    def result(value: float, iterations: int, success: bool, message: str) -> QuantileResult:
        return QuantileResult(
            value=value,
            probability=p,
            complement=complement,
            iterations=iterations,
            method="newton-bisection",
            success=success,
            message=message,
        )

    bracket = find_bracket(target, upper, initial_guess)
    if bracket is None:
        return result(initial_guess, 0, False, f"Could not bracket root from x0={initial_guess!r}")

    lo, hi = bracket
    if lo == hi:
        return result(lo, 0, True, "Initial guess is an exact root")

    x = min(max(initial_guess, lo), hi)
    dx_old = hi - lo
    iterations = 0

    for _ in range(max_iterations):
        iterations += 1

        f = tail_objective(x, target, upper)
        slope = tail_derivative(x, target)

        # Residual produced by rounding x itself; the deep left tail
        # cannot be evaluated more accurately than this
        argument_noise = argument_ulps * MACHINE_EPSILON * abs(x) * slope if math.isfinite(slope) else 0.0
        if abs(f) <= max(residual_tolerance, argument_noise):
            return result(x, iterations, True, f"Converged in {iterations} iterations (residual tol)")

        if f < 0.0:
            lo = x
        else:
            hi = x

        newton_ok = slope > 0.0 and abs(2.0 * f) <= abs(dx_old * slope)
        if newton_ok:
            dx = f / slope
            x_new = x - dx
            newton_ok = lo < x_new < hi

        if not newton_ok:
            dx = 0.5 * (hi - lo)
            x_new = lo + dx

        dx_old = dx

        # Bracket collapsed to adjacent doubles
        if x_new <= lo or x_new >= hi or x_new == x:
            return result(x, iterations, True, f"Converged in {iterations} iterations (bracket exhausted)")

        if abs(dx) <= rel_tolerance * abs(x_new) or hi - lo <= rel_tolerance * max(abs(lo), abs(hi)):
            return result(x_new, iterations, True, f"Converged in {iterations} iterations (x tol)")

        x = x_new

    logger.debug("Newton-bisection hit %d iterations for p=%r", max_iterations, p)
    return result(x, iterations, False, f"Max iterations ({max_iterations}) reached without convergence")
