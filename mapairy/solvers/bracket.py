"""
Root-finding objective and bracket construction for quantile inversion.

Every quantile request is reduced to a tail probability t <= 1/2 on one
side of the distribution, so that t is carried at full relative precision:

    lower tail:  find x with P(X <= x) = t
    upper tail:  find x with P(X >  x) = t

The objective is scaled by 1/t and oriented to increase with x in both
cases, so the solvers see a single monotone function whose derivative is
density(x) / t.
"""

import logging
import math
from typing import NamedTuple, Optional

from mapairy.core.density import density
from mapairy.core.distribution import distribution
from mapairy.utils.constants import QUANTILE_INITIAL_STEP, QUANTILE_MAX_EXPANSIONS

logger = logging.getLogger(__name__)


class Bracket(NamedTuple):
    """Interval [lo, hi] with objective(lo) <= 0 <= objective(hi)."""
    lo: float
    hi: float


def normalize_probability(p: float, complement: bool) -> tuple[float, bool]:
    """
    Map a probability request onto the tail holding at most half the mass.

    Args:
        p: Probability in (0, 1)
        complement: Whether p is an upper tail probability

    Returns:
        (t, upper) where t <= 1/2 and upper selects the upper tail

    Notes:
        For p > 1/2 the subtraction 1 - p is exact (Sterbenz lemma).
    """
    if p > 0.5:
        return 1.0 - p, not complement
    return p, complement


def tail_objective(x: float, target: float, upper: bool) -> float:
    """
    Relative residual of the tail equation, increasing in x.

    Args:
        x: Candidate quantile
        target: Tail probability t being inverted
        upper: Whether t is an upper tail probability

    Returns:
        (CDF(x) - t) / t for the lower tail, (t - CCDF(x)) / t for the upper
    """
    if upper:
        return (target - distribution(x, complement=True)) / target
    return (distribution(x) - target) / target


def tail_derivative(x: float, target: float) -> float:
    """Derivative of tail_objective with respect to x."""
    return density(x) / target


def find_bracket(
    target: float,
    upper: bool,
    initial_guess: float,
    max_expansions: int = QUANTILE_MAX_EXPANSIONS,
    initial_step: float = QUANTILE_INITIAL_STEP,
) -> Optional[Bracket]:
    """
    Grow an interval around the initial guess until it brackets the root.

    Starting from a half-width of initial_step·max(|x0|, 1), the far end
    of the interval is moved away from x0 with doubling step size until the
    objective changes sign.

    Args:
        target: Tail probability t being inverted
        upper: Whether t is an upper tail probability
        initial_guess: Starting point x0
        max_expansions: Maximum number of doublings
        initial_step: Initial step relative to max(|x0|, 1)

    Returns:
        Bracket containing the root, or None if no sign change was found
        before the step overflowed or the expansion budget ran out
    """
    f0 = tail_objective(initial_guess, target, upper)
    if f0 == 0.0:
        return Bracket(initial_guess, initial_guess)

    # Root lies to the right when the objective is still negative
    direction = 1.0 if f0 < 0.0 else -1.0
    near = initial_guess
    step = initial_step * max(abs(initial_guess), 1.0)

    for expansion in range(max_expansions):
        far = initial_guess + direction * step
        if not math.isfinite(far):
            break

        f = tail_objective(far, target, upper)
        if (direction > 0.0 and f >= 0.0) or (direction < 0.0 and f <= 0.0):
            logger.debug(
                "Bracketed root after %d expansions: [%r, %r]",
                expansion + 1,
                min(near, far),
                max(near, far),
            )
            return Bracket(min(near, far), max(near, far))

        near = far
        step *= 2.0

    logger.debug(
        "No sign change found from x0=%r (target=%r, upper=%s)",
        initial_guess,
        target,
        upper,
    )
    return None
