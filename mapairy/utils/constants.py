"""
Numerical constants and tolerances for Map-Airy distribution evaluation.

This module defines the regime boundaries shared by the density and
distribution evaluators, the closed-form reference values of the
distribution, and the convergence criteria used by the quantile solver.
All thresholds are calibrated so that adjacent formulations agree to
working precision at each seam.
"""

import math

# Regime boundaries (argument x)
CENTRAL_UPPER_LIMIT = 64.0  # Beyond this, use the x^(-3/2) asymptotic series
LEFT_DIRECT_LIMIT = 2.0  # For -2 <= x < 0, evaluate without the exp factor
LEFT_UNDERFLOW_LIMIT = 32.0  # Below -32, exp(-2|x|^3/27) underflows to zero

# Regime boundaries (probability p)
QUANTILE_CENTRAL_LOWER = 0.125  # Below this, use log2-scaled tail segments

# Closed-form reference values
CCDF_AT_ZERO = 1.0 / 3.0  # P(X > 0); the distribution's defining point
CDF_AT_ZERO = 2.0 / 3.0  # P(X <= 0)
MODE = -1.16158727113597068525
MEDIAN = -0.71671068545502205332
ENTROPY = 2.00727681841065634600
STABILITY_INDEX = 1.5  # alpha of the stable law
SKEWNESS_PARAMETER = 1.0  # beta of the stable law
UPPER_TAIL_COEFFICIENT = 1.0 / math.sqrt(2.0 * math.pi)  # CCDF(x) ~ this * x^(-3/2)

# Quantile solver parameters
MACHINE_EPSILON = 2.0 ** -52
QUANTILE_REL_TOLERANCE = 2.0 ** -50  # Relative bracket width on x
QUANTILE_RESIDUAL_TOLERANCE = 2.0 ** -50  # Residual relative to the target probability
QUANTILE_ARGUMENT_ULPS = 4.0  # Also accept residuals a few-ulp change in x would produce
QUANTILE_MAX_ITERATIONS = 128  # Newton/bisection refinement steps
QUANTILE_MAX_EXPANSIONS = 128  # Bracket doubling steps
QUANTILE_INITIAL_STEP = 2.0 ** -20  # Initial bracket half-width relative to |x0|
BRENT_REL_TOLERANCE = 4.0 * MACHINE_EPSILON  # scipy's lower limit for brentq rtol
BRENT_ABS_TOLERANCE = 1e-300  # brentq requires a strictly positive xtol
BRENT_MAX_ITERATIONS = 200
