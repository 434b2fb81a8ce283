"""
Unit tests for the Map-Airy distribution function and its complement.

This module validates:
1. Known values at the defining point
2. Complement identity CDF(x) + CCDF(x) = 1
3. Monotonicity, including across approximation segments
4. Tail saturation and the asymptotic upper tail up to x = 2^64
5. Agreement with numerical integration of the density
"""

import math

import numpy as np
import pytest
from scipy.integrate import quad

from mapairy.core.density import density
from mapairy.core.distribution import distribution, lower_tail, upper_tail
from mapairy.utils.constants import CCDF_AT_ZERO, CDF_AT_ZERO
from mapairy.utils.exceptions import NonFiniteInputError

EPSILON = 2.0 ** -52


# ===========================
# Known Values Tests
# ===========================


def test_cdf_at_zero():
    """Two thirds of the mass lies at or below the origin."""
    assert distribution(0.0) == pytest.approx(CDF_AT_ZERO, abs=EPSILON)
    assert distribution(0.0) == pytest.approx(2.0 / 3.0, abs=EPSILON)


def test_ccdf_at_zero():
    """One third of the mass lies above the origin."""
    assert distribution(0.0, complement=True) == pytest.approx(CCDF_AT_ZERO, rel=EPSILON)


def test_cdf_at_origin_from_left():
    """Lower tail formulation approaches 2/3 from the left."""
    assert distribution(-1e-300) == pytest.approx(2.0 / 3.0, rel=1e-15)


# ===========================
# Complement Identity Tests
# ===========================


@pytest.mark.parametrize(
    "x",
    [-40.0, -30.0, -10.0, -2.5, -2.0, -1.0, -0.3, 0.0, 0.5, 1.0, 3.0, 10.0, 63.9, 64.0, 64.1, 1e3, 2.0 ** 64],
)
def test_complement_identity(x):
    """CDF(x) + CCDF(x) equals 1 to within a few ulps."""
    total = distribution(x) + distribution(x, complement=True)
    assert abs(total - 1.0) <= 4.0 * EPSILON


def test_complement_identity_grid(central_grid):
    """Complement identity across the whole central grid."""
    totals = np.array([distribution(x) + distribution(x, True) for x in central_grid])
    assert np.max(np.abs(totals - 1.0)) <= 4.0 * EPSILON


def test_upper_tail_not_computed_by_subtraction():
    """CCDF keeps full relative precision where 1 - CDF would round to 0."""
    x = 2.0 ** 60
    assert distribution(x) == 1.0
    assert distribution(x, complement=True) > 0.0


# ===========================
# Monotonicity Tests
# ===========================


def test_cdf_monotone_central(central_grid):
    """CDF is non-decreasing across the central grid."""
    values = np.array([distribution(x) for x in central_grid])
    assert np.all(np.diff(values) >= 0.0)


def test_ccdf_monotone_right_tail(right_tail_grid):
    """CCDF is strictly decreasing from 64 to 2^65."""
    values = np.array([distribution(x, complement=True) for x in right_tail_grid])
    assert np.all(values > 0.0)
    assert np.all(np.diff(values) < 0.0)


def test_cdf_monotone_across_segments(segment_boundaries):
    """No backwards step where the evaluator switches approximants."""
    for b in segment_boundaries:
        below = distribution(math.nextafter(b, -math.inf))
        at = distribution(b)
        above = distribution(math.nextafter(b, math.inf))
        # Allow one ulp of rounding noise at the seam
        assert below <= at + EPSILON, f"CDF decreases at x={b}"
        assert at <= above + EPSILON, f"CDF decreases after x={b}"


def test_tails_continuous_at_segment_boundaries(segment_boundaries):
    """Tail probabilities from adjacent approximants agree at each seam."""
    for b in segment_boundaries:
        if b > 0:
            left, right = upper_tail(math.nextafter(b, 0.0)), upper_tail(math.nextafter(b, math.inf))
        else:
            left, right = lower_tail(math.nextafter(-b, 0.0)), lower_tail(math.nextafter(-b, math.inf))
        assert left == pytest.approx(right, rel=1e-12), f"Tail jumps at x={b}"


# ===========================
# Tail Tests
# ===========================


@pytest.mark.parametrize("x", [-32.5, -50.0, -1e10, -1e300])
def test_cdf_left_saturation(x):
    """Far left of the support CDF is exactly 0 and CCDF exactly 1."""
    assert distribution(x) == 0.0
    assert distribution(x, complement=True) == 1.0


def test_cdf_left_tail_small_but_positive():
    """Left tail is representable (not flushed to 0) before -25."""
    value = distribution(-10.0)
    assert 0.0 < value < 1e-30


def test_ccdf_at_two_to_the_64():
    """CCDF(2^64) is small, positive and finite."""
    value = distribution(2.0 ** 64, complement=True)
    assert 0.0 < value < 1e-28
    assert math.isfinite(value)


@pytest.mark.parametrize("exponent", [20, 32, 48, 64])
def test_ccdf_power_law(exponent):
    """CCDF(x)·x^(3/2)·sqrt(2π) tends to 1."""
    x = 2.0 ** exponent
    scaled = distribution(x, complement=True) * x ** 1.5 * math.sqrt(2.0 * math.pi)
    assert scaled == pytest.approx(1.0, rel=1e-6)


@pytest.mark.parametrize("x", [1e200, 1e206, 1e210, 1e215])
def test_ccdf_positive_while_representable(x):
    """CCDF stays positive wherever x^(-3/2)/sqrt(2π) is above the smallest subnormal."""
    value = distribution(x, complement=True)
    assert value > 0.0
    expected = x ** -1.5 / math.sqrt(2.0 * math.pi)
    assert value == pytest.approx(expected, rel=1e-6, abs=2.0 ** -1073)


def test_ccdf_decreasing_into_subnormal_range():
    """No drop to zero while the tail is still representable."""
    xs = [10.0 ** k for k in range(200, 216)]
    values = [distribution(x, complement=True) for x in xs]
    assert all(v > 0.0 for v in values)
    assert all(a >= b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("x", [1e300, 1.7e308])
def test_ccdf_extreme_argument_no_nan(x):
    """Arguments far past the last subnormal give 0, never NaN."""
    value = distribution(x, complement=True)
    assert value == 0.0
    assert distribution(x) == 1.0


def test_values_within_unit_interval(central_grid, right_tail_grid):
    """CDF and CCDF never leave [0, 1]."""
    for x in np.concatenate([central_grid, right_tail_grid]):
        for complement in (False, True):
            value = distribution(x, complement)
            assert 0.0 <= value <= 1.0


# ===========================
# Integration Consistency Tests
# ===========================


@pytest.mark.parametrize("x", [-5.0, -2.0, -1.0, -0.5, 0.0, 1.5, 5.0, 20.0])
def test_cdf_matches_integrated_density(x):
    """CDF(x) equals the integral of the density from the far left tail."""
    breakpoints = [b for b in (-16.0, -8.0, -4.0, -2.0, -1.0, 0.0, 1.0, 2.0, 4.0, 8.0, 16.0) if -24.0 < b < x]
    integral, _ = quad(
        density,
        -24.0,
        x,
        points=breakpoints or None,
        limit=200,
        epsabs=1e-14,
        epsrel=1e-13,
    )
    assert distribution(x) == pytest.approx(integral, rel=1e-10, abs=1e-14)


# ===========================
# Input Validation Tests
# ===========================


@pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
@pytest.mark.parametrize("complement", [False, True])
def test_distribution_rejects_non_finite(x, complement):
    """NaN and infinite arguments raise NonFiniteInputError."""
    with pytest.raises(NonFiniteInputError):
        distribution(x, complement)
