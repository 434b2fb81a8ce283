"""
Unit tests for the Map-Airy density.

This module validates:
1. Known values at the defining point and the mode
2. Non-negativity and tail saturation
3. Continuity across approximation segments
4. Asymptotic behaviour up to x = 2^64
5. Consistency with the distribution function (normalization, derivative)
"""

import math

import numpy as np
import pytest
from scipy.integrate import quad

from mapairy.core.density import density
from mapairy.core.distribution import distribution
from mapairy.utils.constants import MODE
from mapairy.utils.exceptions import NonFiniteInputError

PDF_AT_ZERO = 0.197516171847191855610
RIGHT_TAIL_LEADING = 1.5 / math.sqrt(2.0 * math.pi)  # PDF(x) ~ this * x^(-5/2)


# ===========================
# Known Values Tests
# ===========================


def test_density_at_zero():
    """PDF(0) matches the closed-form value 0.19751617184719..."""
    assert density(0.0) == pytest.approx(PDF_AT_ZERO, rel=1e-15)


def test_density_peaks_at_mode():
    """Density should be larger at the mode than on either side."""
    peak = density(MODE)
    assert peak > density(MODE - 1e-3)
    assert peak > density(MODE + 1e-3)
    assert 0.25 < peak < 0.3


def test_density_skewed_left_body():
    """Bulk of the mass sits left of the origin (mode and median are negative)."""
    assert density(-1.0) > density(1.0)
    assert density(-1.0) > density(0.0)


# ===========================
# Non-Negativity and Saturation Tests
# ===========================


def test_density_non_negative(central_grid):
    """Density must be non-negative everywhere on the central grid."""
    values = np.array([density(x) for x in central_grid])
    assert np.all(values >= 0.0)
    assert np.all(np.isfinite(values))


@pytest.mark.parametrize("x", [-32.5, -40.0, -1e3, -1e300])
def test_density_left_tail_exact_zero(x):
    """Beyond -32 the density underflows to exactly zero."""
    assert density(x) == 0.0


@pytest.mark.parametrize("x", [1e200, 1e300, 1.7e308])
def test_density_right_tail_saturates_to_zero(x):
    """Right tail goes to zero without producing NaN or Inf."""
    value = density(x)
    assert value == 0.0
    assert not math.isnan(value)


def test_density_right_tail_positive(right_tail_grid):
    """Density stays strictly positive and finite up to 2^64."""
    values = np.array([density(x) for x in right_tail_grid])
    assert np.all(values > 0.0)
    assert np.all(np.isfinite(values))


def test_density_right_tail_decreasing(right_tail_grid):
    """Density is strictly decreasing in the right tail."""
    values = np.array([density(x) for x in right_tail_grid])
    assert np.all(np.diff(values) < 0.0)


@pytest.mark.parametrize("exponent", [30, 40, 50, 64])
def test_density_right_tail_power_law(exponent):
    """PDF(x)·x^(5/2) approaches 3/(2·sqrt(2π)) for large x."""
    x = 2.0 ** exponent
    assert density(x) * x ** 2.5 == pytest.approx(RIGHT_TAIL_LEADING, rel=1e-8)


def test_density_left_tail_decays_faster_than_gaussian():
    """Left tail decays like exp(-2|x|^3/27), much faster than the right tail."""
    assert density(-10.0) < 1e-30
    assert density(10.0) > 1e-3
    assert density(-20.0) < density(-10.0)


# ===========================
# Continuity Tests
# ===========================


def test_density_continuous_at_segment_boundaries(segment_boundaries):
    """Adjacent approximants agree at every boundary."""
    for b in segment_boundaries:
        below = density(math.nextafter(b, -math.inf))
        above = density(math.nextafter(b, math.inf))
        assert below == pytest.approx(density(b), rel=1e-12), f"Jump below x={b}"
        assert above == pytest.approx(density(b), rel=1e-12), f"Jump above x={b}"


def test_density_continuous_at_origin():
    """Left and right formulations meet at x = 0."""
    assert density(-1e-300) == pytest.approx(density(0.0), rel=1e-14)


# ===========================
# Consistency Tests
# ===========================


def test_density_integrates_to_one():
    """Density integrates to 1 (central quadrature plus the exact tail)."""
    body, _ = quad(
        density,
        -24.0,
        64.0,
        points=[-16.0, -8.0, -4.0, -2.0, -1.0, 0.0, 1.0, 2.0, 4.0, 8.0, 16.0, 32.0],
        limit=200,
        epsabs=1e-14,
        epsrel=1e-13,
    )
    tail = distribution(64.0, complement=True)
    assert body + tail == pytest.approx(1.0, abs=1e-10)


@pytest.mark.parametrize("x", [-6.0, -3.0, -1.5, -0.5, 0.5, 1.5, 3.0, 10.0, 50.0, 100.0])
def test_density_is_derivative_of_distribution(x):
    """Central difference of the CDF matches the density."""
    h = 1e-5 * max(1.0, abs(x))
    slope = (distribution(x + h) - distribution(x - h)) / (2.0 * h)
    if x > 0:
        # Differentiate the complement to avoid cancellation near 1
        slope = (distribution(x - h, True) - distribution(x + h, True)) / (2.0 * h)
    assert slope == pytest.approx(density(x), rel=1e-6)


# ===========================
# Input Validation Tests
# ===========================


@pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
def test_density_rejects_non_finite(x):
    """NaN and infinite arguments raise instead of returning NaN."""
    with pytest.raises(NonFiniteInputError, match="must be finite"):
        density(x)


def test_non_finite_error_is_value_error():
    """Callers catching ValueError also catch non-finite input."""
    with pytest.raises(ValueError):
        density(math.nan)
