"""
Data types and structures for Map-Airy distribution evaluation.

This module defines dataclasses and types used throughout the toolkit
for representing approximation tables, quantile solver results and
summary statistics.
"""

from dataclasses import dataclass
from typing import Literal

SolverMethod = Literal["newton-bisection", "brent"]


@dataclass(frozen=True)
class PadeCoefficients:
    """
    Immutable container for one Padé approximant.

    Attributes:
        numer: Numerator coefficients in ascending powers
        denom: Denominator coefficients in ascending powers
    """
    numer: tuple[float, ...]
    denom: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate that both polynomials are non-empty."""
        if not self.numer:
            raise ValueError("Numerator must have at least one coefficient")
        if not self.denom:
            raise ValueError("Denominator must have at least one coefficient")


@dataclass
class QuantileResult:
    """
    Result from the quantile solver.

    Attributes:
        value: Solved quantile x with CDF(x) = p (or CCDF(x) = q)
        probability: Probability that was inverted
        complement: Whether probability is the upper tail CCDF
        iterations: Number of refinement iterations performed
        method: Method used ('newton-bisection' or 'brent')
        success: Whether the solver converged successfully
        message: Additional information about convergence
    """
    value: float
    probability: float
    complement: bool
    iterations: int
    method: SolverMethod
    success: bool
    message: str = ""


@dataclass(frozen=True)
class DistributionSummary:
    """
    Location, shape and information measures of the distribution.

    Attributes:
        mean: Expected value
        median: 50th percentile
        mode: Location of the density maximum
        variance: Variance (infinite moments are reported as NaN)
        skewness: Skewness (NaN, undefined)
        kurtosis: Kurtosis (NaN, undefined)
        entropy: Differential entropy in nats
        alpha: Stability index of the underlying stable law
        beta: Skewness parameter of the underlying stable law
    """
    mean: float
    median: float
    mode: float
    variance: float
    skewness: float
    kurtosis: float
    entropy: float
    alpha: float
    beta: float
