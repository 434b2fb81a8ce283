"""
Command-line interface for the Map-Airy distribution toolkit.

This CLI provides access to:
- Probability density
- Cumulative distribution and its complement
- Quantile solving
- Summary statistics and random sampling
"""

import logging

import click
import numpy as np

from mapairy.core.density import density
from mapairy.core.distribution import distribution
from mapairy.core.properties import sample, summary
from mapairy.solvers.quantile import solve_quantile
from mapairy.utils.exceptions import MapAiryError


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Log solver diagnostics to stderr")
def cli(verbose):
    """Map-Airy Distribution Toolkit - PDF, CDF and quantile evaluation."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("x", type=float)
def pdf(x):
    """Evaluate the probability density at X."""
    try:
        click.echo(f"{density(x):.16e}")
    except MapAiryError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("x", type=float)
@click.option("--complement", "-c", is_flag=True, help="Return P(X > x) instead of P(X <= x)")
def cdf(x, complement):
    """Evaluate the cumulative distribution at X."""
    try:
        click.echo(f"{distribution(x, complement):.16e}")
    except MapAiryError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("p", type=float)
@click.option("--complement", "-c", is_flag=True, help="Treat P as an upper tail probability")
@click.option("--method", "-m", type=click.Choice(["auto", "newton", "brent"]), default="auto")
def quantile(p, complement, method):
    """Solve for x with CDF(x) = P."""
    try:
        result = solve_quantile(p, complement, method=method)
    except MapAiryError as e:
        raise click.ClickException(str(e)) from e

    if not result.success:
        raise click.ClickException(f"Solver failed: {result.message}")

    click.echo(f"{result.value:.16e}")
    click.echo(f"Method: {result.method}", err=True)
    click.echo(f"Iterations: {result.iterations}", err=True)


@cli.command(name="summary")
def summary_command():
    """Print location, shape and entropy of the distribution."""
    stats = summary()

    click.echo("\nMap-Airy Distribution (alpha=3/2, beta=1):")
    click.echo(f"  Mean:      {stats.mean:>22.16f}")
    click.echo(f"  Median:    {stats.median:>22.16f}")
    click.echo(f"  Mode:      {stats.mode:>22.16f}")
    click.echo(f"  Variance:  {stats.variance:>22}")
    click.echo(f"  Entropy:   {stats.entropy:>22.16f}")


@cli.command(name="sample")
@click.option("--count", "-n", type=click.IntRange(min=1), default=10, help="Number of variates")
@click.option("--seed", "-s", type=int, default=None, help="Random seed")
def sample_command(count, seed):
    """Draw random variates, one per line."""
    draws = sample(count, rng=np.random.default_rng(seed))
    for value in draws:
        click.echo(f"{value:.16e}")


if __name__ == "__main__":
    cli()
