"""Unit tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from interfaces.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_pdf_command(runner):
    """pdf prints the density in scientific notation."""
    result = runner.invoke(cli, ["pdf", "0"])

    assert result.exit_code == 0
    assert float(result.output.strip()) == pytest.approx(0.19751617184719186, rel=1e-15)


def test_pdf_negative_argument(runner):
    """Negative arguments are passed after the option terminator."""
    result = runner.invoke(cli, ["pdf", "--", "-40"])

    assert result.exit_code == 0
    assert float(result.output.strip()) == 0.0


def test_cdf_complement(runner):
    """cdf --complement prints the upper tail probability."""
    result = runner.invoke(cli, ["cdf", "0", "--complement"])

    assert result.exit_code == 0
    assert float(result.output.strip()) == pytest.approx(1.0 / 3.0, rel=1e-15)


def test_quantile_command(runner):
    """quantile prints the solved value first."""
    result = runner.invoke(cli, ["quantile", "0.5"])

    assert result.exit_code == 0
    first_line = result.output.strip().splitlines()[0]
    assert float(first_line) == pytest.approx(-0.71671068545502205, abs=1e-13)


def test_quantile_domain_error(runner):
    """Probabilities outside (0, 1) exit with an error message."""
    result = runner.invoke(cli, ["quantile", "1.0"])

    assert result.exit_code != 0
    assert "open interval" in result.output


def test_cdf_non_finite_error(runner):
    """Infinite arguments are rejected."""
    result = runner.invoke(cli, ["cdf", "inf"])

    assert result.exit_code != 0
    assert "must be finite" in result.output


def test_summary_command(runner):
    """summary lists the median and mode."""
    result = runner.invoke(cli, ["summary"])

    assert result.exit_code == 0
    assert "Median" in result.output
    assert "Mode" in result.output


def test_sample_command(runner):
    """sample prints the requested number of variates."""
    result = runner.invoke(cli, ["sample", "-n", "5", "--seed", "1"])

    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 5


def test_verbose_flag(runner):
    """--verbose is accepted ahead of any command."""
    result = runner.invoke(cli, ["--verbose", "quantile", "0.25", "--method", "brent"])

    assert result.exit_code == 0
