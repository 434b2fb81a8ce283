"""
Exception hierarchy for distribution evaluation failures.

Invalid arguments derive from ValueError so existing callers that catch
ValueError keep working. Solver exhaustion is an ArithmeticError since
the inputs were valid but the iteration did not settle.
"""

from typing import Optional

from mapairy.utils.types import QuantileResult


class MapAiryError(Exception):
    """Base class for all errors raised by the evaluation engine."""
    pass


class NonFiniteInputError(MapAiryError, ValueError):
    """Raised when an argument or probability is NaN or infinite."""
    pass


class DomainError(MapAiryError, ValueError):
    """Raised when a probability lies outside the open interval (0, 1)."""
    pass


class ConvergenceError(MapAiryError, ArithmeticError):
    """
    Raised when the quantile search exhausts its iteration budget.

    Attributes:
        result: The last solver result, including the best estimate found
    """

    def __init__(self, message: str, result: Optional[QuantileResult] = None) -> None:
        super().__init__(message)
        self.result = result
