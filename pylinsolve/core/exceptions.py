"""
Exception hierarchy for pylinsolve.

All exceptions inherit from PyLinsolveError to allow catching any
library-specific error. Every concrete failure is also classified by a
SolveErrorKind, so callers that prefer values over exceptions (see
try_solve) can pattern-match on a closed set of outcomes.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from enum import Enum
from typing import ClassVar


class SolveErrorKind(Enum):
    """Classification of every way a solve can fail."""
    EMPTY_INPUT = 'empty_input'
    INCONSISTENT_DIMENSIONS = 'inconsistent_dimensions'
    RECTANGULAR_MATRIX = 'rectangular_matrix'
    SINGULAR_MATRIX = 'singular_matrix'
    INVALID_INPUT = 'invalid_input'
    NUMERICAL_FAILURE = 'numerical_failure'


class PyLinsolveError(Exception):
    """Base exception for all pylinsolve errors."""
    kind: ClassVar[SolveErrorKind | None] = None


class ValidationError(PyLinsolveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = SolveErrorKind.INVALID_INPUT


class EmptyInputError(ValidationError):
    """Right-hand side has zero length, so there is no system to solve."""
    kind = SolveErrorKind.EMPTY_INPUT


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InconsistentDimensionsError(DimensionError):
    """
    Row count of the coefficient matrix differs from the length of b.

    Attributes:
        n_rows: Number of rows in A
        n_rhs: Length of b
    """
    kind = SolveErrorKind.INCONSISTENT_DIMENSIONS

    def __init__(self, message: str, n_rows: int | None = None, n_rhs: int | None = None):
        super().__init__(message)
        self.n_rows = n_rows
        self.n_rhs = n_rhs


class RectangularMatrixError(DimensionError):
    """
    A row of the coefficient matrix does not have n entries.

    Attributes:
        row: Index of the first offending row
        row_length: Length of that row, or None if it is not a flat sequence
        expected_length: Required row length (n)
    """
    kind = SolveErrorKind.RECTANGULAR_MATRIX

    def __init__(
        self,
        message: str,
        row: int | None = None,
        row_length: int | None = None,
        expected_length: int | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.row_length = row_length
        self.expected_length = expected_length


class NumericalError(PyLinsolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    Raised directly when elimination overflows to a non-finite solution.
    """
    kind = SolveErrorKind.NUMERICAL_FAILURE


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when no pivot of sufficient magnitude remains in some column
    during elimination. Systems with infinitely many solutions and systems
    with none are not distinguished.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Elimination step (column) at which no usable pivot was found
        pivot_magnitude: Largest magnitude available in that column
        tolerance: Threshold the pivot magnitude fell below
        rank: Numerical rank lower bound (pivots accepted before failing)
        expected_rank: Expected rank (n)
    """
    kind = SolveErrorKind.SINGULAR_MATRIX

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_magnitude: float | None = None,
        tolerance: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_magnitude = pivot_magnitude
        self.tolerance = tolerance
        self.rank = rank
        self.expected_rank = expected_rank
