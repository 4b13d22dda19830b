"""
Core infrastructure for pylinsolve.

This module provides shared abstractions, utilities, and compute
infrastructure used by the domain-specific solvers.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and SolveErrorKind classification
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pylinsolve.core.protocols import Backend
from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import (
    SolveErrorKind,
    PyLinsolveError,
    ValidationError,
    EmptyInputError,
    DimensionError,
    InconsistentDimensionsError,
    RectangularMatrixError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "SolveErrorKind",
    "PyLinsolveError",
    "ValidationError",
    "EmptyInputError",
    "DimensionError",
    "InconsistentDimensionsError",
    "RectangularMatrixError",
    "NumericalError",
    "SingularMatrixError",
]
