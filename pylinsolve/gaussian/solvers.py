"""
Solver dispatch for dense linear systems.

This module provides the solve() and try_solve() functions (public API) and
backend selection.
"""

from typing import Literal
import math
import numbers
import warnings

from numpy.typing import ArrayLike

from pylinsolve.core.exceptions import ValidationError, NumericalError
from pylinsolve.core.compute.tolerances import SINGULAR_PIVOT_TOLERANCE
from pylinsolve.gaussian.design import GaussianDesign
from pylinsolve.gaussian.solution import GaussianSolution, SolveOutcome
from pylinsolve.gaussian.backends.cpu import CPUGaussianBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu']


def solve(
    A: ArrayLike | GaussianDesign,
    b: ArrayLike | None = None,
    *,
    tol: float = SINGULAR_PIVOT_TOLERANCE,
    backend: BackendChoice = 'auto',
) -> GaussianSolution:
    """
    Solve the square linear system Ax = b.

    Uses Gaussian elimination with partial pivoting followed by back
    substitution. Inputs are validated up front and never mutated.

    Args:
        A: Coefficient matrix (n x n), any array-like, or a prebuilt
            GaussianDesign (then b must be omitted)
        b: Right-hand side (n,)
        tol: Pivot magnitudes below this are treated as zero and the
            matrix is reported singular. Absolute, not scaled by the norm of A.
        backend: Computational backend to use:
            - 'auto': Select best available (currently always CPU)
            - 'cpu': NumPy elimination on the CPU

    Returns:
        GaussianSolution with the solution vector and elimination diagnostics

    Raises:
        EmptyInputError: If b has zero length
        InconsistentDimensionsError: If A's row count differs from len(b)
        RectangularMatrixError: If a row of A does not have len(b) entries
        ValidationError: If inputs are non-numeric or non-finite, or tol is invalid
        SingularMatrixError: If A is singular to within tol
        NumericalError: If elimination overflows

    Example:
        >>> from pylinsolve import solve
        >>> result = solve([[2, 1], [5, 7]], [5, 8])
        >>> result.x  # approximately [3, -1]
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    _check_tol(tol)
    if isinstance(A, GaussianDesign):
        if b is not None:
            raise ValidationError("b must be omitted when A is a GaussianDesign")
        design = A
    else:
        if b is None:
            raise ValidationError("b required when A is not a GaussianDesign")
        design = GaussianDesign.build(A, b)

    # === Select Backend ===
    backend_impl = _get_backend(backend, tol)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    # === Wrap and Return ===
    return GaussianSolution(_result=result, _design=design)


def try_solve(
    A: ArrayLike | GaussianDesign,
    b: ArrayLike | None = None,
    *,
    tol: float = SINGULAR_PIVOT_TOLERANCE,
    backend: BackendChoice = 'auto',
) -> SolveOutcome:
    """
    Solve Ax = b, returning failures as values instead of raising.

    Takes the same arguments as solve(). Every classified failure
    (empty input, dimension mismatch, non-square matrix, invalid data,
    singular matrix, overflow) comes back as SolveOutcome.error with no
    solution attached.

    Returns:
        SolveOutcome with either solution or error set
    """
    try:
        solution = solve(A, b, tol=tol, backend=backend)
    except (ValidationError, NumericalError) as e:
        return SolveOutcome(error=e.kind, message=str(e))
    return SolveOutcome(solution=solution)


def _check_tol(tol: float) -> None:
    """Reject tolerances that would make the singularity test meaningless."""
    if isinstance(tol, bool) or not isinstance(tol, numbers.Real):
        raise ValidationError(f"tol: expected a real number, got {type(tol).__name__}")
    if not math.isfinite(tol) or tol < 0:
        raise ValidationError(f"tol: must be finite and non-negative, got {tol!r}")


def _get_backend(choice: BackendChoice, tol: float) -> CPUGaussianBackend:
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: User's backend preference
        tol: Singular-pivot tolerance for the backend

    Returns:
        Backend instance ready to solve

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUGaussianBackend(tol=tol)

    raise ValidationError(f"Unknown backend: {choice!r}")
