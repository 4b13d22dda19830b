"""
Gaussian elimination solution types.

Contains the parameter payload, the user-facing solution wrapper, and the
success-or-failure value returned by try_solve().
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import SolveErrorKind

if TYPE_CHECKING:
    from pylinsolve.gaussian.design import GaussianDesign


@dataclass(frozen=True)
class GaussianParams:
    """
    Parameter payload for a solved linear system.

    This is the immutable data computed by backends.
    """
    x: NDArray[np.floating[Any]]
    pivots: NDArray[np.floating[Any]]
    permutation: NDArray[np.intp]
    row_swaps: int


@dataclass
class GaussianSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and provides the solution vector together with
    elimination diagnostics and residual checks.
    """
    _result: Result[GaussianParams]
    _design: 'GaussianDesign'

    # Cached computations
    _residuals: NDArray[np.floating[Any]] | None = None

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    @property
    def solution(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        return self._result.params.pivots

    @property
    def permutation(self) -> NDArray[np.intp]:
        return self._result.params.permutation

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def determinant(self) -> float:
        """
        Determinant of A, recovered from the elimination.

        det(A) = (-1)^swaps * prod(pivots)
        """
        sign = -1.0 if self.row_swaps % 2 else 1.0
        return sign * float(np.prod(self.pivots))

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """Residual vector A x - b against the original (unpivoted) system."""
        if self._residuals is None:
            self._residuals = self._design.A @ self.x - self._design.b
        return self._residuals

    @property
    def max_abs_residual(self) -> float:
        return float(np.max(np.abs(self.residuals)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def tolist(self) -> list[float]:
        """Solution vector as a plain list of floats."""
        return self.x.tolist()

    def summary(self) -> str:
        """Generate a plain-text summary of the solve."""
        lines = [
            "Linear System Solution (Gaussian elimination, partial pivoting)",
            "=" * 60,
            f"Unknowns: {self.n}",
            f"Row swaps: {self.row_swaps}",
            f"Determinant: {self.determinant:.6g}",
            f"Max |Ax - b|: {self.max_abs_residual:.3e}",
            "",
            "Solution:",
            "-" * 60,
            f"{'Index':<8} {'x':>18} {'Pivot':>18}",
            "-" * 60,
        ]

        for i, (xi, piv) in enumerate(zip(self.x, self.pivots)):
            lines.append(f"  x[{i}]: {xi:18.10g} {piv:18.10g}")

        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GaussianSolution(n={self.n}, row_swaps={self.row_swaps}, "
            f"max_abs_residual={self.max_abs_residual:.3e})"
        )


@dataclass(frozen=True)
class SolveOutcome:
    """
    Success-or-failure value returned by try_solve().

    Exactly one of solution and error is set. Callers can branch on ok or
    match on error:

        outcome = try_solve(A, b)
        match outcome.error:
            case None:
                use(outcome.x)
            case SolveErrorKind.SINGULAR_MATRIX:
                ...
    """
    solution: GaussianSolution | None = None
    error: SolveErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return None if self.solution is None else self.solution.x
