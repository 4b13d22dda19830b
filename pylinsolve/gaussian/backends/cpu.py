"""
CPU backend for dense linear systems.

Runs Gaussian elimination with partial pivoting on a private augmented
buffer, then back substitution, using NumPy for the row operations.
"""

from typing import Any
import numpy as np

from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import NumericalError
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import (
    SINGULAR_PIVOT_TOLERANCE,
    PIVOT_RATIO_WARNING,
)
from pylinsolve.core.compute.linalg.elimination import (
    build_augmented,
    forward_eliminate,
    back_substitute,
)
from pylinsolve.gaussian.design import GaussianDesign
from pylinsolve.gaussian.solution import GaussianParams


class CPUGaussianBackend:
    """
    CPU backend using Gaussian elimination with partial pivoting.

    Implements the Backend protocol for GaussianDesign -> GaussianParams.
    Stateless apart from the tolerance fixed at construction.
    """

    def __init__(self, tol: float = SINGULAR_PIVOT_TOLERANCE):
        self._tol = tol

    @property
    def name(self) -> str:
        return 'cpu_gaussian'

    @property
    def tol(self) -> float:
        return self._tol

    def solve(self, design: GaussianDesign) -> Result[GaussianParams]:
        """
        Solve Ax = b.

        Algorithm:
            1. Copy [A | b] into a fresh (n x n+1) buffer
            2. Forward elimination with partial pivoting
            3. Back substitution

        Args:
            design: Validated linear system

        Returns:
            Result containing GaussianParams

        Raises:
            SingularMatrixError: If A is singular to within the tolerance
            NumericalError: If elimination overflowed to a non-finite solution
        """
        timer = Timer()
        timer.start()

        with timer.section('augment'):
            aug = build_augmented(design.A, design.b)

        # Overflow surfaces as a non-finite x and is reported below
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            with timer.section('forward_elimination'):
                elim = forward_eliminate(aug, self._tol)

            with timer.section('back_substitution'):
                x = back_substitute(elim.augmented)

        timer.stop()

        if not np.all(np.isfinite(x)):
            raise NumericalError(
                f"Elimination produced a non-finite solution "
                f"({int(np.sum(~np.isfinite(x)))} of {design.n} entries); "
                f"the system is too badly scaled for double precision."
            )

        warnings: list[str] = []
        magnitudes = np.abs(elim.pivots)
        pivot_ratio = float(magnitudes.min() / magnitudes.max())
        if pivot_ratio < PIVOT_RATIO_WARNING:
            warnings.append(
                f"Pivot magnitude ratio {pivot_ratio:.3e} is below "
                f"{PIVOT_RATIO_WARNING:.0e}; the system is badly scaled or "
                f"nearly singular and the solution may be inaccurate."
            )

        params = GaussianParams(
            x=x,
            pivots=elim.pivots,
            permutation=elim.permutation,
            row_swaps=elim.n_swaps,
        )

        info: dict[str, Any] = {
            'method': 'gaussian_partial_pivoting',
            'n': design.n,
            'tolerance': self._tol,
            'row_swaps': elim.n_swaps,
            'pivot_ratio': pivot_ratio,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
