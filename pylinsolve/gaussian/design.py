"""
Gaussian Design.

Design wraps the coefficient matrix A and right-hand side b of a square
linear system after validation. Everything downstream (backends, kernels)
trusts a Design and performs no further shape checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_nonempty,
    check_row_count,
    check_square_rows,
)


@dataclass(frozen=True)
class GaussianDesign:
    """
    Square linear system specification.

    Holds A (n x n) and b (n,) as float64 arrays. Immutable after construction.

    Construction:
        GaussianDesign.build(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def build(cls, A: ArrayLike, b: ArrayLike) -> GaussianDesign:
        """
        Validate inputs and build a Design.

        Checks run in a fixed order and stop at the first failure:
            1. b is empty                       -> EmptyInputError
            2. len(A) != len(b)                 -> InconsistentDimensionsError
            3. some row of A has length != n    -> RectangularMatrixError
            4. non-numeric or non-finite values -> ValidationError

        A is inspected row by row before conversion so ragged input is
        reported as a rectangular matrix rather than a conversion failure.

        Args:
            A: Coefficient matrix, n rows of n numbers
            b: Right-hand side, n numbers (a column of shape (n, 1) is flattened)

        Returns:
            GaussianDesign ready for a backend
        """
        b_arr = check_array(b, 'b')
        if b_arr.ndim == 2 and b_arr.shape[1] == 1:
            b_arr = b_arr.ravel()
        check_1d(b_arr, 'b')
        check_nonempty(b_arr, 'b')
        n = b_arr.shape[0]

        check_row_count(A, n, 'A')
        check_square_rows(A, n, 'A')

        A_arr = check_array(A, 'A')
        check_2d(A_arr, 'A')
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        return cls(
            _A=np.array(A_arr, dtype=np.float64),
            _b=np.array(b_arr, dtype=np.float64),
            _n=n,
        )

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        return self._b

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    def __repr__(self) -> str:
        return f"GaussianDesign(n={self._n})"
