"""
Gaussian elimination with partial pivoting.

Operates on a single augmented buffer [A | b] of shape (n, n+1), C-contiguous
float64, so every row operation is a strided slice of one allocation. The
buffer is mutated in place and belongs to exactly one solve call.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.exceptions import SingularMatrixError
from pylinsolve.core.compute.tolerances import SINGULAR_PIVOT_TOLERANCE


@dataclass(frozen=True)
class EliminationResult:
    """
    Result of forward elimination.

    Attributes:
        augmented: Row-echelon form of [A | b] with unit diagonal (n x n+1)
        pivots: Pivot values before normalization, one per column (n,)
        permutation: Original row index of each row after pivoting (n,)
        n_swaps: Number of row exchanges performed
    """
    augmented: NDArray[np.floating[Any]]
    pivots: NDArray[np.floating[Any]]
    permutation: NDArray[np.intp]
    n_swaps: int


def build_augmented(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Copy A and b into a fresh augmented buffer.

    Args:
        A: Square coefficient matrix (n x n)
        b: Right-hand side (n,)

    Returns:
        New (n x n+1) float64 array; column n holds b
    """
    n = b.shape[0]
    aug = np.empty((n, n + 1), dtype=np.float64)
    aug[:, :n] = A
    aug[:, n] = b
    return aug


def forward_eliminate(
    aug: NDArray[np.floating[Any]],
    tol: float = SINGULAR_PIVOT_TOLERANCE,
) -> EliminationResult:
    """
    Reduce an augmented matrix to row-echelon form with unit diagonal.

    For each column i:
        1. Pick the row in i..n-1 with the largest |aug[r, i]|; ties go to
           the lowest row index.
        2. Fail if that magnitude is below tol.
        3. Swap it into row i.
        4. Divide row i (columns i..n) by the pivot.
        5. Subtract aug[r, i] times row i from every row r below.

    Args:
        aug: Augmented matrix (n x n+1), modified in place
        tol: Pivot magnitudes strictly below this are treated as zero

    Returns:
        EliminationResult referencing the reduced buffer

    Raises:
        SingularMatrixError: If no usable pivot exists in some column
    """
    n = aug.shape[0]
    pivots = np.empty(n, dtype=np.float64)
    permutation = np.arange(n)
    n_swaps = 0

    for i in range(n):
        # argmax returns the first maximum, matching a strict '>' scan
        p = i + int(np.argmax(np.abs(aug[i:, i])))
        magnitude = float(abs(aug[p, i]))
        if magnitude < tol:
            raise SingularMatrixError(
                f"Matrix is singular: largest pivot candidate in column {i} "
                f"has magnitude {magnitude:.3e}, below tolerance {tol:.1e}. "
                f"Rank is at least {i}, expected {n}.",
                matrix_name='A',
                pivot_index=i,
                pivot_magnitude=magnitude,
                tolerance=tol,
                rank=i,
                expected_rank=n,
            )

        if p != i:
            aug[[i, p]] = aug[[p, i]]
            permutation[[i, p]] = permutation[[p, i]]
            n_swaps += 1

        pivot = aug[i, i]
        pivots[i] = pivot
        aug[i, i:] /= pivot

        if i + 1 < n:
            aug[i + 1:, i:] -= np.outer(aug[i + 1:, i], aug[i, i:])

    return EliminationResult(
        augmented=aug,
        pivots=pivots,
        permutation=permutation,
        n_swaps=n_swaps,
    )


def back_substitute(aug: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Solve a unit upper-triangular augmented system from the bottom up.

    x[i] = aug[i, n] - sum_{j>i} aug[i, j] * x[j]

    Args:
        aug: Row-echelon augmented matrix with unit diagonal (n x n+1)

    Returns:
        Solution vector x (n,)
    """
    n = aug.shape[0]
    x = np.empty(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        x[i] = aug[i, n] - aug[i, i + 1:n] @ x[i + 1:]
    return x

