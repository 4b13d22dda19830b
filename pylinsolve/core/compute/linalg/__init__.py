"""
Linear algebra kernels for pylinsolve.

All functions follow these conventions:
    - Operate on float64 NumPy arrays that have already been validated
    - Each multi-output operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    elimination: Gaussian elimination with partial pivoting
"""

from pylinsolve.core.compute.linalg.elimination import (
    EliminationResult,
    build_augmented,
    forward_eliminate,
    back_substitute,
)

__all__ = [
    "EliminationResult",
    "build_augmented",
    "forward_eliminate",
    "back_substitute",
]
