"""
pylinsolve: dense linear system solving for Python.

Gaussian elimination with partial pivoting over NumPy arrays, with a
classified error taxonomy, per-phase timing and elimination diagnostics.

Submodules:
    gaussian: Square systems via Gaussian elimination
    core: Exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from pylinsolve import gaussian
from pylinsolve.gaussian import solve, try_solve
from pylinsolve.core.exceptions import SolveErrorKind

__all__ = [
    "__version__",
    "gaussian",
    "solve",
    "try_solve",
    "SolveErrorKind",
]
