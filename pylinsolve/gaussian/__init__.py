"""
Dense square linear systems.

Solves Ax = b by Gaussian elimination with partial pivoting and back
substitution.

Public API:
    solve(A, b, ...) -> GaussianSolution      (raises on failure)
    try_solve(A, b, ...) -> SolveOutcome      (failure returned as a value)

solve() handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinsolve.gaussian import solve
    >>> result = solve([[3, 2, -1], [2, -2, 4], [-1, 0.5, -1]], [1, -2, 0])
    >>> print(result.x)
    >>> print(result.summary())
"""

from pylinsolve.gaussian.design import GaussianDesign
from pylinsolve.gaussian.solution import GaussianSolution, GaussianParams, SolveOutcome
from pylinsolve.gaussian.solvers import solve, try_solve

__all__ = [
    "solve",
    "try_solve",
    "GaussianDesign",
    "GaussianSolution",
    "GaussianParams",
    "SolveOutcome",
]
