"""
Shared compute infrastructure for pylinsolve.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical thresholds and comparison tiers
    linalg: Linear algebra kernels (Gaussian elimination)
"""

from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import (
    SINGULAR_PIVOT_TOLERANCE,
    PIVOT_RATIO_WARNING,
    RESIDUAL_ATOL,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "SINGULAR_PIVOT_TOLERANCE",
    "PIVOT_RATIO_WARNING",
    "RESIDUAL_ATOL",
    "ToleranceTier",
    "select_tolerance",
]
