"""
Numerical thresholds and tolerance tiers.

Single source of truth for the constants the solver uses to decide
singularity and to flag badly scaled systems, plus the comparison tiers
used by the test suite when checking solutions.
"""

from dataclasses import dataclass


# A pivot whose magnitude is below this is treated as zero. Absolute, not
# scaled by the matrix norm.
SINGULAR_PIVOT_TOLERANCE = 1e-12

# min|pivot| / max|pivot| below this attaches an accuracy warning to the result.
PIVOT_RATIO_WARNING = 1e-10

# Largest acceptable |A x - b| entry for a solution of a well-posed system.
RESIDUAL_ATOL = 1e-6


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned systems: agreement with LAPACK to near machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# Ill-conditioned systems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a comparison."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
