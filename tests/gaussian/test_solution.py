"""
Tests for GaussianSolution accessors, diagnostics and the CPU backend.
"""

import numpy as np
import pytest

from pylinsolve import solve
from pylinsolve.core.protocols import Backend
from pylinsolve.gaussian import GaussianDesign
from pylinsolve.gaussian.backends import CPUGaussianBackend


class TestGaussianSolution:
    """Accessors derived from the elimination."""

    def test_solution_alias(self):
        result = solve([[2, 1], [5, 7]], [5, 8])
        np.testing.assert_array_equal(result.solution, result.x)
        assert result.n == 2

    def test_tolist(self):
        result = solve([[5]], [20])
        assert result.tolist() == [4.0]

    def test_pivots_and_permutation(self):
        result = solve([[2, 1], [5, 7]], [5, 8])
        np.testing.assert_allclose(result.pivots, [5.0, -1.8])
        np.testing.assert_array_equal(result.permutation, [1, 0])
        assert result.row_swaps == 1

    def test_determinant_by_hand(self):
        result = solve([[2, 1], [5, 7]], [5, 8])
        assert result.determinant == pytest.approx(9.0)

    def test_determinant_matches_numpy(self, rng):
        A = rng.standard_normal((6, 6))
        result = solve(A, rng.standard_normal(6))
        assert result.determinant == pytest.approx(np.linalg.det(A), rel=1e-10)

    def test_residuals(self, well_conditioned_system):
        A, b, _ = well_conditioned_system
        result = solve(A, b)
        np.testing.assert_allclose(result.residuals, A @ result.x - b)
        assert result.max_abs_residual == pytest.approx(float(np.max(np.abs(result.residuals))))

    def test_residuals_ignore_later_changes_to_inputs(self):
        A = np.array([[2.0, 1.0], [5.0, 7.0]])
        b = np.array([5.0, 8.0])
        result = solve(A, b)
        A[0, 0] = 100.0
        assert result.max_abs_residual < 1e-10

    def test_residuals_cached(self, well_conditioned_system):
        A, b, _ = well_conditioned_system
        result = solve(A, b)
        assert result.residuals is result.residuals

    def test_info(self):
        result = solve([[2, 1], [5, 7]], [5, 8])
        assert result.info['method'] == 'gaussian_partial_pivoting'
        assert result.info['n'] == 2
        assert result.info['row_swaps'] == 1
        assert result.info['tolerance'] == 1e-12
        assert 0 < result.info['pivot_ratio'] <= 1

    def test_timing_sections(self):
        result = solve([[2, 1], [5, 7]], [5, 8])
        for key in ('total_seconds', 'augment', 'forward_elimination', 'back_substitution'):
            assert key in result.timing
            assert result.timing[key] >= 0.0

    def test_backend_and_provenance(self):
        result = solve([[1]], [1])
        assert result.backend_name == 'cpu_gaussian'
        assert 'pylinsolve_version' in result.provenance
        assert result.warnings == ()

    def test_summary(self):
        result = solve([[3, 2, -1], [2, -2, 4], [-1, 0.5, -1]], [1, -2, 0])
        text = result.summary()
        assert "Unknowns: 3" in text
        assert "x[0]:" in text
        assert "x[2]:" in text
        assert "Backend: cpu_gaussian" in text

    def test_summary_lists_warnings(self):
        with pytest.warns(RuntimeWarning):
            result = solve([[1, 0], [0, 1e-11]], [1, 1e-11])
        assert "Warning: Pivot magnitude ratio" in result.summary()

    def test_repr(self):
        result = solve([[2, 1], [5, 7]], [5, 8])
        r = repr(result)
        assert "n=2" in r
        assert "row_swaps=1" in r


class TestCPUGaussianBackend:
    """Backend satisfies the protocol and runs on a design directly."""

    def test_satisfies_backend_protocol(self):
        assert isinstance(CPUGaussianBackend(), Backend)

    def test_name_and_default_tolerance(self):
        backend = CPUGaussianBackend()
        assert backend.name == 'cpu_gaussian'
        assert backend.tol == 1e-12

    def test_solve_returns_result(self):
        design = GaussianDesign.build([[3, 2, -1], [2, -2, 4], [-1, 0.5, -1]], [1, -2, 0])
        result = CPUGaussianBackend().solve(design)
        np.testing.assert_allclose(result.params.x, [1, -2, -2], atol=1e-12)
        assert result.backend_name == 'cpu_gaussian'
        assert result.params.row_swaps == result.info['row_swaps']
