"""
Tests for pylinsolve exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinsolveError)
    - SolveErrorKind classification on every concrete exception
    - Diagnostic attributes on InconsistentDimensionsError,
      RectangularMatrixError, SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinsolve.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InconsistentDimensionsError,
    NumericalError,
    PyLinsolveError,
    RectangularMatrixError,
    SingularMatrixError,
    SolveErrorKind,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinsolveError."""

    def test_validation_error_is_pylinsolve_error(self):
        with pytest.raises(PyLinsolveError):
            raise ValidationError("bad input")

    def test_empty_input_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise EmptyInputError("empty")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_inconsistent_dimensions_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise InconsistentDimensionsError("3 rows vs 2")

    def test_rectangular_matrix_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise RectangularMatrixError("row 1 too short")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_empty_input_is_not_dimension_error(self):
        err = EmptyInputError("empty")
        assert not isinstance(err, DimensionError)


# ═══════════════════════════════════════════════════════════════════════
# SolveErrorKind classification
# ═══════════════════════════════════════════════════════════════════════


class TestErrorKinds:
    """Each exception class maps to exactly one SolveErrorKind."""

    @pytest.mark.parametrize("exc_type, kind", [
        (EmptyInputError, SolveErrorKind.EMPTY_INPUT),
        (InconsistentDimensionsError, SolveErrorKind.INCONSISTENT_DIMENSIONS),
        (RectangularMatrixError, SolveErrorKind.RECTANGULAR_MATRIX),
        (SingularMatrixError, SolveErrorKind.SINGULAR_MATRIX),
        (ValidationError, SolveErrorKind.INVALID_INPUT),
        (DimensionError, SolveErrorKind.INVALID_INPUT),
        (NumericalError, SolveErrorKind.NUMERICAL_FAILURE),
    ])
    def test_kind(self, exc_type, kind):
        assert exc_type("message").kind is kind

    def test_base_has_no_kind(self):
        assert PyLinsolveError("message").kind is None

    def test_kinds_are_distinct(self):
        kinds = [
            EmptyInputError.kind,
            InconsistentDimensionsError.kind,
            RectangularMatrixError.kind,
            SingularMatrixError.kind,
        ]
        assert len(set(kinds)) == 4


# ═══════════════════════════════════════════════════════════════════════
# Dimension errors
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionErrors:
    """Dimension errors carry the sizes that disagreed."""

    def test_inconsistent_attributes(self):
        err = InconsistentDimensionsError("mismatch", n_rows=3, n_rhs=2)
        assert str(err) == "mismatch"
        assert err.n_rows == 3
        assert err.n_rhs == 2

    def test_inconsistent_defaults_are_none(self):
        err = InconsistentDimensionsError("mismatch")
        assert err.n_rows is None
        assert err.n_rhs is None

    def test_rectangular_attributes(self):
        err = RectangularMatrixError("not square", row=1, row_length=2, expected_length=3)
        assert err.row == 1
        assert err.row_length == 2
        assert err.expected_length == 3

    def test_rectangular_defaults_are_none(self):
        err = RectangularMatrixError("not square")
        assert err.row is None
        assert err.row_length is None
        assert err.expected_length is None


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries pivot diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            pivot_index=1,
            pivot_magnitude=0.0,
            tolerance=1e-12,
            rank=1,
            expected_rank=2,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.pivot_index == 1
        assert err.pivot_magnitude == 0.0
        assert err.tolerance == 1e-12
        assert err.rank == 1
        assert err.expected_rank == 2

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None
        assert err.pivot_magnitude is None
        assert err.tolerance is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_catchable_with_attributes(self):
        """Attributes accessible in except block."""
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", pivot_index=2)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.pivot_index == 2
