"""
Input validation utilities for pylinsolve.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinsolve.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyInputError,
    InconsistentDimensionsError,
    RectangularMatrixError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and complex inputs, which have no meaning for a real-valued system.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numeric data"
        )

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one entry along its first dimension.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        EmptyInputError: If the first dimension has length zero
    """
    if array.shape[0] == 0:
        raise EmptyInputError(f"{name}: input cannot be empty")


def check_row_count(rows: Any, n: int, name: str, rhs_name: str = 'b') -> None:
    """
    Verify a row-major matrix has exactly n rows.

    Works on raw (possibly ragged) sequences, so it can run before the
    matrix is converted to an array.

    Args:
        rows: Sequence of rows
        n: Required number of rows
        name: Parameter name for error messages
        rhs_name: Name of the vector that defines n

    Raises:
        ValidationError: If rows is not a sized sequence
        InconsistentDimensionsError: If the row count differs from n
    """
    try:
        n_rows = len(rows)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        ) from e

    if n_rows != n:
        raise InconsistentDimensionsError(
            f"{name} has {n_rows} rows but {rhs_name} has length {n}: "
            f"matrix and vector sizes do not match",
            n_rows=n_rows,
            n_rhs=n,
        )


def check_square_rows(rows: Any, n: int, name: str) -> None:
    """
    Verify every row of a row-major matrix is a flat sequence of length n.

    Args:
        rows: Sequence of rows (already known to have n entries)
        n: Required row length
        name: Parameter name for error messages

    Raises:
        RectangularMatrixError: On the first row whose length is not n
    """
    for i, row in enumerate(rows):
        length = _row_length(row)
        if length != n:
            got = "is not a flat sequence" if length is None else f"has length {length}"
            raise RectangularMatrixError(
                f"{name}: matrix must be square, row {i} {got}, expected length {n}",
                row=i,
                row_length=length,
                expected_length=n,
            )


def _row_length(row: Any) -> int | None:
    """Length of a 1D row, or None if the row is a scalar or nested."""
    try:
        arr = np.asarray(row)
    except (ValueError, TypeError):
        return None
    if arr.ndim != 1:
        return None
    return arr.shape[0]
