"""
Precondition checks shared by every transform entry point.

Validation never converts or computes anything; it only inspects the input and
raises one of the engine errors:

    - TypeMismatchError: an element is not a number
    - ShapeMismatchError: a matrix is ragged or not two-dimensional
    - InvalidLengthError: a length fails the power-of-two (or even) rule

The order of the checks is fixed (structure, then element types, then lengths)
so that a given bad input always reports the same error.
"""

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np

from .errors import InvalidLengthError, ShapeMismatchError, TypeMismatchError


def is_power_of_two(n: int) -> bool:
    """Return True for 1, 2, 4, 8, ... (2**0 counts)."""
    return n >= 1 and (n & (n - 1)) == 0


def is_sample(value: Any) -> bool:
    """
    Check whether a single value can be used as a complex sample.

    Numbers that do not fit a complex128 (e.g. ``10**400``) are not samples.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Number):
        return False
    try:
        complex(value)
    except (OverflowError, TypeError, ValueError):
        return False
    return True


def is_container(values: Any) -> bool:
    """Lists, tuples and arrays are containers; strings and bytes are not."""
    if isinstance(values, np.ndarray):
        return values.ndim >= 1
    return isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray))


def _check_array_dtype(values: np.ndarray) -> None:
    if values.dtype == object:
        return
    if values.dtype == np.bool_ or not np.issubdtype(values.dtype, np.number):
        raise TypeMismatchError(f"Expected numeric samples, got array of dtype {values.dtype}")


def validate_samples(values: Any) -> None:
    """
    Check that every element of a flat container is a sample.

    Raises
    ------
    TypeMismatchError
        If ``values`` is not a container, or any element is not a number.
    """
    if not is_container(values):
        raise TypeMismatchError(f"Expected a sequence of samples, got {type(values).__name__}")

    if isinstance(values, np.ndarray):
        _check_array_dtype(values)
        if values.dtype != object:
            if values.ndim != 1:
                raise TypeMismatchError(
                    f"Expected a flat sequence of samples, got array of shape {values.shape}"
                )
            return

    for i, value in enumerate(values):
        if not is_sample(value):
            raise TypeMismatchError(
                f"Element {i} is not a numeric sample: {value!r} ({type(value).__name__})"
            )


def validate_length(length: int, power_of_two: bool = True, what: str = "Sequence length") -> None:
    """
    Check a single length.

    Every length must be at least 1; with ``power_of_two`` it must also be
    an exact power of two.
    """
    if length < 1:
        raise InvalidLengthError(f"{what} must be at least 1, got {length}")
    if power_of_two and not is_power_of_two(length):
        raise InvalidLengthError(f"{what} must be a power of 2, got {length}")


def validate_sequence(values: Any, power_of_two: bool = True) -> None:
    """Validate a 1-D input: element types first, then its length."""
    validate_samples(values)
    validate_length(len(values), power_of_two=power_of_two)


def _matrix_shape(values: Any):
    """Return (rows, cols) of a rectangular matrix, or raise ShapeMismatchError."""
    if isinstance(values, np.ndarray) and values.dtype != object:
        if values.ndim != 2:
            raise ShapeMismatchError(f"Expected a 2-D matrix, got array of shape {values.shape}")
        return values.shape

    if not is_container(values):
        raise ShapeMismatchError(f"Expected a matrix (sequence of rows), got {type(values).__name__}")

    rows = len(values)
    if rows == 0:
        return 0, 0

    for i, row in enumerate(values):
        if not is_container(row):
            raise ShapeMismatchError(f"Row {i} is not a sequence: {row!r}")

    cols = len(values[0])
    for i, row in enumerate(values):
        if len(row) != cols:
            raise ShapeMismatchError(
                f"Expected rows of equal length, row 0 has {cols} elements but row {i} has {len(row)}"
            )
    return rows, cols


def validate_matrix(values: Any, power_of_two: bool = True, even: bool = False) -> None:
    """
    Validate a 2-D input before any row or column is touched.

    Parameters
    ----------
    values : array-like
        Row-major matrix (list of rows or 2-D ndarray)
    power_of_two : bool
        Require both dimensions to be powers of two
    even : bool
        Require both dimensions to be even (quadrant swap)
    """
    rows, cols = _matrix_shape(values)

    if not (isinstance(values, np.ndarray) and values.dtype != object):
        for i, row in enumerate(values):
            try:
                validate_samples(row)
            except TypeMismatchError as e:
                raise TypeMismatchError(f"Row {i}: {e}") from e
    else:
        _check_array_dtype(values)

    validate_length(rows, power_of_two=power_of_two, what="Row count")
    validate_length(cols, power_of_two=power_of_two, what="Row length")

    if even:
        if rows % 2 or cols % 2:
            raise InvalidLengthError(
                f"Expected even dimensions for quadrant swap, got {rows}x{cols}"
            )


def looks_like_matrix(values: Any) -> bool:
    """Guess whether an input is 2-D (used by the element-wise tools)."""
    if isinstance(values, np.ndarray) and values.dtype != object:
        return values.ndim == 2
    return is_container(values) and len(values) > 0 and is_container(values[0])
