"""
Post-processing of transform output: magnitude, phase and quadrant swap.
"""

import numpy as np

from .buffer import as_matrix, as_sequence
from .validation import looks_like_matrix, validate_matrix, validate_sequence


def _as_samples(x) -> np.ndarray:
    """Validate a Sequence or Matrix of any length and copy it as complex128."""
    if looks_like_matrix(x):
        validate_matrix(x, power_of_two=False)
        return as_matrix(x)
    validate_sequence(x, power_of_two=False)
    return as_sequence(x)


def magnitude(x) -> np.ndarray:
    """
    Element-wise magnitude sqrt(re^2 + im^2).

    Examples
    --------
    >>> magnitude([3 + 4j, 2])
    array([5., 2.])
    """
    return np.abs(_as_samples(x))


def phase(x) -> np.ndarray:
    """
    Element-wise phase atan2(im, re) in radians, within (-pi, pi].

    A negative-zero imaginary part on the negative real axis would give -pi;
    it is folded onto +pi.
    """
    z = _as_samples(x)
    angles = np.arctan2(z.imag, z.real)
    angles[angles == -np.pi] = np.pi
    return angles


def quadrant_swap(m) -> np.ndarray:
    """
    Swap the quadrants of a matrix diagonally to center the zero frequency.

    Top-left <-> bottom-right and top-right <-> bottom-left. Both dimensions
    must be even. Values are only moved, so the numeric dtype is kept.

    Examples
    --------
    >>> quadrant_swap([[1, 2], [3, 4]])
    array([[4, 3],
           [2, 1]])
    """
    validate_matrix(m, power_of_two=False, even=True)
    matrix = np.array(m) if isinstance(m, np.ndarray) and m.dtype != object else _numeric_matrix(m)

    rows, cols = matrix.shape
    half_r, half_c = rows // 2, cols // 2
    return np.block([
        [matrix[half_r:, half_c:], matrix[half_r:, :half_c]],
        [matrix[:half_r, half_c:], matrix[:half_r, :half_c]],
    ])


def _numeric_matrix(m) -> np.ndarray:
    """Copy a validated list-of-rows matrix, keeping integer/real values un-promoted."""
    matrix = np.array([list(row) for row in m])
    if not np.issubdtype(matrix.dtype, np.number):
        # mixed Python number types (e.g. Fraction) end up as object
        matrix = as_matrix(m)
    return matrix


switch_quarters = quadrant_swap
