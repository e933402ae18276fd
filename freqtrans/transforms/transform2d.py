"""
Separable 2-D transforms.

Every 2-D transform here is computed the same way:

    1. apply the 1-D kernel to each row
    2. transpose
    3. apply the 1-D kernel to each row again (the original columns)

The result of step 3 is returned as-is, so element [i][j] holds the
coefficient for column frequency i and row frequency j. A rectangular
(R, C) input therefore comes back with shape (C, R). Pass
``restore_layout=True`` to transpose back to the conventional layout
(the one ``numpy.fft.fft2`` uses).

The whole matrix is validated before the first row is transformed.
"""

import logging
from typing import Union

import numpy as np

from .buffer import TransformKind, prepare_matrix
from .engine import Kernel, kernel_for

logger = logging.getLogger(__name__)


def _apply_rows(matrix: np.ndarray, kernel: Kernel) -> np.ndarray:
    """Apply a 1-D kernel to every row; rows are independent of each other."""
    out = np.empty_like(matrix)
    for i in range(matrix.shape[0]):
        out[i] = kernel(np.ascontiguousarray(matrix[i]))
    return out


def separable(matrix: np.ndarray, kernel: Kernel) -> np.ndarray:
    """
    Two-pass row/column application of ``kernel`` to a validated matrix.

    The Hartley family passes a float64 matrix (one real channel) and the
    Fourier family a complex128 matrix (real and imaginary channels together).
    """
    first = _apply_rows(matrix, kernel)
    return _apply_rows(np.ascontiguousarray(first.T), kernel)


def transform2d(m, kind: Union[TransformKind, str], restore_layout: bool = False) -> np.ndarray:
    """
    Run any 2-D separable transform selected by ``kind``.

    Parameters
    ----------
    m : array-like
        Row-major matrix; both dimensions must be powers of two
    kind : TransformKind or str
        One of dft, idft, fft, ifft, dht, fht
    restore_layout : bool
        Transpose the result back to (rows, cols) order

    Returns
    -------
    np.ndarray
        complex128 (Fourier) or float64 (Hartley) matrix; shape (cols, rows)
        unless ``restore_layout`` is set
    """
    kind = TransformKind.parse(kind)
    matrix = prepare_matrix(m, real=kind.is_hartley)
    logger.debug("transform2d %s: shape=%s", kind.value, matrix.shape)

    result = separable(matrix, kernel_for(kind))
    if restore_layout:
        result = np.ascontiguousarray(result.T)
    return result


def dft2d(m, restore_layout: bool = False) -> np.ndarray:
    """2-D forward DFT (direct summation per row and column)."""
    return transform2d(m, TransformKind.DFT, restore_layout=restore_layout)


def idft2d(m, restore_layout: bool = False) -> np.ndarray:
    """2-D inverse DFT, normalized by 1/(rows*cols)."""
    return transform2d(m, TransformKind.IDFT, restore_layout=restore_layout)


def fft2d(m, restore_layout: bool = False) -> np.ndarray:
    """
    2-D forward FFT.

    Examples
    --------
    >>> import numpy as np
    >>> x = np.random.randn(8, 16)
    >>> np.allclose(fft2d(x, restore_layout=True), np.fft.fft2(x))
    True
    """
    return transform2d(m, TransformKind.FFT, restore_layout=restore_layout)


def ifft2d(m, restore_layout: bool = False) -> np.ndarray:
    """2-D inverse FFT; ``ifft2d(fft2d(m))`` returns ``m``."""
    return transform2d(m, TransformKind.IFFT, restore_layout=restore_layout)


def dht2d(m, restore_layout: bool = False) -> np.ndarray:
    """Separable 2-D Hartley transform (direct); self-inverse."""
    return transform2d(m, TransformKind.DHT, restore_layout=restore_layout)


def fht2d(m, restore_layout: bool = False) -> np.ndarray:
    """Separable 2-D Hartley transform (radix-2); self-inverse."""
    return transform2d(m, TransformKind.FHT, restore_layout=restore_layout)


rdft2d = idft2d
rfft2d = ifft2d
