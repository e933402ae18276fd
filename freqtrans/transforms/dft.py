"""
Direct (O(N^2)) Discrete Fourier Transform.

    X[k] = sum_n x[n] * exp(-2j*pi*k*n/N)
    x[n] = (1/N) * sum_k X[k] * exp(+2j*pi*k*n/N)

These are the reference kernels the radix-2 FFT is checked against. The
power-of-two length rule is applied here as well, so the whole Fourier family
shares one precondition.
"""

import logging

import numpy as np
from numba import jit

from .buffer import prepare_sequence

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _dft_direct(x: np.ndarray, sign: float) -> np.ndarray:
    """Unnormalized DFT sum with kernel exp(sign * 2j*pi*k*n/N) (JIT compiled)."""
    N = len(x)
    X = np.empty(N, dtype=np.complex128)

    for k in range(N):
        s = 0j
        for n in range(N):
            # reduce k*n mod N to keep the angle small
            s += x[n] * np.exp(sign * 2j * np.pi * ((k * n) % N) / N)
        X[k] = s

    return X


def dft_core(x: np.ndarray) -> np.ndarray:
    """Forward DFT of a validated complex128 buffer."""
    return _dft_direct(x, -1.0)


def idft_core(X: np.ndarray) -> np.ndarray:
    """Inverse DFT of a validated complex128 buffer, scaled by 1/N."""
    return _dft_direct(X, 1.0) / len(X)


def dft(x) -> np.ndarray:
    """
    Compute the forward DFT by direct summation.

    Parameters
    ----------
    x : array-like
        Samples (real or complex), length a power of two

    Returns
    -------
    np.ndarray
        complex128 coefficients, same length as ``x``

    Examples
    --------
    >>> dft([2, 1, 1, 2])
    array([6.+0.j, 1.+1.j, 0.+0.j, 1.-1.j])
    """
    seq = prepare_sequence(x)
    logger.debug("dft: N=%d", len(seq))
    return dft_core(seq)


def idft(X) -> np.ndarray:
    """Compute the inverse DFT by direct summation (normalized by 1/N)."""
    seq = prepare_sequence(X)
    logger.debug("idft: N=%d", len(seq))
    return idft_core(seq)


rdft = idft
