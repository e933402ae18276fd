"""
Radix-2 FFT Implementation using Numba JIT

Iterative Cooley-Tukey decimation-in-time:
1. Bit-reversal permutation of the input
2. log2(N) butterfly stages of size 2, 4, ..., N

The inverse runs the same butterflies with conjugated twiddle factors and
scales the result by 1/N, matching the direct IDFT's normalization. Only
power-of-two lengths are accepted.
"""

import logging
import math

import numpy as np
from numba import jit

from .buffer import prepare_sequence

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def bit_reverse(x: int, n_bits: int) -> int:
    """Reverse the bits of x with n_bits."""
    result = 0
    for _ in range(n_bits):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result


@jit(nopython=True, cache=True)
def bit_reverse_permute(x: np.ndarray) -> np.ndarray:
    """Return a copy of x with element i moved to bit_reverse(i)."""
    N = len(x)
    n_bits = int(math.log2(N))
    out = np.empty_like(x)
    for i in range(N):
        out[bit_reverse(i, n_bits)] = x[i]
    return out


@jit(nopython=True, cache=True)
def _fft_radix2_iter(x: np.ndarray, sign: float) -> np.ndarray:
    """
    Iterative Cooley-Tukey radix-2 DIT FFT (Numba JIT).

    ``sign`` is -1 for the forward transform and +1 for the (unnormalized)
    inverse.
    """
    N = len(x)
    X = bit_reverse_permute(x)

    # Process stages: size 2, 4, 8, ..., N
    stage_size = 2
    while stage_size <= N:
        half_size = stage_size // 2
        w_step = sign * 2j * np.pi / stage_size
        twiddles = np.exp(w_step * np.arange(half_size))

        for k in range(0, N, stage_size):
            for j in range(half_size):
                even_idx = k + j
                odd_idx = k + j + half_size

                even = X[even_idx]
                odd = X[odd_idx] * twiddles[j]

                X[even_idx] = even + odd
                X[odd_idx] = even - odd

        stage_size *= 2

    return X


def fft_core(x: np.ndarray) -> np.ndarray:
    """Forward FFT of a validated complex128 buffer."""
    return _fft_radix2_iter(x, -1.0)


def ifft_core(X: np.ndarray) -> np.ndarray:
    """Inverse FFT of a validated complex128 buffer, scaled by 1/N."""
    return _fft_radix2_iter(X, 1.0) / len(X)


def fft(x) -> np.ndarray:
    """
    Compute the 1-D discrete Fourier Transform using Cooley-Tukey FFT.

    Parameters
    ----------
    x : array-like
        Samples (real or complex), length a power of two

    Returns
    -------
    np.ndarray
        complex128 coefficients, identical (within rounding) to ``dft(x)``

    Raises
    ------
    TypeMismatchError
        If an element is not a number
    InvalidLengthError
        If the length is not a power of two

    Examples
    --------
    >>> import numpy as np
    >>> x = np.array([1.0, 2.0, 1.0, -1.0, 1.5, 1.0, 0.5, -0.5])
    >>> X = fft(x)
    >>> # Should match numpy.fft.fft(x)
    """
    seq = prepare_sequence(x)
    logger.debug("fft: N=%d", len(seq))
    return fft_core(seq)


def ifft(X) -> np.ndarray:
    """
    Compute the 1-D inverse FFT.

    IFFT(X)[n] = (1/N) * sum_k X[k] * exp(+2j*pi*k*n/N)
    """
    seq = prepare_sequence(X)
    logger.debug("ifft: N=%d", len(seq))
    return ifft_core(seq)


rfft = ifft
