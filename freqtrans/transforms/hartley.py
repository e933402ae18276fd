"""
Discrete and Fast Hartley Transforms (orthonormal).

    H[k] = (1/sqrt(N)) * sum_n x[n] * cas(2*pi*k*n/N),   cas(t) = cos(t) + sin(t)

With the 1/sqrt(N) factor the transform is its own inverse: dht(dht(x)) == x.
Both variants work on the real channel only and return float64.

The fast variant uses the same bit-reversed decimation-in-time layout as the
radix-2 FFT. Splitting x into even and odd halves E and O (each of length
M = N/2) gives

    H[k]     = E[k] + cos(t) * O[k] + sin(t) * O[(M - k) % M]
    H[k + M] = E[k] - cos(t) * O[k] - sin(t) * O[(M - k) % M]

with t = 2*pi*k/N, because cas(a + t) = cos(t) * cas(a) + sin(t) * cas(-a).
"""

import logging

import numpy as np
from numba import jit

from .buffer import prepare_sequence
from .fft import bit_reverse_permute

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _dht_direct(x: np.ndarray) -> np.ndarray:
    """Direct O(N^2) orthonormal DHT (JIT compiled)."""
    N = len(x)
    H = np.empty(N, dtype=np.float64)

    for k in range(N):
        s = 0.0
        for n in range(N):
            theta = 2.0 * np.pi * ((k * n) % N) / N
            s += x[n] * (np.cos(theta) + np.sin(theta))
        H[k] = s

    return H / np.sqrt(N)


@jit(nopython=True, cache=True)
def _fht_radix2_iter(x: np.ndarray) -> np.ndarray:
    """Iterative radix-2 DIT FHT, orthonormal (JIT compiled)."""
    N = len(x)
    H = bit_reverse_permute(x)

    stage_size = 2
    while stage_size <= N:
        half_size = stage_size // 2
        angles = 2.0 * np.pi * np.arange(half_size) / stage_size
        cos_t = np.cos(angles)
        sin_t = np.sin(angles)

        for start in range(0, N, stage_size):
            # both halves are read at mirrored indices, so work from a copy
            block = H[start:start + stage_size].copy()
            for k in range(half_size):
                even = block[k]
                odd = block[half_size + k]
                odd_mirror = block[half_size + (half_size - k) % half_size]
                t = cos_t[k] * odd + sin_t[k] * odd_mirror
                H[start + k] = even + t
                H[start + k + half_size] = even - t

        stage_size *= 2

    return H / np.sqrt(N)


def dht_core(x: np.ndarray) -> np.ndarray:
    """DHT of a validated float64 buffer."""
    return _dht_direct(x)


def fht_core(x: np.ndarray) -> np.ndarray:
    """FHT of a validated float64 buffer."""
    return _fht_radix2_iter(x)


def dht(x) -> np.ndarray:
    """
    Compute the orthonormal Discrete Hartley Transform by direct summation.

    The imaginary part of complex input is ignored.

    Examples
    --------
    >>> dht([2, 1, 1, 2])
    array([3., 0., 0., 1.])
    """
    seq = prepare_sequence(x, real=True)
    logger.debug("dht: N=%d", len(seq))
    return dht_core(seq)


def fht(x) -> np.ndarray:
    """Compute the orthonormal Hartley transform with the radix-2 algorithm."""
    seq = prepare_sequence(x, real=True)
    logger.debug("fht: N=%d", len(seq))
    return fht_core(seq)
