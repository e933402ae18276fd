"""
Complex buffer model shared by all transforms.

A Sequence is a 1-D ``complex128`` array and a Matrix a row-major 2-D
``complex128`` array. NumPy stores complex values as interleaved
``(re, im)`` float64 pairs, which is exactly the layout the kernels work on;
``to_interleaved`` exposes that layout directly.

Conversion functions always copy, so the engine never writes into or keeps a
reference to a caller-owned buffer.
"""

from enum import Enum
from typing import Tuple, Union

import numpy as np

from .config import KIND_ALIASES
from .errors import ShapeMismatchError
from .validation import validate_matrix, validate_sequence


class TransformKind(Enum):
    """Closed set of transforms the engine can run."""
    DFT = 'dft'
    IDFT = 'idft'
    FFT = 'fft'
    IFFT = 'ifft'
    DHT = 'dht'
    FHT = 'fht'

    @property
    def is_hartley(self) -> bool:
        return self in (TransformKind.DHT, TransformKind.FHT)

    @property
    def is_inverse(self) -> bool:
        return self in (TransformKind.IDFT, TransformKind.IFFT)

    @classmethod
    def parse(cls, kind: Union['TransformKind', str]) -> 'TransformKind':
        """Accept an enum member or its (case-insensitive) name, including aliases."""
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            name = kind.lower()
            name = KIND_ALIASES.get(name, name)
            for member in cls:
                if member.value == name:
                    return member
        raise ValueError(f"Unknown transform kind: {kind!r}")


def as_sequence(values, dtype=np.complex128) -> np.ndarray:
    """Copy a validated 1-D input into a fresh array."""
    return np.array(values, dtype=dtype).reshape(-1)


def as_matrix(values, dtype=np.complex128) -> np.ndarray:
    """Copy a validated 2-D input into a fresh row-major array."""
    if isinstance(values, np.ndarray) and values.dtype != object:
        return np.array(values, dtype=dtype)
    return np.array([np.asarray(row, dtype=dtype) for row in values], dtype=dtype)


def as_real(values: np.ndarray) -> np.ndarray:
    """Real channel of a buffer as a contiguous float64 array."""
    return np.ascontiguousarray(np.real(values), dtype=np.float64)


def to_interleaved(x) -> np.ndarray:
    """
    View a Sequence as ``(N, 2)`` float64 ``(re, im)`` pairs.

    >>> to_interleaved([1+2j, 3-4j])
    array([[ 1.,  2.],
           [ 3., -4.]])
    """
    x = np.ascontiguousarray(x, dtype=np.complex128)
    return x.view(np.float64).reshape(x.shape + (2,))


def from_interleaved(pairs) -> np.ndarray:
    """Rebuild a complex Sequence (or Matrix) from trailing ``(re, im)`` pairs."""
    pairs = np.ascontiguousarray(pairs, dtype=np.float64)
    if pairs.ndim < 2 or pairs.shape[-1] != 2:
        raise ValueError(f"Expected trailing dimension of size 2, got shape {pairs.shape}")
    return pairs.view(np.complex128).reshape(pairs.shape[:-1]).copy()


def split_channels(x) -> Tuple[np.ndarray, np.ndarray]:
    """Split a buffer into separate real and imaginary channels."""
    x = np.asarray(x, dtype=np.complex128)
    return np.real(x).copy(), np.imag(x).copy()


def merge_channels(real, imag) -> np.ndarray:
    """Join real and imaginary channels of equal shape into one complex buffer."""
    real = np.asarray(real, dtype=np.float64)
    imag = np.asarray(imag, dtype=np.float64)
    if real.shape != imag.shape:
        raise ShapeMismatchError(f"Channel shapes differ: {real.shape} != {imag.shape}")
    return real + 1j * imag


def prepare_sequence(values, real: bool = False) -> np.ndarray:
    """
    Validate a 1-D input and copy it into a working buffer.

    With ``real=True`` only the real channel is kept (Hartley family).
    """
    validate_sequence(values)
    x = as_sequence(values)
    return as_real(x) if real else x


def prepare_matrix(values, real: bool = False) -> np.ndarray:
    """Validate a 2-D input (both dimensions) and copy it into a working buffer."""
    validate_matrix(values)
    m = as_matrix(values)
    return as_real(m) if real else m
