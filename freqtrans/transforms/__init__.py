"""
Transforms Module - Hand-written Fourier and Hartley Transforms

This module provides from-scratch implementations of the direct and fast
Fourier and Hartley transforms for 1-D sequences and 2-D matrices, checked
against numpy.fft and scipy.fft.

Modules:
    - dft: Direct Discrete Fourier Transform (reference O(N^2) kernels)
    - fft: Fast Fourier Transform (radix-2 Cooley-Tukey algorithm)
    - hartley: Discrete and Fast Hartley Transforms (orthonormal)
    - transform2d: Separable 2-D extension of all transforms
    - tools: magnitude, phase and quadrant swap
"""

from .buffer import (
    TransformKind,
    from_interleaved,
    merge_channels,
    split_channels,
    to_interleaved,
)
from .dft import dft, idft, rdft
from .engine import kernel_for, transform
from .errors import InvalidLengthError, ShapeMismatchError, TransformError, TypeMismatchError
from .fft import fft, ifft, rfft
from .hartley import dht, fht
from .tools import magnitude, phase, quadrant_swap, switch_quarters
from .transform2d import (
    dft2d,
    dht2d,
    fft2d,
    fht2d,
    idft2d,
    ifft2d,
    rdft2d,
    rfft2d,
    transform2d,
)
from .validation import is_power_of_two

__all__ = [
    # 1-D transforms
    'dft',
    'idft',
    'rdft',
    'fft',
    'ifft',
    'rfft',
    'dht',
    'fht',
    # 2-D transforms
    'dft2d',
    'idft2d',
    'rdft2d',
    'fft2d',
    'ifft2d',
    'rfft2d',
    'dht2d',
    'fht2d',
    # Dispatch
    'TransformKind',
    'transform',
    'transform2d',
    'kernel_for',
    # Tools
    'magnitude',
    'phase',
    'quadrant_swap',
    'switch_quarters',
    # Buffers
    'to_interleaved',
    'from_interleaved',
    'split_channels',
    'merge_channels',
    'is_power_of_two',
    # Errors
    'TransformError',
    'TypeMismatchError',
    'InvalidLengthError',
    'ShapeMismatchError',
]
