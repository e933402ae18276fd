"""
Transform dispatch.

Maps a ``TransformKind`` to its 1-D kernel. The 2-D driver looks kernels up
here as well, so both entry paths run exactly the same code per row.
"""

import logging
from typing import Callable, Union

import numpy as np

from .buffer import TransformKind, prepare_sequence
from .dft import dft_core, idft_core
from .fft import fft_core, ifft_core
from .hartley import dht_core, fht_core

logger = logging.getLogger(__name__)

Kernel = Callable[[np.ndarray], np.ndarray]

_KERNELS = {
    TransformKind.DFT: dft_core,
    TransformKind.IDFT: idft_core,
    TransformKind.FFT: fft_core,
    TransformKind.IFFT: ifft_core,
    TransformKind.DHT: dht_core,
    TransformKind.FHT: fht_core,
}


def kernel_for(kind: Union[TransformKind, str]) -> Kernel:
    """Return the 1-D kernel for a kind (enum member or name such as 'fft')."""
    return _KERNELS[TransformKind.parse(kind)]


def transform(x, kind: Union[TransformKind, str]) -> np.ndarray:
    """
    Run any 1-D transform selected by ``kind``.

    Parameters
    ----------
    x : array-like
        Input samples, length a power of two
    kind : TransformKind or str
        One of dft, idft, fft, ifft, dht, fht (rdft/rfft accepted as aliases)

    Returns
    -------
    np.ndarray
        complex128 for the Fourier family, float64 for the Hartley family
    """
    kind = TransformKind.parse(kind)
    seq = prepare_sequence(x, real=kind.is_hartley)
    logger.debug("transform %s: N=%d", kind.value, len(seq))
    return _KERNELS[kind](seq)
