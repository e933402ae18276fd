#!/usr/bin/env python
"""
Centered log-magnitude display of a 2-D spectrum.

Computes fft2d (or fht2d), moves the zero frequency to the middle with
quadrant_swap, and saves the input next to its log-scaled spectrum.

Usage:
    # Built-in test pattern
    python visualization/plot_spectrum.py

    # Any 2-D matrix saved with numpy.save (power-of-two dimensions)
    python visualization/plot_spectrum.py --input image.npy --kind fht
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.colors import LogNorm
import numpy as np

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from freqtrans.transforms import fft2d, fht2d, magnitude, quadrant_swap
from freqtrans.utils.logging import setup_logging

OUTPUT_DIR = Path(__file__).parent / "outputs"

logger = logging.getLogger('plot_spectrum')


def make_test_pattern(size: int = 64, period: int = 8) -> np.ndarray:
    """A centered square plus horizontal stripes, so the spectrum has structure."""
    img = np.zeros((size, size))
    q = size // 4
    img[q:3 * q, q:3 * q] = 1.0
    img += 0.5 * (np.arange(size)[:, None] % period < period // 2)
    return img


def centered_spectrum(img: np.ndarray, kind: str = 'fft') -> np.ndarray:
    """Zero-frequency-centered magnitude spectrum in conventional layout."""
    if kind == 'fht':
        spectrum = np.abs(fht2d(img, restore_layout=True))
    else:
        spectrum = magnitude(fft2d(img, restore_layout=True))
    return quadrant_swap(spectrum)


def plot_spectrum(img: np.ndarray, spectrum: np.ndarray, title: str, save_path: Path):
    """Save the input and its log-scaled spectrum side by side."""
    fig, (ax_img, ax_spec) = plt.subplots(1, 2, figsize=(10, 5))
    fig.suptitle(title)

    ax_img.imshow(img, cmap='gray')
    ax_img.set_title('Input')

    # LogNorm needs strictly positive values
    floor = spectrum[spectrum > 0].min() if np.any(spectrum > 0) else 1e-12
    plot = ax_spec.imshow(np.maximum(spectrum, floor),
                          norm=LogNorm(floor, max(spectrum.max(), floor * 10)),
                          cmap='magma')
    ax_spec.set_title('Log |spectrum| (centered)')
    fig.colorbar(plot, ax=ax_spec)

    save_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(save_path, dpi=150)
    plt.close(fig)
    logger.info(f"Spectrum saved to {save_path}")


def main():
    parser = argparse.ArgumentParser(description="Plot a centered 2-D spectrum")
    parser.add_argument('--input', type=str, default=None, help='Path to a 2-D .npy matrix')
    parser.add_argument('--kind', choices=['fft', 'fht'], default='fft', help='Transform to display')
    parser.add_argument('--output', type=str, default=str(OUTPUT_DIR / 'spectrum.png'),
                        help='Output image path')
    args = parser.parse_args()

    setup_logging(name='plot_spectrum')

    img = np.load(args.input) if args.input else make_test_pattern()
    spectrum = centered_spectrum(img, kind=args.kind)
    plot_spectrum(img, spectrum, f"{args.kind.upper()} magnitude", Path(args.output))
    print(f"Spectrum saved to {args.output}")


if __name__ == "__main__":
    main()
