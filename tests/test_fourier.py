"""
Unit Tests for the Fourier Transforms (direct DFT and radix-2 FFT)

Validates the hand-written kernels against known values and scipy.fft, and
checks that the direct and fast algorithms agree with each other.

Run:
    pytest tests/test_fourier.py -v
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from scipy.fft import fft as scipy_fft, ifft as scipy_ifft

from freqtrans.transforms import dft, fft, idft, ifft, rdft, rfft

TOLERANCE = 1e-8

SIGNAL = [2 + 0j, 1 + 0j, 1 + 0j, 2 + 0j]
SPECTRUM = [6 + 0j, 1 + 1j, 0 + 0j, 1 - 1j]


def random_complex(rng, n):
    return rng.standard_normal(n) + 1j * rng.standard_normal(n)


class TestDFT:
    """Test suite for the direct DFT."""

    def test_dft_known_values(self):
        """Forward DFT of [2, 1, 1, 2]."""
        result = dft(SIGNAL)
        np.testing.assert_allclose(result, SPECTRUM, rtol=0, atol=TOLERANCE)

    def test_idft_known_values(self):
        """Inverse DFT recovers [2, 1, 1, 2] with zero imaginary parts."""
        result = idft(SPECTRUM)
        np.testing.assert_allclose(result.real, [2, 1, 1, 2], rtol=0, atol=TOLERANCE)
        np.testing.assert_allclose(result.imag, 0, rtol=0, atol=TOLERANCE)

    def test_rdft_is_idft(self):
        assert rdft is idft

    def test_dft_vs_scipy(self):
        """Direct DFT matches scipy on power-of-2 lengths."""
        rng = np.random.default_rng(0)
        for N in [1, 2, 4, 8, 32, 128]:
            x = random_complex(rng, N)
            error = np.abs(dft(x) - scipy_fft(x))
            assert error.max() < TOLERANCE, f"DFT failed for N={N}"

    def test_idft_vs_scipy(self):
        rng = np.random.default_rng(1)
        for N in [2, 16, 64]:
            X = random_complex(rng, N)
            error = np.abs(idft(X) - scipy_ifft(X))
            assert error.max() < TOLERANCE, f"IDFT failed for N={N}"

    def test_dft_round_trip(self):
        rng = np.random.default_rng(2)
        for N in [1, 2, 4, 64]:
            x = random_complex(rng, N)
            np.testing.assert_allclose(idft(dft(x)), x, rtol=0, atol=TOLERANCE)


class TestFFT:
    """Test suite for the radix-2 FFT."""

    def test_fft_known_values(self):
        result = fft(SIGNAL)
        np.testing.assert_allclose(result, SPECTRUM, rtol=0, atol=TOLERANCE)

    def test_ifft_known_values(self):
        result = ifft(SPECTRUM)
        np.testing.assert_allclose(result, [2, 1, 1, 2], rtol=0, atol=TOLERANCE)

    def test_rfft_is_ifft(self):
        assert rfft is ifft

    def test_fft_power_of_2(self):
        """Test FFT on power-of-2 lengths."""
        rng = np.random.default_rng(3)
        for N in [1, 2, 4, 64, 128, 256, 512, 1024]:
            x = random_complex(rng, N)
            error = np.abs(fft(x) - scipy_fft(x))
            assert error.max() < TOLERANCE, f"FFT failed for N={N}"

    def test_fft_real_signal(self):
        """Plain real input is accepted (imaginary part zero)."""
        x = np.random.default_rng(4).standard_normal(256)
        error = np.abs(fft(x) - scipy_fft(x))
        assert error.max() < TOLERANCE

    def test_fft_sine_wave(self):
        """A pure tone lands in bins k and N-k."""
        N, k = 64, 5
        x = np.sin(2 * np.pi * k * np.arange(N) / N)
        spectrum = np.abs(fft(x))

        assert spectrum[k] == pytest.approx(N / 2, abs=TOLERANCE)
        assert spectrum[N - k] == pytest.approx(N / 2, abs=TOLERANCE)
        others = np.delete(spectrum, [k, N - k])
        assert others.max() < TOLERANCE

    def test_ifft_round_trip(self):
        rng = np.random.default_rng(5)
        for N in [1, 2, 8, 256, 1024]:
            x = random_complex(rng, N)
            np.testing.assert_allclose(ifft(fft(x)), x, rtol=0, atol=TOLERANCE)

    def test_single_sample_is_identity(self):
        np.testing.assert_allclose(fft([3 - 2j]), [3 - 2j])
        np.testing.assert_allclose(ifft([3 - 2j]), [3 - 2j])


class TestFourierEquivalence:
    """Direct and fast algorithms must agree."""

    @pytest.mark.parametrize("N", [2, 4, 8, 16, 32, 64, 128])
    def test_dft_equals_fft(self, N):
        x = random_complex(np.random.default_rng(N), N)
        np.testing.assert_allclose(dft(x), fft(x), rtol=0, atol=TOLERANCE)

    @pytest.mark.parametrize("N", [2, 4, 8, 16, 32, 64, 128])
    def test_idft_equals_ifft(self, N):
        X = random_complex(np.random.default_rng(100 + N), N)
        np.testing.assert_allclose(idft(X), ifft(X), rtol=0, atol=TOLERANCE)

    def test_output_dtype_and_length(self):
        for fn in (dft, idft, fft, ifft):
            result = fn([1, 2, 3, 4, 5, 6, 7, 8])
            assert result.dtype == np.complex128
            assert result.shape == (8,)

    def test_input_not_mutated(self):
        x = np.array([1 + 1j, 2, 3, 4 - 2j])
        original = x.copy()
        for fn in (dft, idft, fft, ifft):
            fn(x)
        np.testing.assert_array_equal(x, original)

    def test_accepts_tuple_and_numpy_scalars(self):
        x = (np.float32(2), np.int64(1), 1.0, complex(2, 0))
        np.testing.assert_allclose(fft(x), SPECTRUM, rtol=0, atol=1e-6)
