"""
Unit Tests for input validation shared by all transforms

Run:
    pytest tests/test_validation.py -v
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fractions import Fraction

import numpy as np
import pytest

from freqtrans.transforms import (
    InvalidLengthError,
    ShapeMismatchError,
    TransformError,
    TypeMismatchError,
    dft,
    dht,
    fft,
    fft2d,
    fht,
    idft,
    ifft,
    is_power_of_two,
    magnitude,
)
from freqtrans.transforms.validation import (
    is_sample,
    validate_length,
    validate_matrix,
    validate_sequence,
)

ALL_1D = [dft, idft, fft, ifft, dht, fht]


class TestTypeMismatch:
    """Non-numeric elements are rejected by every 1-D transform."""

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_string_element(self, fn):
        with pytest.raises(TypeMismatchError):
            fn([2.0, 'a', 1.0, 2.0])

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_none_element(self, fn):
        with pytest.raises(TypeMismatchError):
            fn([None, 1, 1, 2])

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_bool_element(self, fn):
        with pytest.raises(TypeMismatchError):
            fn([True, False, 1, 2])

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_nested_element(self, fn):
        with pytest.raises(TypeMismatchError):
            fn([[1, 2], [3, 4]])

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_not_a_sequence(self, fn):
        with pytest.raises(TypeMismatchError):
            fn(3.0)
        with pytest.raises(TypeMismatchError):
            fn("abcd")

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_non_numeric_array(self, fn):
        with pytest.raises(TypeMismatchError):
            fn(np.array(['a', 'b', 'c', 'd']))
        with pytest.raises(TypeMismatchError):
            fn(np.array([True, False, True, False]))

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_int_too_large_for_float(self, fn):
        with pytest.raises(TypeMismatchError):
            fn([10**400, 1, 1, 1])
        with pytest.raises(TypeMismatchError):
            fn(np.array([1, 2, 3, -10**400], dtype=object))

    def test_int_too_large_in_matrix(self):
        with pytest.raises(TypeMismatchError):
            fft2d([[1, 2], [3, 10**400]])
        with pytest.raises(TypeMismatchError):
            magnitude([1, 10**400, 3])

    def test_type_checked_before_length(self):
        with pytest.raises(TypeMismatchError):
            fft([1, 'a', 3])

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            fft(['x', 'y'])


class TestInvalidLength:
    """Lengths must be powers of two (1 included)."""

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_length_three(self, fn):
        with pytest.raises(InvalidLengthError):
            fn([2 + 0j, 1 + 0j, 1 + 0j])

    @pytest.mark.parametrize("fn", ALL_1D)
    @pytest.mark.parametrize("n", [0, 5, 6, 12, 100])
    def test_other_lengths(self, fn, n):
        with pytest.raises(InvalidLengthError):
            fn(np.ones(n))

    @pytest.mark.parametrize("fn", ALL_1D)
    def test_length_one_is_valid(self, fn):
        assert len(fn([1.0])) == 1

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            dht([1, 2, 3])


class TestHelpers:

    def test_is_power_of_two(self):
        assert [n for n in range(0, 70) if is_power_of_two(n)] == [1, 2, 4, 8, 16, 32, 64]
        assert not is_power_of_two(-4)

    def test_is_sample(self):
        assert is_sample(1)
        assert is_sample(2.5)
        assert is_sample(1 - 1j)
        assert is_sample(np.float32(1))
        assert is_sample(Fraction(1, 3))
        assert not is_sample(True)
        assert not is_sample(np.bool_(False))
        assert not is_sample('1')
        assert not is_sample(None)
        assert not is_sample(10**400)
        assert is_sample(10**300)

    def test_validate_length_without_power_of_two(self):
        validate_length(3, power_of_two=False)
        with pytest.raises(InvalidLengthError):
            validate_length(0, power_of_two=False)

    def test_validate_sequence_object_array(self):
        validate_sequence(np.array([1, 2.0, 3j, Fraction(1, 2)], dtype=object))
        with pytest.raises(TypeMismatchError):
            validate_sequence(np.array([1, 'a'], dtype=object), power_of_two=False)

    def test_validate_matrix_even(self):
        validate_matrix([[1, 2], [3, 4]], power_of_two=False, even=True)
        with pytest.raises(InvalidLengthError):
            validate_matrix(np.ones((2, 3)), power_of_two=False, even=True)

    def test_validate_matrix_three_dimensional_array(self):
        with pytest.raises(ShapeMismatchError):
            validate_matrix(np.ones((2, 2, 2)))

    def test_error_hierarchy(self):
        for error in (TypeMismatchError, InvalidLengthError, ShapeMismatchError):
            assert issubclass(error, TransformError)
        assert issubclass(TypeMismatchError, TypeError)
        assert issubclass(InvalidLengthError, ValueError)
        assert issubclass(ShapeMismatchError, ValueError)

    def test_fraction_samples_transform(self):
        result = fft([Fraction(2), Fraction(1), Fraction(1), Fraction(2)])
        np.testing.assert_allclose(result, [6, 1 + 1j, 0, 1 - 1j], rtol=0, atol=1e-8)
