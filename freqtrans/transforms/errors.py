"""
Errors raised by the transform engine.

All of them are validation failures: they are raised before any computation
starts, so a failed call never leaves a partial result behind.
"""


class TransformError(Exception):
    """Base class for every error raised by the transform engine."""


class TypeMismatchError(TransformError, TypeError):
    """An input element is not representable as a complex sample."""


class InvalidLengthError(TransformError, ValueError):
    """A sequence length or matrix dimension fails the kernel's length rule."""


class ShapeMismatchError(TransformError, ValueError):
    """A matrix is malformed (ragged rows, wrong number of dimensions)."""
