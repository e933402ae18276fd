"""
Constants shared by the transform engine and the benchmark tooling.
"""

# Comparison tolerance for cross-checking kernels against a reference
DEFAULT_TOLERANCE = 1e-8

# Names kept from the original array API ("reverse" transforms)
KIND_ALIASES = {
    'rdft': 'idft',
    'rfft': 'ifft',
}
