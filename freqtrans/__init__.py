"""
freqtrans - Fourier and Hartley transforms for 1-D and 2-D data.
"""

from .transforms import *  # noqa: F401,F403
from .transforms import __all__

__version__ = '1.0.0'
