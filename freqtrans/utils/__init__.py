"""
Utility modules.
"""

from .logging import setup_logging, BenchmarkLogger

__all__ = ['setup_logging', 'BenchmarkLogger']
