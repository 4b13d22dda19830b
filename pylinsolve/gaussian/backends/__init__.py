"""
Linear system backends.

Available backends:
    CPUGaussianBackend: NumPy Gaussian elimination with partial pivoting
"""

from pylinsolve.gaussian.backends.cpu import CPUGaussianBackend

__all__ = [
    "CPUGaussianBackend",
]
