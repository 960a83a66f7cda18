"""torchsimpson: composite Simpson's rule quadrature for PyTorch."""

from . import quadrature

__all__ = [
    "quadrature",
]

__version__ = "0.1.0"
