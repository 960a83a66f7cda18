"""
Composite Simpson's (1/3) rule quadrature.

Sample-based integration (operates on pre-computed values):
    simpson

Function-based integration (evaluates callable):
    simpson_quad

Quadrature rule classes:
    SimpsonRule

Interpolation:
    lagrange_basis, quadratic_interpolate

Warnings:
    QuadratureWarning
"""

from torchsimpson.quadrature._exceptions import QuadratureWarning
from torchsimpson.quadrature._lagrange import (
    lagrange_basis,
    quadratic_interpolate,
)
from torchsimpson.quadrature._rules import SimpsonRule
from torchsimpson.quadrature._simpson import simpson
from torchsimpson.quadrature._simpson_quad import simpson_quad

__all__ = [
    # Sample-based
    "simpson",
    # Function-based
    "simpson_quad",
    # Rule classes
    "SimpsonRule",
    # Interpolation
    "lagrange_basis",
    "quadratic_interpolate",
    # Warnings
    "QuadratureWarning",
]
