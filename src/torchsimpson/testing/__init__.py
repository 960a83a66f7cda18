"""Testing utilities for torchsimpson.

Hypothesis strategies that generate integration problems with known
answers:

    from torchsimpson.testing.strategies import cubic_polynomials, intervals

    @hypothesis.given(cubic_polynomials(), intervals())
    def test_exact(coefficients, interval):
        ...
"""

from . import strategies

__all__ = [
    "strategies",
]
