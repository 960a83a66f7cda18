"""Hypothesis strategies for quadrature testing."""

from ._cubic_polynomials import cubic_polynomials
from ._intervals import intervals
from ._irregular_grids import irregular_grids
from ._real_number_dtypes import real_number_dtypes
from ._sample_counts import sample_counts

__all__ = [
    # Problem strategies
    "cubic_polynomials",
    "intervals",
    "irregular_grids",
    "sample_counts",
    # Dtype strategies
    "real_number_dtypes",
]
