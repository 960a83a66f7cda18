"""Warnings for Simpson quadrature."""


class QuadratureWarning(UserWarning):
    """Warning for degenerate quadrature input (e.g., repeated sample points)."""

    pass
