"""Quadrature rule classes."""

from typing import Callable, Union

from torch import Tensor

from torchsimpson.quadrature._simpson_quad import (
    _as_limits,
    _check_subdivisions,
    _composite_simpson,
)


class SimpsonRule:
    """
    Composite Simpson's (1/3) rule with a fixed number of subintervals.

    Exact for polynomials of degree <= 3.

    Parameters
    ----------
    n : int
        Number of subintervals the integration interval is split into.

    Examples
    --------
    >>> rule = SimpsonRule(32)
    >>> result = rule.integrate(torch.sin, 0, torch.pi)  # approximately 2.0
    >>> rule(torch.sin, 0, torch.pi)  # same

    Attributes
    ----------
    n : int
        Number of subintervals. Read-only.

    Notes
    -----
    A rule carries no state besides ``n``, so one instance can be shared
    freely, including across threads.
    """

    def __init__(self, n: int):
        self._n = _check_subdivisions(n)

    @property
    def n(self) -> int:
        return self._n

    def integrate(
        self,
        f: Callable[[Tensor], Tensor],
        a: Union[float, Tensor],
        b: Union[float, Tensor],
    ) -> Tensor:
        """
        Integrate f from a to b.

        Parameters
        ----------
        f : callable
            Integrand function. Receives a tensor with the broadcast shape of
            ``a`` and ``b``.
        a, b : float or Tensor
            Integration bounds. Can be batched.

        Returns
        -------
        Tensor
            Integral value(s). Identical to
            ``simpson_quad(f, a, b, self.n)``.
        """
        a, b = _as_limits(a, b)

        return _composite_simpson(f, a, b, self._n)

    def __call__(
        self,
        f: Callable[[Tensor], Tensor],
        a: Union[float, Tensor],
        b: Union[float, Tensor],
    ) -> Tensor:
        return self.integrate(f, a, b)

    def __repr__(self) -> str:
        return f"SimpsonRule(n={self._n})"
