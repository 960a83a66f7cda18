"""Three-point Lagrange interpolation."""

from typing import Union

from torch import Tensor

Scalar = Union[float, Tensor]


def lagrange_basis(x: Scalar, a: Scalar, b: Scalar, c: Scalar) -> Scalar:
    """
    Evaluate the Lagrange basis polynomial of node ``c`` over nodes {a, b, c}.

    Parameters
    ----------
    x : float or Tensor
        Query point.
    a, b : float or Tensor
        The two other interpolation nodes.
    c : float or Tensor
        The node whose basis polynomial is evaluated.

    Returns
    -------
    float or Tensor
        ``(x - a) * (x - b) / ((c - a) * (c - b))``. Equal to 1 at ``c``
        and 0 at ``a`` and ``b``.

    Notes
    -----
    The nodes must be pairwise distinct. Repeated nodes divide by zero and
    the result is NaN or Inf for tensor arguments.

    Examples
    --------
    >>> lagrange_basis(1.5, 1.0, 2.0, 0.0)
    -0.125
    """
    return (x - a) * (x - b) / (c - a) / (c - b)


def quadratic_interpolate(
    x: Scalar,
    x0: Scalar,
    x1: Scalar,
    x2: Scalar,
    y0: Scalar,
    y1: Scalar,
    y2: Scalar,
) -> Scalar:
    """
    Evaluate the quadratic through (x0, y0), (x1, y1), (x2, y2) at ``x``.

    All arguments broadcast elementwise, so a batch of triples can be
    interpolated in one call.

    Parameters
    ----------
    x : float or Tensor
        Query point(s).
    x0, x1, x2 : float or Tensor
        Pairwise distinct interpolation nodes.
    y0, y1, y2 : float or Tensor
        Function values at the nodes.

    Returns
    -------
    float or Tensor
        Interpolated value(s).

    Examples
    --------
    >>> quadratic_interpolate(1.5, 0.0, 1.0, 3.0, 0.0, 1.0, 9.0)
    2.25
    """
    return (
        y0 * lagrange_basis(x, x1, x2, x0)
        + y1 * lagrange_basis(x, x0, x2, x1)
        + y2 * lagrange_basis(x, x0, x1, x2)
    )
