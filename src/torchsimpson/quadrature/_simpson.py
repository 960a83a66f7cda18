"""Simpson's 1/3 rule for sampled functions."""

import warnings
from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from torchsimpson.quadrature._exceptions import QuadratureWarning
from torchsimpson.quadrature._lagrange import quadratic_interpolate


def simpson(
    y: Union[Tensor, Sequence[float]],
    x: Optional[Union[Tensor, Sequence[float]]] = None,
    *,
    dx: Union[float, Tensor] = 1.0,
    dim: int = -1,
) -> Tensor:
    """
    Integrate y using composite Simpson's rule.

    Points are consumed in groups of three. When the number of points is
    even, the last interval is integrated with an extra Simpson step whose
    midpoint value is interpolated from the last three points.

    Parameters
    ----------
    y : Tensor or sequence of float
        Values to integrate. Must have at least 3 points along ``dim``.
    x : Tensor or sequence of float, optional
        Sample points, monotonic along ``dim``. Either 1-D with the same
        number of points as ``y`` or the same shape as ``y``. Spacing may
        be non-uniform.
    dx : float or Tensor
        Spacing when x is None.
    dim : int
        Dimension along which to integrate.

    Returns
    -------
    Tensor
        Definite integral approximation. Shape is y.shape with ``dim`` removed.

    Raises
    ------
    ValueError
        If y has fewer than 3 points along ``dim`` or x and y disagree on
        the number of points.

    Warns
    -----
    QuadratureWarning
        If x contains repeated adjacent points. The local interpolation is
        undefined there and the result is NaN or Inf.

    Notes
    -----
    With x given, each group ``x[i], x[i+1], x[i+2]`` is integrated as
    ``(x[i+2] - x[i]) / 6 * (y[i] + 4 * ym + y[i+2])`` where ``ym`` is the
    quadratic through the group evaluated at ``(x[i] + x[i+2]) / 2``. The
    result is exact for quadratics at any spacing.

    Without x the classic weights ``dx / 3 * (1, 4, 2, 4, ..., 4, 1)`` are
    used, and the result is exact for cubics when the number of points is odd
    and for quadratics otherwise.

    Fully differentiable with respect to ``y``, ``x`` and ``dx``.

    Examples
    --------
    >>> simpson(torch.tensor([0.0, 1.0, 4.0, 9.0, 16.0]))  # 64 / 3
    tensor(21.3333)

    >>> simpson([0.0, 1.0, 9.0], [0.0, 1.0, 3.0])
    tensor(9., dtype=torch.float64)
    """
    y = _as_floating_tensor(y)

    if y.dim() == 0:
        raise ValueError("simpson requires at least 3 points, got a 0-d tensor")

    # Move target dim to end
    y = torch.movedim(y, dim, -1)
    n = y.shape[-1]

    if n < 3:
        raise ValueError(f"simpson requires at least 3 points, got {n}")

    if x is None:
        return _simpson_uniform(y, dx)

    x = _as_floating_tensor(x, like=y)

    if x.dim() > 1:
        x = torch.movedim(x, dim, -1)

    if x.dim() == 0 or x.shape[-1] != n:
        raise ValueError(
            f"x must have the same number of points as y along dim, "
            f"got {x.shape[-1] if x.dim() > 0 else 0} and {n}"
        )

    return _simpson_nonuniform(y, x)


def _as_floating_tensor(
    value: Union[Tensor, Sequence[float]], like: Optional[Tensor] = None
) -> Tensor:
    """Convert samples to a floating point tensor."""
    if not isinstance(value, Tensor):
        if like is not None:
            value = torch.as_tensor(value, dtype=like.dtype, device=like.device)
        else:
            value = torch.as_tensor(value, dtype=torch.float64)

    if not (value.is_floating_point() or value.is_complex()):
        value = value.to(torch.get_default_dtype())

    return value


def _simpson_uniform(y: Tensor, dx: Union[float, Tensor]) -> Tensor:
    """Simpson's 1/3 rule on evenly spaced samples along the last dim."""
    n = y.shape[-1]

    # Number of complete three-point panels
    m = (n - 1) // 2

    # Integral = (dx/3) * sum_i [y(2i) + 4*y(2i+1) + y(2i+2)]
    result = (
        y[..., 0 : 2 * m : 2]
        + 4 * y[..., 1 : 2 * m : 2]
        + y[..., 2 : 2 * m + 1 : 2]
    ).sum(dim=-1) * (dx / 3)

    if n % 2 == 0:
        # One interval left over. The last three samples sit at 0, dx, 2dx;
        # the interpolation weights at 3dx/2 are independent of dx, so they
        # are taken on the unit grid and dx = 0 still yields 0.
        ym = quadratic_interpolate(
            1.5, 0.0, 1.0, 2.0, y[..., -3], y[..., -2], y[..., -1]
        )

        result = result + dx / 6 * (y[..., -2] + 4 * ym + y[..., -1])

    return result


def _simpson_nonuniform(y: Tensor, x: Tensor) -> Tensor:
    """Simpson's 1/3 rule on arbitrarily spaced samples along the last dim."""
    n = y.shape[-1]
    m = (n - 1) // 2

    if torch.any(x[..., 1:] == x[..., :-1]):
        warnings.warn(
            "x contains repeated adjacent points; quadratic interpolation "
            "through them is undefined and the integral will not be finite",
            QuadratureWarning,
            stacklevel=3,
        )

    x0 = x[..., 0 : 2 * m : 2]
    x1 = x[..., 1 : 2 * m : 2]
    x2 = x[..., 2 : 2 * m + 1 : 2]

    y0 = y[..., 0 : 2 * m : 2]
    y1 = y[..., 1 : 2 * m : 2]
    y2 = y[..., 2 : 2 * m + 1 : 2]

    # x1 need not be the midpoint of [x0, x2], so f at the midpoint is
    # interpolated from the group
    ym = quadratic_interpolate((x0 + x2) / 2, x0, x1, x2, y0, y1, y2)

    result = ((x2 - x0) / 6 * (y0 + 4 * ym + y2)).sum(dim=-1)

    if n % 2 == 0:
        # Fit the last three points, integrate over the last two only
        xa, xb, xc = x[..., -3], x[..., -2], x[..., -1]
        ya, yb, yc = y[..., -3], y[..., -2], y[..., -1]

        ym = quadratic_interpolate((xb + xc) / 2, xa, xb, xc, ya, yb, yc)

        result = result + (xc - xb) / 6 * (yb + 4 * ym + yc)

    return result
