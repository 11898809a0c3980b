import torch
from torch import Tensor

from ._polynomial import Polynomial


def _horner(coeffs: Tensor, x: Tensor) -> tuple[Tensor, Tensor]:
    """Synthetic division of coefficient tensors by (t - x).

    Parameters
    ----------
    coeffs : Tensor
        Coefficients shape (..., N) in ascending order.
    x : Tensor
        Points, broadcastable with coeffs[..., 0].

    Returns
    -------
    tuple[Tensor, Tensor]
        Quotient coefficients shape (..., max(N - 1, 1)) and values p(x).
    """
    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    n = coeffs.shape[-1]

    # The accumulator runs from the leading coefficient down to the
    # constant term. Every intermediate value is a quotient coefficient,
    # the last one is p(x).
    accumulator = coeffs[..., -1] + torch.zeros_like(x)
    partials = [accumulator]
    for i in range(n - 2, -1, -1):
        accumulator = coeffs[..., i] + accumulator * x
        partials.append(accumulator)

    value = partials.pop()

    if len(partials) == 0:
        # Constant: quotient is a length-1 placeholder
        quotient = torch.zeros_like(value).unsqueeze(-1)
    else:
        quotient = torch.stack(partials[::-1], dim=-1)

    return quotient, value


def polynomial_horner(p: Polynomial, x: Tensor) -> tuple[Polynomial, Tensor]:
    """Evaluate polynomial and deflate it by (t - x) in one Horner pass.

    Computes q and p(x) such that p(t) = q(t) * (t - x) + p(x).

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (...batch, N).
    x : Tensor
        Deflation points. Batch dimensions of p broadcast with x.

    Returns
    -------
    quotient : Polynomial
        Quotient of synthetic division, shape (...broadcast, N - 1).
        A constant p gives a length-1 zero placeholder.
    value : Tensor
        p(x), shape (...broadcast).

    Examples
    --------
    >>> p = polynomial(torch.tensor([140.0, -13.0, -8.0, 1.0]))
    >>> quotient, value = polynomial_horner(p, torch.tensor(7.0))
    >>> quotient.coeffs  # x^2 - x - 20
    tensor([-20.,  -1.,   1.])
    >>> value
    tensor(0.)
    """
    quotient, value = _horner(p.coeffs, x)

    return Polynomial(coeffs=quotient), value
