import torch
from torch import Tensor

from ._polynomial import Polynomial, polynomial


def polynomial_from_roots(roots: Tensor) -> Polynomial:
    """Construct monic polynomial from its roots.

    Constructs (x - r_0)(x - r_1)...(x - r_{n-1}).

    Parameters
    ----------
    roots : Tensor
        Roots, shape (..., N). Can be complex.

    Returns
    -------
    Polynomial
        Monic polynomial with given roots, shape (..., N+1).

    Examples
    --------
    >>> roots = torch.tensor([7.0, 5.0, -4.0])
    >>> polynomial_from_roots(roots).coeffs
    tensor([140., -13.,  -8.,   1.])
    """
    batch_shape = roots.shape[:-1]
    n_roots = roots.shape[-1]

    ones = torch.ones((*batch_shape, 1), dtype=roots.dtype, device=roots.device)

    if n_roots == 0:
        # Empty roots -> constant polynomial 1
        return polynomial(ones)

    zeros = torch.zeros_like(ones)

    coeffs = ones

    # (c_0 + c_1*x + ... + c_i*x^i) * (x - r_i)
    # new_coeffs[j] = c_{j-1} - r_i * c_j, with c_{-1} = c_{i+1} = 0
    for i in range(n_roots):
        root_i = roots[..., i : i + 1]

        shifted = torch.cat([zeros, coeffs], dim=-1)
        scaled = torch.cat([coeffs, zeros], dim=-1) * root_i

        coeffs = shifted - scaled

    return Polynomial(coeffs=coeffs)
