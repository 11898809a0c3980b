import torch
from torch import Tensor

from torchroots.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree


def polynomial_roots(
    p: Polynomial,
    *,
    generator: torch.Generator | None = None,
) -> Tensor:
    """Find polynomial roots by Laguerre iteration with deflation.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (..., N).
        Leading coefficient must be non-zero.
    generator : torch.Generator, optional
        Source of the random starting points. Defaults to PyTorch's
        global generator.

    Returns
    -------
    Tensor
        Complex roots, shape (..., N-1), in the order they were extracted.
        Always complex dtype.

    Raises
    ------
    DegreeError
        If polynomial is constant (degree 0) or any leading coefficient
        is zero.

    Examples
    --------
    >>> p = polynomial(torch.tensor([140.0, -13.0, -8.0, 1.0], dtype=torch.float64))
    >>> roots = polynomial_roots(p, generator=torch.Generator().manual_seed(0))
    >>> sorted(round(v, 6) for v in roots.real.tolist())
    [-4.0, 5.0, 7.0]

    Notes
    -----
    Each root is found on the current deflated polynomial from a random
    start in the unit square, polished against ``p`` itself, then divided
    out. The final linear factor is solved in closed form. See
    :func:`torchroots.root_finding.laguerre_roots`.
    """
    from torchroots.root_finding import laguerre_roots

    degree = int(polynomial_degree(p))

    if degree < 1:
        raise DegreeError(
            f"Cannot find roots of constant polynomial (degree 0), got {degree + 1} coefficients"
        )

    # Leading coefficient (highest degree)
    leading = p.coeffs[..., -1]

    if torch.any(leading == 0):
        raise DegreeError(
            "Leading coefficient must be non-zero for root finding. "
            "Drop the vanishing highest-power coefficients first."
        )

    return laguerre_roots(p, generator=generator)
