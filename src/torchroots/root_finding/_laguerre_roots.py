"""All roots of a polynomial by Laguerre iteration and deflation."""

import warnings

import torch
from torch import Tensor

from torchroots.polynomial import (
    Polynomial,
    polynomial_degree,
    polynomial_horner,
)

from ._convergence import (
    MAX_STEPS,
    LaguerreStatus,
    complex_dtype,
)
from ._exceptions import ConvergenceWarning
from ._laguerre import laguerre


def _random_start(
    batch_shape: torch.Size,
    cdtype: torch.dtype,
    device: torch.device,
    generator: torch.Generator | None,
) -> Tensor:
    """Draw starting points with real and imaginary parts in [0, 1)."""
    real_dtype = torch.float64 if cdtype == torch.complex128 else torch.float32

    # Real part is drawn first
    parts = torch.rand(
        (2, *batch_shape),
        generator=generator,
        dtype=real_dtype,
        device=device,
    )

    return torch.complex(parts[0], parts[1]).to(cdtype)


def laguerre_roots(
    p: Polynomial,
    *,
    generator: torch.Generator | None = None,
    tol: float | None = None,
    maxiter: int = MAX_STEPS,
) -> Tensor:
    """Find all roots of a polynomial by Laguerre iteration with deflation.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape ``(..., N)``, real or complex.
        The leading coefficient is not checked; a zero leading coefficient
        gives non-finite or meaningless roots.
    generator : torch.Generator, optional
        Source of the random starting points. Defaults to PyTorch's
        global generator.
    tol : float, optional
        Tolerance passed to :func:`laguerre`. Default: dtype-aware.
    maxiter : int, default=10000
        Step cap for every :func:`laguerre` call.

    Returns
    -------
    Tensor
        Complex roots, shape ``(..., N-1)``, in extraction order.
        complex128 for float64 input, complex64 for float32, complex input
        keeps its dtype.

    Raises
    ------
    ValueError
        If the polynomial has degree < 1 (constant polynomial).

    Warns
    -----
    ConvergenceWarning
        If any refinement stopped at ``maxiter``. The best estimates are
        still returned.

    Examples
    --------
    >>> p = polynomial(torch.tensor([6.0, 3.0], dtype=torch.float64))
    >>> laguerre_roots(p).real
    tensor([-2.], dtype=torch.float64)

    Notes
    -----
    While the working polynomial ``q`` has degree 2 or more:

    1. refine a random start in the unit square against ``q``;
    2. polish the estimate against the original ``p``, removing the error
       accumulated by earlier deflations;
    3. divide ``q`` by ``(x - root)`` with :func:`polynomial_horner`.

    The remaining linear factor ``q_0 + q_1 x`` contributes ``-q_0 / q_1``.
    A degree ``D`` polynomial therefore always yields exactly ``D`` roots.

    Repeated calls with different random states follow different paths
    but should agree on the set of roots up to ordering.
    """
    coeffs = p.coeffs
    if polynomial_degree(p) < 1:
        raise ValueError("Polynomial must have degree >= 1")

    cdtype = complex_dtype(coeffs.dtype)
    original = Polynomial(coeffs=coeffs.to(cdtype))
    batch_shape = coeffs.shape[:-1]

    working = original
    roots = []
    stopped_at_cap = False

    while polynomial_degree(working) > 1:
        start = _random_start(batch_shape, cdtype, coeffs.device, generator)

        rough = laguerre(working, start, tol=tol, maxiter=maxiter)
        polished = laguerre(original, rough.root, tol=tol, maxiter=maxiter)

        for result in (rough, polished):
            stopped_at_cap = stopped_at_cap or bool(
                torch.any(result.status == int(LaguerreStatus.MAX_ITERATIONS))
            )

        working, _ = polynomial_horner(working, polished.root)
        roots.append(polished.root)

    # Linear remainder q_0 + q_1 x
    roots.append(-working.coeffs[..., 0] / working.coeffs[..., 1])

    if stopped_at_cap:
        warnings.warn(
            f"Laguerre iteration reached maxiter={maxiter} without "
            f"converging; roots may be inaccurate.",
            ConvergenceWarning,
            stacklevel=2,
        )

    return torch.stack(roots, dim=-1)
