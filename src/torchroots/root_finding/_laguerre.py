"""Laguerre-style refinement of a single polynomial root."""

from typing import NamedTuple

import torch
from torch import Tensor

from torchroots.polynomial import (
    Polynomial,
    polynomial_degree,
    polynomial_derivative,
    polynomial_evaluate,
)

from ._compare import compare_magnitude, is_negligible
from ._convergence import (
    MAX_STEPS,
    LaguerreStatus,
    complex_dtype,
    default_tolerance,
)


class LaguerreResult(NamedTuple):
    """Result of a Laguerre root refinement.

    Parameters
    ----------
    root : Tensor
        Refined estimates, complex, shape matches the batch shape.
        For elements that did not converge this is the last estimate.
    converged : Tensor
        Boolean tensor, True where ``|p(root)|`` became negligible.
    status : Tensor
        ``int64`` tensor of :class:`LaguerreStatus` codes.
    num_iterations : Tensor
        ``int64`` tensor, number of correction steps applied per element.
    """

    root: Tensor
    converged: Tensor
    status: Tensor
    num_iterations: Tensor


def laguerre(
    p: Polynomial,
    x0: Tensor,
    *,
    tol: float | None = None,
    maxiter: int = MAX_STEPS,
) -> LaguerreResult:
    """
    Refine a root estimate of a polynomial with a Laguerre-style update.

    With ``n`` the degree of ``p`` and ``c`` the current estimate, each step
    computes

    .. math::

        G = \\frac{p'(c)}{p(c)}, \\quad
        H = G^2 - p''(c) - p(c), \\quad
        r = \\sqrt{(n - 1)(n H - G^2)}

    and moves ``c`` by ``n / (G \\pm r)``, taking the sign that gives the
    denominator of larger magnitude.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape ``(..., N)``, real or complex.
    x0 : Tensor
        Initial estimate, broadcastable to the batch shape of ``p``.
        Not modified.
    tol : float, optional
        Magnitude below which ``p(c)`` and the step count as zero.
        Default: dtype-aware (1e-9 for double precision).
    maxiter : int, default=10000
        Maximum number of correction steps.

    Returns
    -------
    LaguerreResult
        Refined roots with per-element convergence status.

    Examples
    --------
    >>> p = polynomial(torch.tensor([4.0, 0.0, 1.0], dtype=torch.float64))
    >>> result = laguerre(p, torch.tensor(0.5 + 0.5j, dtype=torch.complex128))
    >>> torch.allclose(result.root, torch.tensor(2j, dtype=torch.complex128))
    True
    >>> LaguerreStatus(result.status.item())
    <LaguerreStatus.CONVERGED: 0>

    Notes
    -----
    **Stopping**: an element stops when ``|p(c)|`` is negligible
    (``CONVERGED``), when the step it just took is negligible
    (``STALLED``), when ``c`` or ``p(c)`` is no longer finite
    (``DIVERGED``), or at ``maxiter`` (``MAX_ITERATIONS``). Stopped
    elements of a batch are frozen while the others keep iterating.

    **Auxiliary term**: ``H`` subtracts ``p(c)`` rather than dividing
    ``p''(c)`` by it. Near a simple root ``G`` dominates and the update
    reduces to a Newton step, so roots are still located to ``tol``.

    **Zero denominator**: no safeguard is applied. A zero denominator
    produces a non-finite step and the element stops as ``DIVERGED``.
    """
    coeffs = p.coeffs
    cdtype = complex_dtype(coeffs.dtype)
    coeffs = coeffs.to(cdtype)

    if tol is None:
        tol = default_tolerance(cdtype)

    p = Polynomial(coeffs=coeffs)
    p1 = polynomial_derivative(p)
    p2 = polynomial_derivative(p1)

    size = int(polynomial_degree(p))

    batch_shape = torch.broadcast_shapes(coeffs.shape[:-1], x0.shape)
    x = x0.to(device=coeffs.device, dtype=cdtype).expand(batch_shape).clone()

    status = torch.full(
        batch_shape,
        int(LaguerreStatus.MAX_ITERATIONS),
        dtype=torch.int64,
        device=x.device,
    )
    done = torch.zeros(batch_shape, dtype=torch.bool, device=x.device)
    num_iterations = torch.zeros(batch_shape, dtype=torch.int64, device=x.device)

    for _ in range(maxiter):
        y0 = polynomial_evaluate(p, x)

        # Residual check: is p(c) approximately zero
        diverged = ~torch.isfinite(y0) & ~done
        converged = is_negligible(y0, tol) & ~diverged & ~done

        status = status.masked_fill(diverged, int(LaguerreStatus.DIVERGED))
        status = status.masked_fill(converged, int(LaguerreStatus.CONVERGED))
        done = done | converged | diverged

        if torch.all(done):
            break

        g = polynomial_evaluate(p1, x) / y0
        h = g * g - polynomial_evaluate(p2, x) - y0
        r = torch.sqrt((size - 1) * (size * h - g * g))

        d1 = g + r
        d2 = g - r

        # Tie-break: the first candidate only wins when strictly larger
        denominator = torch.where(compare_magnitude(d1, d2, tol) > 0, d1, d2)

        a = size / denominator

        x = torch.where(done, x, x - a)
        num_iterations = num_iterations + (~done).to(torch.int64)

        # Step check: did the correction become approximately zero
        diverged = ~torch.isfinite(x) & ~done
        stalled = is_negligible(a, tol) & ~diverged & ~done

        status = status.masked_fill(diverged, int(LaguerreStatus.DIVERGED))
        status = status.masked_fill(stalled, int(LaguerreStatus.STALLED))
        done = done | stalled | diverged

        if torch.all(done):
            break

    return LaguerreResult(
        root=x,
        converged=status == int(LaguerreStatus.CONVERGED),
        status=status,
        num_iterations=num_iterations,
    )
