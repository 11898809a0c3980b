"""Tolerance-aware magnitude comparison of complex tensors."""

import torch
from torch import Tensor

from ._convergence import SMALL_NUMBER


def compare_magnitude(a: Tensor, b: Tensor, tol: float = SMALL_NUMBER) -> Tensor:
    """Order complex numbers by magnitude within a tolerance.

    Parameters
    ----------
    a, b : Tensor
        Real or complex values, broadcastable.
    tol : float
        Magnitudes closer than ``tol`` compare equal.

    Returns
    -------
    Tensor
        ``int64`` tensor: -1 where ``|a| < |b| - tol``, 1 where
        ``|a| > |b| + tol``, 0 otherwise. NaN compares as 0.

    Notes
    -----
    Only magnitudes are compared, so phase is ignored. The Laguerre
    solver uses this for two different questions:

    - whether a residual or step is approximately zero, through
      :func:`is_negligible`;
    - which of two candidate denominators is larger, where a result of
      0 (a tie) selects the second candidate.
    """
    difference = a.abs() - b.abs()

    return (difference > tol).to(torch.int64) - (difference < -tol).to(
        torch.int64
    )


def is_negligible(z: Tensor, tol: float = SMALL_NUMBER) -> Tensor:
    """Return a mask of elements whose magnitude is within ``tol`` of zero."""
    return compare_magnitude(z, torch.zeros_like(z), tol) == 0
