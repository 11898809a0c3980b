"""Convergence constants and status codes for root finding."""

import enum

import torch

# Magnitude below which a complex quantity counts as zero
SMALL_NUMBER = 1e-9

# Step cap for a single Laguerre solve
MAX_STEPS = 10000


class LaguerreStatus(enum.IntEnum):
    """Why a Laguerre iteration stopped."""

    # |p(c)| is negligible
    CONVERGED = 0
    # the correction step is negligible but |p(c)| is not
    STALLED = 1
    # the step cap was reached
    MAX_ITERATIONS = 2
    # the estimate or p(c) became inf/NaN
    DIVERGED = 3


def default_tolerance(dtype: torch.dtype) -> float:
    """Return dtype-appropriate default magnitude tolerance.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype, real or complex.

    Returns
    -------
    float
        ``SMALL_NUMBER`` for double precision, looser values otherwise.
    """
    if dtype in (torch.float16, torch.bfloat16, torch.complex32):
        return 1e-3
    elif dtype in (torch.float32, torch.complex64):
        return 1e-5
    else:  # float64, complex128 and others
        return SMALL_NUMBER


def complex_dtype(dtype: torch.dtype) -> torch.dtype:
    """Return the complex dtype roots of ``dtype`` coefficients live in.

    Preserves precision: double precision (and integer) input maps to
    complex128, lower precision to complex64, complex input is kept.
    """
    if dtype.is_complex:
        return dtype
    if dtype in (torch.float32, torch.float16, torch.bfloat16):
        return torch.complex64
    return torch.complex128
