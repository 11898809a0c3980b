import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> Tensor:
    """Formal degree of a polynomial with ``N`` coefficients, i.e. ``N - 1``.

    The degree is shared by every element of a batch and returned as a
    0-dim ``int64`` tensor. Vanishing leading coefficients still count, so
    ``polynomial([1.0, 2.0, 0.0])`` has degree 2; :func:`polynomial_roots`
    rejects such input separately.
    """
    return torch.tensor(
        p.coeffs.shape[-1] - 1, dtype=torch.int64, device=p.coeffs.device
    )
