from torch import Tensor

from ._polynomial import Polynomial
from ._polynomial_horner import _horner


def polynomial_evaluate(p: Polynomial, x: Tensor) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (...batch, N).
    x : Tensor
        Evaluation points. The result shape is the broadcast of p's
        batch dims with x's shape.

    Returns
    -------
    Tensor
        Values p(x).

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    _, value = _horner(p.coeffs, x)

    return value
