from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchroots.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[..., 0] + coeffs[..., 1]*x + coeffs[..., 2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N) where N = degree + 1.
        coeffs[..., i] is the coefficient of x^i. Real or complex.
        Batch dimensions come first, coefficient dimension last.

    Examples
    --------
    Single polynomial x^3 - 8x^2 - 13x + 140:
        Polynomial(coeffs=torch.tensor([140.0, -13.0, -8.0, 1.0]))

    Batch of 2 polynomials:
        Polynomial(coeffs=torch.tensor([[6.0, 3.0], [4.0, 2.0]]))
        # First: 6 + 3x, Second: 4 + 2x

    Evaluation:
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __call__(self, x: Tensor) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs: Tensor) -> Polynomial:
    """Create polynomial from coefficient tensor.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (..., N).
        Must have at least one coefficient.

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is empty (size 0 in last dimension).

    Examples
    --------
    >>> p = polynomial(torch.tensor([6.0, 3.0]))  # 6 + 3x
    >>> p.coeffs
    tensor([6., 3.])
    """
    if coeffs.dim() == 0:
        raise PolynomialError(
            "Polynomial coefficients must have a coefficient dimension"
        )

    if coeffs.numel() == 0 or coeffs.shape[-1] == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Polynomial(coeffs=coeffs)
