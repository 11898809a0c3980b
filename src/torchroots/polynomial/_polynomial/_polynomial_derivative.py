import torch

from ._polynomial import Polynomial


def polynomial_derivative(p: Polynomial, order: int = 1) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial, real or complex.
    order : int
        Derivative order (default 1).

    Returns
    -------
    Polynomial
        Derivative d^n p / dx^n. Constant polynomial returns [0.0].

    Examples
    --------
    >>> p = polynomial(torch.tensor([140.0, -13.0, -8.0, 1.0]))
    >>> polynomial_derivative(p).coeffs  # -13 - 16x + 3x^2
    tensor([-13., -16.,   3.])
    """
    coeffs = p.coeffs

    for _ in range(order):
        n = coeffs.shape[-1]
        if n <= 1:
            # Derivative of constant is zero
            return Polynomial(
                coeffs=torch.zeros(
                    *coeffs.shape[:-1],
                    1,
                    dtype=coeffs.dtype,
                    device=coeffs.device,
                )
            )

        # new_coeffs[i] = (i+1) * old_coeffs[i+1]
        # arange doesn't support complex, so build the factors in the
        # matching real dtype first
        real_dtype = coeffs.real.dtype if coeffs.is_complex() else coeffs.dtype
        if not real_dtype.is_floating_point:
            real_dtype = torch.float64
        indices = torch.arange(1, n, device=coeffs.device, dtype=real_dtype)
        coeffs = coeffs[..., 1:] * indices.to(
            torch.promote_types(coeffs.dtype, real_dtype)
        )

    return Polynomial(coeffs=coeffs)
