from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_roots import polynomial_from_roots
from ._polynomial_horner import polynomial_horner
from ._polynomial_roots import polynomial_roots

__all__ = [
    "Polynomial",
    "polynomial",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_evaluate",
    "polynomial_from_roots",
    "polynomial_horner",
    "polynomial_roots",
]
