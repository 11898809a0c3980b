from ._compare import compare_magnitude, is_negligible
from ._convergence import (
    MAX_STEPS,
    SMALL_NUMBER,
    LaguerreStatus,
    complex_dtype,
    default_tolerance,
)
from ._exceptions import ConvergenceWarning
from ._laguerre import LaguerreResult, laguerre
from ._laguerre_roots import laguerre_roots

__all__ = [
    "MAX_STEPS",
    "SMALL_NUMBER",
    "compare_magnitude",
    "complex_dtype",
    "default_tolerance",
    "is_negligible",
    "laguerre",
    "laguerre_roots",
    "ConvergenceWarning",
    "LaguerreResult",
    "LaguerreStatus",
]
