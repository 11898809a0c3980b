"""
Command-line root finder.

Example:
  torchroots 1 -8 -13 140        # x^3 - 8x^2 - 13x + 140
  python -m torchroots 1 0 4 --seed 7
"""

import argparse
import sys
import time
from typing import List, Optional, Sequence

import torch
from torch import Tensor

from torchroots.polynomial import PolynomialError, polynomial, polynomial_roots


def format_equation(coefficients: Sequence[str]) -> str:
    """
    Render coefficients, highest power first, as an equation string.

    Coefficients equal to 1 print as a bare ``x``. Every term is joined
    with ``+``, so negative coefficients keep their sign: ``1 -8 140``
    renders as ``x^2 + -8x + 140``.
    """
    terms: List[str] = []
    exponent = len(coefficients) - 1
    for text in coefficients[:-1]:
        term = "x" if float(text) == 1 else f"{text}x"
        if exponent > 1:
            term += f"^{exponent}"
        terms.append(term)
        exponent -= 1
    terms.append(coefficients[-1])
    return " + ".join(terms)


def format_roots(roots: Tensor) -> str:
    """Render complex roots as ``(real,imag)`` pairs in extraction order."""
    return " ".join(f"({z.real:g},{z.imag:g})" for z in roots.tolist())


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="torchroots",
        allow_abbrev=False,
        description="Find all complex roots of a polynomial.",
    )
    ap.add_argument(
        "coefficients",
        nargs="+",
        metavar="COEFF",
        help="Coefficients, highest power first, e.g. 1 -8 -13 140",
    )
    ap.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random starting points (default: current time)",
    )
    return ap


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _positional_tokens(argv: Sequence[str]) -> List[str]:
    """Tokens of ``argv`` in order, without the ``--seed`` option and its value."""
    tokens = []
    remaining = iter(argv)
    for token in remaining:
        if token == "--seed":
            next(remaining, None)
        elif token != "--" and not token.startswith("--seed="):
            tokens.append(token)
    return tokens


def main(argv: Optional[Sequence[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)

    ap = build_parser()
    # argparse only knows plain negative numbers, so exponent forms such
    # as -1e-3 come back as unknown options
    args, extras = ap.parse_known_args(argv)

    unrecognized = [token for token in extras if not _is_number(token)]
    if unrecognized:
        ap.error(f"unrecognized arguments: {' '.join(unrecognized)}")

    coefficients = _positional_tokens(argv) if extras else args.coefficients

    try:
        values = [float(text) for text in coefficients]
    except ValueError as e:
        ap.error(str(e))

    seed = args.seed if args.seed is not None else time.time_ns()
    generator = torch.Generator().manual_seed(seed)

    # Ascending order: index 0 holds the constant term
    coeffs = torch.tensor(values[::-1], dtype=torch.float64)

    print("Your equation is:")
    print(format_equation(coefficients))

    try:
        roots = polynomial_roots(polynomial(coeffs), generator=generator)
    except PolynomialError as e:
        ap.error(str(e))

    print("The roots of the polynomial are:")
    print(format_roots(roots))
