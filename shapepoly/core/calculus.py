"""Exact differentiation and integration with respect to one variable.

Both operations rewrite keys, which can make two terms land on the same key
(e.g. d/dx of "xyx" and "yxx" both give "yx").  Such terms are summed.
"""

from __future__ import annotations

from .evaluation import evaluate_partial
from .monomial import check_identifier, occurrences, remove_first
from .poly import Polynomial, combine, substract


def differentiate(p: Polynomial, c: str) -> Polynomial:
    """Partial derivative of p with respect to c.

    Terms without c vanish.  Every other term is multiplied by its exponent
    of c and loses the leftmost occurrence of c.

      >>> differentiate({"": 1.0, "x": 2.0, "y": 3.0, "xy": 4.0, "xxy": 5.0}, "x")
      {'': 2.0, 'y': 4.0, 'xy': 10.0}
    """
    check_identifier(c)
    return combine(
        (remove_first(c, key), occurrences(c, key) * coeff)
        for key, coeff in p.items()
        if c in key
    )


def integrate(p: Polynomial, c: str) -> Polynomial:
    """Antiderivative of p with respect to c (zero integration constant).

    Every term is divided by its exponent of c plus one and gets c prepended
    to its key.

      >>> integrate({"": 1.0, "y": 3.0}, "y")
      {'y': 1.0, 'yy': 1.5}
    """
    check_identifier(c)
    return combine(
        (c + key, coeff / (occurrences(c, key) + 1.0))
        for key, coeff in p.items()
    )


def integrate_between(p: Polynomial, c: str, lower: float, upper: float) -> Polynomial:
    """Definite integral of p over c in [lower, upper].

    The result is a polynomial in the remaining variables.
    """
    antiderivative = integrate(p, c)
    return substract(
        evaluate_partial(antiderivative, {c: upper}),
        evaluate_partial(antiderivative, {c: lower}),
    )
