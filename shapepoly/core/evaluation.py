"""Numeric evaluation of polynomials and polynomial matrices.

An evaluation point binds some variables to values:

  Evaluation = Dict[str, float]     e.g. {"x": 2.0, "y": 1.0}

Substituting c = v multiplies every term by v ** occurrences(c, key) and
removes c from the key.  evaluate() then sums what is left.  Variables that
the point leaves unbound are either counted as 1 (default) or reported with
UnboundVariable (strict=True).  evaluate_partial() returns the reduced
polynomial instead of a number.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from ..errors import UnboundVariable
from .monomial import check_identifier, remove_all
from .poly import Polynomial, combine, variables

logger = logging.getLogger(__name__)

Evaluation = Dict[str, float]

PointPairs = Union[Mapping[str, float], Iterable[Tuple[str, float]]]


def mk_evaluation(pairs: PointPairs) -> Evaluation:
    """Build an evaluation point from an association list or mapping (last pair wins)."""
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    point: Evaluation = {}
    for c, value in items:
        point[check_identifier(c)] = value
    return point


def _substitute(key: str, coeff: float, point: Mapping[str, float]) -> Tuple[str, float]:
    for c, value in point.items():
        n = key.count(c)
        if n:
            coeff *= value ** n
            key = remove_all(c, key)
    return key, coeff


def evaluate_partial(p: Polynomial, point: Mapping[str, float]) -> Polynomial:
    """Substitute the variables bound by point and return the residual polynomial.

    Terms that coincide once the bound variables are removed are summed, so a
    point binding every variable leaves at most the constant term "".
    """
    for c in point:
        check_identifier(c)
    return combine(_substitute(key, coeff, point) for key, coeff in p.items())


def evaluate(p: Polynomial, point: Mapping[str, float], strict: bool = False) -> float:
    """Evaluate p at point.

    Args:
        p:      Polynomial to evaluate.
        point:  Values for (a subset of) the variables of p.
        strict: If True, raise UnboundVariable when p uses a variable that
                point does not bind.  Otherwise unbound variables count as 1.

    Returns:
        The sum of all coefficients after substitution.
    """
    residual = evaluate_partial(p, point)
    unbound = variables(residual)
    if unbound:
        if strict:
            raise UnboundVariable(unbound)
        logger.debug("Substituting 1 for unbound variable(s) %r", unbound)
    return sum(residual.values(), 0.0)


def evaluate_mat(
    m: Sequence[Sequence[Polynomial]],
    point: Mapping[str, float],
    strict: bool = False,
) -> List[List[float]]:
    """Evaluate every entry of a polynomial matrix; the shape is preserved."""
    return [[evaluate(entry, point, strict=strict) for entry in row] for row in m]
