"""Polynomial operations bound to a Config.

PolynomialAlgebra wraps the pure functions of shapepoly.core and post-processes
every polynomial result according to its Config (canonical keys, zero
pruning), picks the entry product for matrix multiplication, and chooses
between lenient and strict evaluation.

Usage:
    alg = PolynomialAlgebra(Config(canonical_keys=True, strict_evaluation=True))
    n1 = alg.mk_polynomial([("", 0.25), ("x", -0.25), ("y", -0.25), ("xy", 0.25)])
    dn1 = alg.differentiate(n1, "x")
    k = alg.evaluate_mat(alg.mult_mat(bt, b), {"x": 0.577, "y": -0.577})
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

from .config import PRODUCT_RING, Config
from .core import calculus, evaluation, matrix, poly
from .core.matrix import PolyMatrix
from .core.poly import Pairs, Polynomial

logger = logging.getLogger(__name__)


class PolynomialAlgebra:
    """Configured entry point to the polynomial engine.

    Inputs are never modified; every method returns new values.
    """

    def __init__(self, config: Config = Config()):
        self.config = config
        self._product = poly.mult if config.matrix_product == PRODUCT_RING else poly.termwise_product
        logger.debug("PolynomialAlgebra created with %s", config)

    def _finish(self, p: Polynomial) -> Polynomial:
        if self.config.canonical_keys:
            p = poly.canonicalize(p)
        if self.config.prune_zeros:
            p = poly.prune(p)
        return p

    def _finish_matrix(self, m: PolyMatrix) -> PolyMatrix:
        return [[self._finish(entry) for entry in row] for row in m]

    # ---- Construction ----

    def mk_polynomial(self, pairs: Pairs) -> Polynomial:
        return self._finish(poly.mk_polynomial(pairs))

    def mk_evaluation(self, pairs) -> evaluation.Evaluation:
        return evaluation.mk_evaluation(pairs)

    def variables(self, p: Polynomial) -> str:
        return poly.variables(p)

    # ---- Ring operations ----

    def add(self, p: Polynomial, q: Polynomial) -> Polynomial:
        return self._finish(poly.add(p, q))

    def substract(self, p: Polynomial, q: Polynomial) -> Polynomial:
        return self._finish(poly.substract(p, q))

    def mult(self, p: Polynomial, q: Polynomial) -> Polynomial:
        return self._finish(poly.mult(p, q))

    def negate(self, p: Polynomial) -> Polynomial:
        return self._finish(poly.negate(p))

    def scale(self, p: Polynomial, factor: float) -> Polynomial:
        return self._finish(poly.scale(p, factor))

    def is_zero(self, p: Polynomial) -> bool:
        return poly.is_zero(p)

    def inner(self, ps: Sequence[Polynomial], qs: Sequence[Polynomial]) -> Polynomial:
        return self._finish(poly.inner(ps, qs, self._product))

    # ---- Calculus ----

    def differentiate(self, p: Polynomial, c: str) -> Polynomial:
        return self._finish(calculus.differentiate(p, c))

    def integrate(self, p: Polynomial, c: str) -> Polynomial:
        return self._finish(calculus.integrate(p, c))

    def integrate_between(self, p: Polynomial, c: str, lower: float, upper: float) -> Polynomial:
        return self._finish(calculus.integrate_between(p, c, lower, upper))

    # ---- Evaluation ----

    def evaluate(self, p: Polynomial, point: Mapping[str, float]) -> float:
        return evaluation.evaluate(p, point, strict=self.config.strict_evaluation)

    def evaluate_partial(self, p: Polynomial, point: Mapping[str, float]) -> Polynomial:
        return self._finish(evaluation.evaluate_partial(p, point))

    def evaluate_mat(self, m: Sequence[Sequence[Polynomial]], point: Mapping[str, float]) -> List[List[float]]:
        return evaluation.evaluate_mat(m, point, strict=self.config.strict_evaluation)

    # ---- Matrices ----

    def transpose(self, m: Sequence[Sequence[Polynomial]]) -> PolyMatrix:
        return matrix.transpose(m)

    def mult_mat(self, a: Sequence[Sequence[Polynomial]], b: Sequence[Sequence[Polynomial]]) -> PolyMatrix:
        return self._finish_matrix(matrix.mult_mat(a, b, self._product))
