"""Exact symbolic polynomials for finite-element shape functions."""

from .config import Config
from .errors import PolynomialError, UnboundVariable, DimensionMismatch, UndefinedConversion
from .core import (
    Polynomial, Evaluation, PolyMatrix,
    mk_polynomial, mk_evaluation, variables, occurrences,
    add, substract, mult, negate, scale, inner,
    differentiate, integrate, integrate_between,
    evaluate, evaluate_partial, evaluate_mat, mult_mat,
)
from .algebra import PolynomialAlgebra

__version__ = "0.1.0"
