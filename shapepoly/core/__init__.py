from .monomial import Key, as_key, check_identifier, occurrences, remove_first, remove_all, sort_key
from .poly import (
    Polynomial, mk_polynomial, make_zero, make_const, make_var, variables,
    combine, prune, canonicalize, equal, is_zero,
    add, negate, substract, sub, scale, mult, termwise_product, inner,
)
from .calculus import differentiate, integrate, integrate_between
from .evaluation import Evaluation, mk_evaluation, evaluate, evaluate_partial, evaluate_mat
from .matrix import PolyMatrix, shape, transpose, mult_mat
