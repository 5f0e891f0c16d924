"""Sparse multivariate polynomials over the reals.

A polynomial is a dictionary mapping monomial keys (see monomial.py) to float
coefficients:

  Polynomial  =  Dict[Key, float]

Example (variables x, y):
  5 x^2 y + 2 x + 1  →  {"xxy": 5.0, "x": 2.0, "": 1.0}

The zero polynomial is the empty dict {}.  Unlike most polynomial libraries,
terms whose coefficient drops to 0.0 are kept as explicit entries; call prune()
to remove them.  Keys are combined by concatenation, so commuted spellings of
one monomial ("xy", "yx") stay separate until canonicalize() is applied.

No function in this module mutates its arguments.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Sequence, Tuple, Union

from ..errors import DimensionMismatch
from .monomial import Key, as_key, check_identifier, sort_key

# Polynomial type: maps each monomial key to its coefficient.
Polynomial = Dict[Key, float]

Pairs = Union[Mapping[Key, float], Iterable[Tuple[Key, float]]]


def mk_polynomial(pairs: Pairs) -> Polynomial:
    """Build a polynomial from an association list or mapping.

    When a key is repeated the last pair wins; earlier ones are discarded,
    not summed.  Coefficients are taken as given (NaN and inf propagate).
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    return {as_key(key): coeff for key, coeff in items}


def make_zero() -> Polynomial:
    """Return the zero polynomial (empty dict)."""
    return {}


def make_const(value: float) -> Polynomial:
    """Return the constant polynomial `value`."""
    return {"": float(value)}


def make_var(c: str) -> Polynomial:
    """Return the polynomial consisting of the single variable c."""
    return {check_identifier(c): 1.0}


def variables(p: Polynomial) -> str:
    """Return every variable used in p, de-duplicated, as a sorted string."""
    return "".join(sorted(set("".join(p))))


def combine(terms: Iterable[Tuple[Key, float]]) -> Polynomial:
    """Accumulate (key, coeff) pairs into a polynomial, summing repeated keys."""
    out: Polynomial = {}
    for key, coeff in terms:
        if key in out:
            out[key] = out[key] + coeff
        else:
            out[key] = coeff
    return out


def prune(p: Polynomial) -> Polynomial:
    """Drop terms whose coefficient is exactly zero."""
    return {key: coeff for key, coeff in p.items() if coeff != 0}


def canonicalize(p: Polynomial) -> Polynomial:
    """Sort the identifiers of every key and sum the terms that now coincide.

    After this, two polynomials that are equal as mathematical objects have
    equal keys (up to explicit zero terms).
    """
    return combine((sort_key(key), coeff) for key, coeff in p.items())


def equal(a: Polynomial, b: Polynomial) -> bool:
    """Return True iff a and b denote the same polynomial.

    Key order and explicit zero terms are ignored.
    """
    return prune(canonicalize(a)) == prune(canonicalize(b))


def is_zero(p: Polynomial) -> bool:
    """Return True iff every coefficient of p is zero (vacuously for {})."""
    return all(coeff == 0 for coeff in p.values())


# ---- Ring operations ----

def add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return p + q: union of terms, shared keys summed."""
    out: Polynomial = dict(p)
    for key, coeff in q.items():
        out[key] = out[key] + coeff if key in out else coeff
    return out


def negate(p: Polynomial) -> Polynomial:
    """Return -p (coefficient-wise)."""
    return {key: -coeff for key, coeff in p.items()}


def substract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return p - q, i.e. add(p, negate(q)).

    Cancelled terms remain as explicit 0.0 entries.
    """
    return add(p, negate(q))


sub = substract


def scale(p: Polynomial, factor: float) -> Polynomial:
    """Multiply every coefficient of p by factor."""
    return {key: coeff * factor for key, coeff in p.items()}


def mult(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return p * q.

    Each pair of terms contributes key kp + kq (p's key first) with
    coefficient cp * cq; contributions sharing a key are summed.
    """
    return combine(
        (key_p + key_q, coeff_p * coeff_q)
        for key_p, coeff_p in p.items()
        for key_q, coeff_q in q.items()
    )


def termwise_product(p: Polynomial, q: Polynomial) -> Polynomial:
    """Union of p and q where coefficients of shared keys are multiplied.

    Keys present in only one operand keep their coefficient.  This is the
    entry product used by inner() and mult_mat() unless another one is given.
    """
    out: Polynomial = dict(p)
    for key, coeff in q.items():
        out[key] = out[key] * coeff if key in out else coeff
    return out


def inner(
    ps: Sequence[Polynomial],
    qs: Sequence[Polynomial],
    product: Callable[[Polynomial, Polynomial], Polynomial] = termwise_product,
) -> Polynomial:
    """Dot product of two polynomial vectors.

    Entries at matching positions are combined with `product` and the results
    summed with add().  Pass product=mult for the ring dot product.
    """
    if len(ps) != len(qs):
        raise DimensionMismatch(
            f"inner() needs vectors of equal length, got {len(ps)} and {len(qs)}",
            expected=len(ps),
            got=len(qs),
        )
    out: Polynomial = {}
    for p, q in zip(ps, qs):
        out = add(out, product(p, q))
    return out
