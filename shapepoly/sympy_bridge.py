"""Conversions between Polynomial dicts and SymPy expressions.

Useful for display, debugging, and cross-checking results against SymPy.
Each single-character identifier maps to the SymPy Symbol of the same name.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import sympy
from sympy import Expr, Poly, Symbol, expand
from sympy.polys.polyerrors import PolynomialError

from .core.poly import Polynomial
from .errors import UndefinedConversion


def create_variables(names: Iterable[str]) -> List[Symbol]:
    """Create one SymPy symbol per identifier, e.g. "xy" -> [x, y]."""
    return [Symbol(c) for c in names]


def to_sympy(p: Polynomial) -> Expr:
    """Convert a Polynomial to a SymPy expression (commuted keys merge here)."""
    terms = []
    for key, coeff in p.items():
        term = sympy.Integer(int(coeff)) if float(coeff).is_integer() else sympy.Float(coeff)
        for c in key:
            term *= Symbol(c)
        terms.append(term)
    if not terms:
        return sympy.Integer(0)
    return sympy.Add(*terms)


def from_sympy(expr: Expr, variables: Optional[str] = None) -> Polynomial:
    """Convert a SymPy expression to a Polynomial with sorted keys.

    Args:
        expr:      Expression, expanded before conversion.
        variables: Identifiers to treat as variables; defaults to the free
                   symbols of expr.

    Raises:
        UndefinedConversion: if expr is not a polynomial in those variables
                             (e.g. 1/x, sin(x)), or a symbol name is not a
                             single character.
    """
    expr = sympy.sympify(expr)
    if variables is None:
        syms = sorted(expr.free_symbols, key=lambda s: s.name)
    else:
        syms = create_variables(variables)
    for s in syms:
        if len(s.name) != 1:
            raise UndefinedConversion(f"Symbol {s.name!r} is not a single-character identifier")

    expr = expand(expr)
    if not syms:
        if not expr.is_number:
            raise UndefinedConversion(f"{expr} is not a constant")
        return {"": float(expr)}

    try:
        poly = Poly(expr, *syms)
    except PolynomialError as exc:
        raise UndefinedConversion(f"{expr} is not a polynomial in {syms}") from exc

    out: Polynomial = {}
    for monom, coeff in poly.terms():
        if not coeff.is_number:
            raise UndefinedConversion(f"Coefficient {coeff} of {expr} is not numeric over {syms}")
        if coeff == 0:
            continue
        key = "".join(s.name * power for s, power in zip(syms, monom))
        out[key] = float(coeff)
    return out
