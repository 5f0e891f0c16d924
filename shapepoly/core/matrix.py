"""Matrices whose entries are polynomials.

A polynomial matrix is a list of rows, each a list of Polynomial dicts:

  PolyMatrix = List[List[Polynomial]]

These helpers combine shape-function matrices symbolically (e.g. B^T B)
before evaluate_mat() turns the result into numbers at a quadrature point.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Tuple

from ..errors import DimensionMismatch
from .poly import Polynomial, inner, termwise_product

logger = logging.getLogger(__name__)

PolyMatrix = List[List[Polynomial]]


def shape(m: Sequence[Sequence[Polynomial]]) -> Tuple[int, int]:
    """Return (rows, columns); raise DimensionMismatch for ragged rows.

    A matrix without rows has shape (0, 0).
    """
    if not m:
        return (0, 0)
    cols = len(m[0])
    for i, row in enumerate(m):
        if len(row) != cols:
            raise DimensionMismatch(
                f"Row {i} has {len(row)} entries, expected {cols}",
                expected=cols,
                got=len(row),
            )
    return (len(m), cols)


def transpose(m: Sequence[Sequence[Polynomial]]) -> PolyMatrix:
    rows, cols = shape(m)
    return [[m[i][j] for i in range(rows)] for j in range(cols)]


def mult_mat(
    a: Sequence[Sequence[Polynomial]],
    b: Sequence[Sequence[Polynomial]],
    product: Callable[[Polynomial, Polynomial], Polynomial] = termwise_product,
) -> PolyMatrix:
    """Matrix product a @ b with inner() in place of the scalar dot product.

    Args:
        a:       rows(a) x k polynomial matrix.
        b:       k x cols(b) polynomial matrix.
        product: Entry product handed to inner(); use mult for the ring product.

    Returns:
        rows(a) x cols(b) polynomial matrix.

    Raises:
        DimensionMismatch: if columns(a) != rows(b) or either matrix is ragged.
    """
    rows_a, cols_a = shape(a)
    rows_b, _ = shape(b)
    if rows_a == 0:
        return []
    if cols_a != rows_b:
        raise DimensionMismatch(
            f"Cannot multiply {rows_a}x{cols_a} by {rows_b}-row matrix",
            expected=cols_a,
            got=rows_b,
        )
    columns = transpose(b)
    logger.debug("mult_mat: (%d x %d) @ (%d x %d)", rows_a, cols_a, rows_b, len(columns))
    if not columns:
        return [[] for _ in a]
    return [[inner(row, col, product) for col in columns] for row in a]
