"""Dense numeric vectors and matrices backed by numpy.

This is the numeric side of the engine: evaluate_mat() output is turned into
float64 arrays here and combined with ordinary linear algebra.  Shapes are
checked up front so that mismatches raise DimensionMismatch instead of
numpy broadcasting or a bare ValueError.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatch


def vector(values: Sequence[float]) -> np.ndarray:
    """Build a 1-D float64 vector."""
    v = np.asarray(values, dtype=np.float64)
    if v.ndim != 1:
        raise DimensionMismatch(f"Expected a flat sequence, got {v.ndim} dimensions", expected=1, got=v.ndim)
    return v


def to_list(v: np.ndarray) -> List[float]:
    return [float(x) for x in v]


def _check_same_shape(v: np.ndarray, w: np.ndarray) -> None:
    if v.shape != w.shape:
        raise DimensionMismatch(
            f"Operand shapes differ: {v.shape} vs {w.shape}",
            expected=v.shape,
            got=w.shape,
        )


def dot_prod(v: np.ndarray, w: np.ndarray) -> float:
    _check_same_shape(v, w)
    return float(np.dot(v, w))


def norm(v: np.ndarray) -> float:
    """Euclidean norm, sqrt(v . v)."""
    return float(np.sqrt(dot_prod(v, v)))


def add(v: np.ndarray, w: np.ndarray) -> np.ndarray:
    """Elementwise sum of two vectors, or of two matrices of the same shape."""
    _check_same_shape(v, w)
    return v + w


def mult(v: np.ndarray, w: np.ndarray) -> np.ndarray:
    """Elementwise product; no broadcasting."""
    _check_same_shape(v, w)
    return v * w


def negate(v: np.ndarray) -> np.ndarray:
    return -v


def matrix(rows: Sequence[Sequence[float]]) -> np.ndarray:
    """Build a 2-D float64 matrix from nested rows; ragged input is rejected."""
    rows = [list(r) for r in rows]
    if not rows:
        return np.zeros((0, 0), dtype=np.float64)
    cols = len(rows[0])
    for i, r in enumerate(rows):
        if len(r) != cols:
            raise DimensionMismatch(
                f"Row {i} has {len(r)} entries, expected {cols}",
                expected=cols,
                got=len(r),
            )
    return np.array(rows, dtype=np.float64)


def to_lists(m: np.ndarray) -> List[List[float]]:
    return [to_list(row) for row in m]


def dim(m: np.ndarray) -> Tuple[int, int]:
    """Return (rows, columns)."""
    return (int(m.shape[0]), int(m.shape[1]))


def is_square(m: np.ndarray) -> bool:
    rows, cols = dim(m)
    return rows == cols


def transpose(m: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(m.T)


def mult_mv(m: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Matrix-vector product: entry i is dot_prod(row_i, v)."""
    rows, cols = dim(m)
    if cols != v.shape[0]:
        raise DimensionMismatch(
            f"Cannot multiply {rows}x{cols} matrix by vector of length {v.shape[0]}",
            expected=cols,
            got=v.shape[0],
        )
    return m @ v


def mult_mm(m: np.ndarray, n: np.ndarray) -> np.ndarray:
    rows_m, cols_m = dim(m)
    rows_n, cols_n = dim(n)
    if cols_m != rows_n:
        raise DimensionMismatch(
            f"Cannot multiply {rows_m}x{cols_m} by {rows_n}x{cols_n}",
            expected=cols_m,
            got=rows_n,
        )
    return m @ n


def vec_prod(v: np.ndarray, w: np.ndarray) -> np.ndarray:
    """Outer product: row i is v[i] * w."""
    return np.outer(v, w)
