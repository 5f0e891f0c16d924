"""Configuration dataclass for the polynomial engine.

A Config is handed to PolynomialAlgebra (see algebra.py), which applies it to
every operation.  The module-level functions in shapepoly.core take the same
choices as explicit keyword arguments instead.
"""

from __future__ import annotations

from dataclasses import dataclass

# Entry products accepted by Config.matrix_product.
PRODUCT_TERMWISE = "termwise"   # union of terms, shared keys multiplied
PRODUCT_RING = "ring"           # full polynomial multiplication (mult)
MATRIX_PRODUCTS = (PRODUCT_TERMWISE, PRODUCT_RING)


@dataclass(frozen=True)
class Config:
    """Frozen engine options.

    Groups:
        Evaluation:      strict_evaluation
        Representation:  canonical_keys, prune_zeros
        Matrices:        matrix_product
    """

    # --- Evaluation ---
    strict_evaluation: bool = False   # raise UnboundVariable instead of substituting 1

    # --- Representation ---
    canonical_keys: bool = False      # sort identifiers in every result key ("yx" -> "xy")
    prune_zeros: bool = False         # drop explicit 0.0 terms from every result

    # --- Matrices ---
    matrix_product: str = PRODUCT_TERMWISE

    def __post_init__(self):
        if self.matrix_product not in MATRIX_PRODUCTS:
            raise ValueError(
                f"matrix_product must be one of {MATRIX_PRODUCTS}, got {self.matrix_product!r}"
            )
