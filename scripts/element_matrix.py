#!/usr/bin/env python3
"""Print the gradient product matrix of a bilinear quad at one point.

Builds the four shape functions of the reference square [-1, 1]^2, stacks
their x/y derivatives into B (2 x 4), forms B^T B symbolically, evaluates it
at the requested point and hands the numbers to shapepoly.numeric.

Usage:
    python scripts/element_matrix.py --x 0.577350269 --y -0.577350269
"""

import argparse
import logging

from shapepoly import Config, PolynomialAlgebra, numeric


def quad_shape_functions(alg):
    """N_i = (1 + xi_i x)(1 + eta_i y) / 4 for the corners in counter-clockwise order."""
    corners = [(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)]
    return [
        alg.mk_polynomial([("", 0.25), ("x", 0.25 * xi), ("y", 0.25 * eta), ("xy", 0.25 * xi * eta)])
        for xi, eta in corners
    ]


def gradient_product(alg, x, y):
    """Return B^T B at (x, y) as a numeric 4 x 4 matrix."""
    shape_functions = quad_shape_functions(alg)
    b = [[alg.differentiate(n, c) for n in shape_functions] for c in "xy"]
    btb = alg.mult_mat(alg.transpose(b), b)
    values = alg.evaluate_mat(btb, alg.mk_evaluation([("x", x), ("y", y)]))
    return numeric.matrix(values)


def main():
    parser = argparse.ArgumentParser(description="Evaluate B^T B for a bilinear quad")
    parser.add_argument("--x", type=float, default=0.0, help="x coordinate of the point")
    parser.add_argument("--y", type=float, default=0.0, help="y coordinate of the point")
    parser.add_argument("--termwise", action="store_true", help="Use the termwise entry product")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = Config(
        strict_evaluation=True,
        canonical_keys=True,
        prune_zeros=True,
        matrix_product="termwise" if args.termwise else "ring",
    )
    alg = PolynomialAlgebra(config)

    k = gradient_product(alg, args.x, args.y)
    rows, cols = numeric.dim(k)
    row_sums = numeric.mult_mv(k, numeric.vector([1.0] * cols))

    print(f"Point: ({args.x}, {args.y})")
    print(f"Shape: {rows}x{cols} (square: {numeric.is_square(k)})")
    for row in numeric.to_lists(k):
        print("  " + "  ".join(f"{v: .6f}" for v in row))
    print("Row sums: " + "  ".join(f"{v: .6f}" for v in numeric.to_list(row_sums)))


if __name__ == "__main__":
    main()
