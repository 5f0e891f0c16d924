"""Monomial keys.

A monomial is stored as a string of single-character variable identifiers in
which repetition encodes the exponent:

  ""     →  1
  "x"    →  x
  "xxy"  →  x^2 * y

Keys are not sorted on construction.  Operations build them by concatenation
in a fixed position, so "xy" and "yx" are distinct keys for the same monomial
unless the polynomial is passed through canonicalize() (see poly.py).
"""

from __future__ import annotations

# Monomial key: one character per variable occurrence.
Key = str


def check_identifier(c) -> str:
    """Return c if it is a single-character variable identifier, else raise ValueError."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"Variable identifier must be a single character, got {c!r}")
    return c


def occurrences(c: str, key: Key) -> float:
    """Return how many times variable c appears in key, as a float.

    The result is used directly as a coefficient multiplier (differentiation)
    or divisor (integration).
    """
    return float(key.count(c))


def remove_first(c: str, key: Key) -> Key:
    """Drop the leftmost occurrence of c from key."""
    return key.replace(c, "", 1)


def remove_all(c: str, key: Key) -> Key:
    """Drop every occurrence of c from key."""
    return key.replace(c, "")


def sort_key(key: Key) -> Key:
    """Return the canonical spelling of key (identifiers in sorted order)."""
    return "".join(sorted(key))


def as_key(key) -> Key:
    """Coerce a string or a sequence of identifiers to a key."""
    if isinstance(key, str):
        return key
    return "".join(key)
