"""Exceptions raised by the polynomial engine.

  PolynomialError      base class for every error below
  UnboundVariable      strict evaluation met a variable missing from the point
  DimensionMismatch    matrix/vector operands have incompatible shapes
  UndefinedConversion  a value has no meaning as a polynomial
"""

from __future__ import annotations

from typing import Iterable, Optional


class PolynomialError(Exception):
    """Base class for all shapepoly errors."""


class UnboundVariable(PolynomialError, KeyError):
    """Raised by strict evaluation when some variables are not bound."""

    def __init__(self, missing: Iterable[str]):
        self.missing = "".join(sorted(set(missing)))
        super().__init__(f"Unbound variable(s) in evaluation: {self.missing!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class DimensionMismatch(PolynomialError, ValueError):
    """Raised when operand shapes do not fit the requested operation."""

    def __init__(self, message: str, expected: Optional[object] = None, got: Optional[object] = None):
        self.expected = expected
        self.got = got
        super().__init__(message)


class UndefinedConversion(PolynomialError, TypeError):
    """Raised when a value cannot be converted to a polynomial."""
