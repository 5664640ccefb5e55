# RadixCalc SDK - Rational Approximation
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
Rational approximation of floating point values.

The approximator walks denominators 1, 2, 3, ... and accepts the first one
whose multiple of the value lies within ``1 / (depth + 1)`` of an integer.
Smaller denominators always win, which is what cleans up binary noise:

    >>> approximate(0.33333333333, 512).as_fraction()
    Fraction(1, 3)
    >>> approximate(-1.75, 4096)
    RationalApproximation(-7/4, residual_error=0.0)

This module also provides human-friendly float to Fraction conversion for
literal values:

    >>> from fractions import Fraction
    >>> Fraction(0.1)
    Fraction(3602879701896397, 36028797018963968)  # Binary representation!
    >>> to_fraction(0.1)
    Fraction(1, 10)
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Union
import math

from .exceptions import DivisionByZero, DomainError, ExpressionError, PrecisionOverflow


# Type for things that can be converted to Fraction
Numeric = Union[int, float, Fraction]

# Numerators and denominators are exchanged with hosts as 32-bit integers
I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class RationalApproximation:
    """
    A fraction approximating a floating point value.

    Attributes:
        numerator: Signed numerator, within 32-bit range.
        denominator: Positive denominator.
        value: The value that was approximated.
        precision: The search depth used (0 for exact fractions).
        residual_error: Distance of ``denominator * value`` from the nearest integer.
    """
    numerator: int
    denominator: int
    value: float
    precision: int = 0
    residual_error: float = 0.0

    @classmethod
    def exact(cls, numerator: int, denominator: int) -> RationalApproximation:
        """
        Build an exact fraction, normalising the sign onto the numerator.

        Raises:
            DivisionByZero: If denominator is 0.
            PrecisionOverflow: If either term leaves 32-bit range.
        """
        if denominator == 0:
            raise DivisionByZero(f"Fraction {numerator}/{denominator} has a zero denominator")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        _check_i32(numerator, "numerator")
        _check_i32(denominator, "denominator")
        return cls(numerator, denominator, numerator / denominator)

    def as_fraction(self) -> Fraction:
        """The approximation as an exact (reduced) Fraction."""
        return Fraction(self.numerator, self.denominator)

    def as_tuple(self) -> tuple[int, int, float]:
        return (self.numerator, self.denominator, self.residual_error)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return {
            'numerator': self.numerator,
            'denominator': self.denominator,
            'value': self.value,
            'precision': self.precision,
            'residualError': self.residual_error,
        }

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"RationalApproximation({self}, residual_error={self.residual_error})"


def approximate(value: float, max_denominator_search: int) -> RationalApproximation:
    """
    Find the smallest denominator whose multiple of ``value`` is near an integer.

    Denominators ``1..max_denominator_search`` are tried in increasing order.
    A denominator ``i`` is accepted when ``(value * i) mod 1`` is within
    ``1 / (max_denominator_search + 1)`` of 0 or 1. When nothing is accepted
    the result is ``trunc(value) / 1`` with a residual error of 0.

    Args:
        value: A finite float.
        max_denominator_search: Largest denominator tried (search depth).

    Returns:
        RationalApproximation with ``residual_error <= 1 / (max_denominator_search + 1)``.

    Raises:
        DomainError: If value is not finite or the search depth is negative.
        PrecisionOverflow: If the numerator leaves 32-bit range.

    Examples:
        >>> approximate(0.75, 512).as_tuple()
        (3, 4, 0.0)
    """
    if not math.isfinite(value):
        raise DomainError(f"Cannot approximate non-finite value {value!r}")
    if max_denominator_search < 0:
        raise DomainError(f"Search depth must be >= 0, got {max_denominator_search}")

    tolerance = 1.0 / (max_denominator_search + 1)
    for i in range(1, max_denominator_search + 1):
        residual = _divisible_within(value, i, tolerance)
        if residual is not None:
            numerator = round_half_away(i * value)
            _check_i32(numerator, "numerator")
            return RationalApproximation(numerator, i, value, max_denominator_search, residual)

    numerator = math.trunc(value)
    _check_i32(numerator, "numerator")
    return RationalApproximation(numerator, 1, value, max_denominator_search, 0.0)


def _divisible_within(value: float, i: int, tolerance: float) -> Optional[float]:
    """Residual error if ``value * i`` is within tolerance of an integer, else None."""
    frac = (value * i) % 1.0
    if frac <= tolerance:
        return frac
    if frac >= 1.0 - tolerance:
        return 1.0 - frac
    return None


def round_half_away(x: Numeric) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(x))
    if abs(x) - magnitude >= 0.5:
        magnitude += 1
    return -magnitude if x < 0 else magnitude


def _check_i32(n: int, what: str) -> None:
    if not I32_MIN <= n <= I32_MAX:
        raise PrecisionOverflow(f"{what} {n} does not fit in a 32-bit integer")


def parse_fraction_text(text: str) -> RationalApproximation:
    """
    Parse a base-10 fraction written as ``"N/D"`` (whitespace allowed).

    Examples:
        >>> parse_fraction_text("3 / 2").as_tuple()
        (3, 2, 0.0)

    Raises:
        ExpressionError: If the text is not two integers separated by '/'.
        DivisionByZero: If D is 0.
    """
    parts = text.split('/')
    if len(parts) != 2:
        raise ExpressionError(f"Expected a fraction 'N/D', got {text!r}")
    try:
        numerator = int(parts[0].strip())
        denominator = int(parts[1].strip())
    except ValueError:
        raise ExpressionError(f"Expected integer terms in fraction, got {text!r}") from None
    return RationalApproximation.exact(numerator, denominator)


def to_fraction(x: Numeric, max_denom: int = 10**12) -> Fraction:
    """
    Convert a numeric value to Fraction with human-friendly results.

    Floats are read through their shortest decimal representation, so
    ``0.1`` becomes ``1/10`` rather than its binary expansion.

    Examples:
        >>> to_fraction(0.25)
        Fraction(1, 4)
        >>> to_fraction(Fraction(1, 3))
        Fraction(1, 3)
    """
    if isinstance(x, Fraction):
        return x
    elif isinstance(x, int):
        return Fraction(x)
    else:
        return _float_to_nice_fraction(x, max_denom)


def _float_to_nice_fraction(x: float, max_denom: int = 10**12) -> Fraction:
    """
    Convert a float to a human-friendly Fraction.

    Strategy:
    1. Exact integers convert directly
    2. Otherwise parse the shortest repr (catches 0.1 -> "1/10")
    3. Fall back to limit_denominator for long expansions
    """
    if not math.isfinite(x):
        raise DomainError(f"Cannot convert non-finite value {x!r} to a fraction")
    if x == int(x):
        return Fraction(int(x))

    # str(x) is the shortest repr that round-trips, and Fraction parses
    # decimal and scientific notation exactly
    result = Fraction(str(x))
    if result.denominator <= max_denom:
        return result
    return Fraction(x).limit_denominator(max_denom)
