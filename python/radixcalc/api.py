# RadixCalc SDK - Calculator API
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
High-level Calculator API for RadixCalc.

This module provides the call-in surface used by hosts: every operation
takes and returns primitive values or the plain result types of
``radixcalc.result``.

Example:
    >>> calc = Calculator()
    >>> calc.encode(26.75, 20)
    '16.f'
    >>> calc.encode_expression('1 / 3', 12)
    '0.4'
    >>> calc.describe(26.75, 20).mixed
    '16 3/4'
"""

from __future__ import annotations
from typing import Optional
import logging

from .config import Config
from .convert import decode, encode, parse_radix_fraction, render_mixed
from .exceptions import PrecisionOverflow
from .expr import EvalEnv
from .parser import evaluate_expression
from .rational import RationalApproximation, approximate, parse_fraction_text
from .result import RadixFraction, RadixValue


logger = logging.getLogger(__name__)


class Calculator:
    """
    Conversion and approximation front end bound to one Config.

    Calculators hold no state besides their configuration, so one instance
    can serve any number of callers.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def encode(self, value: float, base: int) -> str:
        """Render a decimal value in ``base``."""
        return encode(value, base, self.config)

    def decode(self, text: str, base: int) -> float:
        """Parse a radix string written in ``base``."""
        return decode(text, base)

    def approximate(self, value: float, precision: int) -> RationalApproximation:
        """Approximate a value by the smallest-denominator fraction within ``1/(precision+1)``."""
        return approximate(value, precision)

    def render_mixed(self, numerator: int, denominator: int, base: int) -> str:
        """Render a base-10 fraction as a mixed number in ``base``."""
        return render_mixed(numerator, denominator, base)

    def parse_radix_fraction(self, text: str, base: int) -> RadixFraction:
        """Evaluate ``"N/D"`` written in ``base`` and render the value back in that base."""
        return parse_radix_fraction(text, base, self.config)

    def evaluate(self, expression: str, variables: Optional[EvalEnv] = None) -> float:
        """Evaluate an arithmetic expression."""
        return evaluate_expression(expression, variables)

    def encode_expression(self, expression: str, base: int) -> str:
        """Evaluate an arithmetic expression and render the result in ``base``."""
        return self.encode(self.evaluate(expression), base)

    def fraction_from_text(self, text: str) -> RationalApproximation:
        """Parse an exact base-10 fraction such as ``"3 / 2"``."""
        return parse_fraction_text(text)

    def mixed_fraction(self, value: float, base: int) -> Optional[str]:
        """
        ``value`` as a mixed fraction in ``base``, via the approximator.

        Returns None when the approximating fraction does not fit 32-bit terms.
        """
        try:
            approx = approximate(value, self.config.mixed_search_depth)
        except PrecisionOverflow:
            logger.debug("No mixed fraction for %r: numerator out of range", value)
            return None
        return render_mixed(approx.numerator, approx.denominator, base)

    def describe(self, value: float, base: int) -> RadixValue:
        """Describe a decimal value converted to ``base``."""
        value = float(value)
        return RadixValue(
            text=self.encode(value, base),
            value=value,
            base=base,
            direction='to',
            mixed=self.mixed_fraction(value, base),
        )

    def describe_radix(self, text: str, base: int) -> RadixValue:
        """Describe a radix string written in ``base`` converted to decimal."""
        value = self.decode(text, base)
        return RadixValue(
            text=text,
            value=value,
            base=base,
            direction='from',
            mixed=self.mixed_fraction(value, base),
        )

    def __repr__(self) -> str:
        return f"Calculator({self.config!r})"


# Global calculator instance for convenience functions
_global_calculator: Optional[Calculator] = None


def _get_calculator() -> Calculator:
    """Get or create global calculator instance."""
    global _global_calculator
    if _global_calculator is None:
        _global_calculator = Calculator()
    return _global_calculator


# Convenience functions that use the global calculator

def to_radix(value: float, base: int) -> str:
    """Render a decimal value in ``base``."""
    return _get_calculator().encode(value, base)


def from_radix(text: str, base: int) -> float:
    """Parse a radix string written in ``base``."""
    return _get_calculator().decode(text, base)


def float_to_fraction(value: float, precision: int) -> RationalApproximation:
    """Approximate a value as a fraction with search depth ``precision``."""
    return _get_calculator().approximate(value, precision)


def mixed_number(numerator: int, denominator: int, base: int) -> str:
    """Render ``numerator/denominator`` as a mixed number in ``base``."""
    return _get_calculator().render_mixed(numerator, denominator, base)


def radix_fraction(text: str, base: int) -> RadixFraction:
    """Evaluate ``"N/D"`` written in ``base``."""
    return _get_calculator().parse_radix_fraction(text, base)


def evaluate(expression: str, variables: Optional[EvalEnv] = None) -> float:
    """Evaluate an arithmetic expression."""
    return _get_calculator().evaluate(expression, variables)


def expression_to_radix(expression: str, base: int) -> str:
    """Evaluate an arithmetic expression and render it in ``base``."""
    return _get_calculator().encode_expression(expression, base)


def fraction_from_text(text: str) -> RationalApproximation:
    """Parse an exact base-10 fraction such as ``"3 / 2"``."""
    return _get_calculator().fraction_from_text(text)


def describe(value: float, base: int) -> RadixValue:
    """Describe a decimal value converted to ``base``."""
    return _get_calculator().describe(value, base)
