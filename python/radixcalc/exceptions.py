# RadixCalc SDK - Exceptions
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""Exception hierarchy for RadixCalc."""

from __future__ import annotations
from typing import Optional


# Functions understood by the expression parser, for error messages
SUPPORTED_FUNCTIONS = [
    'sqrt', 'exp', 'ln', 'log', 'abs', 'sin', 'cos', 'tan',
    'asin', 'acos', 'atan', 'sinh', 'cosh', 'tanh', 'asinh', 'acosh',
    'atanh', 'floor', 'ceil', 'round', 'signum', 'atan2', 'min', 'max',
]


class RadixCalcError(Exception):
    """Base class for all RadixCalc exceptions."""
    pass


class MalformedRadixString(RadixCalcError, ValueError):
    """Raised when a radix string cannot be parsed in the given base."""

    def __init__(self, text: str, base: int, reason: Optional[str] = None):
        message = f"Malformed base-{base} string: {text!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.text = text
        self.base = base
        self.reason = reason


class InvalidBase(RadixCalcError, ValueError):
    """Raised when a base is not an integer >= 2."""

    def __init__(self, base: object):
        super().__init__(f"Invalid base: {base!r} (expected an integer >= 2)")
        self.base = base


class DivisionByZero(RadixCalcError, ZeroDivisionError):
    """Raised when a fraction is built or rendered with a zero denominator."""
    pass


class PrecisionOverflow(RadixCalcError, OverflowError):
    """Raised when a magnitude does not fit the representation it is converted to."""
    pass


class DomainError(RadixCalcError, ValueError):
    """Raised when a value or search depth is outside the supported domain."""
    pass


class ExpressionError(RadixCalcError, ValueError):
    """Raised when an arithmetic expression cannot be parsed or evaluated."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        suggestion: Optional[str] = None,
    ):
        full_message = message
        if position is not None:
            full_message += f" at position {position}"
        if suggestion:
            full_message += f"\n  Suggestion: {suggestion}"
        super().__init__(full_message)
        self.position = position
        self.suggestion = suggestion


class UnknownFunctionError(ExpressionError):
    """Raised when an expression calls a function or names a constant that does not exist."""

    def __init__(self, name: str, position: Optional[int] = None):
        super().__init__(
            f"Unknown function or constant: '{name}'",
            position=position,
            suggestion=_get_suggestion_for_name(name),
        )
        self.name = name


class BridgeError(RadixCalcError):
    """Raised when a bridge request is not a well-formed call."""
    pass


class InvalidParams(BridgeError):
    """Raised when a bridge parameter has the wrong JSON type or range."""
    pass


def _get_suggestion_for_name(name: str) -> Optional[str]:
    """Get a helpful suggestion for an unknown function or constant name."""
    suggestions = {
        'sine': "Did you mean 'sin'?",
        'cosine': "Did you mean 'cos'?",
        'tangent': "Did you mean 'tan'?",
        'arcsin': "Did you mean 'asin'?",
        'arccos': "Did you mean 'acos'?",
        'arctan': "Did you mean 'atan'?",
        'log10': "Use log(x) / log(10); 'log' is the natural logarithm.",
        'log2': "Use log(x) / log(2); 'log' is the natural logarithm.",
        'pow': "Use x ^ n for powers.",
        'sign': "Did you mean 'signum'?",
        'trunc': "Use signum(x) * floor(abs(x)).",
        'tau': "Use 2 * pi.",
    }
    suggestion = suggestions.get(name.lower())
    if suggestion is None and name.lower() in SUPPORTED_FUNCTIONS:
        suggestion = f"Function names are lower case: use '{name.lower()}'."
    return suggestion
