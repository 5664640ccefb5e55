# RadixCalc SDK
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
RadixCalc Python SDK - Arbitrary-Base Number Conversion.

This SDK converts real numbers between decimal and any base >= 2, finds
small-denominator fractions for floating point values, renders mixed
numbers in a base, and evaluates arithmetic expressions whose results can
be written out in any base.

Example:
    >>> import radixcalc as rc
    >>> rc.to_radix(26.75, 20)
    '16.f'
    >>> rc.from_radix('01:02.30', 60)
    62.5
    >>> rc.float_to_fraction(-1.75, 4096).as_tuple()
    (-7, 4, 0.0)
    >>> rc.expression_to_radix('1 / 3', 12)
    '0.4'

Key Features:
    - Bases up to 36 use 0-9a-z digits, larger bases use ``dd:dd`` groups
    - Noise cleanup snaps 0.33333333333 to exactly 1/3 before conversion
    - Exact rational arithmetic in the expression evaluator
    - JSON-lines bridge for host processes (``python -m radixcalc``)
"""

import logging

__version__ = "0.1.0"

# Configuration
from .config import Config, fractional_digits, scale_factor

# Digit codec
from .digits import encode_integer, decode_integer, to_radix_be, from_radix_be

# Rational approximation
from .rational import RationalApproximation, approximate, parse_fraction_text, to_fraction

# Conversion
from .convert import encode, decode, render_mixed, parse_radix_fraction, clean_fraction

# Result types
from .result import RadixFraction, RadixValue

# Expressions
from .expr import Expr, Variable, Const, var, const, call
from .parser import parse_expression, evaluate_expression

# Calculator
from .api import (
    Calculator,
    to_radix,
    from_radix,
    float_to_fraction,
    mixed_number,
    radix_fraction,
    evaluate,
    expression_to_radix,
    fraction_from_text,
    describe,
)

# Exceptions
from .exceptions import (
    RadixCalcError,
    MalformedRadixString,
    InvalidBase,
    DivisionByZero,
    PrecisionOverflow,
    DomainError,
    ExpressionError,
    UnknownFunctionError,
    BridgeError,
    InvalidParams,
    SUPPORTED_FUNCTIONS,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Config",
    "fractional_digits",
    "scale_factor",
    # Digit codec
    "encode_integer",
    "decode_integer",
    "to_radix_be",
    "from_radix_be",
    # Rational approximation
    "RationalApproximation",
    "approximate",
    "parse_fraction_text",
    "to_fraction",
    # Conversion
    "encode",
    "decode",
    "render_mixed",
    "parse_radix_fraction",
    "clean_fraction",
    # Result types
    "RadixFraction",
    "RadixValue",
    # Expressions
    "Expr",
    "Variable",
    "Const",
    "var",
    "const",
    "call",
    "parse_expression",
    "evaluate_expression",
    # Calculator
    "Calculator",
    "to_radix",
    "from_radix",
    "float_to_fraction",
    "mixed_number",
    "radix_fraction",
    "evaluate",
    "expression_to_radix",
    "fraction_from_text",
    "describe",
    # Exceptions
    "RadixCalcError",
    "MalformedRadixString",
    "InvalidBase",
    "DivisionByZero",
    "PrecisionOverflow",
    "DomainError",
    "ExpressionError",
    "UnknownFunctionError",
    "BridgeError",
    "InvalidParams",
    "SUPPORTED_FUNCTIONS",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
