# RadixCalc SDK - Radix Conversion
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
Conversion of real numbers between decimal floats and radix strings.

Example:
    >>> encode(26.75, 20)
    '16.f'
    >>> encode(62.5, 60)
    '01:02.30'
    >>> decode('16.f', 20)
    26.75
    >>> render_mixed(7, 4, 10)
    '1 3/4'

Encoding splits the value into an integer part and a fractional remainder.
The remainder is snapped to a small fraction when it is within noise of one
(so 0.33333333333 becomes exactly 1/3), quantised to a fixed number of
decimal places, scaled by a base-dependent power of the base, and written
out as the digits of the resulting integer.
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional
import logging
import math

from .config import Config, fractional_digits, scale_factor
from .digits import (
    check_base,
    decode_integer,
    encode_integer,
    from_radix_be,
    group_width,
    is_grouped,
    render_digits,
    text_to_digits,
    to_radix_be,
    GROUP_SEPARATOR,
)
from .exceptions import DivisionByZero, DomainError, MalformedRadixString, PrecisionOverflow
from .rational import approximate
from .result import RadixFraction


logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Config()


def clean_fraction(remainder: float, config: Optional[Config] = None) -> float:
    """
    Remove floating point noise from a fractional remainder.

    The remainder is replaced by ``n/d`` when the approximator finds a
    denominator strictly inside the configured window with a residual error
    below the configured tolerance. The result is then rounded up to
    ``config.decimal_places`` decimal places and made non-negative.

    Examples:
        >>> clean_fraction(0.75)
        0.75
        >>> clean_fraction(0.166666666)
        0.166666666666667
    """
    config = config or DEFAULT_CONFIG
    if config.noise_search_depth:
        approx = approximate(remainder, config.noise_search_depth)
        if (config.noise_min_denominator < approx.denominator < config.noise_max_denominator
                and approx.residual_error < config.noise_tolerance):
            logger.debug("Snapped fractional remainder %r to %s", remainder, approx)
            remainder = approx.numerator / approx.denominator
    multiplier = 10.0 ** config.decimal_places
    return abs(math.ceil(remainder * multiplier) / multiplier)


@dataclass(frozen=True)
class FractionalPart:
    """
    The fractional part of a value, extracted as base-``base`` digits.

    Attributes:
        value: The cleaned fraction in [0, 1).
        base: Target base.
        digits: Big-endian digits of ``floor(value * scale_factor(base))``,
                empty when the fraction scales to zero.
    """
    value: float
    base: int
    digits: tuple[int, ...]

    @classmethod
    def extract(cls, value: float, base: int) -> FractionalPart:
        """
        Scale a cleaned fraction and extract its digits.

        Raises:
            PrecisionOverflow: If the scaled fraction exceeds the float range.
        """
        if value == 0.0:
            return cls(value, base, ())
        try:
            scale = scale_factor(base)
            scaled = int(value * scale)
        except OverflowError:
            raise PrecisionOverflow(
                f"Base {base} needs a scale factor of {base}**{fractional_digits(base)}, "
                f"which exceeds the float range"
            ) from None
        logger.debug("Base %d keeps %d fractional digits", base, fractional_digits(base))
        if scaled == 0:
            return cls(value, base, ())
        return cls(value, base, tuple(to_radix_be(scaled, base)))

    @property
    def leading_zeros(self) -> int:
        """
        Zero digits between the point and the first significant digit.

        This is ``ceil(log_base(1 / value)) - 1``, computed from the digit
        count so it is exact.
        """
        if not self.digits:
            return 0
        return fractional_digits(self.base) - len(self.digits)

    def significant_text(self, max_groups: int = 8) -> str:
        """Digit text after the leading zeros, without redundant trailing zeros."""
        digits = list(self.digits)
        if is_grouped(self.base) and len(digits) > max_groups:
            digits = digits[:max_groups]
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
        return render_digits(digits, self.base)

    def to_text(self, max_groups: int = 8) -> str:
        """Full fractional segment, without the point."""
        if not self.digits:
            return ""
        zero = "0" * group_width(self.base) + GROUP_SEPARATOR if is_grouped(self.base) else "0"
        return zero * self.leading_zeros + self.significant_text(max_groups)


def split_value(value: float) -> tuple[int, float, bool]:
    """
    Split a value into ``(integer_part, fractional_magnitude, is_negative)``.

    The integer part is truncated toward zero, so ``-2.25`` splits into
    ``(-2, 0.25, True)``.
    """
    magnitude = abs(value)
    integer = math.floor(magnitude)
    return (-integer if value < 0 else integer), math.fmod(magnitude, 1.0), value < 0


def encode(value: float, base: int, config: Optional[Config] = None) -> str:
    """
    Render a decimal value in ``base``.

    Args:
        value: A finite float (ints are accepted).
        base: Target base, >= 2.
        config: Conversion settings (default: Config()).

    Returns:
        The radix string, e.g. ``'-0.9'`` for -0.75 in base 12. The
        fractional segment is omitted when the fraction is zero.

    Raises:
        InvalidBase: If base is not an integer >= 2.
        DomainError: If value is not finite.
        PrecisionOverflow: If the base is too large to scale the fraction.
    """
    config = config or DEFAULT_CONFIG
    check_base(base)
    value = float(value)
    if not math.isfinite(value):
        raise DomainError(f"Cannot encode non-finite value {value!r}")

    integer, remainder, negative = split_value(value)
    fraction = clean_fraction(remainder, config)
    magnitude = abs(integer)
    if fraction >= 1.0:
        # Quantising rounded the remainder up to a whole unit
        magnitude += 1
        fraction = 0.0

    text = encode_integer(magnitude, base, negative)
    segment = FractionalPart.extract(fraction, base).to_text(config.max_fraction_groups)
    if segment:
        text += "." + segment
    return text


def decode_fraction(text: str, base: int) -> Fraction:
    """
    Exact value of a fractional segment: ``sum(digit_p / base**p)``.

    Trailing zero digits (``0`` or ``:00`` groups) are ignored.
    """
    if not text:
        return Fraction(0)
    digits = text_to_digits(text, base)
    while digits and digits[-1] == 0:
        digits.pop()
    return Fraction(from_radix_be(digits, base), base ** len(digits))


def decode(text: str, base: int) -> float:
    """
    Parse a radix string into a decimal value.

    Args:
        text: Radix string with an optional sign, an integer segment and
              an optional ``.`` followed by a fractional segment.
        base: Base the text is written in.

    Raises:
        InvalidBase: If base is not an integer >= 2.
        MalformedRadixString: If the text is not valid in base.
        PrecisionOverflow: If the value exceeds the float range.

    Examples:
        >>> decode('-0.9', 12)
        -0.75
        >>> decode('01:02.30', 60)
        62.5
    """
    check_base(base)
    body = text.strip()
    negative = body.startswith("-")
    if negative or body.startswith("+"):
        body = body[1:]

    parts = body.split(".")
    if len(parts) > 2:
        raise MalformedRadixString(text, base, "more than one '.'")
    integer_text = parts[0]
    fraction_text = parts[1] if len(parts) == 2 else None
    if integer_text.startswith(("-", "+")):
        raise MalformedRadixString(text, base, "repeated sign")
    if not integer_text and not fraction_text:
        raise MalformedRadixString(text, base, "no digits")

    magnitude = Fraction(decode_integer(integer_text, base)) if integer_text else Fraction(0)
    if fraction_text is not None:
        magnitude += decode_fraction(fraction_text, base)

    try:
        result = float(magnitude)
    except OverflowError:
        raise PrecisionOverflow(f"Value of {text!r} in base {base} exceeds the float range") from None
    return -result if negative else result


def render_mixed(numerator: int, denominator: int, base: int) -> str:
    """
    Render ``numerator/denominator`` as a mixed number in ``base``.

    The whole part comes first; a non-zero remainder follows as
    ``remainder/denominator``, separated by a space when there is a whole
    part. The sign is written once in front.

    Examples:
        >>> render_mixed(7, 4, 10)
        '1 3/4'
        >>> render_mixed(-3, 4, 10)
        '-3/4'
        >>> render_mixed(25, 12, 12)
        '2 1/10'

    Raises:
        DivisionByZero: If denominator is 0.
        InvalidBase: If base is not an integer >= 2.
    """
    check_base(base)
    if denominator == 0:
        raise DivisionByZero(f"Cannot render {numerator}/{denominator}: zero denominator")

    negative = (numerator < 0) != (denominator < 0)
    whole, remainder = divmod(abs(numerator), abs(denominator))

    terms = []
    if whole or not remainder:
        terms.append(encode_integer(whole, base))
    if remainder:
        terms.append(f"{encode_integer(remainder, base)}/{encode_integer(abs(denominator), base)}")

    sign = "-" if negative and numerator != 0 else ""
    return sign + " ".join(terms)


def parse_radix_fraction(text: str, base: int, config: Optional[Config] = None) -> RadixFraction:
    """
    Evaluate a fraction ``"N/D"`` written in ``base``.

    Examples:
        >>> parse_radix_fraction('1/4', 12)
        RadixFraction(value=0.25, text='0.3')

    Raises:
        MalformedRadixString: If the text is not two integers in base around '/'.
        DivisionByZero: If D is zero.
    """
    check_base(base)
    parts = text.split("/")
    if len(parts) != 2:
        raise MalformedRadixString(text, base, "expected 'N/D'")
    numerator = decode_integer(parts[0].strip(), base)
    denominator = decode_integer(parts[1].strip(), base)
    if denominator == 0:
        raise DivisionByZero(f"Fraction {text!r} has a zero denominator")

    try:
        value = numerator / denominator
    except OverflowError:
        raise PrecisionOverflow(f"Value of {text!r} in base {base} exceeds the float range") from None
    return RadixFraction(value=value, text=encode(value, base, config))
