# RadixCalc SDK - Digit Codec
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
Integer <-> digit conversion for arbitrary bases.

Bases up to 36 write one character per digit (``0-9`` then ``a-z``).
Larger bases write every digit as a zero-padded decimal group and join
the groups with ``:``. Groups are two characters wide, three for bases
of 100 and above:

    >>> encode_integer(62, 60)
    '01:02'
    >>> encode_integer(12345, 200)
    '061:145'
    >>> decode_integer('1v', 36)
    67

Magnitudes are plain Python ints, so digit extraction is exact at any size.
"""

from __future__ import annotations
from typing import Iterable

from .exceptions import InvalidBase, MalformedRadixString


DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Largest base written with one character per digit
ALPHABET_LIMIT = len(DIGITS)

GROUP_SEPARATOR = ":"


def check_base(base: int) -> int:
    """
    Validate a base.

    Raises:
        InvalidBase: If base is not an integer >= 2.
    """
    if isinstance(base, bool) or not isinstance(base, int) or base < 2:
        raise InvalidBase(base)
    return base


def is_grouped(base: int) -> bool:
    """True if ``base`` uses the grouped ``dd:dd`` notation."""
    return base > ALPHABET_LIMIT


def group_width(base: int) -> int:
    """Characters per digit group in grouped notation."""
    return max(2, len(str(base - 1)))


def to_radix_be(magnitude: int, base: int) -> list[int]:
    """
    Big-endian digit values of a non-negative integer.

    Examples:
        >>> to_radix_be(62, 60)
        [1, 2]
        >>> to_radix_be(0, 7)
        [0]
    """
    if magnitude < 0:
        raise ValueError(f"Magnitude must be non-negative, got {magnitude}")
    if magnitude == 0:
        return [0]
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        digits.append(digit)
    digits.reverse()
    return digits


def from_radix_be(digits: Iterable[int], base: int) -> int:
    """Rebuild a non-negative integer from big-endian digit values."""
    magnitude = 0
    for digit in digits:
        magnitude = magnitude * base + digit
    return magnitude


def digit_to_text(digit: int, base: int) -> str:
    """Render one digit value (``0 <= digit < base``)."""
    if not 0 <= digit < base:
        raise ValueError(f"Digit {digit} out of range for base {base}")
    if is_grouped(base):
        return str(digit).zfill(group_width(base))
    return DIGITS[digit]


def render_digits(digits: Iterable[int], base: int) -> str:
    """Render digit values, joined with ':' for grouped bases."""
    separator = GROUP_SEPARATOR if is_grouped(base) else ""
    return separator.join(digit_to_text(d, base) for d in digits)


def encode_integer(magnitude: int, base: int, is_negative: bool = False) -> str:
    """
    Render an integer in ``base``.

    The sign is written once in front of the whole string. ``is_negative``
    forces it even for a zero magnitude, which is how ``-0.75`` keeps its
    sign as ``-0.9`` in base 12.

    Examples:
        >>> encode_integer(26, 20)
        '16'
        >>> encode_integer(0, 12, is_negative=True)
        '-0'
    """
    check_base(base)
    if magnitude < 0:
        magnitude = -magnitude
        is_negative = True
    text = render_digits(to_radix_be(magnitude, base), base)
    return "-" + text if is_negative else text


def text_to_digits(text: str, base: int) -> list[int]:
    """
    Parse unsigned digit text into big-endian digit values.

    Raises:
        MalformedRadixString: On an empty string, a character outside the
                              alphabet, an empty or non-decimal group, or a
                              digit value >= base.
    """
    if not text:
        raise MalformedRadixString(text, base, "no digits")

    if is_grouped(base):
        digits = []
        for group in text.split(GROUP_SEPARATOR):
            if not group:
                raise MalformedRadixString(text, base, "empty digit group")
            if not (group.isascii() and group.isdigit()):
                raise MalformedRadixString(text, base, f"group {group!r} is not decimal")
            digits.append(int(group))
    else:
        digits = []
        for char in text.lower():
            value = DIGITS.find(char)
            if value < 0:
                raise MalformedRadixString(text, base, f"unexpected character {char!r}")
            digits.append(value)

    for digit in digits:
        if digit >= base:
            raise MalformedRadixString(text, base, f"digit {digit} is not below the base")
    return digits


def decode_integer(text: str, base: int) -> int:
    """
    Parse a signed integer written in ``base``.

    Examples:
        >>> decode_integer('-01:02', 60)
        -62

    Raises:
        InvalidBase: If base is not an integer >= 2.
        MalformedRadixString: If the text is not a valid integer in base.
    """
    check_base(base)
    body = text
    negative = body.startswith("-")
    if negative:
        body = body[1:]
    magnitude = from_radix_be(text_to_digits(body, base), base)
    return -magnitude if negative else magnitude
