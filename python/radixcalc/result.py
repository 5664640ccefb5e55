# RadixCalc SDK - Result Types
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
Result types returned across the RadixCalc call-in boundary.

Every result is a plain value: it can be converted to a JSON-compatible
dictionary with ``to_dict()`` and carries no references back into the
converter.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Any


@dataclass(frozen=True)
class RadixFraction:
    """
    A fraction written in some base, evaluated.

    Access Patterns:
        result.value  # float value of N/D
        result.text   # the value rendered back in the same base
    """
    value: float
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {'value': self.value, 'text': self.text}


@dataclass(frozen=True)
class RadixValue:
    """
    A value described in a base.

    Access Patterns:
        result.text       # radix string, e.g. '16.f'
        result.value      # decimal value, e.g. 26.75
        result.base       # the base, e.g. 20
        result.direction  # 'to' (decimal -> radix) or 'from' (radix -> decimal)
        result.mixed      # mixed fraction in the base, e.g. '16 3/4',
                          # or None when it does not fit 32-bit terms
    """
    text: str
    value: float
    base: int
    direction: str
    mixed: Optional[str] = None

    @property
    def is_negative(self) -> bool:
        return self.value < 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            'text': self.text,
            'value': self.value,
            'base': self.base,
            'direction': self.direction,
            'mixed': self.mixed,
        }

    def __str__(self) -> str:
        return f"{self.text} (base {self.base})"
