# RadixCalc SDK - Configuration
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""Configuration settings and the fractional digit-budget policy for RadixCalc."""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional


@dataclass(frozen=True)
class ScaleBand:
    """
    One row of the fractional digit-budget policy.

    A band covers every base below ``below`` (all remaining bases when
    ``below`` is None). The budget is either the fixed ``anchor`` or
    ``floor(base * ratio)``.
    """
    below: Optional[int]
    anchor: Optional[int] = None
    ratio: Fraction = Fraction(1)

    def covers(self, base: int) -> bool:
        return self.below is None or base < self.below

    def budget(self, base: int) -> int:
        if self.anchor is not None:
            return self.anchor
        return base * self.ratio.numerator // self.ratio.denominator


# Empirical tuning. Small bases keep a fixed budget, larger bases shrink it
# proportionally. Thresholds and constants are part of the output format.
SCALE_POLICY: tuple[ScaleBand, ...] = (
    ScaleBand(below=25, anchor=20),
    ScaleBand(below=40, ratio=Fraction(2, 3)),
    ScaleBand(below=None, ratio=Fraction(4, 7)),
)


def fractional_digits(base: int) -> int:
    """
    Number of base-``base`` digits kept for the fractional part.

    Examples:
        >>> fractional_digits(10)
        15
        >>> fractional_digits(60)
        4
    """
    for band in SCALE_POLICY:
        if band.covers(base):
            return band.budget(base) - base // 2
    raise AssertionError("SCALE_POLICY must end with an open band")


def scale_factor(base: int) -> float:
    """
    Factor the fractional part is multiplied by before digit extraction.

    Raises:
        OverflowError: If ``base ** fractional_digits(base)`` exceeds the float range.
    """
    return float(base) ** fractional_digits(base)


@dataclass
class Config:
    """
    Configuration for radix conversion.

    Attributes:
        noise_search_depth: Denominator search depth used to snap a noisy
                            fractional remainder to a small fraction.
                            0 disables snapping.
        noise_min_denominator: Snapping requires a denominator strictly above this.
        noise_max_denominator: Snapping requires a denominator strictly below this.
        noise_tolerance: Snapping requires a residual error strictly below this.
        decimal_places: Decimal digits the fractional remainder is quantised to.
        max_fraction_groups: Maximum number of groups in a grouped (base > 36)
                             fractional segment.
        mixed_search_depth: Search depth used when describing a value as a
                            mixed fraction.
    """
    noise_search_depth: int = 512
    noise_min_denominator: int = 2
    noise_max_denominator: int = 256
    noise_tolerance: Fraction = Fraction(1, 512)
    decimal_places: int = 15
    max_fraction_groups: int = 8
    mixed_search_depth: int = 256

    def __post_init__(self):
        # Convert tolerance to Fraction if given as float
        if isinstance(self.noise_tolerance, float):
            self.noise_tolerance = Fraction(self.noise_tolerance).limit_denominator(10**12)
        if self.noise_search_depth < 0:
            raise ValueError(f"noise_search_depth must be >= 0, got {self.noise_search_depth}")
        if self.noise_min_denominator >= self.noise_max_denominator:
            raise ValueError(
                f"noise_min_denominator ({self.noise_min_denominator}) must be below "
                f"noise_max_denominator ({self.noise_max_denominator})"
            )
        if not 0 <= self.decimal_places <= 17:
            raise ValueError(f"decimal_places must be in [0, 17], got {self.decimal_places}")
        if self.max_fraction_groups < 1:
            raise ValueError(f"max_fraction_groups must be >= 1, got {self.max_fraction_groups}")
        if self.mixed_search_depth < 0:
            raise ValueError(f"mixed_search_depth must be >= 0, got {self.mixed_search_depth}")

    @classmethod
    def default(cls) -> Config:
        """Output-compatible configuration."""
        return cls()

    @classmethod
    def raw(cls) -> Config:
        """Configuration that never snaps the fractional remainder to a small fraction."""
        return cls(noise_search_depth=0)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        return {
            'noiseSearchDepth': self.noise_search_depth,
            'noiseMinDenominator': self.noise_min_denominator,
            'noiseMaxDenominator': self.noise_max_denominator,
            'noiseTolerance': {
                'n': self.noise_tolerance.numerator,
                'd': self.noise_tolerance.denominator,
            },
            'decimalPlaces': self.decimal_places,
            'maxFractionGroups': self.max_fraction_groups,
            'mixedSearchDepth': self.mixed_search_depth,
        }

    def __repr__(self) -> str:
        return (
            f"Config(noise_search_depth={self.noise_search_depth}, "
            f"decimal_places={self.decimal_places}, "
            f"max_fraction_groups={self.max_fraction_groups})"
        )
