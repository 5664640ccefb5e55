# Tests for rational.py - Rational approximation and fraction parsing

import math
import pytest
from fractions import Fraction


class TestApproximate:
    """Tests for approximate() - smallest-denominator search."""

    def test_exact_quarter(self):
        from radixcalc.rational import approximate

        assert approximate(0.75, 512).as_tuple() == (3, 4, 0.0)

    def test_negative_value_keeps_sign(self):
        """Floor-mod residuals make negative values behave like positive ones."""
        from radixcalc.rational import approximate

        assert approximate(-1.75, 4096).as_tuple() == (-7, 4, 0.0)

    def test_repeating_third(self):
        from radixcalc.rational import approximate

        result = approximate(0.33333333333, 512)
        assert result.as_fraction() == Fraction(1, 3)
        assert result.residual_error < 1e-9

    def test_pi_with_shallow_search(self):
        from radixcalc.rational import approximate

        result = approximate(math.pi, 10)
        assert (result.numerator, result.denominator) == (22, 7)

    def test_residual_within_tolerance(self):
        from radixcalc.rational import approximate

        for value in (0.1, 0.7071, 2.718281828, -5.4321):
            for depth in (1, 7, 100, 1000):
                result = approximate(value, depth)
                assert result.residual_error <= 1 / (depth + 1)
                assert result.denominator >= 1

    def test_rounds_to_nearest_below_half(self):
        """Values just under one half round down, not up."""
        from radixcalc.rational import approximate, round_half_away

        result = approximate(0.49999999999999994, 1)
        assert (result.numerator, result.denominator) == (0, 1)
        assert round_half_away(0.49999999999999994) == 0
        assert round_half_away(-0.49999999999999994) == 0
        assert round_half_away(2.5) == 3
        assert round_half_away(-2.5) == -3

    def test_zero_depth_truncates(self):
        from radixcalc.rational import approximate

        assert approximate(2.5, 0).as_tuple() == (2, 1, 0.0)
        assert approximate(-2.5, 0).as_tuple() == (-2, 1, 0.0)

    def test_records_value_and_depth(self):
        from radixcalc.rational import approximate

        result = approximate(0.75, 64)
        assert result.value == 0.75
        assert result.precision == 64

    def test_non_finite_rejected(self):
        from radixcalc.rational import approximate
        from radixcalc.exceptions import DomainError

        with pytest.raises(DomainError):
            approximate(float('nan'), 10)
        with pytest.raises(DomainError):
            approximate(float('inf'), 10)

    def test_negative_depth_rejected(self):
        from radixcalc.rational import approximate
        from radixcalc.exceptions import DomainError

        with pytest.raises(DomainError, match="Search depth"):
            approximate(1.0, -1)

    def test_numerator_overflow(self):
        from radixcalc.rational import approximate
        from radixcalc.exceptions import PrecisionOverflow

        with pytest.raises(PrecisionOverflow):
            approximate(3e9, 1)


class TestRationalApproximation:
    """Tests for the RationalApproximation value type."""

    def test_exact_normalises_sign(self):
        from radixcalc.rational import RationalApproximation

        r = RationalApproximation.exact(3, -4)
        assert (r.numerator, r.denominator) == (-3, 4)
        assert r.value == -0.75

    def test_exact_zero_denominator(self):
        from radixcalc.rational import RationalApproximation
        from radixcalc.exceptions import DivisionByZero

        with pytest.raises(DivisionByZero):
            RationalApproximation.exact(1, 0)

    def test_exact_out_of_range(self):
        from radixcalc.rational import RationalApproximation
        from radixcalc.exceptions import PrecisionOverflow

        with pytest.raises(PrecisionOverflow):
            RationalApproximation.exact(2 ** 31, 1)

    def test_str_and_repr(self):
        from radixcalc.rational import RationalApproximation

        r = RationalApproximation.exact(-7, 4)
        assert str(r) == "-7/4"
        assert 'RationalApproximation(-7/4' in repr(r)

    def test_to_dict(self):
        from radixcalc.rational import approximate

        d = approximate(0.75, 512).to_dict()
        assert d == {
            'numerator': 3,
            'denominator': 4,
            'value': 0.75,
            'precision': 512,
            'residualError': 0.0,
        }


class TestParseFractionText:
    """Tests for parse_fraction_text() - exact base-10 fractions."""

    def test_whitespace_allowed(self):
        from radixcalc.rational import parse_fraction_text

        r = parse_fraction_text("3 / 2")
        assert r.as_tuple() == (3, 2, 0.0)
        assert r.value == 1.5

    def test_negative(self):
        from radixcalc.rational import parse_fraction_text

        assert parse_fraction_text("-6/4").as_fraction() == Fraction(-3, 2)

    def test_zero_denominator(self):
        from radixcalc.rational import parse_fraction_text
        from radixcalc.exceptions import DivisionByZero

        with pytest.raises(DivisionByZero):
            parse_fraction_text("3/0")

    def test_malformed(self):
        from radixcalc.rational import parse_fraction_text
        from radixcalc.exceptions import DomainError, ExpressionError

        for text in ("abc", "1/2/3", "1.5/2", "/"):
            with pytest.raises(ExpressionError) as info:
                parse_fraction_text(text)
            assert not isinstance(info.value, DomainError)


class TestToFraction:
    """Tests for to_fraction() - human-friendly conversion."""

    def test_integer_conversion(self):
        from radixcalc.rational import to_fraction

        assert to_fraction(0) == Fraction(0)
        assert to_fraction(-5) == Fraction(-5)

    def test_fraction_passthrough(self):
        from radixcalc.rational import to_fraction

        f = Fraction(1, 3)
        assert to_fraction(f) is f

    def test_simple_decimals(self):
        """Floats read through their shortest decimal form."""
        from radixcalc.rational import to_fraction

        assert to_fraction(0.1) == Fraction(1, 10)
        assert to_fraction(0.25) == Fraction(1, 4)
        assert to_fraction(-3.14) == Fraction(-314, 100)
        assert to_fraction(10.1) == Fraction(101, 10)

    def test_non_finite_rejected(self):
        from radixcalc.rational import to_fraction
        from radixcalc.exceptions import DomainError

        with pytest.raises(DomainError):
            to_fraction(float('inf'))
