# Tests for expr.py - Arithmetic expression AST

import math
import pytest
from fractions import Fraction


class TestExprConstruction:
    """Tests for building expressions with Python operators."""

    def test_var_creation(self):
        from radixcalc.expr import var, Variable

        x = var('x')
        assert isinstance(x, Variable)
        assert x.name == 'x'

    def test_var_validation(self):
        from radixcalc.expr import var

        with pytest.raises(ValueError):
            var('')
        with pytest.raises(TypeError):
            var(3)

    def test_const_is_exact(self):
        from radixcalc.expr import const

        assert const(0.1).value == Fraction(1, 10)
        assert const(3).value == Fraction(3)

    def test_operator_overloading(self):
        from radixcalc.expr import var, Add, Mul, Pow, Mod

        x = var('x')
        assert isinstance(x + 1, Add)
        assert isinstance(2 * x, Mul)
        assert isinstance(x ** 2, Pow)
        assert isinstance(x % 3, Mod)

    def test_free_vars(self):
        from radixcalc.expr import var, call

        x, y = var('x'), var('y')
        assert (x * y + call('sin', x)).free_vars() == frozenset({'x', 'y'})
        assert (var('pi') * 2).free_vars() == frozenset()

    def test_cannot_convert(self):
        from radixcalc.expr import var

        with pytest.raises(TypeError):
            var('x') + "1"


class TestExprEvaluate:
    """Tests for exact and floating point evaluation."""

    def test_polynomial_stays_exact(self):
        from radixcalc.expr import var

        x = var('x')
        assert ((x + 1) ** 2 / 4).evaluate({'x': 3}) == Fraction(4)

    def test_division_exact(self):
        from radixcalc.expr import const

        assert (const(1) / 7).evaluate({}) == Fraction(1, 7)

    def test_division_by_zero(self):
        from radixcalc.expr import var
        from radixcalc.exceptions import DivisionByZero

        with pytest.raises(DivisionByZero):
            (var('x') / 0).evaluate({'x': 1})
        with pytest.raises(DivisionByZero):
            (var('x') % 0).evaluate({'x': 1})

    def test_mod_truncates(self):
        """Remainders take the sign of the dividend."""
        from radixcalc.expr import const

        assert (const(7) % 3).evaluate({}) == 1
        assert (const(-7) % 3).evaluate({}) == -1
        assert (const(7.5) % 2).evaluate({}) == Fraction(3, 2)

    def test_pow(self):
        from radixcalc.expr import const
        from radixcalc.exceptions import DivisionByZero, ExpressionError, PrecisionOverflow

        assert (const(2) ** 10).evaluate({}) == Fraction(1024)
        assert (const(2) ** -1).evaluate({}) == Fraction(1, 2)
        assert (const(4) ** 0.5).evaluate({}) == 2.0
        with pytest.raises(DivisionByZero):
            (const(0) ** -1).evaluate({})
        with pytest.raises(ExpressionError):
            (const(-8) ** Fraction(1, 3)).evaluate({})
        with pytest.raises(PrecisionOverflow):
            (const(10) ** 5000).evaluate({})

    def test_constants(self):
        from radixcalc.expr import var

        assert var('pi').evaluate({}) == math.pi
        assert var('e').evaluate({}) == math.e

    def test_environment_shadows_constants(self):
        from radixcalc.expr import var

        assert var('e').evaluate({'e': 2}) == Fraction(2)

    def test_unbound_variable(self):
        from radixcalc.expr import var
        from radixcalc.exceptions import UnknownFunctionError

        with pytest.raises(UnknownFunctionError):
            var('y').evaluate({})


class TestCall:
    """Tests for function application."""

    def test_float_functions(self):
        from radixcalc.expr import call

        assert call('sqrt', 4).evaluate({}) == 2.0
        assert call('atan2', 1, 1).evaluate({}) == math.atan2(1, 1)

    def test_integer_results_are_exact(self):
        from radixcalc.expr import call

        assert call('floor', 2.5).evaluate({}) == Fraction(2)
        assert call('ceil', Fraction(1, 3)).evaluate({}) == Fraction(1)
        assert call('round', -2.5).evaluate({}) == Fraction(-3)
        assert call('signum', -4).evaluate({}) == Fraction(-1)

    def test_round_float_just_below_half(self):
        from radixcalc.expr import call, var

        assert call('round', var('x')).evaluate({'x': 0.49999999999999994}) == 0
        assert call('round', var('x')).evaluate({'x': 1.5}) == 2

    def test_variadic(self):
        from radixcalc.expr import call

        assert call('min', 3, 1, 2).evaluate({}) == 1
        assert call('max', 3, 1, 2).evaluate({}) == 3

    def test_domain_error(self):
        from radixcalc.expr import call
        from radixcalc.exceptions import ExpressionError

        with pytest.raises(ExpressionError):
            call('sqrt', -1).evaluate({})
        with pytest.raises(ExpressionError):
            call('ln', 0).evaluate({})

    def test_overflow(self):
        from radixcalc.expr import call
        from radixcalc.exceptions import PrecisionOverflow

        with pytest.raises(PrecisionOverflow):
            call('exp', 1000).evaluate({})

    def test_unknown_function(self):
        from radixcalc.expr import call
        from radixcalc.exceptions import UnknownFunctionError

        with pytest.raises(UnknownFunctionError):
            call('nope', 1)

    def test_arity(self):
        from radixcalc.expr import call
        from radixcalc.exceptions import ExpressionError

        with pytest.raises(ExpressionError, match="takes 2 argument"):
            call('atan2', 1)
        with pytest.raises(ExpressionError, match="at least 1"):
            call('max')
