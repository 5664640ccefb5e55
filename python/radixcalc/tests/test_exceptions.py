# Tests for exceptions.py - Error hierarchy and suggestions

import pytest


class TestHierarchy:
    """Every library error is a RadixCalcError and a matching builtin."""

    def test_builtin_bases(self):
        from radixcalc.exceptions import (
            RadixCalcError, MalformedRadixString, InvalidBase, DivisionByZero,
            PrecisionOverflow, DomainError, ExpressionError, UnknownFunctionError,
        )

        assert issubclass(MalformedRadixString, ValueError)
        assert issubclass(InvalidBase, ValueError)
        assert issubclass(DivisionByZero, ZeroDivisionError)
        assert issubclass(PrecisionOverflow, OverflowError)
        assert issubclass(DomainError, ValueError)
        assert issubclass(UnknownFunctionError, ExpressionError)
        for cls in (MalformedRadixString, InvalidBase, DivisionByZero,
                    PrecisionOverflow, DomainError, ExpressionError):
            assert issubclass(cls, RadixCalcError)

    def test_malformed_message(self):
        from radixcalc.exceptions import MalformedRadixString

        e = MalformedRadixString('1g', 16, 'unexpected character')
        assert '1g' in str(e)
        assert 'base-16' in str(e)
        assert e.reason == 'unexpected character'

    def test_invalid_base_message(self):
        from radixcalc.exceptions import InvalidBase

        e = InvalidBase(1)
        assert e.base == 1
        assert '>= 2' in str(e)


class TestSuggestions:
    """Tests for unknown-name suggestions."""

    def test_common_misspellings(self):
        from radixcalc.exceptions import UnknownFunctionError

        assert UnknownFunctionError('sine').suggestion == "Did you mean 'sin'?"
        assert UnknownFunctionError('sign').suggestion == "Did you mean 'signum'?"

    def test_case_hint(self):
        from radixcalc.exceptions import UnknownFunctionError

        assert "'sqrt'" in UnknownFunctionError('SQRT').suggestion

    def test_no_suggestion(self):
        from radixcalc.exceptions import UnknownFunctionError

        e = UnknownFunctionError('frobnicate', position=3)
        assert e.suggestion is None
        assert 'at position 3' in str(e)
