# Tests for result.py - Call-in result types

import json
import pytest
from dataclasses import FrozenInstanceError


class TestRadixFraction:
    """Tests for RadixFraction."""

    def test_fields(self):
        from radixcalc.result import RadixFraction

        result = RadixFraction(value=0.25, text='0.3')
        assert result.value == 0.25
        assert result.text == '0.3'

    def test_to_dict_is_json(self):
        from radixcalc.result import RadixFraction

        d = RadixFraction(value=0.25, text='0.3').to_dict()
        assert json.loads(json.dumps(d)) == {'value': 0.25, 'text': '0.3'}

    def test_immutable(self):
        from radixcalc.result import RadixFraction

        result = RadixFraction(value=0.25, text='0.3')
        with pytest.raises(FrozenInstanceError):
            result.value = 1.0


class TestRadixValue:
    """Tests for RadixValue."""

    def test_is_negative(self):
        from radixcalc.result import RadixValue

        assert RadixValue('-0.9', -0.75, 12, 'to').is_negative
        assert not RadixValue('16.f', 26.75, 20, 'to').is_negative

    def test_str(self):
        from radixcalc.result import RadixValue

        assert str(RadixValue('16.f', 26.75, 20, 'to')) == '16.f (base 20)'

    def test_to_dict(self):
        from radixcalc.result import RadixValue

        d = RadixValue('16.f', 26.75, 20, 'from', mixed='16 3/4').to_dict()
        assert d == {
            'text': '16.f',
            'value': 26.75,
            'base': 20,
            'direction': 'from',
            'mixed': '16 3/4',
        }

    def test_mixed_defaults_to_none(self):
        from radixcalc.result import RadixValue

        assert RadixValue('7', 7.0, 10, 'to').mixed is None
