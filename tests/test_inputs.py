"""Tests for engines.inputs: form coercion and the headcount precondition."""
import pytest

from engines.inputs import (
    HEADCOUNT_MESSAGE,
    InvalidInputError,
    parse_float,
    parse_headcount,
    parse_inputs,
    parse_int,
)


class TestParseNumbers:

    @pytest.mark.parametrize('raw,expected', [
        ('42', 42), ('12.7', 12), (' 7 ', 7), ('1,500', 1500), (9.9, 9),
        ('12abc', 12), ('1e3', 1), ('-4 units', -4),
        ('abc', None), ('', None), (None, None), (True, None), (float('nan'), None),
    ])
    def test_parse_int(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize('raw,expected', [
        ('12.5', 12.5), ('3', 3.0), (4, 4.0), ('2,000.5', 2000.5),
        ('x', None), (None, None), ('inf', None),
    ])
    def test_parse_float(self, raw, expected):
        assert parse_float(raw) == expected


class TestHeadcount:

    @pytest.mark.parametrize('raw', ['', 'abc', '0', '-3', None, 0])
    def test_rejects_invalid(self, raw):
        with pytest.raises(InvalidInputError) as exc:
            parse_headcount(raw)
        assert str(exc.value) == HEADCOUNT_MESSAGE

    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)

    def test_accepts_positive(self):
        assert parse_headcount('250') == 250
        assert parse_headcount(1) == 1


class TestParseInputs:

    def test_headcount_only(self):
        assert parse_inputs({'headcount': '500'}) == {'headcount': 500, 'industry': 'other'}

    def test_blank_fields_omitted(self):
        inputs = parse_inputs({'headcount': '10', 'monthlyTicketVolume': '', 'avgHandleTimeMinutes': '  '})
        assert 'monthlyTicketVolume' not in inputs
        assert 'avgHandleTimeMinutes' not in inputs

    def test_types(self):
        inputs = parse_inputs({
            'headcount': '100', 'industry': 'Technology',
            'monthlyTicketVolume': '5000.9', 'avgHandleTimeMinutes': '7.5',
            'currentAutomationRate': '15', 'avgCostPerEmployee': '95000',
        })
        assert inputs == {
            'headcount': 100, 'industry': 'technology',
            'monthlyTicketVolume': 5000, 'avgHandleTimeMinutes': 7.5,
            'currentAutomationRate': 15.0, 'avgCostPerEmployee': 95000.0,
        }

    def test_percentages_clamped(self):
        inputs = parse_inputs({
            'headcount': '10', 'currentAutomationRate': '150',
            'firstContactResolutionRate': '-5', 'errorReworkRate': '101',
        })
        assert inputs['currentAutomationRate'] == 100
        assert inputs['firstContactResolutionRate'] == 0
        assert inputs['errorReworkRate'] == 100

    def test_negative_numbers_floored_at_zero(self):
        inputs = parse_inputs({'headcount': '10', 'monthlyEscalationVolume': '-20', 'avgResolutionTimeHours': '-1'})
        assert inputs['monthlyEscalationVolume'] == 0
        assert inputs['avgResolutionTimeHours'] == 0

    def test_zero_fcr_kept(self):
        inputs = parse_inputs({'headcount': '10', 'firstContactResolutionRate': '0'})
        assert inputs['firstContactResolutionRate'] == 0

    def test_non_numeric_optional_dropped(self):
        inputs = parse_inputs({'headcount': '10', 'monthlyTicketVolume': 'lots'})
        assert 'monthlyTicketVolume' not in inputs

    def test_tier2_ignored_without_advanced(self):
        form = {
            'headcount': '10', 'monthlyTicketVolume': '100',
            'firstContactResolutionRate': '70', 'avgResolutionTimeHours': '2',
            'monthlyEscalationVolume': '5', 'errorReworkRate': '3',
        }
        inputs = parse_inputs(form, advanced=False)
        assert inputs == {'headcount': 10, 'industry': 'other', 'monthlyTicketVolume': 100}

    def test_unknown_industry_passed_through(self):
        assert parse_inputs({'headcount': '1', 'industry': 'aerospace'})['industry'] == 'aerospace'

    def test_invalid_headcount_propagates(self):
        with pytest.raises(InvalidInputError):
            parse_inputs({'headcount': 'ten', 'monthlyTicketVolume': '100'})
