"""Tests for engines.contact: headline selection, formatting, mailto link."""
from urllib.parse import unquote

import pytest

from engines.contact import (
    CONTACT_EMAIL,
    build_contact_body,
    build_contact_link,
    format_currency,
    format_number,
    headline_figures,
)
from engines.roi import estimate


class TestFormatting:

    @pytest.mark.parametrize('value,expected', [
        (1234567, '$1,234,567'), (0, '$0'), (None, '$0'), (-500, '-$500'), (999.6, '$1,000'),
    ])
    def test_format_currency(self, value, expected):
        assert format_currency(value) == expected

    @pytest.mark.parametrize('value,expected', [
        (63700, '63,700'), (None, '0'), (12.5, '12.5'), (60000.0, '60,000'),
    ])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestHeadline:

    def test_prefers_totals(self):
        results = {'annualSavings': 100, 'monthlySavings': 8, 'dailySavings': 1,
                   'totalAnnualSavings': 200, 'totalMonthlySavings': 17, 'totalDailySavings': 2}
        assert headline_figures(results) == {'annual': 200, 'monthly': 17, 'daily': 2}

    def test_falls_back_to_base_when_total_zero(self):
        results = {'annualSavings': 100, 'monthlySavings': 8, 'dailySavings': 1,
                   'totalAnnualSavings': 0, 'totalMonthlySavings': 0, 'totalDailySavings': 0}
        assert headline_figures(results) == {'annual': 100, 'monthly': 8, 'daily': 1}


class TestContactLink:

    def test_link_shape(self, config):
        link = build_contact_link(estimate({'headcount': 500}, config))
        assert link.startswith(f'mailto:{CONTACT_EMAIL}?subject=Agentic%20Launchpad%20Inquiry&body=')

    def test_body_contents(self, config):
        results = estimate({'headcount': 100, 'monthlyEscalationVolume': 40}, config)
        body = build_contact_body(results)
        assert '- Headcount: 100 employees' in body
        assert f"- Annual Savings: {format_currency(results['totalAnnualSavings'])}" in body
        assert f"- Monthly Savings: {format_currency(results['totalMonthlySavings'])}" in body
        assert f"- Hours Saved/Year: {format_number(results['totalHoursPerYear'])}" in body

    def test_body_round_trips_through_link(self, config):
        results = estimate({'headcount': 42}, config)
        link = build_contact_link(results, recipient='sales@example.com', subject='Hello')
        encoded = link.split('&body=', 1)[1]
        assert unquote(encoded) == build_contact_body(results)
        assert link.startswith('mailto:sales@example.com?subject=Hello&')
