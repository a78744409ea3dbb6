"""
Agentic Launchpad: Contact & Display Helpers
Headline-figure selection, USD/number formatting and the mailto: enquiry link.
"""
from urllib.parse import quote

CONTACT_EMAIL = 'support@tqima.com'
CONTACT_SUBJECT = 'Agentic Launchpad Inquiry'
INTRO = "I'm interested in learning more about TQ IMA's Agentic Launchpad."


def format_currency(value):
    value = value or 0
    sign = '-' if value < 0 else ''
    return f"{sign}${abs(value):,.0f}"


def format_number(value):
    if value is None:
        return '0'
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.2f}".rstrip('0').rstrip('.')
    return f"{int(value):,}"


def headline_figures(results):
    """Total (with tier-2 components) figures when non-zero, else the base ones."""
    return {
        'annual': results.get('totalAnnualSavings') or results.get('annualSavings', 0),
        'monthly': results.get('totalMonthlySavings') or results.get('monthlySavings', 0),
        'daily': results.get('totalDailySavings') or results.get('dailySavings', 0),
    }


def build_contact_body(results):
    h = headline_figures(results)
    lines = [
        INTRO,
        '',
        'Projected Savings:',
        f"- Headcount: {results['headcount']} employees",
        f"- Annual Savings: {format_currency(h['annual'])}",
        f"- Monthly Savings: {format_currency(h['monthly'])}",
        f"- Hours Saved/Year: {format_number(results.get('totalHoursPerYear'))}",
    ]
    return '\r\n'.join(lines)


def build_contact_link(results, recipient=CONTACT_EMAIL, subject=CONTACT_SUBJECT):
    body = build_contact_body(results)
    return f"mailto:{recipient}?subject={quote(subject)}&body={quote(body)}"
