"""
Agentic Launchpad: Input Coercion
Turns raw form values into an estimator input record.
Headcount is the only hard precondition; everything else degrades to "not supplied".
"""
import re, logging
from engines.assumptions import FALLBACK_INDUSTRY

HEADCOUNT_MESSAGE = 'Please enter a valid headcount number'
LEADING_INT = re.compile(r'[+-]?\d+')

# field -> (kind, tier)
OPTIONAL_FIELDS = {
    'monthlyTicketVolume': ('int', 1),
    'currentAutomationRate': ('percent', 1),
    'avgHandleTimeMinutes': ('float', 1),
    'avgCostPerEmployee': ('float', 1),
    'firstContactResolutionRate': ('percent', 2),
    'avgResolutionTimeHours': ('float', 2),
    'monthlyEscalationVolume': ('int', 2),
    'errorReworkRate': ('percent', 2),
}


class InvalidInputError(ValueError):
    pass


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def parse_int(raw):
    """Leading integer, like a form parseInt: '12.7' -> 12, '12abc' -> 12, '1e3' -> 1.

    Thousands separators are dropped first ('1,500' -> 1500). None if no leading digits.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return int(raw) if raw == raw and abs(raw) != float('inf') else None
    m = LEADING_INT.match(str(raw).strip().replace(',', ''))
    return int(m.group(0)) if m else None


def parse_float(raw):
    if raw is None or isinstance(raw, bool):
        return None
    try:
        v = float(str(raw).strip().replace(',', '')) if isinstance(raw, str) else float(raw)
    except (ValueError, TypeError):
        return None
    if v != v or abs(v) == float('inf'):
        return None
    return v


def _is_blank(raw):
    return raw is None or (isinstance(raw, str) and not raw.strip())


def parse_headcount(raw):
    count = parse_int(raw)
    if count is None or count <= 0:
        raise InvalidInputError(HEADCOUNT_MESSAGE)
    return count


def parse_inputs(form, advanced=True):
    """Build an estimator input record from raw form values.

    Blank and unparseable optional fields are left out; zeros are kept, since a
    zero first-contact-resolution rate still enables the quality uplift. Percent
    fields are clamped to [0, 100], other numbers to >= 0. Tier-2 fields are read
    only when advanced is set.
    """
    inputs = {
        'headcount': parse_headcount(form.get('headcount')),
        'industry': str(form.get('industry') or '').strip().lower() or FALLBACK_INDUSTRY,
    }
    for field, (kind, tier) in OPTIONAL_FIELDS.items():
        if tier == 2 and not advanced:
            continue
        raw = form.get(field)
        if _is_blank(raw):
            continue
        val = parse_int(raw) if kind == 'int' else parse_float(raw)
        if val is None:
            logging.warning(f"parse_inputs: ignoring non-numeric {field}={raw!r}")
            continue
        inputs[field] = clamp(val, 0, 100) if kind == 'percent' else max(0, val)
    return inputs
