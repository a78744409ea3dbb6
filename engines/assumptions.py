"""
Agentic Launchpad: Assumptions Engine
Built-in productivity/cost/industry assumptions with optional overrides from
config/assumptions.xlsx. Returns an immutable snapshot; reloads produce a new one.
"""
import os, math, logging
from types import MappingProxyType
import openpyxl

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'data')
DEFAULT_PATH = os.path.join(DATA_DIR, 'config', 'assumptions.xlsx')

FALLBACK_INDUSTRY = 'other'

# Industry-specific cost and automation potential
INDUSTRY_DEFAULTS = {
    'financial-services': {'averageHourlyRate': 85, 'automatablePercentage': 0.40, 'complexityMultiplier': 1.2},
    'technology':         {'averageHourlyRate': 90, 'automatablePercentage': 0.45, 'complexityMultiplier': 1.1},
    'healthcare':         {'averageHourlyRate': 80, 'automatablePercentage': 0.30, 'complexityMultiplier': 1.3},
    'manufacturing':      {'averageHourlyRate': 70, 'automatablePercentage': 0.35, 'complexityMultiplier': 1.0},
    'retail':             {'averageHourlyRate': 65, 'automatablePercentage': 0.38, 'complexityMultiplier': 0.9},
    'other':              {'averageHourlyRate': 75, 'automatablePercentage': 0.35, 'complexityMultiplier': 1.0},
}

USE_CASES = [
    'Incident ticket triage and routing',
    'Knowledge base article generation',
    'Automated customer request handling',
    'Report generation and analysis',
    'Routine approvals and workflows',
    'Employee onboarding tasks',
]

# Workbook label -> (block, key, kind)
# kind: 'fraction' in [0,1], 'rate' > 0, 'multiplier' >= 1, 'months' int in [0,24], 'count' int >= 0
PARAM_MAP = {
    'Annual Working Hours': ('productivity', 'annualWorkingHours', 'rate'),
    'Automatable Tasks %': ('productivity', 'automatableTasksPercentage', 'fraction'),
    'Productivity Gain %': ('productivity', 'productivityGainPercentage', 'fraction'),
    'Ramp-Up Months': ('productivity', 'rampUpMonths', 'months'),
    'Average Hourly Rate': ('costs', 'averageHourlyRate', 'rate'),
    'Loaded Cost Multiplier': ('costs', 'loadedCostMultiplier', 'multiplier'),
    'Implementation Weeks': ('agenticLaunchpad', 'implementationWeeks', 'count'),
    'Deployment Days per Workflow': ('agenticLaunchpad', 'deploymentTimePerWorkflow', 'count'),
}

INDUSTRY_COLUMNS = {
    'Hourly Rate': ('averageHourlyRate', 'rate'),
    'Automatable %': ('automatablePercentage', 'fraction'),
    'Complexity Multiplier': ('complexityMultiplier', 'rate'),
}


def _default_params():
    """Research basis: ~20% productivity improvement on automatable GBS work."""
    return {
        'productivity': {
            # 40 hrs/week * 52 weeks
            'annualWorkingHours': 2080,
            'automatableTasksPercentage': 0.35,
            'productivityGainPercentage': 0.20,
            'rampUpMonths': 3,
        },
        'costs': {
            'averageHourlyRate': 75,
            # benefits/overhead
            'loadedCostMultiplier': 1.4,
        },
        'agenticLaunchpad': {
            'useCases': list(USE_CASES),
            'implementationWeeks': 8,
            'deploymentTimePerWorkflow': 2,
        },
        'industryDefaults': {k: dict(v) for k, v in INDUSTRY_DEFAULTS.items()},
    }


def freeze(obj):
    """Deep read-only copy: dicts -> MappingProxyType, lists -> tuples."""
    if isinstance(obj, dict):
        return MappingProxyType({k: freeze(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return tuple(freeze(v) for v in obj)
    return obj


def config_to_dict(config):
    """Plain, JSON-serializable copy of a snapshot."""
    if isinstance(config, (dict, MappingProxyType)):
        return {k: config_to_dict(v) for k, v in config.items()}
    if isinstance(config, tuple):
        return [config_to_dict(v) for v in config]
    return config


def coerce_value(val, kind):
    """Parse and range-check one assumption value. Returns None if it is unusable."""
    if val is None or val == '':
        return None
    try:
        num = float(str(val).strip().rstrip('%')) if isinstance(val, str) else float(val)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(num):
        return None
    if isinstance(val, str) and val.strip().endswith('%'):
        num = num / 100
    if kind == 'fraction':
        return num if 0 <= num <= 1 else None
    if kind == 'rate':
        return num if num > 0 else None
    if kind == 'multiplier':
        return num if num >= 1 else None
    if kind == 'months':
        return int(num) if num == int(num) and 0 <= num <= 24 else None
    if kind == 'count':
        return int(num) if num == int(num) and num >= 0 else None
    return None


def read_xlsx_sheet(filepath, sheet_name=None):
    wb = openpyxl.load_workbook(filepath, read_only=True, data_only=True)
    try:
        if sheet_name and sheet_name not in wb.sheetnames:
            return []
        ws = wb[sheet_name] if sheet_name else wb.active
        rows = list(ws.iter_rows(values_only=True))
    finally:
        wb.close()
    if len(rows) < 2:
        return []
    headers = [str(h).strip() if h else f'col_{i}' for i, h in enumerate(rows[0])]
    return [dict(zip(headers, row)) for row in rows[1:]]


def _apply_parameters(p, rows):
    for row in rows:
        label = str(row.get('Parameter') or '').strip()
        if not label:
            continue
        if label not in PARAM_MAP:
            logging.warning(f"assumptions: unknown parameter '{label}' ignored")
            continue
        block, key, kind = PARAM_MAP[label]
        val = coerce_value(row.get('Value'), kind)
        if val is None:
            logging.warning(f"assumptions: invalid value {row.get('Value')!r} for '{label}', keeping {p[block][key]}")
            continue
        p[block][key] = val


def _apply_industries(p, rows):
    industries = p['industryDefaults']
    for row in rows:
        key = str(row.get('Industry') or '').strip().lower()
        if not key:
            continue
        entry = dict(industries.get(key, industries[FALLBACK_INDUSTRY]))
        for col, (field, kind) in INDUSTRY_COLUMNS.items():
            if row.get(col) is None:
                continue
            val = coerce_value(row.get(col), kind)
            if val is None:
                logging.warning(f"assumptions: invalid {col} {row.get(col)!r} for industry '{key}' ignored")
                continue
            entry[field] = val
        industries[key] = entry


def _apply_use_cases(p, rows):
    cases = [str(r.get('Use Case')).strip() for r in rows if r.get('Use Case')]
    if cases:
        p['agenticLaunchpad']['useCases'] = cases


def default_config():
    return freeze(_default_params())


def load_config(path=None):
    """Load assumptions: defaults overlaid with config/assumptions.xlsx when present.

    Sheets read: 'Assumptions' (Parameter, Value), 'Industries'
    (Industry, Hourly Rate, Automatable %, Complexity Multiplier) and
    'Use Cases' (Use Case). All are optional.
    """
    path = path or os.environ.get('ROI_ASSUMPTIONS_PATH') or DEFAULT_PATH
    p = _default_params()
    if not os.path.exists(path):
        logging.debug(f"assumptions: {path} not found, using built-in defaults")
        return freeze(p)
    try:
        _apply_parameters(p, read_xlsx_sheet(path, 'Assumptions'))
        _apply_industries(p, read_xlsx_sheet(path, 'Industries'))
        _apply_use_cases(p, read_xlsx_sheet(path, 'Use Cases'))
    except Exception as e:
        logging.error(f"assumptions: could not read {path} ({type(e).__name__}: {e}), using built-in defaults")
        return default_config()
    logging.info(f"assumptions: loaded {path} ({len(p['industryDefaults'])} industries)")
    return freeze(p)


def resolve_industry(config, key):
    industries = config['industryDefaults']
    if key and key in industries:
        return key, industries[key]
    if key:
        logging.debug(f"assumptions: unknown industry '{key}', using '{FALLBACK_INDUSTRY}'")
    return FALLBACK_INDUSTRY, industries[FALLBACK_INDUSTRY]
