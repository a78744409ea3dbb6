"""
Agentic Launchpad: ROI Estimator
Maps one input record + assumptions snapshot to a savings breakdown.

  Rate base:   avg cost per employee / working hours, else industry rate → loaded rate
  Hours saved: ticket volume × AHT × automation gain × productivity gain   (ticket-based)
               working hours × automatable % × productivity gain × headcount (employee-based)
  Ramp-up:     aggregate hours × (1 − rampUpMonths/24)
  Tier 2:      FCR uplift, escalation reduction, error rework reduction (additive)

Pure: no I/O, no state between calls. Rounding happens only when building the result.
"""
import math, logging
from engines.assumptions import resolve_industry

AUTOMATION_CAP = 0.60
AUTOMATION_CAP_PCT = 60
WORKING_DAYS_PER_MONTH = 21.67
TICKETS_PER_EMPLOYEE_MONTHLY = 50

# Quality: FCR uplift, capped
FCR_UPLIFT = 0.15
FCR_CAP = 0.95

# Escalations cost 2-3x a normal ticket
ESCALATION_COST_MULTIPLIER = 2.5
ESCALATION_REDUCTION = 0.30
ESCALATION_HOURS = 2

ERROR_REDUCTION = 0.50
REWORK_HOURS_PER_ERROR = 0.5

TICKET_BASED = 'ticket-based'
EMPLOYEE_BASED = 'employee-based'


def round_half_up(v):
    """Half-up to the nearest int (-2.5 -> -2). Decides on the fraction, not v + 0.5."""
    whole = math.floor(v)
    return int(whole) + (1 if v - whole >= 0.5 else 0)


def _annual_tickets(inputs, headcount):
    return (inputs.get('monthlyTicketVolume') or headcount * TICKETS_PER_EMPLOYEE_MONTHLY) * 12


def quality_improvement_savings(inputs, headcount, loaded_rate):
    fcr = inputs.get('firstContactResolutionRate')
    resolution_hours = inputs.get('avgResolutionTimeHours')
    if fcr is None or not resolution_hours:
        return 0
    current_fcr = fcr / 100
    target_fcr = min(current_fcr + FCR_UPLIFT, FCR_CAP)
    rework_hours = _annual_tickets(inputs, headcount) * (target_fcr - current_fcr) * resolution_hours
    return rework_hours * loaded_rate


def escalation_reduction_savings(inputs, loaded_rate):
    monthly_escalations = inputs.get('monthlyEscalationVolume')
    if not monthly_escalations:
        return 0
    hours = monthly_escalations * 12 * ESCALATION_REDUCTION * ESCALATION_HOURS
    return hours * loaded_rate * ESCALATION_COST_MULTIPLIER


def error_reduction_savings(inputs, headcount, loaded_rate):
    rework_rate = inputs.get('errorReworkRate')
    if not rework_rate:
        return 0
    hours = _annual_tickets(inputs, headcount) * (rework_rate / 100) * ERROR_REDUCTION * REWORK_HOURS_PER_ERROR
    return hours * loaded_rate


def estimate(inputs, config):
    """
    Project savings for one organisation.

    Args:
        inputs: dict with headcount (>= 1, validated by the caller) and optional
            tier-1 / tier-2 fields; absent or zero fields fall back to defaults.
        config: assumptions snapshot from engines.assumptions.

    Returns:
        new dict of rounded hour/currency metrics, automation rates and ticket echo fields.
    """
    productivity = config['productivity']
    costs = config['costs']
    headcount = inputs['headcount']
    industry_key, industry = resolve_industry(config, inputs.get('industry'))

    # ── Rate base ──
    if inputs.get('avgCostPerEmployee'):
        base_rate = inputs['avgCostPerEmployee'] / productivity['annualWorkingHours']
    else:
        base_rate = industry['averageHourlyRate']
    loaded_rate = base_rate * costs['loadedCostMultiplier']

    # ── Automation gain (not floored: negative means already past the cap) ──
    current_automation = (inputs.get('currentAutomationRate') or 0) / 100
    target_automation = min(industry['automatablePercentage'], AUTOMATION_CAP)
    automation_gain = target_automation - current_automation

    # ── Hours saved ──
    gain_pct = productivity['productivityGainPercentage']
    monthly_tickets = inputs.get('monthlyTicketVolume')
    aht = inputs.get('avgHandleTimeMinutes')
    if monthly_tickets and aht:
        method = TICKET_BASED
        ticket_hours = monthly_tickets * 12 * (aht / 60)
        total_hours = ticket_hours * automation_gain * gain_pct
        hours_per_employee = total_hours / headcount
    else:
        method = EMPLOYEE_BASED
        automatable_hours = productivity['annualWorkingHours'] * industry['automatablePercentage']
        hours_per_employee = automatable_hours * gain_pct
        total_hours = hours_per_employee * headcount
    # per-employee figure stays at steady state; only the aggregate is ramp-adjusted
    ramp_factor = 1 - (productivity['rampUpMonths'] / 24)
    total_hours = total_hours * ramp_factor
    logging.debug(f"estimate: {method} path, industry={industry_key}, gain={automation_gain:.3f}")

    annual = total_hours * loaded_rate
    monthly = annual / 12

    quality = quality_improvement_savings(inputs, headcount, loaded_rate)
    escalation = escalation_reduction_savings(inputs, loaded_rate)
    error = error_reduction_savings(inputs, headcount, loaded_rate)

    total_annual = annual + quality + escalation + error
    total_monthly = total_annual / 12

    # ── Automation projection (percentage scale, capped again) ──
    projected = min((current_automation + automation_gain) * 100, AUTOMATION_CAP_PCT)
    current_rate = inputs.get('currentAutomationRate') or current_automation * 100

    return {
        'headcount': headcount,
        'industry': industry_key,
        'calculationMethod': method,
        'hoursPerEmployeePerYear': round_half_up(hours_per_employee),
        'totalHoursPerYear': round_half_up(total_hours),
        'loadedHourlyRate': round_half_up(loaded_rate),

        'annualSavings': round_half_up(annual),
        'monthlySavings': round_half_up(monthly),
        'dailySavings': round_half_up(monthly / WORKING_DAYS_PER_MONTH),

        'totalAnnualSavings': round_half_up(total_annual),
        'totalMonthlySavings': round_half_up(total_monthly),
        'totalDailySavings': round_half_up(total_monthly / WORKING_DAYS_PER_MONTH),

        'qualityImprovementSavings': round_half_up(quality),
        'escalationReductionSavings': round_half_up(escalation),
        'errorReductionSavings': round_half_up(error),

        'currentAutomationRate': current_rate,
        'projectedAutomationRate': round_half_up(projected),
        'automationGain': round_half_up(projected - current_rate),

        'productivityGainPercentage': gain_pct * 100,

        'monthlyTicketVolume': monthly_tickets,
        'annualTicketVolume': monthly_tickets * 12 if monthly_tickets else None,
    }
