"""
Agentic Launchpad: Excel Export
One workbook per calculation: summary, savings breakdown, inputs and the assumptions used.
"""
from io import BytesIO
import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from engines.assumptions import config_to_dict
from engines.contact import format_currency, format_number, headline_figures

HEADER_FONT = Font(bold=True, color='FFFFFF', size=11)
HEADER_FILL = PatternFill(start_color='2E2E38', end_color='2E2E38', fill_type='solid')
THIN = Side(style='thin')
BORDER = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)

INPUT_LABELS = {
    'headcount': 'Headcount',
    'industry': 'Industry',
    'monthlyTicketVolume': 'Monthly Ticket Volume',
    'currentAutomationRate': 'Current Automation Rate (%)',
    'avgHandleTimeMinutes': 'Avg Handle Time (min)',
    'avgCostPerEmployee': 'Avg Cost per Employee',
    'firstContactResolutionRate': 'First Contact Resolution (%)',
    'avgResolutionTimeHours': 'Avg Resolution Time (hrs)',
    'monthlyEscalationVolume': 'Monthly Escalations',
    'errorReworkRate': 'Error Rework Rate (%)',
}


def ws_write(ws, headers, rows):
    for c, h in enumerate(headers, 1):
        cell = ws.cell(row=1, column=c, value=h)
        cell.font = HEADER_FONT; cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal='center'); cell.border = BORDER
    for r, row in enumerate(rows, 2):
        for c, val in enumerate(row, 1):
            ws.cell(row=r, column=c, value=val).border = BORDER
    for col in ws.columns:
        ml = max(len(str(cell.value or '')) for cell in col)
        ws.column_dimensions[col[0].column_letter].width = min(ml + 2, 50)


def build_workbook(results, config, inputs=None):
    wb = openpyxl.Workbook()
    h = headline_figures(results)

    ws = wb.active; ws.title = 'Summary'
    ws_write(ws, ['Metric', 'Value'], [
        ['Headcount', results['headcount']],
        ['Industry', results.get('industry', '')],
        ['Calculation Method', results.get('calculationMethod', '')],
        ['Total Annual Savings', format_currency(h['annual'])],
        ['Total Monthly Savings', format_currency(h['monthly'])],
        ['Total Daily Savings', format_currency(h['daily'])],
        ['Hours Saved / Year', format_number(results['totalHoursPerYear'])],
        ['Hours Saved / Employee / Year', format_number(results['hoursPerEmployeePerYear'])],
        ['Loaded Hourly Rate', format_currency(results['loadedHourlyRate'])],
        ['Current Automation Rate', f"{results['currentAutomationRate']:g}%"],
        ['Projected Automation Rate', f"{results['projectedAutomationRate']}%"],
        ['Automation Gain (pts)', results['automationGain']],
        ['Productivity Gain', f"{results['productivityGainPercentage']:.0f}%"],
        ['Annual Ticket Volume', format_number(results['annualTicketVolume']) if results.get('annualTicketVolume') else 'n/a'],
    ])

    ws2 = wb.create_sheet('Savings Breakdown')
    ws_write(ws2, ['Component', 'Annual', 'Monthly', 'Daily'], [
        ['Base Productivity', results['annualSavings'], results['monthlySavings'], results['dailySavings']],
        ['Quality Improvement', results['qualityImprovementSavings'], None, None],
        ['Escalation Reduction', results['escalationReductionSavings'], None, None],
        ['Error Reduction', results['errorReductionSavings'], None, None],
        ['Total', results['totalAnnualSavings'], results['totalMonthlySavings'], results['totalDailySavings']],
    ])

    if inputs:
        ws3 = wb.create_sheet('Inputs')
        ws_write(ws3, ['Input', 'Value'], [
            [INPUT_LABELS.get(k, k), v] for k, v in inputs.items()
        ])

    cfg = config_to_dict(config)
    ws4 = wb.create_sheet('Assumptions')
    rows = []
    for block in ('productivity', 'costs'):
        for k, v in cfg[block].items():
            rows.append([block, k, v])
    la = cfg.get('agenticLaunchpad', {})
    rows.append(['agenticLaunchpad', 'implementationWeeks', la.get('implementationWeeks')])
    rows.append(['agenticLaunchpad', 'deploymentTimePerWorkflow', la.get('deploymentTimePerWorkflow')])
    rows.append(['agenticLaunchpad', 'useCases', '; '.join(la.get('useCases', []))])
    ws_write(ws4, ['Block', 'Parameter', 'Value'], rows)

    ws5 = wb.create_sheet('Industries')
    ws_write(ws5, ['Industry', 'Hourly Rate', 'Automatable %', 'Complexity Multiplier'], [
        [k, v['averageHourlyRate'], v['automatablePercentage'], v['complexityMultiplier']]
        for k, v in cfg['industryDefaults'].items()
    ])
    return wb


def export_buffer(results, config, inputs=None):
    buf = BytesIO()
    build_workbook(results, config, inputs).save(buf)
    buf.seek(0)
    return buf
