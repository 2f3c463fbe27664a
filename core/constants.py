# constants.py

# Flat credit per assignment; real hours are not tracked.
HOURS_PER_EVENT = 4

CAMPAIGNS_REPORT_FILENAME = "campaigns-report.csv"
FUND_USAGE_REPORT_FILENAME = "fund-usage-report.csv"
