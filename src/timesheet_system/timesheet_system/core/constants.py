"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Server-side rule: authoritative for persistence.
AUTHORITATIVE_FIRST_TIER_HOURS = 9.5
AUTHORITATIVE_SECOND_TIER_HOURS = 19.0

# Dashboard pre-save warning only. Independent of the server rule above.
ADVISORY_DAILY_HOURS = 8.0

DEFAULT_PORT = 3000
PORT_SCAN_RANGE = 100

DEFAULT_PROJECT_NAMES = (
    "Komatsu",
    "Brunswick",
    "ABB India",
    "Omnion",
    "Rinnai",
    "Oshkosh",
    "Polaris",
    "Volvo",
    "Bridgestone",
    "Wartsila UK",
    "MTU",
    "MHI",
    "Free Hours",
    "Non-Billable Hours",
    "Training Hours",
)
