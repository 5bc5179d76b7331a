"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 5000
REPORT_PERCENT_DECIMALS = 2
HEALTH_MESSAGE = "Backend is working!"
