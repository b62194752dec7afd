"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Billing category without a rate card; priced by a caller-supplied flat cost.
MANUAL_ENTRY_CATEGORY = "HIREUP"
MANUAL_ENTRY_DESCRIPTION = f"{MANUAL_ENTRY_CATEGORY} shift"

INVOICE_DUE_DAYS = 7
