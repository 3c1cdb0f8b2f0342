# rentquote/utils/constants.py

"""
Global constants for asset kinds, rate bases, and the fixed fee model.
These constants are imported by both models and services.
"""

# Date format (used for quote start/end)
DATE_FMT = "%Y-%m-%d"


class AssetKind:
    PROPERTY = "property"
    VEHICLE = "vehicle"


class RateBasis:
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    DAILY = "daily"
    MONTHLY_PRORATED = "monthly_prorated"


# --- Fee model (fixed platform rates) ---
SERVICE_FEE_RATE = 0.05
TAX_RATE = 0.13  # VAT-equivalent

# --- Tier thresholds and nominal period lengths ---
# A nominal month is always 30 days; it is not calendar-aware.
MONTH_DAYS = 30
WEEK_DAYS = 7

RATE_LABELS = {
    RateBasis.MONTHLY: "Monthly Rate Applied",
    RateBasis.WEEKLY: "Weekly Rate Applied",
}

ALLOWED_KINDS = {AssetKind.PROPERTY, AssetKind.VEHICLE}
VEHICLE_TYPE_ALIASES = {"vehicle", "bike", "motorbike", "car"}
