"""Domain constants for portfolio metrics."""

from datetime import timedelta

STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"
STATUS_LATE = "late"
STATUS_DEFAULTED = "defaulted"
STATUS_PENDING = "pending"

# Stored statuses treated as open exposure for the active APR.
OPEN_EXPOSURE_STATUSES = (
    STATUS_ACTIVE,
    STATUS_LATE,
    STATUS_DEFAULTED,
)

# Stored statuses never reclassified as late.
CLOSED_STATUSES = (
    STATUS_COMPLETED,
    STATUS_PENDING,
)

CASHFLOW_RECEIVED = "received"
CASHFLOW_EXPECTED = "expected"
CASHFLOW_UPCOMING = "upcoming"
FORECAST_CASHFLOW_STATUSES = (
    CASHFLOW_EXPECTED,
    CASHFLOW_UPCOMING,
)

CASHFLOW_PROFIT = "profit"
CASHFLOW_PRINCIPAL = "principal"

CASH_INFLOW_TYPES = ("deposit", "distribution")
CASH_OUTFLOW_TYPES = ("withdrawal", "investment")

ALL_PLATFORMS = "all"
UNKNOWN_PLATFORM_NAME = "Unknown"

DEFAULT_THRESHOLD_DAYS = 60
STATUS_GRACE_PERIOD = timedelta(days=30)

DEFAULT_RATE_LOW_LIMIT = 5
DEFAULT_RATE_MEDIUM_LIMIT = 10

DEFAULT_FORECAST_MONTHS = 40
FORECAST_SUMMARY_PERIODS = (1, 3, 6, 12, 24)

FREQUENCY_MONTHLY = "monthly"
FREQUENCY_QUARTERLY = "quarterly"
FREQUENCY_SEMI_ANNUALLY = "semi_annually"
FREQUENCY_ANNUALLY = "annually"
FREQUENCY_AT_MATURITY = "at_maturity"
DISTRIBUTION_INTERVAL_MONTHS = {
    FREQUENCY_MONTHLY: 1,
    FREQUENCY_QUARTERLY: 3,
    FREQUENCY_SEMI_ANNUALLY: 6,
    FREQUENCY_ANNUALLY: 12,
}
DEFAULT_INTERVAL_MONTHS = 12

PROFIT_PERIODIC = "periodic"
PROFIT_AT_MATURITY = "at_maturity"


__all__ = [
    "STATUS_ACTIVE",
    "STATUS_COMPLETED",
    "STATUS_LATE",
    "STATUS_DEFAULTED",
    "STATUS_PENDING",
    "OPEN_EXPOSURE_STATUSES",
    "CLOSED_STATUSES",
    "CASHFLOW_RECEIVED",
    "CASHFLOW_EXPECTED",
    "CASHFLOW_UPCOMING",
    "FORECAST_CASHFLOW_STATUSES",
    "CASHFLOW_PROFIT",
    "CASHFLOW_PRINCIPAL",
    "CASH_INFLOW_TYPES",
    "CASH_OUTFLOW_TYPES",
    "ALL_PLATFORMS",
    "UNKNOWN_PLATFORM_NAME",
    "DEFAULT_THRESHOLD_DAYS",
    "STATUS_GRACE_PERIOD",
    "DEFAULT_RATE_LOW_LIMIT",
    "DEFAULT_RATE_MEDIUM_LIMIT",
    "DEFAULT_FORECAST_MONTHS",
    "FORECAST_SUMMARY_PERIODS",
    "FREQUENCY_MONTHLY",
    "FREQUENCY_QUARTERLY",
    "FREQUENCY_SEMI_ANNUALLY",
    "FREQUENCY_ANNUALLY",
    "FREQUENCY_AT_MATURITY",
    "DISTRIBUTION_INTERVAL_MONTHS",
    "DEFAULT_INTERVAL_MONTHS",
    "PROFIT_PERIODIC",
    "PROFIT_AT_MATURITY",
]
