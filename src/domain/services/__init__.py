"""Domain services package."""

from .cash_ledger import (
    calculate_cash_by_platform,
    calculate_total_cash,
    transaction_effect,
)
from .cashflow_schedule import (
    calculate_number_of_payments,
    generate_cashflows,
    payment_interval_months,
)
from .classification import (
    build_status_distribution,
    is_investment_defaulted,
    is_investment_late,
)
from .dashboard_metrics import compute_dashboard_metrics
from .default_rate import (
    calculate_default_rate,
    calculate_default_rates_by_platform,
    classify_default_severity,
)
from .distribution import (
    platform_distribution_active,
    platform_distribution_by_count,
    platform_distribution_by_value,
    resolve_platform_name,
)
from .filtering import filter_portfolio, is_platform_selected
from .forecast import calculate_forecast_summaries, calculate_monthly_forecast
from .profit import (
    calculate_end_date,
    calculate_expected_profit_rounded,
    calculate_term_months,
    validate_investment_financials,
)
from .rates import (
    calculate_active_apr,
    calculate_apr,
    calculate_historical_apr,
    calculate_portfolio_roi,
    calculate_realized_profit,
    calculate_value_weighted_apr,
    investment_apr,
)
from .status_transitions import (
    check_all_investment_statuses,
    determine_investment_status,
)
from .valuation import (
    active_investment_value,
    calculate_duration_months,
    calculate_expected_profit,
    calculate_portfolio_value,
    calculate_roi,
    expected_profit,
    investment_duration_months,
    total_face_value,
)

__all__ = [
    "calculate_cash_by_platform",
    "calculate_total_cash",
    "transaction_effect",
    "calculate_number_of_payments",
    "generate_cashflows",
    "payment_interval_months",
    "build_status_distribution",
    "is_investment_defaulted",
    "is_investment_late",
    "compute_dashboard_metrics",
    "calculate_default_rate",
    "calculate_default_rates_by_platform",
    "classify_default_severity",
    "platform_distribution_active",
    "platform_distribution_by_count",
    "platform_distribution_by_value",
    "resolve_platform_name",
    "filter_portfolio",
    "is_platform_selected",
    "calculate_forecast_summaries",
    "calculate_monthly_forecast",
    "calculate_end_date",
    "calculate_expected_profit_rounded",
    "calculate_term_months",
    "validate_investment_financials",
    "calculate_active_apr",
    "calculate_apr",
    "calculate_historical_apr",
    "calculate_portfolio_roi",
    "calculate_realized_profit",
    "calculate_value_weighted_apr",
    "investment_apr",
    "check_all_investment_statuses",
    "determine_investment_status",
    "active_investment_value",
    "calculate_duration_months",
    "calculate_expected_profit",
    "calculate_portfolio_value",
    "calculate_roi",
    "expected_profit",
    "investment_duration_months",
    "total_face_value",
]
