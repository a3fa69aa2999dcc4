"""Domain package for portfolio metrics and classification rules."""

from .constants import (
    ALL_PLATFORMS,
    DEFAULT_THRESHOLD_DAYS,
    UNKNOWN_PLATFORM_NAME,
)
from .models import (
    Cashflow,
    CashTransaction,
    DashboardMetrics,
    DateRange,
    DefaultRateResult,
    ForecastTotals,
    Investment,
    InvestmentFinancials,
    MonthlyForecast,
    Platform,
    PlatformDefaultRate,
    PlatformShare,
    PortfolioSnapshot,
    ScheduledCashflow,
    StatusDistribution,
    StatusUpdate,
)
from .services import (
    calculate_active_apr,
    calculate_apr,
    calculate_cash_by_platform,
    calculate_default_rate,
    calculate_default_rates_by_platform,
    calculate_duration_months,
    calculate_expected_profit,
    calculate_forecast_summaries,
    calculate_historical_apr,
    calculate_monthly_forecast,
    calculate_number_of_payments,
    calculate_portfolio_roi,
    calculate_portfolio_value,
    calculate_roi,
    calculate_total_cash,
    check_all_investment_statuses,
    compute_dashboard_metrics,
    determine_investment_status,
    filter_portfolio,
    generate_cashflows,
    is_investment_defaulted,
    is_investment_late,
    validate_investment_financials,
)

__all__ = [
    "ALL_PLATFORMS",
    "DEFAULT_THRESHOLD_DAYS",
    "UNKNOWN_PLATFORM_NAME",
    "Cashflow",
    "CashTransaction",
    "DashboardMetrics",
    "DateRange",
    "DefaultRateResult",
    "ForecastTotals",
    "Investment",
    "InvestmentFinancials",
    "MonthlyForecast",
    "Platform",
    "PlatformDefaultRate",
    "PlatformShare",
    "PortfolioSnapshot",
    "ScheduledCashflow",
    "StatusDistribution",
    "StatusUpdate",
    "calculate_active_apr",
    "calculate_apr",
    "calculate_cash_by_platform",
    "calculate_default_rate",
    "calculate_default_rates_by_platform",
    "calculate_duration_months",
    "calculate_expected_profit",
    "calculate_forecast_summaries",
    "calculate_historical_apr",
    "calculate_monthly_forecast",
    "calculate_number_of_payments",
    "calculate_portfolio_roi",
    "calculate_portfolio_value",
    "calculate_roi",
    "calculate_total_cash",
    "check_all_investment_statuses",
    "compute_dashboard_metrics",
    "determine_investment_status",
    "filter_portfolio",
    "generate_cashflows",
    "is_investment_defaulted",
    "is_investment_late",
    "validate_investment_financials",
]
