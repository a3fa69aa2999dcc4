"""Application use cases package."""

from .check_investment_statuses import CheckInvestmentStatusesUseCase
from .get_cashflow_forecast import (
    CashflowForecastView,
    GetCashflowForecastUseCase,
)
from .get_dashboard_metrics import (
    GetDashboardMetricsUseCase,
    build_date_range,
)
from .get_platform_default_rates import GetPlatformDefaultRatesUseCase

__all__ = [
    "CheckInvestmentStatusesUseCase",
    "CashflowForecastView",
    "GetCashflowForecastUseCase",
    "GetDashboardMetricsUseCase",
    "build_date_range",
    "GetPlatformDefaultRatesUseCase",
]
