"""Domain models package."""

from .metrics import (
    DashboardMetrics,
    DefaultRateResult,
    FilteredPortfolio,
    ForecastTotals,
    InvestmentFinancials,
    MonthlyForecast,
    PlatformDefaultRate,
    PlatformShare,
    ScheduledCashflow,
    StatusDistribution,
    StatusUpdate,
)
from .portfolio import (
    Cashflow,
    CashTransaction,
    DateRange,
    Investment,
    Platform,
    PortfolioSnapshot,
)

__all__ = [
    "Cashflow",
    "CashTransaction",
    "DateRange",
    "Investment",
    "Platform",
    "PortfolioSnapshot",
    "DashboardMetrics",
    "DefaultRateResult",
    "FilteredPortfolio",
    "ForecastTotals",
    "InvestmentFinancials",
    "ScheduledCashflow",
    "MonthlyForecast",
    "PlatformDefaultRate",
    "PlatformShare",
    "StatusDistribution",
    "StatusUpdate",
]
