"""Domain models for derived portfolio metrics."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.portfolio import Cashflow, CashTransaction, Investment


@dataclass(frozen=True)
class FilteredPortfolio:
    """Working set left after platform and date filtering."""

    investments: list[Investment]
    cash_transactions: list[CashTransaction]
    cashflows: list[Cashflow]


@dataclass(frozen=True)
class PlatformShare:
    """One row of a platform distribution table."""

    platform_id: str
    platform_name: str
    value: Decimal
    count: int
    percentage: Decimal


@dataclass(frozen=True)
class StatusDistribution:
    """Investment counts per displayed status bucket."""

    active: int
    completed: int
    late: int
    defaulted: int


@dataclass(frozen=True)
class DashboardMetrics:
    """Derived figures displayed by dashboards, reports, and exports.

    Attributes:
        portfolio_value: Active face value plus total cash.
        total_cash: Net balance of the filtered cash transactions.
        cash_by_platform: Cash balance keyed by platform id.
        actual_returns: Sum of received profit cashflows.
        expected_returns: Sum of recorded expected profit.
        active_apr: Value-weighted APR over open exposure.
        cash_ratio: Cash as a percentage of portfolio value.
        weighted_apr: Value-weighted APR over every investment.
        portfolio_roi: Received profit over total face value, in percent.
        total_profit_amount: Realized profit amount.
        avg_duration: Mean duration in months, rounded to cents.
        avg_amount: Mean face value.
        avg_payment_amount: Mean profit cashflow amount.
    """

    portfolio_value: Decimal
    total_cash: Decimal
    cash_by_platform: dict[str, Decimal]
    actual_returns: Decimal
    expected_returns: Decimal
    active_apr: Decimal
    cash_ratio: Decimal
    weighted_apr: Decimal
    portfolio_roi: Decimal
    total_profit_amount: Decimal
    avg_duration: Decimal
    avg_amount: Decimal
    avg_payment_amount: Decimal
    total_investments: int
    active_investments: int
    completed_investments: int
    late_investments: int
    defaulted_investments: int
    status_distribution: StatusDistribution
    platform_distribution_all: list[PlatformShare]
    platform_distribution_active: list[PlatformShare]
    platform_distribution_count: list[PlatformShare]

    @property
    def platform_distribution(self) -> list[PlatformShare]:
        """Return the all-by-value table under its legacy name."""
        return self.platform_distribution_all


@dataclass(frozen=True)
class StatusUpdate:
    """Recommended stored status for an investment."""

    investment_id: str
    new_status: str
    late_date: date | None = None
    defaulted_date: date | None = None


@dataclass(frozen=True)
class DefaultRateResult:
    """Share of defaulted investments and its severity band."""

    rate: Decimal
    severity: str
    defaulted_count: int
    total_count: int


@dataclass(frozen=True)
class PlatformDefaultRate:
    """Default rate computed for a single platform."""

    platform_id: str
    platform_name: str
    result: DefaultRateResult


@dataclass(frozen=True)
class MonthlyForecast:
    """Expected inflows for a calendar month."""

    month: str
    offset: int
    month_start: date
    principal: Decimal
    profit: Decimal

    @property
    def total(self) -> Decimal:
        """Return principal plus profit."""
        return self.principal + self.profit


@dataclass(frozen=True)
class ForecastTotals:
    """Forecast totals over the first months of a forecast."""

    months: int
    principal: Decimal
    profit: Decimal
    total: Decimal


@dataclass(frozen=True)
class ScheduledCashflow:
    """A payment generated for a new investment's schedule."""

    due_date: date
    amount: Decimal
    type: str


@dataclass(frozen=True)
class InvestmentFinancials:
    """Investment terms with derived end date, duration, and profit.

    Attributes:
        face_value: Principal amount.
        expected_irr: Annual rate as a percentage.
        start_date: Investment start date.
        end_date: Maturity date, given or derived from the duration.
        duration_months: Term in months, given or derived from the dates.
        total_expected_profit: Recorded profit, or the calculated one when
            none was recorded.
    """

    face_value: Decimal
    expected_irr: Decimal
    start_date: date
    end_date: date
    duration_months: int
    total_expected_profit: Decimal


__all__ = [
    "FilteredPortfolio",
    "PlatformShare",
    "StatusDistribution",
    "DashboardMetrics",
    "StatusUpdate",
    "DefaultRateResult",
    "PlatformDefaultRate",
    "MonthlyForecast",
    "ForecastTotals",
    "ScheduledCashflow",
    "InvestmentFinancials",
]
