"""Top-level aggregation of dashboard metrics."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import CASHFLOW_PROFIT, STATUS_ACTIVE, STATUS_COMPLETED
from src.domain.models import (
    Cashflow,
    CashTransaction,
    DashboardMetrics,
    DateRange,
    Investment,
    Platform,
)
from src.domain.services.cash_ledger import (
    calculate_cash_by_platform,
    calculate_total_cash,
)
from src.domain.services.classification import build_status_distribution
from src.domain.services.distribution import (
    platform_distribution_active,
    platform_distribution_by_count,
    platform_distribution_by_value,
)
from src.domain.services.filtering import filter_portfolio
from src.domain.services.rates import (
    calculate_active_apr,
    calculate_historical_apr,
    calculate_portfolio_roi,
    calculate_realized_profit,
)
from src.domain.services.valuation import (
    calculate_portfolio_value,
    expected_profit,
    investment_duration_months,
    total_face_value,
)
from src.utils.decimal_utils import coerce_decimal, round_cents


def _mean(total: Decimal, count: int) -> Decimal:
    if count == 0:
        return Decimal("0")
    return total / Decimal(count)


def _warn_on_incomplete_records(
    investments: list[Investment],
    platforms: list[Platform],
    logger: Logger,
) -> None:
    known = {platform.id for platform in platforms}
    dangling = sorted(
        {inv.platform_id for inv in investments if inv.platform_id not in known}
    )
    if dangling:
        logger.warning(
            f"Investments reference unknown platforms: {', '.join(dangling)}"
        )
    undated = sum(1 for inv in investments if not inv.has_dates)
    if undated:
        logger.warning(
            f"Skipping {undated} undated investments in duration aggregates"
        )


def compute_dashboard_metrics(
    investments: Iterable[Investment],
    cash_transactions: Iterable[CashTransaction],
    platforms: Iterable[Platform],
    cashflows: Iterable[Cashflow],
    date_range: DateRange | None = None,
    platform_id: str | None = None,
    *,
    as_of: date,
    logger: Logger | None = None,
) -> DashboardMetrics:
    """Compute every dashboard figure from raw portfolio records.

    Args:
        investments: Investment records.
        cash_transactions: Cash transaction records.
        platforms: Platform records used for display names.
        cashflows: Cashflow records.
        date_range: Optional inclusive window on investment start dates.
        platform_id: Optional platform filter, ``"all"`` for every platform.
        as_of: Reference date for late and defaulted classification.
        logger: Optional logger used for data-quality warnings.

    Returns:
        DashboardMetrics: Freshly computed metrics record.
    """
    platforms = list(platforms)
    filtered = filter_portfolio(
        investments,
        cash_transactions,
        cashflows,
        platform_id=platform_id,
        date_range=date_range,
    )
    selected = filtered.investments
    selected_cashflows = filtered.cashflows
    if logger is not None:
        _warn_on_incomplete_records(selected, platforms, logger)

    total_cash = calculate_total_cash(filtered.cash_transactions)
    cash_by_platform = calculate_cash_by_platform(
        filtered.cash_transactions, platform_id
    )

    portfolio_value = calculate_portfolio_value(selected, total_cash)
    actual_returns = calculate_realized_profit(selected_cashflows)
    expected_returns = sum(
        (expected_profit(inv) for inv in selected), Decimal("0")
    )
    cash_ratio = (
        total_cash / portfolio_value * Decimal("100")
        if portfolio_value > 0
        else Decimal("0")
    )

    durations = [
        months
        for months in (investment_duration_months(inv) for inv in selected)
        if months is not None
    ]
    avg_duration = round_cents(_mean(Decimal(sum(durations)), len(durations)))
    avg_amount = _mean(total_face_value(selected), len(selected))
    profit_amounts = [
        coerce_decimal(cf.amount)
        for cf in selected_cashflows
        if cf.type == CASHFLOW_PROFIT
    ]
    avg_payment_amount = _mean(
        sum(profit_amounts, Decimal("0")), len(profit_amounts)
    )

    status_distribution = build_status_distribution(
        selected, selected_cashflows, as_of
    )

    return DashboardMetrics(
        portfolio_value=portfolio_value,
        total_cash=total_cash,
        cash_by_platform=cash_by_platform,
        actual_returns=actual_returns,
        expected_returns=expected_returns,
        active_apr=calculate_active_apr(selected),
        cash_ratio=cash_ratio,
        weighted_apr=calculate_historical_apr(selected),
        portfolio_roi=calculate_portfolio_roi(selected, selected_cashflows),
        total_profit_amount=actual_returns,
        avg_duration=avg_duration,
        avg_amount=avg_amount,
        avg_payment_amount=avg_payment_amount,
        total_investments=len(selected),
        active_investments=sum(
            1 for inv in selected if inv.status == STATUS_ACTIVE
        ),
        completed_investments=sum(
            1 for inv in selected if inv.status == STATUS_COMPLETED
        ),
        late_investments=status_distribution.late,
        defaulted_investments=status_distribution.defaulted,
        status_distribution=status_distribution,
        platform_distribution_all=platform_distribution_by_value(
            selected, platforms
        ),
        platform_distribution_active=platform_distribution_active(
            selected, platforms
        ),
        platform_distribution_count=platform_distribution_by_count(
            selected, platforms
        ),
    )


__all__ = ["compute_dashboard_metrics"]
