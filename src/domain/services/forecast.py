"""Monthly forecast of expected cashflow inflows."""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    CASHFLOW_PRINCIPAL,
    DEFAULT_FORECAST_MONTHS,
    FORECAST_CASHFLOW_STATUSES,
    FORECAST_SUMMARY_PERIODS,
)
from src.domain.models import Cashflow, ForecastTotals, MonthlyForecast
from src.utils.date_utils import add_months, month_start
from src.utils.decimal_utils import coerce_decimal


def _month_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def calculate_monthly_forecast(
    cashflows: Iterable[Cashflow],
    as_of: date,
    months: int = DEFAULT_FORECAST_MONTHS,
) -> list[MonthlyForecast]:
    """Group expected and upcoming cashflows by due month.

    The window starts on the first day of the month containing ``as_of``
    and spans ``months`` calendar months; every month appears even when
    nothing is due.

    Args:
        cashflows: Cashflows to project.
        as_of: Reference date standing in for "today".
        months: Number of months in the window.

    Returns:
        list[MonthlyForecast]: One entry per month, in calendar order.
    """
    window_start = month_start(as_of)
    window_end = add_months(window_start, months)

    totals: dict[str, list[Decimal]] = {
        _month_key(add_months(window_start, offset)): [
            Decimal("0"),
            Decimal("0"),
        ]
        for offset in range(months)
    }
    for cashflow in cashflows:
        if cashflow.status not in FORECAST_CASHFLOW_STATUSES:
            continue
        if not window_start <= cashflow.due_date < window_end:
            continue
        bucket = totals[_month_key(cashflow.due_date)]
        amount = coerce_decimal(cashflow.amount)
        if cashflow.type == CASHFLOW_PRINCIPAL:
            bucket[0] += amount
        else:
            bucket[1] += amount

    forecast: list[MonthlyForecast] = []
    for offset in range(months):
        start = add_months(window_start, offset)
        principal, profit = totals[_month_key(start)]
        forecast.append(
            MonthlyForecast(
                month=_month_key(start),
                offset=offset,
                month_start=start,
                principal=principal,
                profit=profit,
            )
        )
    return forecast


def calculate_forecast_summaries(
    forecast: Sequence[MonthlyForecast],
    periods: Iterable[int] = FORECAST_SUMMARY_PERIODS,
) -> list[ForecastTotals]:
    """Total the first months of a forecast for each requested period."""
    summaries: list[ForecastTotals] = []
    for months in periods:
        window = forecast[:months]
        principal = sum((m.principal for m in window), Decimal("0"))
        profit = sum((m.profit for m in window), Decimal("0"))
        summaries.append(
            ForecastTotals(
                months=months,
                principal=principal,
                profit=profit,
                total=principal + profit,
            )
        )
    return summaries


__all__ = ["calculate_monthly_forecast", "calculate_forecast_summaries"]
