"""Valuation and duration helpers for investments."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import STATUS_ACTIVE
from src.domain.models import Investment
from src.utils.decimal_utils import coerce_decimal


def calculate_duration_months(start_date: date, end_date: date) -> int:
    """Return the calendar-month span between two dates.

    The day of month is ignored and the result is floored at one so that
    rate computations never divide by zero.

    Args:
        start_date: Investment start date.
        end_date: Investment end date.

    Returns:
        int: Number of months, at least 1.
    """
    months = (end_date.year - start_date.year) * 12 + (
        end_date.month - start_date.month
    )
    return max(1, months)


def investment_duration_months(investment: Investment) -> int | None:
    """Return the duration of an investment, or None when a date is missing."""
    if investment.start_date is None or investment.end_date is None:
        return None
    return calculate_duration_months(investment.start_date, investment.end_date)


def expected_profit(investment: Investment) -> Decimal:
    """Return the recorded expected profit of an investment."""
    if investment.total_expected_profit is None:
        return Decimal("0")
    return coerce_decimal(investment.total_expected_profit)


def total_face_value(investments: Iterable[Investment]) -> Decimal:
    """Return the summed face value of the investments."""
    return sum(
        (coerce_decimal(investment.face_value) for investment in investments),
        Decimal("0"),
    )


def active_investment_value(investments: Iterable[Investment]) -> Decimal:
    """Return the face value deployed in investments with status active."""
    return total_face_value(
        investment
        for investment in investments
        if investment.status == STATUS_ACTIVE
    )


def calculate_portfolio_value(
    investments: Iterable[Investment],
    total_cash: Decimal,
) -> Decimal:
    """Return active face value plus liquid cash.

    Completed, late, defaulted, and pending investments are not part of
    this figure.
    """
    return active_investment_value(investments) + coerce_decimal(total_cash)


def calculate_expected_profit(
    amount,
    expected_irr,
    duration_months: int,
) -> Decimal:
    """Project profit from an annual rate over a number of months.

    Args:
        amount: Principal amount.
        expected_irr: Annual rate as a percentage, numeric or string.
        duration_months: Holding period in months.

    Returns:
        Decimal: ``amount * irr / 100 * months / 12``.
    """
    rate = coerce_decimal(expected_irr) / Decimal("100")
    years = Decimal(duration_months) / Decimal("12")
    return coerce_decimal(amount) * rate * years


def calculate_roi(investment_amount, total_returns) -> Decimal:
    """Return the percentage gain of total returns over the invested amount.

    Args:
        investment_amount: Amount invested.
        total_returns: Everything received back, principal included.

    Returns:
        Decimal: ``(returns - amount) / amount * 100``, or 0 when nothing
        was invested.
    """
    amount = coerce_decimal(investment_amount)
    if amount == 0:
        return Decimal("0")
    returns = coerce_decimal(total_returns)
    return (returns - amount) / amount * Decimal("100")


__all__ = [
    "calculate_duration_months",
    "investment_duration_months",
    "expected_profit",
    "total_face_value",
    "active_investment_value",
    "calculate_portfolio_value",
    "calculate_expected_profit",
    "calculate_roi",
]
