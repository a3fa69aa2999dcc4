"""Annualized return computations and value-weighted aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import CASHFLOW_PROFIT, OPEN_EXPOSURE_STATUSES
from src.domain.models import Cashflow, Investment
from src.domain.services.valuation import (
    expected_profit,
    investment_duration_months,
    total_face_value,
)
from src.utils.decimal_utils import coerce_decimal


def calculate_apr(amount, profit, duration_months: int) -> Decimal:
    """Return the annualized return of a profit over a holding period.

    Args:
        amount: Principal amount.
        profit: Profit earned over the period.
        duration_months: Holding period in months.

    Returns:
        Decimal: APR as a percentage, 0 when amount or duration is 0.
    """
    principal = coerce_decimal(amount)
    if duration_months == 0 or principal == 0:
        return Decimal("0")
    roi = coerce_decimal(profit) / principal
    return roi * (Decimal("12") / Decimal(duration_months)) * Decimal("100")


def investment_apr(investment: Investment) -> Decimal | None:
    """Return the APR implied by an investment's expected profit.

    Returns:
        Decimal | None: APR percentage, or None when a date is missing.
    """
    duration = investment_duration_months(investment)
    if duration is None:
        return None
    return calculate_apr(
        investment.face_value,
        expected_profit(investment),
        duration,
    )


def calculate_value_weighted_apr(investments: Iterable[Investment]) -> Decimal:
    """Return the face-value weighted average APR.

    Investments missing either date neither add weight nor value, so the
    weights sum to one over the contributing subset.

    Args:
        investments: Investments to aggregate.

    Returns:
        Decimal: Weighted APR percentage, 0 when no value contributes.
    """
    contributions: list[tuple[Decimal, Decimal]] = []
    for investment in investments:
        apr = investment_apr(investment)
        if apr is None:
            continue
        contributions.append((coerce_decimal(investment.face_value), apr))

    total_value = sum((value for value, _ in contributions), Decimal("0"))
    if total_value == 0:
        return Decimal("0")
    return sum(
        (apr * (value / total_value) for value, apr in contributions),
        Decimal("0"),
    )


def calculate_active_apr(investments: Iterable[Investment]) -> Decimal:
    """Return the weighted APR over active, late, and defaulted investments."""
    return calculate_value_weighted_apr(
        investment
        for investment in investments
        if investment.status in OPEN_EXPOSURE_STATUSES
    )


def calculate_historical_apr(investments: Iterable[Investment]) -> Decimal:
    """Return the weighted APR over every investment regardless of status."""
    return calculate_value_weighted_apr(investments)


def calculate_realized_profit(cashflows: Iterable[Cashflow]) -> Decimal:
    """Return the sum of received profit cashflows."""
    return sum(
        (
            coerce_decimal(cashflow.amount)
            for cashflow in cashflows
            if cashflow.is_received and cashflow.type == CASHFLOW_PROFIT
        ),
        Decimal("0"),
    )


def calculate_portfolio_roi(
    investments: Iterable[Investment],
    cashflows: Iterable[Cashflow],
) -> Decimal:
    """Return realized profit as a percentage of total face value.

    Args:
        investments: Filtered investments providing the capital base.
        cashflows: Cashflows of those investments.

    Returns:
        Decimal: ROI percentage, 0 when no capital is invested.
    """
    invested = total_face_value(investments)
    if invested <= 0:
        return Decimal("0")
    return calculate_realized_profit(cashflows) / invested * Decimal("100")


__all__ = [
    "calculate_apr",
    "investment_apr",
    "calculate_value_weighted_apr",
    "calculate_active_apr",
    "calculate_historical_apr",
    "calculate_realized_profit",
    "calculate_portfolio_roi",
]
