"""Profit calculator used to prefill investment records."""

from datetime import date
from decimal import Decimal

from src.domain.models import InvestmentFinancials
from src.utils.date_utils import add_months
from src.utils.decimal_utils import coerce_decimal, round_cents


def calculate_expected_profit_rounded(
    face_value,
    irr_percent,
    duration_months: int,
) -> Decimal:
    """Return ``face_value * irr / 100 * months / 12`` rounded to cents.

    Non-positive face value or duration, or a negative rate, yield 0.
    """
    principal = coerce_decimal(face_value)
    rate = coerce_decimal(irr_percent)
    if principal <= 0 or rate < 0 or duration_months <= 0:
        return Decimal("0")
    years = Decimal(duration_months) / Decimal("12")
    return round_cents(principal * (rate / Decimal("100")) * years)


def calculate_term_months(start_date: date, end_date: date) -> int:
    """Return the contractual term in months, counting partial months.

    Args:
        start_date: Investment start date.
        end_date: Investment end date.

    Returns:
        int: 0 when the end is not after the start, otherwise the
        calendar-month span plus one when the end day passes the start
        day, with a minimum of 1.
    """
    if end_date <= start_date:
        return 0
    months = (end_date.year - start_date.year) * 12 + (
        end_date.month - start_date.month
    )
    if end_date.day > start_date.day:
        months += 1
    return max(1, months)


def calculate_end_date(start_date: date, duration_months: int) -> date:
    """Return the maturity date ``duration_months`` after the start."""
    return add_months(start_date, duration_months)


def validate_investment_financials(
    face_value,
    expected_irr,
    start_date: date,
    end_date: date | None = None,
    duration_months: int | None = None,
    total_expected_profit=None,
) -> InvestmentFinancials:
    """Complete investment terms from whichever of them were supplied.

    The end date is derived from the duration and the duration from the
    dates when either is missing. A missing or zero profit is replaced by
    the calculated expected profit.

    Args:
        face_value: Principal amount.
        expected_irr: Annual rate as a percentage.
        start_date: Investment start date.
        end_date: Optional maturity date.
        duration_months: Optional term in months.
        total_expected_profit: Optional recorded profit.

    Returns:
        InvestmentFinancials: Consistent terms.

    Raises:
        ValueError: If neither a usable end date nor a duration is given.
    """
    if duration_months and end_date is None:
        end_date = calculate_end_date(start_date, duration_months)
    if end_date is not None and not duration_months:
        duration_months = calculate_term_months(start_date, end_date)
    if end_date is None or not duration_months:
        raise ValueError("Either end_date or duration_months must be provided")

    profit = coerce_decimal(total_expected_profit)
    if profit == 0:
        profit = calculate_expected_profit_rounded(
            face_value, expected_irr, duration_months
        )
    return InvestmentFinancials(
        face_value=coerce_decimal(face_value),
        expected_irr=coerce_decimal(expected_irr),
        start_date=start_date,
        end_date=end_date,
        duration_months=duration_months,
        total_expected_profit=profit,
    )


__all__ = [
    "calculate_expected_profit_rounded",
    "calculate_term_months",
    "calculate_end_date",
    "validate_investment_financials",
]
