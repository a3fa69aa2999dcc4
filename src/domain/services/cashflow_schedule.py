"""Payment schedules generated for new investments."""

from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import (
    CASHFLOW_PRINCIPAL,
    CASHFLOW_PROFIT,
    DEFAULT_INTERVAL_MONTHS,
    DISTRIBUTION_INTERVAL_MONTHS,
    FREQUENCY_AT_MATURITY,
    PROFIT_PERIODIC,
)
from src.domain.models import ScheduledCashflow
from src.utils.date_utils import add_months
from src.utils.decimal_utils import coerce_decimal, round_cents


def payment_interval_months(frequency: str) -> int:
    """Return the months between profit payments, yearly when unknown."""
    return DISTRIBUTION_INTERVAL_MONTHS.get(frequency, DEFAULT_INTERVAL_MONTHS)


def _payment_dates(
    start_date: date,
    end_date: date,
    interval: int,
    include_end: bool,
) -> list[date]:
    dates: list[date] = []
    step = 1
    current = add_months(start_date, interval)
    while current < end_date or (include_end and current == end_date):
        dates.append(current)
        step += 1
        current = add_months(start_date, interval * step)
    return dates


def _split_evenly(total: Decimal, parts: int) -> list[Decimal]:
    """Split an amount into cents, leaving the remainder on the last part."""
    share = round_cents(total / Decimal(parts))
    return [share] * (parts - 1) + [total - share * (parts - 1)]


def generate_cashflows(
    start_date: date,
    end_date: date,
    face_value,
    total_expected_profit,
    distribution_frequency: str,
    profit_payment_structure: str = PROFIT_PERIODIC,
) -> list[ScheduledCashflow]:
    """Build the expected payments of an investment.

    Args:
        start_date: Investment start date.
        end_date: Maturity date.
        face_value: Principal returned at the end of the term.
        total_expected_profit: Profit spread over the profit payments.
        distribution_frequency: ``monthly``, ``quarterly``,
            ``semi_annually``, ``annually``, or ``at_maturity``.
        profit_payment_structure: ``periodic`` spreads profit over the
            payment dates; ``at_maturity`` pays it with the principal.

    Returns:
        list[ScheduledCashflow]: Payments ordered by due date. Periodic
        schedules repay principal the day after the last profit payment.
    """
    principal = coerce_decimal(face_value)
    profit = coerce_decimal(total_expected_profit)

    if distribution_frequency == FREQUENCY_AT_MATURITY:
        schedule: list[ScheduledCashflow] = []
        if profit > 0:
            schedule.append(
                ScheduledCashflow(
                    due_date=end_date, amount=profit, type=CASHFLOW_PROFIT
                )
            )
        schedule.append(
            ScheduledCashflow(
                due_date=end_date, amount=principal, type=CASHFLOW_PRINCIPAL
            )
        )
        return schedule

    if profit_payment_structure != PROFIT_PERIODIC:
        return [
            ScheduledCashflow(
                due_date=end_date,
                amount=principal + profit,
                type=CASHFLOW_PRINCIPAL,
            )
        ]

    dates = _payment_dates(
        start_date,
        end_date,
        payment_interval_months(distribution_frequency),
        include_end=True,
    ) or [end_date]
    schedule = [
        ScheduledCashflow(due_date=due, amount=amount, type=CASHFLOW_PROFIT)
        for due, amount in zip(dates, _split_evenly(profit, len(dates)))
    ]
    schedule.append(
        ScheduledCashflow(
            due_date=dates[-1] + timedelta(days=1),
            amount=principal,
            type=CASHFLOW_PRINCIPAL,
        )
    )
    return schedule


def calculate_number_of_payments(
    start_date: date,
    end_date: date,
    frequency: str,
) -> int:
    """Return how many profit payments fall in the term.

    Payment dates strictly before the end date are counted, plus one for
    the final payment; at least one payment is always reported.
    """
    if frequency == FREQUENCY_AT_MATURITY:
        return 1
    count = len(
        _payment_dates(
            start_date,
            end_date,
            payment_interval_months(frequency),
            include_end=False,
        )
    )
    return count + 1 if count > 0 else 1


__all__ = [
    "payment_interval_months",
    "generate_cashflows",
    "calculate_number_of_payments",
]
