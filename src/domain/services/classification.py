"""Late and defaulted classification from cashflow due dates."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import (
    CLOSED_STATUSES,
    DEFAULT_THRESHOLD_DAYS,
    STATUS_ACTIVE,
    STATUS_COMPLETED,
)
from src.domain.models import Cashflow, Investment, StatusDistribution


def _unreceived_cashflows(
    investment: Investment,
    cashflows: Iterable[Cashflow],
) -> list[Cashflow]:
    return [
        cashflow
        for cashflow in cashflows
        if cashflow.investment_id == investment.id and not cashflow.is_received
    ]


def is_investment_late(
    investment: Investment,
    cashflows: Iterable[Cashflow],
    as_of: date,
) -> bool:
    """Return True when an unreceived cashflow is past its due date.

    Completed and pending investments are never late.

    Args:
        investment: Investment to classify.
        cashflows: Cashflows, possibly of other investments too.
        as_of: Reference date standing in for "today".

    Returns:
        bool: True when at least one own cashflow is overdue.
    """
    if investment.status in CLOSED_STATUSES:
        return False
    return any(
        cashflow.due_date < as_of
        for cashflow in _unreceived_cashflows(investment, cashflows)
    )


def is_investment_defaulted(
    investment: Investment,
    cashflows: Iterable[Cashflow],
    as_of: date,
) -> bool:
    """Return True when an active investment has a payment over 60 days late.

    Args:
        investment: Investment to classify.
        cashflows: Cashflows, possibly of other investments too.
        as_of: Reference date standing in for "today".

    Returns:
        bool: False for any stored status other than active.
    """
    if investment.status != STATUS_ACTIVE:
        return False
    return any(
        (as_of - cashflow.due_date).days > DEFAULT_THRESHOLD_DAYS
        for cashflow in _unreceived_cashflows(investment, cashflows)
    )


def build_status_distribution(
    investments: Iterable[Investment],
    cashflows: Iterable[Cashflow],
    as_of: date,
) -> StatusDistribution:
    """Count investments per displayed status bucket.

    The active bucket counts stored active statuses as-is; late and
    defaulted come from the cashflow predicates, so an investment may be
    counted in more than one bucket.
    """
    investments = list(investments)
    cashflows = list(cashflows)
    return StatusDistribution(
        active=sum(1 for inv in investments if inv.status == STATUS_ACTIVE),
        completed=sum(
            1 for inv in investments if inv.status == STATUS_COMPLETED
        ),
        late=sum(
            1
            for inv in investments
            if is_investment_late(inv, cashflows, as_of)
        ),
        defaulted=sum(
            1
            for inv in investments
            if is_investment_defaulted(inv, cashflows, as_of)
        ),
    )


__all__ = [
    "is_investment_late",
    "is_investment_defaulted",
    "build_status_distribution",
]
