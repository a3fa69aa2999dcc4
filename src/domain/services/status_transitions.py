"""Recommended stored-status transitions driven by cashflow payments."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import (
    STATUS_ACTIVE,
    STATUS_COMPLETED,
    STATUS_DEFAULTED,
    STATUS_GRACE_PERIOD,
    STATUS_LATE,
)
from src.domain.models import Cashflow, Investment, StatusUpdate


def determine_investment_status(
    investment: Investment,
    cashflows: Iterable[Cashflow],
    as_of: date,
) -> StatusUpdate:
    """Work out the status an investment should carry on ``as_of``.

    Args:
        investment: Investment to evaluate.
        cashflows: Cashflows belonging to the investment.
        as_of: Reference date standing in for "today".

    Returns:
        StatusUpdate: completed when every cashflow is received, active
        when nothing is overdue, defaulted when the oldest overdue payment
        is past the grace period, late otherwise.
    """
    own = [cf for cf in cashflows if cf.investment_id == investment.id]
    pending = [cf for cf in own if not cf.is_received]

    if own and not pending:
        return StatusUpdate(
            investment_id=investment.id,
            new_status=STATUS_COMPLETED,
        )

    overdue = [cf for cf in pending if cf.due_date < as_of]
    if not overdue:
        return StatusUpdate(
            investment_id=investment.id,
            new_status=STATUS_ACTIVE,
        )

    oldest_due = min(cf.due_date for cf in overdue)
    late_date = investment.late_date or oldest_due
    if (as_of - oldest_due) > STATUS_GRACE_PERIOD:
        return StatusUpdate(
            investment_id=investment.id,
            new_status=STATUS_DEFAULTED,
            late_date=late_date,
            defaulted_date=oldest_due + STATUS_GRACE_PERIOD,
        )
    return StatusUpdate(
        investment_id=investment.id,
        new_status=STATUS_LATE,
        late_date=late_date,
    )


def check_all_investment_statuses(
    investments: Iterable[Investment],
    cashflows: Iterable[Cashflow],
    as_of: date,
) -> list[StatusUpdate]:
    """Return the updates whose status differs from the stored one."""
    by_investment: dict[str, list[Cashflow]] = {}
    for cashflow in cashflows:
        by_investment.setdefault(cashflow.investment_id, []).append(cashflow)

    updates: list[StatusUpdate] = []
    for investment in investments:
        update = determine_investment_status(
            investment,
            by_investment.get(investment.id, []),
            as_of,
        )
        if update.new_status != investment.status:
            updates.append(update)
    return updates


__all__ = ["determine_investment_status", "check_all_investment_statuses"]
