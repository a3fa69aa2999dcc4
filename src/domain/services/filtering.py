"""Platform and date filtering of portfolio records."""

from collections.abc import Iterable

from src.domain.constants import ALL_PLATFORMS
from src.domain.models import (
    Cashflow,
    CashTransaction,
    DateRange,
    FilteredPortfolio,
    Investment,
)


def is_platform_selected(platform_id: str | None) -> bool:
    """Return True when a specific platform, not the "all" view, is chosen.

    Args:
        platform_id: Platform id filter, ``None`` or ``"all"`` for every
            platform.

    Returns:
        bool: True when records must be narrowed to one platform.
    """
    return bool(platform_id) and platform_id != ALL_PLATFORMS


def filter_portfolio(
    investments: Iterable[Investment],
    cash_transactions: Iterable[CashTransaction],
    cashflows: Iterable[Cashflow],
    platform_id: str | None = None,
    date_range: DateRange | None = None,
) -> FilteredPortfolio:
    """Narrow the working set by platform and investment start date.

    Platform filtering applies to investments and cash transactions
    independently; unassigned transactions only survive the "all" view.
    The date range applies to investments alone, and cashflows follow
    their owning investment.

    Args:
        investments: Investment records.
        cash_transactions: Cash transaction records.
        cashflows: Cashflow records.
        platform_id: Optional platform id filter.
        date_range: Optional inclusive window on investment start dates.

    Returns:
        FilteredPortfolio: Records that survived every filter.
    """
    kept_investments = list(investments)
    kept_transactions = list(cash_transactions)

    if is_platform_selected(platform_id):
        kept_investments = [
            investment
            for investment in kept_investments
            if investment.platform_id == platform_id
        ]
        kept_transactions = [
            transaction
            for transaction in kept_transactions
            if transaction.platform_id == platform_id
        ]

    if date_range is not None:
        kept_investments = [
            investment
            for investment in kept_investments
            if investment.start_date is not None
            and date_range.contains(investment.start_date)
        ]

    kept_ids = {investment.id for investment in kept_investments}
    kept_cashflows = [
        cashflow for cashflow in cashflows if cashflow.investment_id in kept_ids
    ]

    return FilteredPortfolio(
        investments=kept_investments,
        cash_transactions=kept_transactions,
        cashflows=kept_cashflows,
    )


__all__ = ["filter_portfolio", "is_platform_selected"]
