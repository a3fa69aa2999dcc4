"""Cash balance reductions over signed cash transactions."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import CASH_INFLOW_TYPES, CASH_OUTFLOW_TYPES
from src.domain.models import CashTransaction
from src.domain.services.filtering import is_platform_selected
from src.utils.decimal_utils import coerce_decimal


def transaction_effect(transaction: CashTransaction) -> Decimal:
    """Return the signed effect of a transaction on the cash balance.

    Args:
        transaction: Cash transaction to evaluate.

    Returns:
        Decimal: Positive for inflows, negative for outflows, zero for
        unrecognized types.
    """
    amount = coerce_decimal(transaction.amount)
    if transaction.type in CASH_INFLOW_TYPES:
        return amount
    if transaction.type in CASH_OUTFLOW_TYPES:
        return -amount
    return Decimal("0")


def calculate_total_cash(transactions: Iterable[CashTransaction]) -> Decimal:
    """Return the net cash balance of the transactions.

    The balance is a plain sum and does not depend on input order.
    """
    return sum(
        (transaction_effect(transaction) for transaction in transactions),
        Decimal("0"),
    )


def calculate_cash_by_platform(
    transactions: Iterable[CashTransaction],
    platform_id: str | None = None,
) -> dict[str, Decimal]:
    """Break the cash balance down per platform.

    Args:
        transactions: Already filtered cash transactions.
        platform_id: Selected platform, if any.

    Returns:
        dict[str, Decimal]: Balance keyed by platform id. With a platform
        selected the whole balance is attributed to it; otherwise
        unassigned transactions are left out of the breakdown.
    """
    if is_platform_selected(platform_id):
        return {platform_id: calculate_total_cash(transactions)}

    balances: dict[str, Decimal] = {}
    for transaction in transactions:
        if not transaction.platform_id:
            continue
        balances[transaction.platform_id] = balances.get(
            transaction.platform_id, Decimal("0")
        ) + transaction_effect(transaction)
    return balances


__all__ = [
    "transaction_effect",
    "calculate_total_cash",
    "calculate_cash_by_platform",
]
