"""Domain models for portfolio input records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import CASHFLOW_RECEIVED


@dataclass(frozen=True)
class Platform:
    """Issuing platform an investment is held on."""

    id: str
    name: str
    type: str = ""


@dataclass(frozen=True)
class Investment:
    """A single sukuk or fixed-income position.

    Attributes:
        id: Investment identifier.
        platform_id: Identifier of the issuing platform.
        face_value: Principal amount, used as the weighting basis.
        expected_irr: Expected annual rate as a percentage.
        start_date: Start date, if known.
        end_date: Expected maturity date, if known.
        status: Stored lifecycle status.
        total_expected_profit: Authoritative expected profit, if recorded.
        is_reinvestment: Whether the position was funded from profits.
        name: Display name.
        late_date: Date the investment first became late, if any.
    """

    id: str
    platform_id: str
    face_value: Decimal
    expected_irr: Decimal
    start_date: date | None
    end_date: date | None
    status: str
    total_expected_profit: Decimal | None = None
    is_reinvestment: bool = False
    name: str = ""
    late_date: date | None = None

    @property
    def has_dates(self) -> bool:
        """Return True when both start and end dates are present."""
        return self.start_date is not None and self.end_date is not None


@dataclass(frozen=True)
class Cashflow:
    """A scheduled or received payment belonging to an investment."""

    id: str
    investment_id: str
    amount: Decimal
    due_date: date
    status: str
    type: str
    received_date: date | None = None

    @property
    def is_received(self) -> bool:
        """Return True when the payment has been received."""
        return self.status == CASHFLOW_RECEIVED


@dataclass(frozen=True)
class CashTransaction:
    """A signed movement of liquid cash."""

    id: str
    amount: Decimal
    type: str
    platform_id: str | None = None


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window applied to investment start dates."""

    start: date
    end: date

    def contains(self, value: date) -> bool:
        """Return True when value falls inside the window."""
        return self.start <= value <= self.end


@dataclass(frozen=True)
class PortfolioSnapshot:
    """All input collections needed by the metrics engine."""

    investments: list[Investment] = field(default_factory=list)
    cashflows: list[Cashflow] = field(default_factory=list)
    cash_transactions: list[CashTransaction] = field(default_factory=list)
    platforms: list[Platform] = field(default_factory=list)


__all__ = [
    "Platform",
    "Investment",
    "Cashflow",
    "CashTransaction",
    "DateRange",
    "PortfolioSnapshot",
]
