"""Use case to find investments whose stored status is out of date."""

from datetime import date
from typing import Callable

from src.application.ports.portfolio_snapshot import (
    PortfolioSnapshotSourcePort,
)
from src.domain.models import StatusUpdate
from src.domain.services.status_transitions import (
    check_all_investment_statuses,
)
from src.infrastructure.logging.logger import get_app_logger


class CheckInvestmentStatusesUseCase:
    """Recommend status transitions from cashflow payment dates."""

    def __init__(
        self,
        snapshot_source: PortfolioSnapshotSourcePort,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_source: Port providing portfolio records.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Callable returning the default reference date.
        """
        self._snapshot_source = snapshot_source
        self._logger = logger or get_app_logger()
        self._today = today

    def execute(self, as_of: date | None = None) -> list[StatusUpdate]:
        """Return the status updates that differ from stored statuses.

        Args:
            as_of: Reference date, today if None.

        Returns:
            list[StatusUpdate]: Recommended transitions.
        """
        snapshot = self._snapshot_source.load_snapshot()
        reference_date = as_of or self._today()
        updates = check_all_investment_statuses(
            snapshot.investments,
            snapshot.cashflows,
            reference_date,
        )
        self._logger.info(
            f"Status check as_of={reference_date}: "
            f"{len(updates)} of {len(snapshot.investments)} investments "
            f"need a new status"
        )
        return updates


__all__ = ["CheckInvestmentStatusesUseCase"]
