"""Use case to compute dashboard metrics from a portfolio snapshot."""

from datetime import date
from typing import Callable

from src.application.ports.portfolio_snapshot import (
    PortfolioSnapshotSourcePort,
)
from src.domain.constants import ALL_PLATFORMS
from src.domain.models import DashboardMetrics, DateRange
from src.domain.services.dashboard_metrics import compute_dashboard_metrics
from src.infrastructure.logging.logger import get_app_logger


def build_date_range(
    start_date: date | None,
    end_date: date | None,
) -> DateRange | None:
    """Return an inclusive range, open-ended on a missing bound.

    Args:
        start_date: Optional lower bound on investment start dates.
        end_date: Optional upper bound on investment start dates.

    Returns:
        DateRange | None: None when neither bound is given.
    """
    if start_date is None and end_date is None:
        return None
    return DateRange(start=start_date or date.min, end=end_date or date.max)


class GetDashboardMetricsUseCase:
    """Compute dashboard metrics for a platform and date window."""

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

    def execute(
        self,
        platform_id: str | None = ALL_PLATFORMS,
        start_date: date | None = None,
        end_date: date | None = None,
        as_of: date | None = None,
    ) -> DashboardMetrics:
        """Return the metrics record.

        Args:
            platform_id: Platform filter, ``"all"`` for every platform.
            start_date: Optional lower bound on investment start dates.
            end_date: Optional upper bound on investment start dates.
            as_of: Reference date for late classification, today if None.

        Returns:
            DashboardMetrics: Computed metrics.
        """
        snapshot = self._snapshot_source.load_snapshot()
        reference_date = as_of or self._today()
        metrics = compute_dashboard_metrics(
            snapshot.investments,
            snapshot.cash_transactions,
            snapshot.platforms,
            snapshot.cashflows,
            date_range=build_date_range(start_date, end_date),
            platform_id=platform_id,
            as_of=reference_date,
            logger=self._logger,
        )
        self._logger.info(
            f"Dashboard metrics computed: platform={platform_id}, "
            f"as_of={reference_date}, investments={metrics.total_investments}, "
            f"portfolio_value={metrics.portfolio_value}, "
            f"total_cash={metrics.total_cash}"
        )
        return metrics


__all__ = ["GetDashboardMetricsUseCase", "build_date_range"]
