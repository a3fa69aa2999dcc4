"""Use case to project expected cashflows month by month."""

from dataclasses import dataclass
from datetime import date
from typing import Callable

from src.application.ports.portfolio_snapshot import (
    PortfolioSnapshotSourcePort,
)
from src.domain.constants import DEFAULT_FORECAST_MONTHS
from src.domain.models import ForecastTotals, MonthlyForecast
from src.domain.services.filtering import filter_portfolio
from src.domain.services.forecast import (
    calculate_forecast_summaries,
    calculate_monthly_forecast,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CashflowForecastView:
    """Monthly forecast with its period totals."""

    months: list[MonthlyForecast]
    summaries: list[ForecastTotals]


class GetCashflowForecastUseCase:
    """Forecast expected inflows for the coming months."""

    def __init__(
        self,
        snapshot_source: PortfolioSnapshotSourcePort,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._snapshot_source = snapshot_source
        self._logger = logger or get_app_logger()
        self._today = today

    def execute(
        self,
        platform_id: str | None = None,
        as_of: date | None = None,
        months: int = DEFAULT_FORECAST_MONTHS,
    ) -> CashflowForecastView:
        """Return the forecast for the selected platform.

        Args:
            platform_id: Optional platform filter.
            as_of: Reference date, today if None.
            months: Number of months to forecast.

        Returns:
            CashflowForecastView: Monthly rows and period totals.
        """
        snapshot = self._snapshot_source.load_snapshot()
        filtered = filter_portfolio(
            snapshot.investments,
            snapshot.cash_transactions,
            snapshot.cashflows,
            platform_id=platform_id,
        )
        forecast = calculate_monthly_forecast(
            filtered.cashflows,
            as_of or self._today(),
            months,
        )
        summaries = calculate_forecast_summaries(forecast)
        self._logger.info(
            f"Cashflow forecast computed for {months} months "
            f"from {len(filtered.cashflows)} cashflows"
        )
        return CashflowForecastView(months=forecast, summaries=summaries)


__all__ = ["GetCashflowForecastUseCase", "CashflowForecastView"]
