"""Use case to compute default rates per platform."""

from src.application.ports.portfolio_snapshot import (
    PortfolioSnapshotSourcePort,
)
from src.domain.models import PlatformDefaultRate
from src.domain.services.default_rate import (
    calculate_default_rates_by_platform,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPlatformDefaultRatesUseCase:
    """Compute the defaulted share of each platform's investments."""

    def __init__(
        self,
        snapshot_source: PortfolioSnapshotSourcePort,
        logger=None,
    ) -> None:
        self._snapshot_source = snapshot_source
        self._logger = logger or get_app_logger()

    def execute(self) -> list[PlatformDefaultRate]:
        """Return default rates ordered from highest to lowest."""
        snapshot = self._snapshot_source.load_snapshot()
        rates = calculate_default_rates_by_platform(
            snapshot.investments,
            snapshot.platforms,
        )
        high = [rate for rate in rates if rate.result.severity == "high"]
        if high:
            self._logger.warning(
                "High default rate on platforms: "
                + ", ".join(rate.platform_name for rate in high)
            )
        return sorted(rates, key=lambda rate: rate.result.rate, reverse=True)


__all__ = ["GetPlatformDefaultRatesUseCase"]
