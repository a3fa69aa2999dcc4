"""CLI adapter printing dashboard metrics for a portfolio snapshot."""

from decimal import Decimal

from src.application.use_cases.get_dashboard_metrics import (
    GetDashboardMetricsUseCase,
)
from src.infrastructure.container import build_snapshot_source
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import PortfolioSettings


def _fmt(value: Decimal) -> str:
    return f"{value:,.2f}"


def main() -> None:
    """Compute and print dashboard metrics configured from the environment."""
    logger = get_app_logger()
    settings = PortfolioSettings.from_env()
    try:
        snapshot_source = build_snapshot_source(settings)
        use_case = GetDashboardMetricsUseCase(
            snapshot_source=snapshot_source,
            logger=logger,
        )
        metrics = use_case.execute(
            platform_id=settings.platform_id,
            start_date=settings.start_date,
            end_date=settings.end_date,
            as_of=settings.as_of,
        )
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(
        "Dashboard metrics "
        f"(platform={settings.platform_id}, start={settings.start_date}, "
        f"end={settings.end_date})"
    )
    print(
        f"Portfolio value={_fmt(metrics.portfolio_value)}, "
        f"cash={_fmt(metrics.total_cash)}, "
        f"cash ratio={_fmt(metrics.cash_ratio)}%"
    )
    print(
        f"Returns: actual={_fmt(metrics.actual_returns)}, "
        f"expected={_fmt(metrics.expected_returns)}, "
        f"ROI={_fmt(metrics.portfolio_roi)}%"
    )
    print(
        f"APR: active={_fmt(metrics.active_apr)}%, "
        f"historical={_fmt(metrics.weighted_apr)}%"
    )
    status = metrics.status_distribution
    print(
        f"Investments: total={metrics.total_investments}, "
        f"active={status.active}, completed={status.completed}, "
        f"late={status.late}, defaulted={status.defaulted}"
    )
    for share in metrics.platform_distribution_all:
        print(
            f"  {share.platform_name}: value={_fmt(share.value)}, "
            f"count={share.count}, share={_fmt(share.percentage)}%"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
