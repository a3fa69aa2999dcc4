"""CLI adapter listing investments whose stored status is out of date."""

from src.application.use_cases.check_investment_statuses import (
    CheckInvestmentStatusesUseCase,
)
from src.infrastructure.container import build_snapshot_source
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import PortfolioSettings


def main() -> None:
    """Print recommended status transitions for the configured snapshot."""
    logger = get_app_logger()
    settings = PortfolioSettings.from_env()
    try:
        use_case = CheckInvestmentStatusesUseCase(
            snapshot_source=build_snapshot_source(settings),
            logger=logger,
        )
        updates = use_case.execute(as_of=settings.as_of)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    if not updates:
        print("All investment statuses are up to date.")
        return
    print(f"{len(updates)} investments need a status update:")
    for update in updates:
        details = ""
        if update.late_date:
            details += f", late since {update.late_date}"
        if update.defaulted_date:
            details += f", defaulted on {update.defaulted_date}"
        print(f"  {update.investment_id} -> {update.new_status}{details}")


if __name__ == "__main__":  # pragma: no cover
    main()
