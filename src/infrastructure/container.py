"""Composition root for wiring infrastructure adapters."""

from src.application.ports.portfolio_snapshot import (
    PortfolioSnapshotSourcePort,
)
from src.infrastructure.json_snapshot_source import JsonPortfolioSnapshotSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import PortfolioSettings


def build_snapshot_source(
    settings: PortfolioSettings | None = None,
) -> PortfolioSnapshotSourcePort:
    """Return the configured portfolio snapshot source."""
    resolved = settings or PortfolioSettings.from_env()
    if resolved.snapshot_file is None:
        raise RuntimeError(
            "A portfolio snapshot is required. "
            "Set PORTFOLIO_SNAPSHOT_FILE or place one .json file in data/."
        )
    return JsonPortfolioSnapshotSource(
        resolved.snapshot_file,
        logger=get_app_logger(),
    )


__all__ = ["build_snapshot_source"]
