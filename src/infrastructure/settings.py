"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import ALL_PLATFORMS
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class PortfolioSettings:
    """Settings selecting the snapshot and the metrics view.

    Attributes:
        snapshot_file: Optional path to the JSON portfolio snapshot.
        platform_id: Platform filter, ``"all"`` for every platform.
        start_date: Optional lower bound on investment start dates.
        end_date: Optional upper bound on investment start dates.
        as_of: Optional reference date for late classification.
    """

    snapshot_file: Optional[Path] = None
    platform_id: str = ALL_PLATFORMS
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    as_of: Optional[date] = None

    @classmethod
    def from_env(cls) -> "PortfolioSettings":
        """Build settings from environment variables.

        Returns:
            PortfolioSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_snapshot = os.getenv("PORTFOLIO_SNAPSHOT_FILE")
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)
        platform_id = (
            os.getenv("PORTFOLIO_PLATFORM", ALL_PLATFORMS).strip()
            or ALL_PLATFORMS
        )
        return cls(
            snapshot_file=snapshot_file,
            platform_id=platform_id,
            start_date=cls._parse_date(
                "PORTFOLIO_START_DATE", logger=logger
            ),
            end_date=cls._parse_date("PORTFOLIO_END_DATE", logger=logger),
            as_of=cls._parse_date("PORTFOLIO_AS_OF", logger=logger),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the snapshot file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Portfolio snapshot does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single snapshot is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json snapshots found in data/. "
                "Set PORTFOLIO_SNAPSHOT_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_date(name: str, logger) -> date | None:
        """Parse an ISO date environment variable.

        Args:
            name: Environment variable name.
            logger: Logger used for warnings.

        Returns:
            date | None: Parsed date or None when unset or invalid.
        """
        value = os.getenv(name)
        if not value:
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            logger.warning(
                f"Invalid date '{value}' in {name}. Expected format YYYY-MM-DD."
            )
            return None


__all__ = ["PortfolioSettings"]
