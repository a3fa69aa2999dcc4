"""Port for reading portfolio records."""

from typing import Protocol

from src.domain.models import PortfolioSnapshot


class PortfolioSnapshotSourcePort(Protocol):
    """Port exposing the raw records the metrics engine consumes.

    Implementations own the storage format; the engine only ever sees the
    returned in-memory snapshot.
    """

    def load_snapshot(self) -> PortfolioSnapshot:
        """Return investments, cashflows, cash transactions, and platforms.

        Returns:
            PortfolioSnapshot: Read-only collections for one computation.
        """


__all__ = ["PortfolioSnapshotSourcePort"]
