"""Application ports package."""

from .portfolio_snapshot import PortfolioSnapshotSourcePort

__all__ = ["PortfolioSnapshotSourcePort"]
