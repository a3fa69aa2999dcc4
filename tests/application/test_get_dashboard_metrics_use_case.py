"""Tests for the GetDashboardMetricsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_dashboard_metrics import (
    GetDashboardMetricsUseCase,
    build_date_range,
)
from src.domain.models import (
    Cashflow,
    CashTransaction,
    DateRange,
    Investment,
    Platform,
    PortfolioSnapshot,
)


class _FakeSnapshotSource:
    def __init__(self, snapshot: PortfolioSnapshot) -> None:
        self._snapshot = snapshot
        self.calls = 0

    def load_snapshot(self) -> PortfolioSnapshot:
        self.calls += 1
        return self._snapshot


def _snapshot() -> PortfolioSnapshot:
    return PortfolioSnapshot(
        investments=[
            Investment(
                id="i1",
                platform_id="p1",
                face_value=Decimal("1000"),
                expected_irr=Decimal("10"),
                start_date=date(2024, 1, 1),
                end_date=date(2025, 1, 1),
                status="active",
                total_expected_profit=Decimal("100"),
            ),
            Investment(
                id="i2",
                platform_id="p2",
                face_value=Decimal("3000"),
                expected_irr=Decimal("10"),
                start_date=date(2023, 1, 1),
                end_date=date(2024, 1, 1),
                status="active",
                total_expected_profit=Decimal("300"),
            ),
        ],
        cashflows=[
            Cashflow(
                id="c1",
                investment_id="i1",
                amount=Decimal("50"),
                due_date=date(2024, 12, 1),
                status="upcoming",
                type="profit",
            )
        ],
        cash_transactions=[
            CashTransaction(id="t1", amount=Decimal("200"), type="deposit"),
        ],
        platforms=[Platform(id="p1", name="Sukuk", type="sukuk")],
    )


def test_execute_computes_metrics_and_logs_summary() -> None:
    """Use case should load the snapshot once and log headline figures."""
    source = _FakeSnapshotSource(_snapshot())
    logger = MagicMock()
    use_case = GetDashboardMetricsUseCase(snapshot_source=source, logger=logger)

    result = use_case.execute(as_of=date(2025, 1, 15))

    assert source.calls == 1
    assert result.portfolio_value == Decimal("4200")
    assert result.late_investments == 1
    logged = logger.info.call_args.args[0]
    assert "portfolio_value=4200" in logged
    assert "as_of=2025-01-15" in logged


def test_execute_defaults_reference_date_to_today() -> None:
    source = _FakeSnapshotSource(_snapshot())
    use_case = GetDashboardMetricsUseCase(
        snapshot_source=source,
        logger=MagicMock(),
        today=lambda: date(2024, 11, 1),
    )

    result = use_case.execute()

    assert result.late_investments == 0


def test_execute_applies_date_bounds() -> None:
    source = _FakeSnapshotSource(_snapshot())
    use_case = GetDashboardMetricsUseCase(
        snapshot_source=source,
        logger=MagicMock(),
    )

    result = use_case.execute(
        start_date=date(2024, 1, 1),
        as_of=date(2025, 1, 15),
    )

    assert result.total_investments == 1
    assert result.platform_distribution_all[0].platform_name == "Sukuk"


def test_build_date_range_is_open_ended_on_missing_bound() -> None:
    assert build_date_range(None, None) is None
    assert build_date_range(date(2024, 1, 1), None) == DateRange(
        date(2024, 1, 1), date.max
    )
    assert build_date_range(None, date(2024, 1, 1)) == DateRange(
        date.min, date(2024, 1, 1)
    )
