"""Tests for the dashboard_metrics_cli adapter."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import dashboard_metrics_cli
from src.domain.models import (
    DashboardMetrics,
    PlatformShare,
    StatusDistribution,
)
from src.infrastructure.settings import PortfolioSettings


def _metrics() -> DashboardMetrics:
    share = PlatformShare(
        platform_id="p1",
        platform_name="Sukuk",
        value=Decimal("1500"),
        count=2,
        percentage=Decimal("100"),
    )
    return DashboardMetrics(
        portfolio_value=Decimal("1700"),
        total_cash=Decimal("200"),
        cash_by_platform={"p1": Decimal("200")},
        actual_returns=Decimal("40"),
        expected_returns=Decimal("150"),
        active_apr=Decimal("10"),
        cash_ratio=Decimal("11.7647"),
        weighted_apr=Decimal("9.5"),
        portfolio_roi=Decimal("2.6667"),
        total_profit_amount=Decimal("40"),
        avg_duration=Decimal("12.00"),
        avg_amount=Decimal("750"),
        avg_payment_amount=Decimal("20"),
        total_investments=2,
        active_investments=1,
        completed_investments=1,
        late_investments=0,
        defaulted_investments=0,
        status_distribution=StatusDistribution(
            active=1, completed=1, late=0, defaulted=0
        ),
        platform_distribution_all=[share],
        platform_distribution_active=[share],
        platform_distribution_count=[share],
    )


def _settings() -> PortfolioSettings:
    return PortfolioSettings(
        platform_id="p1",
        start_date=date(2024, 1, 1),
        as_of=date(2025, 1, 1),
    )


def test_main_runs_use_case_and_prints_metrics(monkeypatch, capsys):
    """The CLI should wire the use case and print the headline figures."""
    fake_logger = MagicMock()
    dummy_source = object()
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = _metrics()
    settings = _settings()

    monkeypatch.setattr(
        dashboard_metrics_cli, "get_app_logger", lambda: fake_logger
    )
    monkeypatch.setattr(
        dashboard_metrics_cli,
        "PortfolioSettings",
        SimpleNamespace(from_env=lambda: settings),
    )
    monkeypatch.setattr(
        dashboard_metrics_cli,
        "build_snapshot_source",
        lambda resolved: dummy_source,
    )

    def _fake_use_case(snapshot_source, logger):
        assert snapshot_source is dummy_source
        assert logger is fake_logger
        return fake_use_case

    monkeypatch.setattr(
        dashboard_metrics_cli,
        "GetDashboardMetricsUseCase",
        _fake_use_case,
    )

    dashboard_metrics_cli.main()

    fake_use_case.execute.assert_called_once_with(
        platform_id="p1",
        start_date=date(2024, 1, 1),
        end_date=None,
        as_of=date(2025, 1, 1),
    )
    out = capsys.readouterr().out
    assert "platform=p1" in out
    assert "Portfolio value=1,700.00" in out
    assert "cash ratio=11.76%" in out
    assert "Sukuk: value=1,500.00, count=2, share=100.00%" in out


def test_main_logs_runtime_errors(monkeypatch, capsys):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        dashboard_metrics_cli, "get_app_logger", lambda: fake_logger
    )
    monkeypatch.setattr(
        dashboard_metrics_cli,
        "PortfolioSettings",
        SimpleNamespace(from_env=lambda: PortfolioSettings()),
    )

    def _raise(_settings):
        raise RuntimeError("A portfolio snapshot is required.")

    monkeypatch.setattr(dashboard_metrics_cli, "build_snapshot_source", _raise)

    dashboard_metrics_cli.main()

    fake_logger.error.assert_called_once_with(
        "A portfolio snapshot is required."
    )
    assert capsys.readouterr().out == ""
