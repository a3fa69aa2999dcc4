"""Tests for the investment_status_cli adapter."""

from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import investment_status_cli
from src.domain.models import StatusUpdate
from src.infrastructure.settings import PortfolioSettings


def _patch_wiring(monkeypatch, updates, logger):
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = updates
    settings = PortfolioSettings(as_of=date(2025, 3, 1))
    monkeypatch.setattr(investment_status_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        investment_status_cli,
        "PortfolioSettings",
        SimpleNamespace(from_env=lambda: settings),
    )
    monkeypatch.setattr(
        investment_status_cli,
        "build_snapshot_source",
        lambda resolved: object(),
    )
    monkeypatch.setattr(
        investment_status_cli,
        "CheckInvestmentStatusesUseCase",
        lambda snapshot_source, logger: fake_use_case,
    )
    return fake_use_case


def test_main_prints_recommended_updates(monkeypatch, capsys):
    """Each out-of-date investment should be listed with its dates."""
    updates = [
        StatusUpdate(
            investment_id="i1",
            new_status="defaulted",
            late_date=date(2025, 1, 1),
            defaulted_date=date(2025, 1, 31),
        ),
        StatusUpdate(investment_id="i2", new_status="completed"),
    ]
    fake_use_case = _patch_wiring(monkeypatch, updates, MagicMock())

    investment_status_cli.main()

    fake_use_case.execute.assert_called_once_with(as_of=date(2025, 3, 1))
    out = capsys.readouterr().out
    assert "2 investments need a status update:" in out
    assert (
        "i1 -> defaulted, late since 2025-01-01, defaulted on 2025-01-31"
        in out
    )
    assert "i2 -> completed\n" in out


def test_main_reports_up_to_date_portfolio(monkeypatch, capsys):
    _patch_wiring(monkeypatch, [], MagicMock())

    investment_status_cli.main()

    assert "All investment statuses are up to date." in capsys.readouterr().out


def test_main_logs_runtime_errors(monkeypatch, capsys):
    fake_logger = MagicMock()
    fake_use_case = _patch_wiring(monkeypatch, [], fake_logger)
    fake_use_case.execute.side_effect = RuntimeError("snapshot missing")

    investment_status_cli.main()

    fake_logger.error.assert_called_once_with("snapshot missing")
    assert capsys.readouterr().out == ""
