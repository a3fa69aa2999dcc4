"""Tests for infrastructure settings."""

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import PortfolioSettings

_ENV_VARS = (
    "PORTFOLIO_SNAPSHOT_FILE",
    "PORTFOLIO_PLATFORM",
    "PORTFOLIO_START_DATE",
    "PORTFOLIO_END_DATE",
    "PORTFOLIO_AS_OF",
)


@pytest.fixture
def fake_logger(monkeypatch, tmp_path: Path) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_uses_file_path(monkeypatch, tmp_path: Path, fake_logger):
    """File paths should resolve to Path instances."""
    snapshot = tmp_path / "portfolio.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("PORTFOLIO_SNAPSHOT_FILE", str(snapshot))

    settings = PortfolioSettings.from_env()

    assert isinstance(settings.snapshot_file, Path)
    assert settings.snapshot_file == snapshot.resolve()
    assert settings.platform_id == "all"
    fake_logger.warning.assert_not_called()


def test_from_env_accepts_file_uri(monkeypatch, tmp_path: Path, fake_logger):
    snapshot = tmp_path / "portfolio.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("PORTFOLIO_SNAPSHOT_FILE", snapshot.resolve().as_uri())

    settings = PortfolioSettings.from_env()

    assert settings.snapshot_file == snapshot.resolve()


def test_from_env_warns_on_missing_snapshot(
    monkeypatch, tmp_path: Path, fake_logger
):
    monkeypatch.setenv("PORTFOLIO_SNAPSHOT_FILE", str(tmp_path / "none.json"))

    settings = PortfolioSettings.from_env()

    assert settings.snapshot_file == (tmp_path / "none.json").resolve()
    assert "does not exist" in fake_logger.warning.call_args.args[0]


def test_from_env_defaults_to_single_data_file(tmp_path: Path, fake_logger):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "export.json").write_text("{}", encoding="utf-8")

    settings = PortfolioSettings.from_env()

    assert settings.snapshot_file == (data_dir / "export.json").resolve()


def test_from_env_ignores_ambiguous_data_files(tmp_path: Path, fake_logger):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.json").write_text("{}", encoding="utf-8")
    (data_dir / "b.json").write_text("{}", encoding="utf-8")

    settings = PortfolioSettings.from_env()

    assert settings.snapshot_file is None
    assert "Multiple .json snapshots" in fake_logger.warning.call_args.args[0]


def test_from_env_reads_view_options(monkeypatch, fake_logger):
    monkeypatch.setenv("PORTFOLIO_PLATFORM", " p1 ")
    monkeypatch.setenv("PORTFOLIO_START_DATE", "2024-01-01")
    monkeypatch.setenv("PORTFOLIO_END_DATE", "2024-12-31")
    monkeypatch.setenv("PORTFOLIO_AS_OF", "not-a-date")

    settings = PortfolioSettings.from_env()

    assert settings.snapshot_file is None
    assert settings.platform_id == "p1"
    assert settings.start_date == date(2024, 1, 1)
    assert settings.end_date == date(2024, 12, 31)
    assert settings.as_of is None
    assert "PORTFOLIO_AS_OF" in fake_logger.warning.call_args.args[0]
