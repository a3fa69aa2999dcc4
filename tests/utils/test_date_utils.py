"""Tests for calendar helpers."""

from datetime import date, datetime

from src.utils.date_utils import add_months, month_start, parse_iso_date


def test_add_months_clamps_to_month_end() -> None:
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)
    assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)


def test_month_start() -> None:
    assert month_start(date(2024, 5, 17)) == date(2024, 5, 1)


def test_parse_iso_date_accepts_dates_and_timestamps() -> None:
    assert parse_iso_date("2024-05-17") == date(2024, 5, 17)
    assert parse_iso_date("2024-05-17T10:30:00.000Z") == date(2024, 5, 17)
    assert parse_iso_date(datetime(2024, 5, 17, 8, 0)) == date(2024, 5, 17)
    assert parse_iso_date(date(2024, 5, 17)) == date(2024, 5, 17)


def test_parse_iso_date_returns_none_for_bad_input() -> None:
    assert parse_iso_date(None) is None
    assert parse_iso_date("") is None
    assert parse_iso_date("17/05/2024") is None
