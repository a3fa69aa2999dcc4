"""Tests for the profit calculator helpers."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.services.profit import (
    calculate_end_date,
    calculate_expected_profit_rounded,
    calculate_term_months,
    validate_investment_financials,
)


def test_expected_profit_is_rounded_to_cents() -> None:
    assert calculate_expected_profit_rounded("10000", "15.6", 7) == Decimal(
        "910.00"
    )
    assert calculate_expected_profit_rounded("1000", "10", 1) == Decimal("8.33")


def test_expected_profit_guards_invalid_inputs() -> None:
    assert calculate_expected_profit_rounded("0", "10", 12) == 0
    assert calculate_expected_profit_rounded("1000", "-1", 12) == 0
    assert calculate_expected_profit_rounded("1000", "10", 0) == 0


def test_term_months_counts_partial_month() -> None:
    assert calculate_term_months(date(2024, 1, 15), date(2024, 7, 15)) == 6
    assert calculate_term_months(date(2024, 1, 15), date(2024, 7, 20)) == 7
    assert calculate_term_months(date(2024, 1, 15), date(2024, 1, 20)) == 1


def test_term_months_is_zero_when_end_not_after_start() -> None:
    assert calculate_term_months(date(2024, 1, 15), date(2024, 1, 15)) == 0
    assert calculate_term_months(date(2024, 2, 1), date(2024, 1, 1)) == 0


def test_end_date_clamps_to_month_end() -> None:
    assert calculate_end_date(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert calculate_end_date(date(2024, 11, 30), 3) == date(2025, 2, 28)
    assert calculate_end_date(date(2024, 5, 10), 12) == date(2025, 5, 10)


def test_validate_financials_derives_end_date_and_profit() -> None:
    result = validate_investment_financials(
        "1000", "10", date(2024, 1, 31), duration_months=12
    )

    assert result.end_date == date(2025, 1, 31)
    assert result.duration_months == 12
    assert result.total_expected_profit == Decimal("100.00")
    assert result.face_value == Decimal("1000")


def test_validate_financials_derives_duration_and_keeps_profit() -> None:
    result = validate_investment_financials(
        "1000",
        "10",
        date(2024, 1, 15),
        end_date=date(2024, 7, 20),
        total_expected_profit="50",
    )

    assert result.duration_months == 7
    assert result.total_expected_profit == Decimal("50")


def test_validate_financials_requires_end_date_or_duration() -> None:
    with pytest.raises(ValueError, match="end_date or duration_months"):
        validate_investment_financials("1000", "10", date(2024, 1, 15))

    with pytest.raises(ValueError):
        validate_investment_financials(
            "1000", "10", date(2024, 1, 15), end_date=date(2024, 1, 1)
        )
