"""Utility helpers package."""

from .decimal_utils import coerce_decimal, round_cents
from .date_utils import add_months, month_start, parse_iso_date
from .utils import get_project_root

__all__ = [
    "coerce_decimal",
    "round_cents",
    "add_months",
    "month_start",
    "parse_iso_date",
    "get_project_root",
]
