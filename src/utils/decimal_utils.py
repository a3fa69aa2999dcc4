"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing, empty, or unparseable values collapse to zero so that display
    computations never fail on incomplete records.

    Args:
        value: Raw numeric value from a snapshot record or a caller.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    raw = str(value).strip()
    if not raw:
        return Decimal("0")
    try:
        parsed = Decimal(raw)
    except InvalidOperation:
        return Decimal("0")
    return parsed if parsed.is_finite() else Decimal("0")


def round_cents(value: Decimal) -> Decimal:
    """Round a Decimal to two places, half away from zero."""
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "round_cents"]
