"""Default rate and severity per platform."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_RATE_LOW_LIMIT,
    DEFAULT_RATE_MEDIUM_LIMIT,
    STATUS_DEFAULTED,
)
from src.domain.models import (
    DefaultRateResult,
    Investment,
    Platform,
    PlatformDefaultRate,
)
from src.domain.services.distribution import resolve_platform_name


def classify_default_severity(rate: Decimal) -> str:
    """Map a default rate percentage to low, medium, or high."""
    if rate < DEFAULT_RATE_LOW_LIMIT:
        return "low"
    if rate <= DEFAULT_RATE_MEDIUM_LIMIT:
        return "medium"
    return "high"


def calculate_default_rate(
    investments: Iterable[Investment],
) -> DefaultRateResult:
    """Return the share of investments whose stored status is defaulted.

    Args:
        investments: Investments of one platform, or any other group.

    Returns:
        DefaultRateResult: Rate percentage with its severity band.
    """
    investments = list(investments)
    total = len(investments)
    if total == 0:
        return DefaultRateResult(
            rate=Decimal("0"),
            severity="low",
            defaulted_count=0,
            total_count=0,
        )
    defaulted = sum(1 for inv in investments if inv.status == STATUS_DEFAULTED)
    rate = Decimal(defaulted) / Decimal(total) * Decimal("100")
    return DefaultRateResult(
        rate=rate,
        severity=classify_default_severity(rate),
        defaulted_count=defaulted,
        total_count=total,
    )


def calculate_default_rates_by_platform(
    investments: Iterable[Investment],
    platforms: Iterable[Platform],
) -> list[PlatformDefaultRate]:
    """Return the default rate of each platform holding investments."""
    grouped: dict[str, list[Investment]] = {}
    for investment in investments:
        grouped.setdefault(investment.platform_id, []).append(investment)

    platforms_by_id = {platform.id: platform for platform in platforms}
    return [
        PlatformDefaultRate(
            platform_id=platform_id,
            platform_name=resolve_platform_name(platform_id, platforms_by_id),
            result=calculate_default_rate(members),
        )
        for platform_id, members in grouped.items()
    ]


__all__ = [
    "classify_default_severity",
    "calculate_default_rate",
    "calculate_default_rates_by_platform",
]
