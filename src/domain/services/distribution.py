"""Platform distribution tables under three weighting schemes."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import STATUS_ACTIVE, UNKNOWN_PLATFORM_NAME
from src.domain.models import Investment, Platform, PlatformShare
from src.utils.decimal_utils import coerce_decimal

_HUNDRED = Decimal("100")


@dataclass
class _Bucket:
    value: Decimal
    count: int


def resolve_platform_name(
    platform_id: str,
    platforms_by_id: dict[str, Platform],
) -> str:
    """Return the platform display name, or the unknown placeholder."""
    platform = platforms_by_id.get(platform_id)
    if platform is None or not platform.name:
        return UNKNOWN_PLATFORM_NAME
    return platform.name


def _bucket_by_platform(
    investments: Iterable[Investment],
) -> dict[str, _Bucket]:
    buckets: dict[str, _Bucket] = {}
    for investment in investments:
        bucket = buckets.setdefault(
            investment.platform_id, _Bucket(Decimal("0"), 0)
        )
        bucket.value += coerce_decimal(investment.face_value)
        bucket.count += 1
    return buckets


def _share(part: Decimal, whole: Decimal) -> Decimal:
    if whole <= 0:
        return Decimal("0")
    return part / whole * _HUNDRED


def _build_rows(
    buckets: dict[str, _Bucket],
    platforms: Iterable[Platform],
    *,
    by_count: bool,
) -> list[PlatformShare]:
    platforms_by_id = {platform.id: platform for platform in platforms}
    total_value = sum((b.value for b in buckets.values()), Decimal("0"))
    total_count = sum(b.count for b in buckets.values())

    rows = [
        PlatformShare(
            platform_id=platform_id,
            platform_name=resolve_platform_name(platform_id, platforms_by_id),
            value=bucket.value,
            count=bucket.count,
            percentage=(
                _share(Decimal(bucket.count), Decimal(total_count))
                if by_count
                else _share(bucket.value, total_value)
            ),
        )
        for platform_id, bucket in buckets.items()
    ]
    if by_count:
        return sorted(rows, key=lambda row: row.count, reverse=True)
    return sorted(rows, key=lambda row: row.value, reverse=True)


def platform_distribution_by_value(
    investments: Iterable[Investment],
    platforms: Iterable[Platform],
) -> list[PlatformShare]:
    """Return face value per platform as a share of all investments."""
    return _build_rows(
        _bucket_by_platform(investments), platforms, by_count=False
    )


def platform_distribution_active(
    investments: Iterable[Investment],
    platforms: Iterable[Platform],
) -> list[PlatformShare]:
    """Return active face value per platform as a share of active value."""
    active = (inv for inv in investments if inv.status == STATUS_ACTIVE)
    return _build_rows(_bucket_by_platform(active), platforms, by_count=False)


def platform_distribution_by_count(
    investments: Iterable[Investment],
    platforms: Iterable[Platform],
) -> list[PlatformShare]:
    """Return investment count per platform as a share of the total count."""
    return _build_rows(
        _bucket_by_platform(investments), platforms, by_count=True
    )


__all__ = [
    "resolve_platform_name",
    "platform_distribution_by_value",
    "platform_distribution_active",
    "platform_distribution_by_count",
]
