"""Timezone resolution helpers."""

from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def resolve_zone(timezone: str | tzinfo | None) -> tzinfo:
    """
    Turn a user supplied timezone into a tzinfo.

    Args:
        timezone: IANA zone name (e.g., "UTC", "Asia/Seoul"), a tzinfo, or None for UTC.

    Returns:
        The resolved tzinfo.

    Raises:
        ValueError: If the zone name is unknown.
    """
    if timezone is None:
        return UTC
    if isinstance(timezone, tzinfo):
        return timezone

    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone '{timezone}'") from e
