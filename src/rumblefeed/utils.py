from datetime import datetime, timezone

UPLOAD_DATE_FORMAT = "%Y%m%d"


def utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def first_non_empty(*candidates: str | None) -> str:
    """Return the first non-empty candidate.

    Args:
        candidates: Values in order of preference

    Returns:
        The first truthy candidate, or an empty string if none is set

    """
    for candidate in candidates:
        if candidate:
            return candidate
    return ""


def from_unix(seconds: int) -> datetime | None:
    """Convert Unix seconds to an aware UTC datetime.

    Args:
        seconds: Seconds since the epoch

    Returns:
        Aware UTC datetime, or None if the value is out of the supported range

    """
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


def parse_upload_date(value: str) -> datetime | None:
    """Parse a ``YYYYMMDD`` upload date.

    Args:
        value: The upload date string

    Returns:
        Midnight UTC of that date, or None if the value cannot be parsed

    """
    # strptime accepts single-digit months and days, the format does not
    if len(value) != 8 or not value.isdigit():
        return None
    try:
        parsed = datetime.strptime(value, UPLOAD_DATE_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=timezone.utc)
