"""Date parsing for the ``since`` window of issue listings."""

from datetime import datetime, timedelta, timezone


def parse_date_input(date_str: str) -> datetime:
    """Parse various date formats into UTC datetime objects.

    Supports:
    - ISO dates: 2024-01-01, 2024-01-01T10:00:00Z
    - Common formats: January 1, 2024, Jan 1 2024

    Args:
        date_str: Date string to parse

    Returns:
        Parsed datetime, in UTC

    Raises:
        ValueError: If date format is not recognized
    """
    formats = [
        "%Y-%m-%d",  # 2024-01-01
        "%Y-%m-%dT%H:%M:%SZ",  # 2024-01-01T10:00:00Z
        "%Y-%m-%dT%H:%M:%S",  # 2024-01-01T10:00:00
        "%B %d, %Y",  # January 1, 2024
        "%b %d, %Y",  # Jan 1, 2024
        "%B %d %Y",  # January 1 2024
        "%b %d %Y",  # Jan 1 2024
        "%Y/%m/%d",  # 2024/01/01
    ]

    for fmt in formats:
        try:
            return datetime.strptime(date_str.strip(), fmt).replace(
                tzinfo=timezone.utc
            )
        except ValueError:
            continue

    raise ValueError(
        f"Unable to parse date '{date_str}'. "
        f"Supported formats include: YYYY-MM-DD, YYYY-MM-DDTHH:MM:SSZ, "
        f"'January 1, 2024', 'Jan 1 2024'"
    )


def relative_date_to_absolute(
    days: int | None = None, weeks: int | None = None
) -> datetime:
    """Convert a relative window into the UTC datetime it starts at.

    Args:
        days: Number of days ago (optional)
        weeks: Number of weeks ago (optional)

    Raises:
        ValueError: If both or neither option is provided, or a value is not positive
    """
    if days is None and weeks is None:
        raise ValueError("Must provide one of: days or weeks")
    if days is not None and weeks is not None:
        raise ValueError("Cannot combine multiple relative date options")

    now = datetime.now(timezone.utc)

    if days is not None:
        if days <= 0:
            raise ValueError("Days must be a positive integer")
        return now - timedelta(days=days)

    assert weeks is not None
    if weeks <= 0:
        raise ValueError("Weeks must be a positive integer")
    return now - timedelta(weeks=weeks)


def resolve_since(
    since: str | None = None,
    last_days: int | None = None,
    last_weeks: int | None = None,
) -> datetime | None:
    """Resolve the CLI time-window options into a single ``since`` datetime.

    Raises:
        ValueError: If absolute and relative options are combined or invalid
    """
    has_relative = last_days is not None or last_weeks is not None
    if since and has_relative:
        raise ValueError(
            "Cannot combine --since with relative options (--last-days/--last-weeks)"
        )

    if since:
        return parse_date_input(since)
    if has_relative:
        return relative_date_to_absolute(days=last_days, weeks=last_weeks)
    return None
