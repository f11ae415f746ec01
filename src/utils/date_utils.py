"""Date and time utility functions."""
import re
from datetime import datetime, timezone

# PostgreSQL trims trailing zeros from fractional seconds
_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(timestamp: str) -> datetime:
    """
    Parse an ISO 8601 timestamp, accepting a trailing 'Z'.

    Args:
        timestamp: Timestamp string (e.g., "2025-01-01T00:00:00Z")

    Returns:
        datetime object (timezone-aware when the input carries an offset)

    Raises:
        ValueError: If timestamp format is invalid
    """
    if not isinstance(timestamp, str):
        raise ValueError(f"Invalid timestamp format: {timestamp!r}")
    value = timestamp.strip().replace("Z", "+00:00")
    value = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    return datetime.fromisoformat(value)


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def format_display_date(timestamp: str) -> str:
    """
    Format a timestamp as M/D/YYYY for tables and documents.

    Args:
        timestamp: ISO 8601 timestamp

    Returns:
        Short date string, or the raw input if it cannot be parsed
    """
    try:
        value = parse_timestamp(timestamp)
    except ValueError:
        return str(timestamp)
    return f"{value.month}/{value.day}/{value.year}"


def sort_key_newest_first(timestamp: str) -> float:
    """Return a sort key that orders timestamps newest-first."""
    try:
        value = parse_timestamp(timestamp)
    except ValueError:
        return float("inf")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return -value.timestamp()
