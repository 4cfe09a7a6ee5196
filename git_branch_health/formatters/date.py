"""Date and time formatting utilities."""

from datetime import datetime, timezone
from typing import Any, Optional


def format_date(date: Any) -> str:
    """
    Format a date object to YYYY-MM-DD string.

    Args:
        date: Date object (datetime or string)

    Returns:
        Formatted date string
    """
    if hasattr(date, "strftime"):
        return date.strftime("%Y-%m-%d")
    return str(date)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def format_relative_date(date: datetime, now: Optional[datetime] = None) -> str:
    """
    Format a datetime relative to now ("today", "3 days ago", "2 months ago").

    Args:
        date: Timestamp to format; naive values are taken as UTC
        now: Reference time, defaults to the current time

    Returns:
        Relative date string
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_days = (now - date).days

    if diff_days <= 0:
        return "today"
    if diff_days == 1:
        return "yesterday"
    if diff_days < 7:
        return f"{diff_days} days ago"
    if diff_days < 30:
        return _plural(diff_days // 7, "week")
    if diff_days < 365:
        return _plural(diff_days // 30, "month")
    return _plural(diff_days // 365, "year")
