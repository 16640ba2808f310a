"""Utility functions for StartDeck."""

from datetime import date, datetime, timedelta
from typing import List
from urllib.parse import quote, urlparse

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def extract_domain(url: str) -> str:
    """Extract domain from URL.

    Args:
        url: Full URL

    Returns:
        Domain name (e.g., "example.com"), or "" if the URL has none

    Example:
        >>> extract_domain("https://www.example.com/path?query=1")
        "www.example.com"
    """
    try:
        parsed = urlparse(url)
        return parsed.netloc
    except ValueError:
        return ""


def get_favicon_url(url: str, size: int = 256) -> str:
    """Get favicon URL for a link using Google's favicon service.

    Args:
        url: Any URL from the domain
        size: Icon size in pixels

    Returns:
        URL to the domain's favicon via Google service

    Example:
        >>> get_favicon_url("https://example.com/article")
        "https://www.google.com/s2/favicons?domain=example.com&sz=256"

    Notes:
        - Links are not validated, so a bare "example.com" has no parsed
          domain; the whole value is passed and Google resolves it
    """
    domain = extract_domain(url) or url
    return f"https://www.google.com/s2/favicons?domain={quote(domain, safe='')}&sz={size}"


def format_clock(moment: datetime) -> str:
    """Zero-padded 24-hour "HH:MM"."""
    return f"{moment.hour:02d}:{moment.minute:02d}"


def format_long_date(moment: date) -> str:
    """Date as "DD MonthName YYYY" (e.g., "03 March 2024")."""
    return f"{moment.day:02d} {MONTH_NAMES[moment.month - 1]} {moment.year}"


def forecast_day_labels(today: date, count: int = 3) -> List[str]:
    """Labels for consecutive forecast days starting today.

    Example:
        >>> forecast_day_labels(date(2024, 3, 3))
        ["Today", "Tomorrow", "Tuesday"]
    """
    labels = ["Today", "Tomorrow"]
    for offset in range(2, count):
        labels.append(WEEKDAY_NAMES[(today + timedelta(days=offset)).weekday()])
    return labels[:count]
